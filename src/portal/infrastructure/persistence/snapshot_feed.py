"""Push-style delivery of order snapshots to subscribers.

Shared by every OrderRepository implementation: the repository decides
*when* the order list changed, the feed takes care of *who* hears about it.
"""

from __future__ import annotations

import logging
from typing import Callable

from portal.domain.repository.order_repository import (
    ErrorCallback,
    Snapshot,
    SnapshotCallback,
    Subscription,
)

logger = logging.getLogger(__name__)


class _FeedSubscription(Subscription):

    def __init__(
        self,
        feed: SnapshotFeed,
        on_snapshot: SnapshotCallback,
        on_error: ErrorCallback | None,
    ) -> None:
        self._feed = feed
        self.on_snapshot = on_snapshot
        self.on_error = on_error
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._feed._detach(self)


class SnapshotFeed:

    def __init__(self, load: Callable[[], Snapshot]) -> None:
        self._load = load
        self._subscriptions: list[_FeedSubscription] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(
        self,
        on_snapshot: SnapshotCallback,
        on_error: ErrorCallback | None = None,
    ) -> Subscription:
        """Register a subscriber and deliver the current snapshot to it."""
        subscription = _FeedSubscription(self, on_snapshot, on_error)
        self._subscriptions.append(subscription)
        self._deliver([subscription])
        return subscription

    def publish(self) -> None:
        """Send a fresh snapshot to every open subscription."""
        self._deliver(list(self._subscriptions))

    def close_all(self) -> None:
        for subscription in list(self._subscriptions):
            subscription.close()

    # --- Internal helpers -----------------------------------------------------

    def _deliver(self, targets: list[_FeedSubscription]) -> None:
        if not targets:
            return
        try:
            snapshot = self._load()
        except Exception as exc:  # delivered to subscribers, never raised
            self._fail(targets, exc)
            return
        for subscription in targets:
            if not subscription.closed:
                subscription.on_snapshot(snapshot)

    @staticmethod
    def _fail(targets: list[_FeedSubscription], exc: Exception) -> None:
        for subscription in targets:
            if subscription.closed:
                continue
            if subscription.on_error is None:
                logger.error("Order snapshot could not be loaded: %s", exc)
            else:
                subscription.on_error(exc)

    def _detach(self, subscription: _FeedSubscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)
