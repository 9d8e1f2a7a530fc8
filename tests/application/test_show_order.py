"""Integration tests for the List Orders and Show Order queries."""

import pytest

from portal.application.list_orders import ListOrdersHandler
from portal.application.show_order import ShowOrderHandler
from portal.domain.exceptions import EntityNotFoundError, MalformedItemsError
from tests.fakes import FakeOrderRepository, make_order


class TestListOrders:

    def test_empty(self):
        assert ListOrdersHandler(FakeOrderRepository()).handle() == []

    def test_cards(self):
        repo = FakeOrderRepository([
            make_order("a", order_number="ORD-1", status="Pending"),
            make_order("b", order_number="ORD-2", status="Mystery"),
        ])
        cards = ListOrdersHandler(repo).handle()
        assert [c.order_number for c in cards] == ["ORD-1", "ORD-2"]
        assert cards[0].status_color == "#f59e0b"
        assert cards[1].status_color == "#6b7280"

    def test_cards_do_not_parse_items(self):
        repo = FakeOrderRepository([make_order(items="not valid json")])
        assert len(ListOrdersHandler(repo).handle()) == 1


class TestShowOrder:

    def test_detail(self):
        repo = FakeOrderRepository([make_order()])
        dto = ShowOrderHandler(repo).handle("ORD-2024-001")
        assert dto.distributor_name == "Metro Grocery Supply"
        assert dto.delivery_date == "Dec 8, 2024"
        assert [item.subtotal for item in dto.items] == ["$500.00", "$425.00", "$525.00"]
        assert dto.items[1].quantity == "100"
        assert dto.items[1].price == "$4.25"

    def test_unknown_order(self):
        with pytest.raises(EntityNotFoundError, match="ORD-404"):
            ShowOrderHandler(FakeOrderRepository()).handle("ORD-404")

    def test_malformed_items(self):
        repo = FakeOrderRepository([make_order(items="not valid json")])
        with pytest.raises(MalformedItemsError):
            ShowOrderHandler(repo).handle("ORD-2024-001")
