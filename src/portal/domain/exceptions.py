"""Domain-level exceptions.

All failures the portal reports to a user are subclasses of DomainException
so the CLI and the dashboard can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class MalformedItemsError(DomainException):
    """An order's serialized line items could not be parsed."""


class StorageError(DomainException):
    """The order store could not be read or written."""
