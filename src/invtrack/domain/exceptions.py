"""Domain-level exceptions.

Every failure a store operation can report is a subclass of DomainException,
so the menu loop can catch them uniformly and print the message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class DuplicateItemError(ValidationError):
    """An item with the same name is already in the inventory."""


class InvalidQuantityError(ValidationError):
    """A quantity adjustment was zero or negative."""


class ItemNotFoundError(EntityNotFoundError):
    """No item with the requested name is in the inventory."""


class PersistenceError(DomainException):
    """The backing file could not be read or written."""


class SerializationError(PersistenceError):
    """The backing file holds malformed data, or the inventory could not be encoded."""


class StorageError(PersistenceError):
    """An I/O failure other than a missing file."""
