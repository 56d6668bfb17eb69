"""Exception types raised by the Calidr core.

User-facing parse failures carry a fixed message meant to be shown to the
user verbatim. Model errors signal a violated precondition on one of the
filtered collections and carry the offending item.
"""

from typing import Any


class ParseException(Exception):
    """Raised when raw user input does not satisfy a field's constraints."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EventOrderError(ParseException):
    """Raised when an event starts after it ends and ordering is enforced."""

    MESSAGE = "Event start date-time must not be later than its end date-time"

    def __init__(self, start: Any, end: Any):
        self.start = start
        self.end = end
        super().__init__(self.MESSAGE)


class ModelError(Exception):
    """Base class for precondition violations on the in-memory model."""

    def __init__(self, message: str, item: Any = None):
        self.item = item
        super().__init__(message)


class DuplicateEntityError(ModelError):
    """Raised when an operation would store two entities with the same identity."""

    def __init__(self, item: Any):
        super().__init__(f"Operation would result in duplicate entries: {item!r}", item)


class EntityNotFoundError(ModelError):
    """Raised when the target of a delete or replace is not in the collection."""

    def __init__(self, item: Any):
        super().__init__(f"Entity not found in collection: {item!r}", item)
