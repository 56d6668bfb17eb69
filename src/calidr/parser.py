"""Parsers turning raw user input into validated Calidr values.

Every ``parse_*`` function strips surrounding whitespace, validates the
result and returns a value object. Invalid input raises ``ParseException``
carrying the field's fixed constraint message, which is meant to be shown
to the user as is. Passing ``None`` is a programming error and raises
``TypeError`` before any validation takes place.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, FrozenSet, Generic, Iterable, Optional, TypeVar

from .config import get_config
from .domain import (
    Address,
    Email,
    EventDateTimes,
    Name,
    Phone,
    Remark,
    Tag,
    Title,
    TodoDateTime,
)
from .domain.values import ValidatedText
from .errors import ParseException
from .index import Index
from .utils import datetime as datetime_utils

logger = logging.getLogger(__name__)

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."

NON_ZERO_UNSIGNED_INTEGER = re.compile(r"[1-9][0-9]*", re.ASCII)
# Largest position a user can address; longer digit strings are rejected
# as overflow rather than accepted as arbitrarily large integers.
MAX_INDEX = 2**31 - 1

V = TypeVar("V")


def require_non_null(**values: Any) -> None:
    """Raise TypeError naming the first argument that is None."""
    for name, value in values.items():
        if value is None:
            raise TypeError(f"{name} must not be None")


def _parse_text(raw: Optional[str], value_type: type, field_name: str) -> ValidatedText:
    require_non_null(**{field_name: raw})
    trimmed = raw.strip()
    if not value_type.is_valid(trimmed):
        logger.debug(f"Rejected {field_name}: {raw!r}")
        raise ParseException(value_type.MESSAGE_CONSTRAINTS)
    return value_type(trimmed)


def parse_index(one_based_index: str) -> Index:
    """Parse a 1-based position such as ``"3"`` into an ``Index``.

    Raises:
        ParseException: If the text is not a non-zero unsigned integer.
    """
    require_non_null(one_based_index=one_based_index)
    trimmed = one_based_index.strip()
    if (
        not NON_ZERO_UNSIGNED_INTEGER.fullmatch(trimmed)
        or len(trimmed) > len(str(MAX_INDEX))
        or int(trimmed) > MAX_INDEX
    ):
        logger.debug(f"Rejected index: {one_based_index!r}")
        raise ParseException(MESSAGE_INVALID_INDEX)
    return Index.from_one_based(int(trimmed))


def parse_name(name: str) -> Name:
    return _parse_text(name, Name, "name")


def parse_phone(phone: str) -> Phone:
    return _parse_text(phone, Phone, "phone")


def parse_address(address: str) -> Address:
    return _parse_text(address, Address, "address")


def parse_email(email: str) -> Email:
    return _parse_text(email, Email, "email")


def parse_remark(remark: str) -> Remark:
    """Parse a remark. Any text is accepted, so this only strips it."""
    return _parse_text(remark, Remark, "remark")


def parse_tag(tag: str) -> Tag:
    return _parse_text(tag, Tag, "tag")


def parse_tags(tags: Iterable[str]) -> FrozenSet[Tag]:
    """Parse a collection of tag names into a set of tags.

    Duplicate names collapse into one tag. The first invalid name aborts the
    whole batch with that tag's error.
    """
    require_non_null(tags=tags)
    return frozenset(parse_tag(tag_name) for tag_name in tags)


def parse_title(title: str) -> Title:
    return _parse_text(title, Title, "title")


def parse_date_time(date_time_text: str) -> datetime:
    """Parse a ``DD-MM-YYYY hhmm`` string, e.g. ``15-03-2024 1430``."""
    require_non_null(date_time_text=date_time_text)
    return datetime_utils.parse_date_time(date_time_text.strip())


def parse_todo_date_time(todo_date_time: str) -> TodoDateTime:
    """Parse the deadline of a todo."""
    require_non_null(todo_date_time=todo_date_time)
    return TodoDateTime(parse_date_time(todo_date_time))


def parse_event_date_times(
    from_date_time: str,
    to_date_time: str,
    *,
    enforce_order: Optional[bool] = None,
) -> EventDateTimes:
    """Parse the start and end of an event.

    Both sides are checked for presence before either is parsed. The start
    is parsed first, so when both sides are malformed its error is the one
    raised.

    Args:
        from_date_time: Start of the event.
        to_date_time: End of the event.
        enforce_order: Reject a start later than the end. ``None`` defers to
            ``ConfigModel.enforce_event_order``.

    Raises:
        ParseException: If either side is not a valid date-time.
        EventOrderError: If ordering is enforced and the start is after the end.
    """
    require_non_null(from_date_time=from_date_time, to_date_time=to_date_time)

    start = parse_date_time(from_date_time)
    end = parse_date_time(to_date_time)

    if enforce_order is None:
        enforce_order = get_config().enforce_event_order

    if enforce_order:
        return EventDateTimes.ordered(start, end)
    return EventDateTimes(start, end)


@dataclass(frozen=True)
class ParseResult(Generic[V]):
    """Outcome of a parse: either a value or the message explaining the failure."""

    value: Optional[V] = None
    error: Optional[ParseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error is not None else None

    def unwrap(self) -> V:
        """Return the value, re-raising the captured error on failure."""
        if self.error is not None:
            raise self.error
        return self.value


def try_parse(parser: Callable[..., V], *args: Any, **kwargs: Any) -> ParseResult[V]:
    """Run ``parser`` and capture a ParseException in the returned result.

    TypeError from a ``None`` argument is not captured; it signals a caller
    bug rather than bad user input.
    """
    try:
        return ParseResult(value=parser(*args, **kwargs))
    except ParseException as e:
        return ParseResult(error=e)
