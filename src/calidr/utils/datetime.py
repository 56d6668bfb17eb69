"""Date-time utilities for the fixed ``DD-MM-YYYY hhmm`` format.

This module is the single definition of the date-time syntax accepted by
Calidr. Task parameters call into it rather than parsing date-times
themselves, so changing the accepted format only happens here.
"""

import logging
import re
from datetime import datetime

from ..errors import ParseException

logger = logging.getLogger(__name__)

DATE_TIME_PATTERN = "%d-%m-%Y %H%M"
DATE_TIME_SHAPE = re.compile(r"\d{2}-\d{2}-\d{4} \d{4}", re.ASCII)
MESSAGE_CONSTRAINTS = "Date-times should be of the format DD-MM-YYYY hhmm"


def parse_date_time(date_time_text: str) -> datetime:
    """Parse a ``DD-MM-YYYY hhmm`` string into a naive datetime.

    The text must match the pattern exactly: two-digit day and month, a
    four-digit year, a single space and a four-digit 24-hour time. No
    surrounding whitespace is tolerated here; callers strip first.

    Args:
        date_time_text: The string containing the date and time.

    Returns:
        A naive datetime with second and microsecond set to zero.

    Raises:
        ParseException: If the text has the wrong shape or names a date or
            time that does not exist (e.g. 31-02-2024 or 2400).
    """
    if not DATE_TIME_SHAPE.fullmatch(date_time_text):
        logger.debug(f"Rejected date-time with wrong shape: {date_time_text!r}")
        raise ParseException(MESSAGE_CONSTRAINTS)

    try:
        return datetime.strptime(date_time_text, DATE_TIME_PATTERN)
    except ValueError:
        logger.debug(f"Rejected out-of-range date-time: {date_time_text!r}")
        raise ParseException(MESSAGE_CONSTRAINTS) from None


def format_date_time(dt: datetime) -> str:
    """Format a datetime back into ``DD-MM-YYYY hhmm``."""
    # strftime does not zero-pad years below 1000 on every platform
    return f"{dt.day:02d}-{dt.month:02d}-{dt.year:04d} {dt.hour:02d}{dt.minute:02d}"


def is_valid_date_time(date_time_text: str) -> bool:
    """Return True if ``date_time_text`` parses as a date-time."""
    try:
        parse_date_time(date_time_text)
    except ParseException:
        return False
    return True
