"""
Clock boundary and date formatting helpers.

The queries never read the clock themselves: they take an explicit
``today`` and fall back to :func:`get_today` only when the caller omits it.
"""

from datetime import date, datetime
from typing import Optional, Union

DATE_SEPARATOR = "."

DateLike = Union[date, str]


def get_today(today: Optional[DateLike] = None) -> date:
    """
    Resolve the reference "today".

    Args:
        today: Explicit date, "DD.MM.YYYY" string, or None for the system clock

    Returns:
        The resolved calendar date
    """
    if today is None:
        return datetime.now().date()

    if isinstance(today, datetime):
        return today.date()

    if isinstance(today, date):
        return today

    return parse_date(today)


def format_date(value: date, separator: str = DATE_SEPARATOR) -> str:
    """Format a date in the phone book's DD.MM.YYYY form."""
    return f"{value.day:02d}{separator}{value.month:02d}{separator}{value.year:04d}"


def format_reversed_date(value: date, separator: str = DATE_SEPARATOR) -> str:
    """Format a date in the sortable YYYY.MM.DD form."""
    return f"{value.year:04d}{separator}{value.month:02d}{separator}{value.day:02d}"


def parse_date(value: str, separator: str = DATE_SEPARATOR) -> date:
    """
    Parse a DD.MM.YYYY string into a date.

    Raises:
        ValueError: If the string is not a valid calendar date
    """
    try:
        day, month, year = value.split(separator)
        return date(int(year), int(month), int(day))
    except (AttributeError, TypeError) as e:
        raise ValueError(f"Invalid date value: {value!r}") from e
