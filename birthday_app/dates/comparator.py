"""
Date comparison for DD.MM.YYYY birthdates.

Two orderings are available:

* ``reversed`` turns "DD.MM.YYYY" into "YYYY.MM.DD" and compares the strings.
  The birth year takes part in the comparison, so a birthdate is "in the
  future" only when the whole date lies after today.
* ``anniversary`` projects every birthdate onto its next occurrence on or
  after today and compares those calendar dates, ignoring the birth year.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Optional, Union

from ..errors import MalformedContactDateError
from ..utils.time import DATE_SEPARATOR, DateLike, format_reversed_date, get_today, parse_date

REFERENCE_PART_LENGTHS = (2, 2, 4)


def reverse_date(value: str, separator: str = DATE_SEPARATOR) -> str:
    """
    Reorder DD.MM.YYYY into YYYY.MM.DD.

    No validation: malformed input produces malformed output.
    """
    return separator.join(reversed(value.split(separator)))


def is_future(value: str, today: Optional[DateLike] = None,
              separator: str = DATE_SEPARATOR) -> bool:
    """True iff the reversed date sorts strictly after the reversed today."""
    reversed_today = format_reversed_date(get_today(today), separator)
    return reversed_today < reverse_date(value, separator)


def compare_dates(first: str, second: str, separator: str = DATE_SEPARATOR) -> int:
    """
    Comparator over reversed dates.

    Returns 1 when ``first`` sorts after ``second`` and -1 otherwise; equal
    dates are treated as "first before second".
    """
    return 1 if reverse_date(first, separator) > reverse_date(second, separator) else -1


def validate_reference_date(value: Any, separator: str = DATE_SEPARATOR) -> Optional[str]:
    """
    Check the DD.MM.YYYY shape of a reference date.

    Returns:
        None when the shape is valid, otherwise the reason it is not
    """
    if not isinstance(value, str):
        return f"reference date must be a string, got {type(value).__name__}"

    parts = value.split(separator)
    if len(parts) != len(REFERENCE_PART_LENGTHS):
        return f"reference date {value!r} must have 3 parts separated by {separator!r}"

    if tuple(len(part) for part in parts) != REFERENCE_PART_LENGTHS:
        return f"reference date {value!r} must be shaped DD{separator}MM{separator}YYYY"

    return None


def birth_month(value: str, separator: str = DATE_SEPARATOR) -> int:
    """
    Month number (1-12) of a DD.MM.YYYY birthdate.

    Raises:
        MalformedContactDateError: If the month part is missing or out of range
    """
    parts = value.split(separator)
    try:
        month = int(parts[1])
    except (IndexError, ValueError) as e:
        raise MalformedContactDateError(
            f"Cannot read month from birthdate {value!r}", birthdate=value
        ) from e

    if not 1 <= month <= 12:
        raise MalformedContactDateError(f"Month out of range in birthdate {value!r}", birthdate=value)

    return month


def next_occurrence(value: str, today: Optional[DateLike] = None,
                    separator: str = DATE_SEPARATOR) -> date:
    """
    Next anniversary of a birthdate on or after today.

    29.02 falls on 28.02 in years without a leap day.

    Raises:
        MalformedContactDateError: If the birthdate cannot be parsed
    """
    today = get_today(today)
    parts = value.split(separator)
    try:
        day, month = int(parts[0]), int(parts[1])
        # Validates day/month against a leap year
        date(2000, month, day)
    except (IndexError, ValueError) as e:
        raise MalformedContactDateError(
            f"Cannot read day and month from birthdate {value!r}", birthdate=value
        ) from e

    occurrence = _anniversary(today.year, month, day)
    if occurrence < today:
        occurrence = _anniversary(today.year + 1, month, day)
    return occurrence


def _anniversary(year: int, month: int, day: int) -> date:
    try:
        return date(year, month, day)
    except ValueError:
        return date(year, 2, 28)


class BirthdayOrdering(ABC):
    """
    Strategy deciding which birthdays are upcoming and in what order.

    Subclasses implement the primitives the queries rely on.
    """

    name = ""

    def __init__(self, separator: str = DATE_SEPARATOR):
        self.separator = separator

    def validate_reference(self, reference_date: Any) -> Optional[str]:
        """Reason the reference date is unusable, or None."""
        return validate_reference_date(reference_date, self.separator)

    @abstractmethod
    def is_upcoming(self, birthdate: str, today: date) -> bool:
        """Whether the birthday still lies ahead of today."""
        pass

    @abstractmethod
    def is_after(self, birthdate: str, reference_date: str, today: date) -> bool:
        """Whether the birthday falls strictly after the reference date."""
        pass

    @abstractmethod
    def sort_key(self, birthdate: str, today: date) -> Any:
        """Ascending sort key for a birthdate."""
        pass

    def month_sort_key(self, month: int, today: date) -> int:
        """Ascending sort key for a month bucket."""
        return month

    def __repr__(self) -> str:
        return f"{type(self).__name__}(separator={self.separator!r})"


class ReversedDateOrdering(BirthdayOrdering):
    """Compares YYYY.MM.DD strings, birth year included."""

    name = "reversed"

    def is_upcoming(self, birthdate: str, today: date) -> bool:
        return is_future(birthdate, today, self.separator)

    def is_after(self, birthdate: str, reference_date: str, today: date) -> bool:
        return reverse_date(reference_date, self.separator) < reverse_date(birthdate, self.separator)

    def sort_key(self, birthdate: str, today: date) -> str:
        return reverse_date(birthdate, self.separator)


class AnniversaryOrdering(BirthdayOrdering):
    """Compares each birthday's next occurrence from today."""

    name = "anniversary"

    def validate_reference(self, reference_date: Any) -> Optional[str]:
        reason = super().validate_reference(reference_date)
        if reason is not None:
            return reason

        try:
            parse_date(reference_date, self.separator)
        except ValueError:
            return f"reference date {reference_date!r} is not a calendar date"
        return None

    def is_upcoming(self, birthdate: str, today: date) -> bool:
        # Every birthday recurs; this only rejects unparsable dates
        next_occurrence(birthdate, today, self.separator)
        return True

    def is_after(self, birthdate: str, reference_date: str, today: date) -> bool:
        reference = parse_date(reference_date, self.separator)
        return next_occurrence(birthdate, today, self.separator) > reference

    def sort_key(self, birthdate: str, today: date) -> date:
        return next_occurrence(birthdate, today, self.separator)

    def month_sort_key(self, month: int, today: date) -> int:
        # Calendar order starting at the current month
        return (month - today.month) % 12


ORDERINGS = {
    ReversedDateOrdering.name: ReversedDateOrdering,
    AnniversaryOrdering.name: AnniversaryOrdering,
}


def get_ordering(ordering: Union[BirthdayOrdering, str, None] = None,
                 separator: str = DATE_SEPARATOR) -> BirthdayOrdering:
    """
    Resolve an ordering strategy.

    Args:
        ordering: Strategy instance, strategy name, or None for "reversed"
        separator: Date field separator for a strategy built by name

    Raises:
        ValueError: If the name is unknown
    """
    if isinstance(ordering, BirthdayOrdering):
        return ordering

    name = ordering or ReversedDateOrdering.name
    try:
        return ORDERINGS[name](separator)
    except KeyError:
        raise ValueError(f"Unknown ordering: {name!r}") from None
