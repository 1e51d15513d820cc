"""Date comparison for DD.MM.YYYY birthdates"""

from .comparator import (
    AnniversaryOrdering,
    BirthdayOrdering,
    ReversedDateOrdering,
    birth_month,
    compare_dates,
    get_ordering,
    is_future,
    next_occurrence,
    reverse_date,
    validate_reference_date,
)

__all__ = [
    "BirthdayOrdering",
    "ReversedDateOrdering",
    "AnniversaryOrdering",
    "get_ordering",
    "reverse_date",
    "is_future",
    "compare_dates",
    "validate_reference_date",
    "birth_month",
    "next_occurrence",
]
