"""Upcoming birthdays grouped by birth month"""

from typing import Any, Optional, Sequence, Union

from ..config.defaults import MONTH_NAMES
from ..data.models import Contact, MonthGroup, QueryResult
from ..data.normalizer import ContactNormalizer, ensure_sequence
from ..dates.comparator import BirthdayOrdering, birth_month, get_ordering
from ..errors import MalformedContactDateError, NonSequenceInputError
from ..logging.config import get_query_logger
from ..utils.time import DateLike, get_today

logger = get_query_logger(__name__)

DEFAULT_MONTH_NAMES = MONTH_NAMES["ru"]


def query_months_list(contacts: Any,
                      today: Optional[DateLike] = None,
                      ordering: Union[BirthdayOrdering, str, None] = None,
                      month_names: Sequence[str] = DEFAULT_MONTH_NAMES) -> QueryResult:
    """
    Group contacts with upcoming birthdays by birth month.

    Buckets are ordered by month number (for the anniversary ordering,
    starting at the current month) and contacts inside a bucket by birthdate.

    Args:
        contacts: List or tuple of contacts (models or mappings)
        today: Reference "today", defaults to the system clock
        ordering: Ordering strategy or its name, defaults to "reversed"
        month_names: Twelve month names, January first

    Returns:
        QueryResult with MonthGroup items, or a failure for non-sequence
        input or an upcoming contact without a readable month
    """
    try:
        ensure_sequence(contacts)
    except NonSequenceInputError as e:
        return QueryResult.failure(str(e))

    ordering = get_ordering(ordering)
    today = get_today(today)
    phone_book = ContactNormalizer().normalize_contacts(contacts)

    buckets: dict[int, list[Contact]] = {}
    groups = []
    try:
        for contact in phone_book:
            if not ordering.is_upcoming(contact.birthdate, today):
                continue
            month = birth_month(contact.birthdate, ordering.separator)
            buckets.setdefault(month, []).append(contact)

        for month in sorted(buckets, key=lambda month: ordering.month_sort_key(month, today)):
            friends = sorted(buckets[month], key=lambda contact: ordering.sort_key(contact.birthdate, today))
            groups.append(MonthGroup(month=month_names[month - 1], friends=tuple(friends)))
    except MalformedContactDateError as e:
        return QueryResult.failure(str(e))

    logger.debug(
        "Months list built",
        ordering=ordering.name,
        contact_count=len(phone_book),
        month_count=len(groups)
    )
    return QueryResult.success(groups)


def get_months_list(contacts: Any,
                    today: Optional[DateLike] = None,
                    ordering: Union[BirthdayOrdering, str, None] = None,
                    month_names: Sequence[str] = DEFAULT_MONTH_NAMES) -> list[MonthGroup]:
    """Month groups of upcoming birthdays; empty list for unusable input."""
    return query_months_list(contacts, today=today, ordering=ordering, month_names=month_names).to_list()
