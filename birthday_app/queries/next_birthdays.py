"""Upcoming birthdays after a reference date"""

from typing import Any, Optional, Union

from ..data.models import Contact, QueryResult
from ..data.normalizer import ContactNormalizer, ensure_sequence
from ..dates.comparator import BirthdayOrdering, get_ordering
from ..errors import MalformedContactDateError, MalformedReferenceDateError, NonSequenceInputError
from ..logging.config import get_query_logger
from ..utils.time import DateLike, get_today

logger = get_query_logger(__name__)


def query_next_birthdays(reference_date: Any, contacts: Any,
                         today: Optional[DateLike] = None,
                         ordering: Union[BirthdayOrdering, str, None] = None) -> QueryResult:
    """
    Contacts whose birthday is upcoming and falls after the reference date.

    A contact is kept when its birthday is still ahead of today AND lies
    strictly after ``reference_date``; both filters apply, so a reference
    date in the past does not bring back birthdays that already passed.
    Survivors are sorted ascending; equal birthdates keep input order.

    Args:
        reference_date: DD.MM.YYYY cutoff
        contacts: List or tuple of contacts (models or mappings)
        today: Reference "today", defaults to the system clock
        ordering: Ordering strategy or its name, defaults to "reversed"

    Returns:
        QueryResult with the contacts, or a failure naming the bad input
        (reference date, non-sequence contacts, or an unparsable birthdate
        under the anniversary ordering)
    """
    ordering = get_ordering(ordering)

    try:
        reason = ordering.validate_reference(reference_date)
        if reason is not None:
            raise MalformedReferenceDateError(reason, raw_date=reference_date)
        ensure_sequence(contacts)
    except (MalformedReferenceDateError, NonSequenceInputError) as e:
        return QueryResult.failure(str(e))

    today = get_today(today)
    phone_book = ContactNormalizer().normalize_contacts(contacts)

    try:
        upcoming = [
            contact for contact in phone_book
            if ordering.is_upcoming(contact.birthdate, today)
            and ordering.is_after(contact.birthdate, reference_date, today)
        ]
        upcoming.sort(key=lambda contact: ordering.sort_key(contact.birthdate, today))
    except MalformedContactDateError as e:
        # Only the anniversary ordering parses birthdates
        return QueryResult.failure(str(e))

    logger.debug(
        "Next birthdays selected",
        reference_date=reference_date,
        ordering=ordering.name,
        contact_count=len(phone_book),
        selected_count=len(upcoming)
    )
    return QueryResult.success(upcoming)


def get_next_birthdays(reference_date: Any, contacts: Any,
                       today: Optional[DateLike] = None,
                       ordering: Union[BirthdayOrdering, str, None] = None) -> list[Contact]:
    """
    Contacts whose birthday comes after the reference date.

    Malformed input yields an empty list and a warning log entry, which
    reads the same as "no birthdays"; use :func:`query_next_birthdays`
    to tell the two apart.
    """
    result = query_next_birthdays(reference_date, contacts, today=today, ordering=ordering)
    if not result.ok:
        logger.warning("Invalid next birthdays query", reason=result.reason)
    return result.to_list()
