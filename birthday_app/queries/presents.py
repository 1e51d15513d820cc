"""Minimum gift budget over upcoming birthdays"""

from typing import Any, Optional, Union

from ..data.models import BudgetResult, Contact, GiftOption, PresentPlan
from ..data.normalizer import ContactNormalizer
from ..dates.comparator import BirthdayOrdering, get_ordering
from ..logging.config import get_query_logger
from ..utils.time import DateLike, get_today

logger = get_query_logger(__name__)


def cheapest_wish(contact: Contact) -> Optional[GiftOption]:
    """
    Cheapest wish-list entry, or None when the wish list is absent or empty.

    Sorts a copy; among equal prices the earlier entry wins.
    """
    if not contact.wish_list:
        return None
    return sorted(contact.wish_list, key=lambda gift: gift.price)[0]


def get_minimum_presents_price(contacts: Any,
                               today: Optional[DateLike] = None,
                               ordering: Union[BirthdayOrdering, str, None] = None) -> BudgetResult:
    """
    Pick the cheapest wish for every upcoming birthday and total the cost.

    Args:
        contacts: List or tuple of contacts with optional wish lists
        today: Reference "today", defaults to the system clock
        ordering: Ordering strategy or its name, defaults to "reversed"

    Returns:
        BudgetResult in phone book order

    Raises:
        NonSequenceInputError: If contacts is not a list or tuple
    """
    ordering = get_ordering(ordering)
    today = get_today(today)
    phone_book = ContactNormalizer().normalize_contacts(contacts)

    plans = []
    total_price = 0
    for contact in phone_book:
        if not ordering.is_upcoming(contact.birthdate, today):
            continue
        present = cheapest_wish(contact)
        if present is not None:
            total_price += present.price
        plans.append(PresentPlan(name=contact.name, birthdate=contact.birthdate, present=present))

    logger.debug(
        "Presents budget computed",
        ordering=ordering.name,
        friend_count=len(plans),
        total_price=total_price
    )
    return BudgetResult(friends_list=tuple(plans), total_price=total_price)
