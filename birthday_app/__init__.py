"""
Birthday App - Birthday Views Over a Contact List

Computes birthday-related views over an in-memory phone book: upcoming
birthdays after a reference date, contacts grouped by birth month, and the
minimum total gift cost using each contact's cheapest wish-list item.
"""

__version__ = "0.1.0"
__author__ = "Birthday App Team"

from .data.models import BudgetResult, Contact, GiftOption, MonthGroup, PresentPlan, QueryResult
from .engine import BirthdayPlanner
from .queries import get_minimum_presents_price, get_months_list, get_next_birthdays

__all__ = [
    "BirthdayPlanner",
    "get_next_birthdays",
    "get_months_list",
    "get_minimum_presents_price",
    "Contact",
    "GiftOption",
    "MonthGroup",
    "PresentPlan",
    "BudgetResult",
    "QueryResult",
]
