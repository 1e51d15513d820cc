"""Birthday views over a phone book"""

from .months import get_months_list, query_months_list
from .next_birthdays import get_next_birthdays, query_next_birthdays
from .presents import get_minimum_presents_price

__all__ = [
    "get_next_birthdays",
    "query_next_birthdays",
    "get_months_list",
    "query_months_list",
    "get_minimum_presents_price",
]
