"""
Canonical data models for phone book contacts and query results.

This module defines immutable data structures built fresh by every query.
``to_dict`` renders each one in the phone book's wire shape (camelCase keys).
"""

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class GiftOption:
    """Single wish-list entry."""
    title: str
    price: Union[int, float]    # Non-negative

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "price": self.price}


@dataclass(frozen=True)
class Contact:
    """Phone book contact with DD.MM.YYYY birthdate."""
    name: str
    birthdate: str                                   # DD.MM.YYYY
    wish_list: Optional[tuple[GiftOption, ...]] = None   # None when absent

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"name": self.name, "birthdate": self.birthdate}
        if self.wish_list is not None:
            result["wishList"] = [gift.to_dict() for gift in self.wish_list]
        return result


@dataclass(frozen=True)
class MonthGroup:
    """Contacts sharing a birth month."""
    month: str                      # Localized month name
    friends: tuple[Contact, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "month": self.month,
            "friends": [friend.to_dict() for friend in self.friends],
        }


@dataclass(frozen=True)
class PresentPlan:
    """Cheapest present chosen for one contact."""
    name: str
    birthdate: str
    present: Optional[GiftOption] = None    # None when the wish list is absent or empty

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "birthdate": self.birthdate,
            "present": self.present.to_dict() if self.present is not None else None,
        }


@dataclass(frozen=True)
class BudgetResult:
    """Present plan for every upcoming birthday plus the total cost."""
    friends_list: tuple[PresentPlan, ...]
    total_price: Union[int, float]

    def to_dict(self) -> dict[str, Any]:
        return {
            "friendsList": [plan.to_dict() for plan in self.friends_list],
            "totalPrice": self.total_price,
        }


@dataclass(frozen=True)
class QueryResult:
    """
    Outcome of a validated query.

    Separates "no matching contacts" (ok with no items) from "bad input"
    (not ok, with a reason).
    """
    ok: bool
    items: tuple = ()
    reason: Optional[str] = None

    @classmethod
    def success(cls, items) -> "QueryResult":
        """Create successful result with query items."""
        return cls(ok=True, items=tuple(items))

    @classmethod
    def failure(cls, reason: str) -> "QueryResult":
        """Create failed result."""
        return cls(ok=False, reason=reason)

    def to_list(self) -> list:
        """Items as a fresh list; empty for failures."""
        return list(self.items)
