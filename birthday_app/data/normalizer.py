"""
Contact normalization for converting raw phone book data to models.

This module handles parsing of JSON payloads and the basic structural
checks on contact records. The inner format of a birthdate is not checked
here; queries compare whatever string the phone book supplies.
"""

import numbers
from typing import Any, Iterable, Optional, Union

import orjson
import structlog

from ..errors import MalformedContactError, NonSequenceInputError
from .models import Contact, GiftOption

logger = structlog.get_logger(__name__)

WISH_LIST_KEYS = ("wishList", "wish_list")


def ensure_sequence(contacts: Any) -> None:
    """
    Check that contacts arrived as a list or tuple.

    Raises:
        NonSequenceInputError: For any other type, including str and dict
    """
    if not isinstance(contacts, (list, tuple)):
        raise NonSequenceInputError(
            f"Contacts must be a list or tuple, got {type(contacts).__name__}",
            received_type=type(contacts).__name__
        )


class ContactNormalizer:
    """
    Contact normalization pipeline.

    Turns mappings shaped like ``{"name", "birthdate", "wishList"}`` into
    frozen :class:`Contact` objects. Contacts that are already models pass
    through unchanged.
    """

    def __init__(self):
        self.logger = logger

    def normalize_contact(self, raw: Any) -> Contact:
        """
        Normalize a single contact.

        Args:
            raw: Contact instance or contact mapping

        Returns:
            Contact model

        Raises:
            MalformedContactError: If required fields are missing or mistyped
        """
        if isinstance(raw, Contact):
            return raw

        if not isinstance(raw, dict):
            raise MalformedContactError(
                f"Contact must be a mapping, got {type(raw).__name__}",
                raw_data=repr(raw)[:100]
            )

        for field in ("name", "birthdate"):
            if not isinstance(raw.get(field), str):
                raise MalformedContactError(
                    f"Missing or non-string contact field: {field}",
                    field=field,
                    raw_data=repr(raw)[:100]
                )

        return Contact(
            name=raw["name"],
            birthdate=raw["birthdate"],
            wish_list=self._normalize_wish_list(raw),
        )

    def normalize_contacts(self, contacts: Any) -> list[Contact]:
        """
        Normalize a phone book.

        Raises:
            NonSequenceInputError: If contacts is not a list or tuple
            MalformedContactError: If any contact is malformed
        """
        ensure_sequence(contacts)
        return [self.normalize_contact(raw) for raw in contacts]

    def parse_contacts_payload(self, payload: Union[str, bytes]) -> list[Contact]:
        """
        Decode a JSON array of contacts and normalize it.

        Raises:
            MalformedContactError: If the payload is not a JSON array
        """
        try:
            document = orjson.loads(payload)
        except orjson.JSONDecodeError as e:
            raise MalformedContactError(f"Failed to decode contacts payload: {e}") from e

        if not isinstance(document, list):
            raise MalformedContactError(
                f"Contacts payload must be a JSON array, got {type(document).__name__}"
            )

        contacts = self.normalize_contacts(document)
        self.logger.debug("Contacts payload decoded", contact_count=len(contacts))
        return contacts

    def _normalize_wish_list(self, raw: dict[str, Any]) -> Optional[tuple[GiftOption, ...]]:
        """Normalize the optional wish list of a contact mapping."""
        wish_list = None
        for key in WISH_LIST_KEYS:
            if raw.get(key) is not None:
                wish_list = raw[key]
                break

        if wish_list is None:
            return None

        if not isinstance(wish_list, (list, tuple)):
            raise MalformedContactError(
                "Wish list must be a list",
                field="wishList",
                raw_data=repr(wish_list)[:100]
            )

        return tuple(self._normalize_gift(gift, index) for index, gift in enumerate(wish_list))

    def _normalize_gift(self, raw: Any, index: int) -> GiftOption:
        """Normalize a single wish-list entry."""
        if isinstance(raw, GiftOption):
            return raw

        if not isinstance(raw, dict) or not isinstance(raw.get("title"), str):
            raise MalformedContactError(
                f"wishList[{index}] must have a string title",
                field="wishList",
                raw_data=repr(raw)[:100]
            )

        price = raw.get("price")
        if isinstance(price, bool) or not isinstance(price, numbers.Real) or price < 0:
            raise MalformedContactError(
                f"wishList[{index}] price must be a non-negative number",
                field="price",
                raw_data=repr(raw)[:100]
            )

        return GiftOption(title=raw["title"], price=price)


def normalize_contacts(contacts: Iterable[Any]) -> list[Contact]:
    """Normalize a phone book with a default normalizer."""
    return ContactNormalizer().normalize_contacts(contacts)
