"""
Error handling tests.

Covers the error hierarchy and which failures become results versus
exceptions.
"""

import pytest

from birthday_app.errors import (
    ConfigurationError,
    ContactDataError,
    MalformedContactDateError,
    MalformedContactError,
    MalformedReferenceDateError,
    NonSequenceInputError,
)
from birthday_app.queries import get_minimum_presents_price, get_months_list, get_next_birthdays


class TestErrorClassification:
    """Test error classification system."""

    def test_contact_data_error_hierarchy(self):
        base_error = ContactDataError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        reference_error = MalformedReferenceDateError("bad date", raw_date="2025.02.13")
        assert isinstance(reference_error, ContactDataError)
        assert reference_error.raw_date == "2025.02.13"
        assert reference_error.expected_format == "DD.MM.YYYY"

        date_error = MalformedContactDateError("bad birthdate", birthdate="2099")
        assert isinstance(date_error, ContactDataError)
        assert date_error.birthdate == "2099"

        contact_error = MalformedContactError("missing", field="name", context={"index": 3})
        assert contact_error.field == "name"
        assert contact_error.context == {"index": 3}

    def test_non_sequence_is_type_error(self):
        error = NonSequenceInputError("not a list", received_type="dict")
        assert isinstance(error, ContactDataError)
        assert isinstance(error, TypeError)
        assert error.received_type == "dict"

    def test_configuration_error_not_recoverable(self):
        error = ConfigurationError("invalid", errors=["x"])
        assert error.recoverable is False
        assert error.errors == ["x"]


class TestPropagationPolicy:
    """Detected input-shape errors become empty results; the budget is unguarded."""

    @pytest.mark.parametrize("contacts", [None, 42, "text", {"name": "X"}])
    def test_next_birthdays_never_raises_on_shape(self, contacts, today):
        assert get_next_birthdays("13.02.2025", contacts, today=today) == []

    @pytest.mark.parametrize("reference_date", [None, "", "13.02.25", "2025-02-13", "13.02.2025.1"])
    def test_next_birthdays_bad_reference(self, reference_date, today):
        assert get_next_birthdays(reference_date, [], today=today) == []

    @pytest.mark.parametrize("contacts", [None, 42, "text", {"name": "X"}])
    def test_months_list_never_raises_on_shape(self, contacts, today):
        assert get_months_list(contacts, today=today) == []

    @pytest.mark.parametrize("contacts", [None, 42, "text", {"name": "X"}])
    def test_budget_raises_on_shape(self, contacts, today):
        with pytest.raises(NonSequenceInputError):
            get_minimum_presents_price(contacts, today=today)

    def test_malformed_birthdate_compares_without_error(self, today):
        """An unreadable birthdate is compared as a string, not rejected"""
        result = get_next_birthdays("13.02.2025", [{"name": "X", "birthdate": "soon"}], today=today)
        assert [contact.name for contact in result] == ["X"]
