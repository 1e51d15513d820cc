"""Tests for month grouping"""

import pytest

from birthday_app.config.defaults import MONTH_NAMES
from birthday_app.data.models import Contact, MonthGroup
from birthday_app.queries.months import get_months_list, query_months_list


def layout(groups):
    return [(group.month, [friend.name for friend in group.friends]) for group in groups]


class TestGetMonthsList:
    """Test month grouping with the reversed ordering"""

    def test_groups_by_month(self, sample_phone_book, today):
        result = get_months_list(sample_phone_book, today=today)

        assert layout(result) == [
            ("январь", ["Борис"]),
            ("март", ["Дина", "Анна"]),
            ("октябрь", ["Вера"]),
        ]
        assert all(isinstance(group, MonthGroup) for group in result)

    def test_march_bucket(self, today):
        result = get_months_list([Contact("Анна", "15.03.2099")], today=today)

        assert len(result) == 1
        assert result[0].month == "март"

    def test_past_birthdays_excluded(self, today):
        assert get_months_list([Contact("Old", "05.11.1990")], today=today) == []

    def test_buckets_sorted_by_month_number(self, today):
        """September sorts before October even when written as "9" """
        contacts = [
            Contact("Oct", "15.10.2099"),
            Contact("Sep", "15.9.2099"),
            Contact("Feb", "15.02.2099"),
        ]

        result = get_months_list(contacts, today=today)

        assert [group.month for group in result] == ["февраль", "сентябрь", "октябрь"]

    def test_friends_sorted_within_month(self, today):
        contacts = [
            Contact("Late", "28.03.2099"),
            Contact("Next year", "01.03.2100"),
            Contact("Early", "02.03.2099"),
        ]

        result = get_months_list(contacts, today=today)

        assert layout(result) == [("март", ["Early", "Late", "Next year"])]

    def test_english_month_names(self, sample_phone_book, today):
        result = get_months_list(sample_phone_book, today=today, month_names=MONTH_NAMES["en"])
        assert [group.month for group in result] == ["January", "March", "October"]

    def test_non_sequence_returns_empty(self, today):
        assert get_months_list(None, today=today) == []
        assert get_months_list("15.03.2099", today=today) == []

    def test_repeated_calls_identical(self, sample_phone_book, today):
        snapshot = [dict(item) for item in sample_phone_book]

        assert get_months_list(sample_phone_book, today=today) == get_months_list(sample_phone_book, today=today)
        assert sample_phone_book == snapshot

    @pytest.mark.parametrize("birthdate", ["2099", "15.13.2099", "15.xx.2099"])
    def test_unreadable_month_returns_empty(self, birthdate, today):
        """A bad birthdate fails the whole call instead of raising"""
        phone_book = [Contact("Анна", "15.03.2099"), {"name": "Broken", "birthdate": birthdate}]

        assert get_months_list(phone_book, today=today) == []


class TestQueryMonthsList:
    """Test the QueryResult variant"""

    def test_non_sequence_is_failure(self, today):
        result = query_months_list(42, today=today)

        assert result.ok is False
        assert "int" in result.reason

    def test_empty_is_success(self, today):
        result = query_months_list([], today=today)

        assert result.ok is True
        assert result.items == ()

    def test_unreadable_month_is_failure(self, today):
        result = query_months_list([Contact("Broken", "15.13.2099")], today=today)

        assert result.ok is False
        assert "15.13.2099" in result.reason


class TestAnniversaryMonths:
    """Test month grouping by next occurrence"""

    def test_starts_at_current_month(self, sample_phone_book, today):
        result = get_months_list(sample_phone_book, today=today, ordering="anniversary")

        assert layout(result) == [
            ("март", ["Дина", "Анна"]),
            ("октябрь", ["Вера"]),
            ("ноябрь", ["Глеб"]),
            ("январь", ["Борис"]),
        ]
