"""Tests for the minimum presents budget"""

import pytest

from birthday_app.data.models import BudgetResult, Contact, GiftOption, PresentPlan
from birthday_app.errors import NonSequenceInputError
from birthday_app.queries.presents import cheapest_wish, get_minimum_presents_price


class TestCheapestWish:
    """Test cheapest wish selection"""

    def test_picks_lowest_price(self):
        contact = Contact("Анна", "15.03.2099", (GiftOption("A", 50), GiftOption("B", 30)))
        assert cheapest_wish(contact) == GiftOption("B", 30)

    def test_tie_keeps_first_entry(self):
        contact = Contact("Анна", "15.03.2099", (GiftOption("A", 30), GiftOption("B", 30)))
        assert cheapest_wish(contact).title == "A"

    def test_absent_wish_list(self):
        assert cheapest_wish(Contact("Борис", "01.01.2100")) is None

    def test_empty_wish_list(self):
        assert cheapest_wish(Contact("Вера", "20.10.2099", ())) is None


class TestGetMinimumPresentsPrice:
    """Test budget calculation"""

    def test_budget(self, sample_phone_book, today):
        result = get_minimum_presents_price(sample_phone_book, today=today)

        assert isinstance(result, BudgetResult)
        assert result.total_price == 30
        assert result.friends_list == (
            PresentPlan("Анна", "15.03.2099", GiftOption("B", 30)),
            PresentPlan("Борис", "01.01.2100", None),
            PresentPlan("Вера", "20.10.2099", None),
            PresentPlan("Дина", "07.03.2099", None),
        )

    def test_single_contact_cheapest(self, today):
        phone_book = [{
            "name": "Анна",
            "birthdate": "15.03.2099",
            "wishList": [{"title": "A", "price": 50}, {"title": "B", "price": 30}],
        }]

        result = get_minimum_presents_price(phone_book, today=today)

        assert result.friends_list[0].present == GiftOption("B", 30)
        assert result.total_price == 30

    def test_no_wish_list_contributes_zero(self, today):
        result = get_minimum_presents_price([{"name": "Борис", "birthdate": "01.01.2100"}], today=today)

        assert len(result.friends_list) == 1
        assert result.friends_list[0].present is None
        assert result.total_price == 0

    def test_past_birthdays_excluded(self, today):
        phone_book = [{"name": "Глеб", "birthdate": "05.11.1990", "wishList": [{"title": "C", "price": 10}]}]

        result = get_minimum_presents_price(phone_book, today=today)

        assert result.friends_list == ()
        assert result.total_price == 0

    def test_fractional_prices_summed_exactly(self, today):
        phone_book = [
            Contact("A", "01.01.2099", (GiftOption("x", 0.5),)),
            Contact("B", "02.01.2099", (GiftOption("y", 0.25),)),
        ]

        assert get_minimum_presents_price(phone_book, today=today).total_price == 0.75

    def test_caller_wish_list_not_reordered(self, sample_phone_book, today):
        wish_list = sample_phone_book[0]["wishList"]
        before = list(wish_list)

        first = get_minimum_presents_price(sample_phone_book, today=today)
        second = get_minimum_presents_price(sample_phone_book, today=today)

        assert wish_list == before
        assert first == second

    def test_non_sequence_raises(self, today):
        with pytest.raises(NonSequenceInputError):
            get_minimum_presents_price(None, today=today)

    def test_non_sequence_is_type_error(self, today):
        with pytest.raises(TypeError):
            get_minimum_presents_price(42, today=today)

    def test_anniversary_ordering_includes_all(self, sample_phone_book, today):
        result = get_minimum_presents_price(sample_phone_book, today=today, ordering="anniversary")

        assert len(result.friends_list) == 5
        assert result.total_price == 40
