"""Pytest configuration and shared fixtures."""

import pytest
import structlog
from datetime import date
from typing import Any, Dict, List


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration changes made by a test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def today() -> date:
    """Fixed reference "today" so results do not depend on the wall clock."""
    return date(2025, 2, 13)


@pytest.fixture
def reference_date() -> str:
    """Reference date matching the fixed today."""
    return "13.02.2025"


@pytest.fixture
def sample_phone_book() -> List[Dict[str, Any]]:
    """Phone book in wire shape; Глеб's birthdate lies before today."""
    return [
        {
            "name": "Анна",
            "birthdate": "15.03.2099",
            "wishList": [
                {"title": "A", "price": 50},
                {"title": "B", "price": 30},
            ],
        },
        {"name": "Борис", "birthdate": "01.01.2100"},
        {"name": "Вера", "birthdate": "20.10.2099", "wishList": []},
        {
            "name": "Глеб",
            "birthdate": "05.11.1990",
            "wishList": [{"title": "C", "price": 10}],
        },
        {"name": "Дина", "birthdate": "07.03.2099"},
    ]
