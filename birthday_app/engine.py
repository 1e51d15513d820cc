"""
Configured coordinator over the birthday queries.

Binds the ordering strategy, date separator and month names from the
configuration so callers only pass the phone book and, optionally, today.
"""

from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .config.defaults import DefaultConfig, get_default_config
from .config.loader import ConfigLoader
from .data.models import BudgetResult, Contact, MonthGroup, QueryResult
from .dates.comparator import get_ordering
from .logging.config import configure_logging
from .queries.months import query_months_list
from .queries.next_birthdays import query_next_birthdays
from .queries.presents import get_minimum_presents_price
from .utils.time import DateLike

logger = structlog.get_logger(__name__)


class BirthdayPlanner:
    """
    Main coordinator for the birthday views.

    Every method is stateless: results depend only on the arguments, the
    bound configuration and ``today``.
    """

    def __init__(self, config: Optional[DefaultConfig] = None) -> None:
        self.logger = logger
        self.config = config or get_default_config()
        self.ordering = get_ordering(self.config.ordering.mode, separator=self.config.date.separator)
        self.month_names = self.config.month_names

    @classmethod
    def from_config_dir(cls, config_dir: Optional[Union[str, Path]] = None,
                        overrides: Optional[dict[str, Any]] = None) -> "BirthdayPlanner":
        """
        Build a planner from a config directory and per-call overrides.

        Also applies the configured logging level and output format.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        loader = ConfigLoader.create(Path(config_dir) if config_dir is not None else None)
        config = loader.load(overrides)
        configure_logging(level=config.logging.level, format_json=config.logging.format_json)

        planner = cls(config)
        planner.logger.info(
            "Birthday planner configured",
            ordering=planner.ordering.name,
            locale=planner.config.months.locale
        )
        return planner

    def query_next_birthdays(self, reference_date: Any, contacts: Any,
                             today: Optional[DateLike] = None) -> QueryResult:
        """Upcoming birthdays after the reference date, as a QueryResult."""
        return query_next_birthdays(reference_date, contacts, today=today, ordering=self.ordering)

    def next_birthdays(self, reference_date: Any, contacts: Any,
                       today: Optional[DateLike] = None) -> list[Contact]:
        """Upcoming birthdays after the reference date; empty on bad input."""
        result = self.query_next_birthdays(reference_date, contacts, today=today)
        if not result.ok:
            self.logger.warning("Invalid next birthdays query", reason=result.reason)
        return result.to_list()

    def query_months_list(self, contacts: Any, today: Optional[DateLike] = None) -> QueryResult:
        """Upcoming birthdays grouped by month, as a QueryResult."""
        return query_months_list(contacts, today=today, ordering=self.ordering, month_names=self.month_names)

    def months_list(self, contacts: Any, today: Optional[DateLike] = None) -> list[MonthGroup]:
        """Upcoming birthdays grouped by month; empty on non-sequence input."""
        return self.query_months_list(contacts, today=today).to_list()

    def minimum_presents_price(self, contacts: Any, today: Optional[DateLike] = None) -> BudgetResult:
        """Cheapest present per upcoming birthday and their total price."""
        return get_minimum_presents_price(contacts, today=today, ordering=self.ordering)
