"""Default configuration parameters for the birthday queries."""

from dataclasses import dataclass, field


MONTH_NAMES = {
    "ru": (
        "январь", "февраль", "март", "апрель", "май", "июнь",
        "июль", "август", "сентябрь", "октябрь", "ноябрь", "декабрь",
    ),
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
}

ORDERING_MODES = ("reversed", "anniversary")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class DateParams:
    """Date string format parameters."""
    separator: str = "."                 # DD.MM.YYYY field separator


@dataclass(frozen=True)
class OrderingParams:
    """How birthdates are compared against today and each other."""
    mode: str = "reversed"               # "reversed" or "anniversary"


@dataclass(frozen=True)
class MonthParams:
    """Month grouping parameters."""
    locale: str = "ru"                   # Key into MONTH_NAMES


@dataclass(frozen=True)
class LoggingParams:
    """Logging setup applied when a planner is built from config."""
    level: str = "INFO"                  # One of LOG_LEVELS
    format_json: bool = False            # JSON lines instead of console output


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    date: DateParams
    ordering: OrderingParams
    months: MonthParams
    logging: LoggingParams = field(default_factory=LoggingParams)

    @property
    def month_names(self) -> tuple[str, ...]:
        """Month name table for the configured locale."""
        return MONTH_NAMES[self.months.locale]


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        date=DateParams(),
        ordering=OrderingParams(),
        months=MonthParams(),
        logging=LoggingParams(),
    )
