from .formatter import (
    DEFAULT_PATTERN,
    DateTimeFormatter,
    default_formatter,
    format_datetime,
    format_default,
    format_naive,
    format_naive_default,
    format_naive_utc,
    format_naive_utc_default,
)
from .pattern import Pattern
from .units import TimeUnit
from .util import (
    DAY,
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOSECOND,
    SECOND,
    TimeUnitOverflowError,
)

__all__ = [
    "Pattern",
    "DateTimeFormatter",
    "DEFAULT_PATTERN",
    "default_formatter",
    "format_default",
    "format_datetime",
    "format_naive_default",
    "format_naive",
    "format_naive_utc",
    "format_naive_utc_default",
    "TimeUnit",
    "TimeUnitOverflowError",
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
]
