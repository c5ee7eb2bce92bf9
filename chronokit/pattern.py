"""Catalog of named date-time display patterns.

Each :class:`Pattern` carries two fixed strings: a ``strftime`` template
and its canonical name. Both directions of the mapping are lookups over
module-level tables, so every template and every name resolves back to
exactly one pattern.
"""

from enum import Enum

YEAR_MONTH_DAY = "%Y-%m-%d"
MONTH_DAY_YEAR = "%m/%d/%Y"
DAY_MONTH_YEAR = "%d-%m-%Y"

YEAR_MONTH_DAY_HOUR_MINUTE = "%Y-%m-%d %H:%M"
YEAR_MONTH_DAY_HOUR_MINUTE_SECOND = "%Y-%m-%d %H:%M:%S"
YEAR_MONTH_DAY_HOUR_MINUTE_SECOND_MILLIS = "%Y-%m-%d %H:%M:%S%.3f"

HOUR_MINUTE = "%H:%M"
HOUR_MINUTE_SECOND = "%H:%M:%S"

MONTH_NAME_FULL = "%B"
MONTH_NAME_ABBREVIATED = "%b"

WEEKDAY_NAME_FULL = "%A"
WEEKDAY_NAME_ABBREVIATED = "%a"

MERIDIEM_INDICATOR = "%p"

# Not a strftime template: epoch seconds are rendered by the formatter.
TIMESTAMP = "timestamp"

# Fractional-seconds token strftime lacks; expanded by the formatter.
MILLIS_TOKEN = "%.3f"

# Four-digit year; expanded by the formatter so it is always zero-padded.
YEAR_TOKEN = "%Y"


class Pattern(Enum):
    """Named date-time display patterns.

    Member values are the canonical names, spelled exactly as external
    callers refer to them (``"YearMonthDayHourMinuteSecond"``).
    """

    YEAR_MONTH_DAY = "YearMonthDay"
    MONTH_DAY_YEAR = "MonthDayYear"
    DAY_MONTH_YEAR = "DayMonthYear"
    YEAR_MONTH_DAY_HOUR_MINUTE = "YearMonthDayHourMinute"
    YEAR_MONTH_DAY_HOUR_MINUTE_SECOND = "YearMonthDayHourMinuteSecond"
    YEAR_MONTH_DAY_HOUR_MINUTE_SECOND_MILLIS = "YearMonthDayHourMinuteSecondMillis"
    HOUR_MINUTE = "HourMinute"
    HOUR_MINUTE_SECOND = "HourMinuteSecond"
    MONTH_NAME_FULL = "MonthNameFull"
    MONTH_NAME_ABBREVIATED = "MonthNameAbbreviated"
    WEEKDAY_NAME_FULL = "WeekdayNameFull"
    WEEKDAY_NAME_ABBREVIATED = "WeekdayNameAbbreviated"
    MERIDIEM_INDICATOR = "MeridiemIndicator"
    EPOCH_SECONDS = "EpochSeconds"

    @property
    def is_epoch(self) -> bool:
        """True if formatting bypasses strftime and renders epoch seconds."""
        return self is Pattern.EPOCH_SECONDS

    def template_of(self) -> str:
        """Return the strftime template (or the epoch sentinel) for this pattern."""
        return _TEMPLATES[self]

    def name_of(self) -> str:
        return self.value

    @classmethod
    def from_template(cls, template: str) -> "Pattern | None":
        """Return the pattern whose template is ``template``, or None."""
        if not isinstance(template, str):
            return None
        return _BY_TEMPLATE.get(template)

    @classmethod
    def from_name(cls, name: str) -> "Pattern | None":
        """Return the pattern whose canonical name is ``name`` (case-sensitive)."""
        if not isinstance(name, str):
            return None
        return _BY_NAME.get(name)


_TEMPLATES: dict[Pattern, str] = {
    Pattern.YEAR_MONTH_DAY: YEAR_MONTH_DAY,
    Pattern.MONTH_DAY_YEAR: MONTH_DAY_YEAR,
    Pattern.DAY_MONTH_YEAR: DAY_MONTH_YEAR,
    Pattern.YEAR_MONTH_DAY_HOUR_MINUTE: YEAR_MONTH_DAY_HOUR_MINUTE,
    Pattern.YEAR_MONTH_DAY_HOUR_MINUTE_SECOND: YEAR_MONTH_DAY_HOUR_MINUTE_SECOND,
    Pattern.YEAR_MONTH_DAY_HOUR_MINUTE_SECOND_MILLIS: (
        YEAR_MONTH_DAY_HOUR_MINUTE_SECOND_MILLIS
    ),
    Pattern.HOUR_MINUTE: HOUR_MINUTE,
    Pattern.HOUR_MINUTE_SECOND: HOUR_MINUTE_SECOND,
    Pattern.MONTH_NAME_FULL: MONTH_NAME_FULL,
    Pattern.MONTH_NAME_ABBREVIATED: MONTH_NAME_ABBREVIATED,
    Pattern.WEEKDAY_NAME_FULL: WEEKDAY_NAME_FULL,
    Pattern.WEEKDAY_NAME_ABBREVIATED: WEEKDAY_NAME_ABBREVIATED,
    Pattern.MERIDIEM_INDICATOR: MERIDIEM_INDICATOR,
    Pattern.EPOCH_SECONDS: TIMESTAMP,
}

_BY_TEMPLATE: dict[str, Pattern] = {
    template: pattern for pattern, template in _TEMPLATES.items()
}

_BY_NAME: dict[str, Pattern] = {pattern.value: pattern for pattern in Pattern}
