"""Date-time formatting against the :class:`~chronokit.pattern.Pattern` catalog.

A :class:`DateTimeFormatter` is an immutable value bound to one pattern.
Rendering is delegated to :meth:`datetime.datetime.strftime`, except for
``Pattern.EPOCH_SECONDS`` which renders whole seconds since the Unix
epoch.

A process-wide formatter bound to :data:`DEFAULT_PATTERN` is built on
first use and shared by the module-level ``format_*`` functions, so call
sites that never need another pattern do not have to hold a formatter.
"""

import logging
import threading
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone

from typing_extensions import Self

from chronokit.pattern import MILLIS_TOKEN, YEAR_TOKEN, Pattern

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = Pattern.YEAR_MONTH_DAY_HOUR_MINUTE_SECOND

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_SECOND = timedelta(seconds=1)


def _require_pattern(pattern: Pattern) -> Pattern:
    if not isinstance(pattern, Pattern):
        raise TypeError(
            f"Formatter pattern must be a Pattern member.\n"
            f"Got {type(pattern).__name__!r}: {pattern!r}\n"
            f"Hint: look up names or templates first:\n"
            f"  Pattern.from_name('YearMonthDay')\n"
            f"  Pattern.from_template('%Y-%m-%d')"
        )
    return pattern


def epoch_seconds(moment: datetime) -> int:
    """Whole seconds since 1970-01-01T00:00:00Z, floored (negative before 1970)."""
    return (moment - _EPOCH) // _ONE_SECOND


@dataclass(frozen=True)
class DateTimeFormatter:
    pattern: Pattern = DEFAULT_PATTERN

    def __post_init__(self) -> None:
        _require_pattern(self.pattern)

    def rebind(self, pattern: Pattern) -> Self:
        """Return a new formatter bound to ``pattern``; this one is unchanged."""
        return replace(self, pattern=_require_pattern(pattern))

    def active_pattern(self) -> Pattern:
        return self.pattern

    def format(self, moment: datetime, pattern: Pattern) -> str:
        """Render a timezone-aware datetime with ``pattern``.

        The instant is converted to UTC before rendering, so fields and
        epoch seconds always describe the UTC wall clock.

        Raises:
            TypeError: If ``moment`` is naive or ``pattern`` is not a Pattern
        """
        _require_pattern(pattern)
        if moment.utcoffset() is None:
            raise TypeError(
                f"format() requires a timezone-aware datetime.\n"
                f"Got naive datetime: {moment!r}\n"
                f"Hint: use format_naive() to read its fields as UTC, or add "
                f"timezone info:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )
        utc = moment.astimezone(timezone.utc)

        if pattern.is_epoch:
            return str(epoch_seconds(utc))

        template = pattern.template_of()
        if MILLIS_TOKEN in template:
            millis = f".{utc.microsecond // 1000:03d}"
            template = template.replace(MILLIS_TOKEN, millis)
        if YEAR_TOKEN in template:
            # glibc strftime does not pad %Y below year 1000
            template = template.replace(YEAR_TOKEN, f"{utc.year:04d}")
        return utc.strftime(template)

    def format_default(self, moment: datetime) -> str:
        return self.format(moment, self.active_pattern())

    def format_naive(self, moment: datetime, pattern: Pattern) -> str:
        """Render a naive datetime, taking its wall-clock fields as UTC.

        UTC is attached without shifting any field.

        Raises:
            TypeError: If ``moment`` already carries timezone info
        """
        if moment.utcoffset() is not None:
            raise TypeError(
                f"format_naive() requires a naive datetime.\n"
                f"Got timezone-aware datetime: {moment!r}\n"
                f"Hint: use format() for aware datetimes."
            )
        return self.format(moment.replace(tzinfo=timezone.utc), pattern)

    def format_naive_default(self, moment: datetime) -> str:
        return self.format_naive(moment, self.active_pattern())


_default: DateTimeFormatter | None = None
_default_lock = threading.Lock()


def default_formatter() -> DateTimeFormatter:
    """Return the shared formatter, creating it on first call.

    The lock guards only construction; formatting runs outside it.
    """
    global _default
    formatter = _default
    if formatter is not None:
        return formatter
    with _default_lock:
        if _default is None:
            _default = DateTimeFormatter(DEFAULT_PATTERN)
            logger.debug(
                "Created default formatter with pattern %s", DEFAULT_PATTERN.value
            )
        return _default


def format_default(moment: datetime) -> str:
    """Format an aware datetime with the shared formatter's pattern."""
    return default_formatter().format_default(moment)


def format_datetime(moment: datetime, pattern: Pattern) -> str:
    """Format an aware datetime with ``pattern`` via the shared formatter."""
    return default_formatter().format(moment, pattern)


def format_naive_default(moment: datetime) -> str:
    return default_formatter().format_naive_default(moment)


def format_naive(moment: datetime, pattern: Pattern) -> str:
    return default_formatter().format_naive(moment, pattern)


def format_naive_utc(moment: datetime, pattern: Pattern) -> str:
    """Attach UTC to a naive datetime here, then format it as an aware one."""
    if moment.utcoffset() is not None:
        raise TypeError(
            f"format_naive_utc() requires a naive datetime.\n"
            f"Got timezone-aware datetime: {moment!r}\n"
            f"Hint: use format_datetime() for aware datetimes."
        )
    return default_formatter().format(moment.replace(tzinfo=timezone.utc), pattern)


def format_naive_utc_default(moment: datetime) -> str:
    return format_naive_utc(moment, default_formatter().active_pattern())
