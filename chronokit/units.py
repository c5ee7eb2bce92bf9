"""Time granularities with integer conversions and blocking sleeps.

Every conversion first normalizes the magnitude to nanoseconds and then
floor-divides by the target scale, so truncation happens exactly once.
Magnitudes and nanosecond results stay in the unsigned 64-bit range;
anything larger raises :class:`~chronokit.util.TimeUnitOverflowError`
instead of wrapping.
"""

import logging
import time
from collections.abc import Callable
from datetime import timedelta
from enum import Enum
from typing import TypeVar

from dateutil.relativedelta import relativedelta

from chronokit.util import (
    DAY,
    HOUR,
    HOURS_PER_DAY,
    I64_MAX,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    MINUTES_PER_HOUR,
    NANOSECOND,
    SECOND,
    SECONDS_PER_MINUTE,
    U64_MAX,
    TimeUnitOverflowError,
    check_magnitude,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TimeUnit(Enum):
    """Time granularities from nanoseconds to days, finest first.

    Member values are the canonical names (``"Milliseconds"``), so
    ``TimeUnit.MILLISECONDS.value`` is the name external callers use.

    Examples:
        >>> TimeUnit.MILLISECONDS.to_nanos(1024)
        1024000000

        >>> TimeUnit.DAYS.to_hours(1024)
        24576

        >>> TimeUnit.SECONDS.to_minutes(10)
        0
    """

    NANOSECONDS = "Nanoseconds"
    MICROSECONDS = "Microseconds"
    MILLISECONDS = "Milliseconds"
    SECONDS = "Seconds"
    MINUTES = "Minutes"
    HOURS = "Hours"
    DAYS = "Days"

    @property
    def scale(self) -> int:
        """Nanoseconds in one unit."""
        return _SCALES[self]

    @property
    def seconds_per_unit(self) -> int:
        """Whole seconds in one unit (0 for sub-second units)."""
        return self.scale // SECOND

    def to_nanos(self, amount: int) -> int:
        nanos = check_magnitude(amount) * self.scale
        if nanos > U64_MAX:
            raise TimeUnitOverflowError(
                f"{amount} {self.value} is {nanos} nanoseconds, which exceeds "
                f"the 64-bit range ({U64_MAX}).\n"
                f"Hint: convert from a coarser unit directly, e.g. "
                f"TimeUnit.DAYS.to_duration(amount)"
            )
        return nanos

    def to_micros(self, amount: int) -> int:
        return self.to_nanos(amount) // MICROSECOND

    def to_millis(self, amount: int) -> int:
        return self.to_nanos(amount) // MILLISECOND

    def to_seconds(self, amount: int) -> int:
        return self.to_nanos(amount) // SECOND

    def to_minutes(self, amount: int) -> int:
        return self.to_seconds(amount) // SECONDS_PER_MINUTE

    def to_hours(self, amount: int) -> int:
        return self.to_minutes(amount) // MINUTES_PER_HOUR

    def to_days(self, amount: int) -> int:
        return self.to_hours(amount) // HOURS_PER_DAY

    def to_duration(self, amount: int) -> timedelta:
        """Return ``amount`` of this unit as a :class:`~datetime.timedelta`.

        Built from timedelta's own constructors rather than through
        nanoseconds. Nanoseconds are truncated to whole microseconds,
        timedelta's resolution. Durations beyond timedelta's range raise
        its native :class:`OverflowError`.
        """
        check_magnitude(amount)
        if self is TimeUnit.NANOSECONDS:
            return timedelta(microseconds=amount // (MICROSECOND // NANOSECOND))
        if self is TimeUnit.MICROSECONDS:
            return timedelta(microseconds=amount)
        if self is TimeUnit.MILLISECONDS:
            return timedelta(milliseconds=amount)
        return timedelta(seconds=amount * self.seconds_per_unit)

    def to_external_duration(self, amount: int) -> relativedelta:
        """Return ``amount`` of this unit as a dateutil ``relativedelta``.

        Covers the same wall-clock length as :meth:`to_duration`, using
        relativedelta's signed per-unit arguments, so ``amount`` must fit
        the signed 64-bit range.
        """
        check_magnitude(amount, limit=I64_MAX)
        if self is TimeUnit.NANOSECONDS:
            return relativedelta(microseconds=amount // (MICROSECOND // NANOSECOND))
        if self is TimeUnit.MICROSECONDS:
            return relativedelta(microseconds=amount)
        if self is TimeUnit.MILLISECONDS:
            return relativedelta(microseconds=amount * (MILLISECOND // MICROSECOND))
        if self is TimeUnit.SECONDS:
            return relativedelta(seconds=amount)
        if self is TimeUnit.MINUTES:
            return relativedelta(minutes=amount)
        if self is TimeUnit.HOURS:
            return relativedelta(hours=amount)
        return relativedelta(days=amount)

    def sleep(self, amount: int) -> None:
        """Block the calling thread for ``amount`` of this unit.

        Sleeps for the whole milliseconds in ``amount``; the actual pause
        is at least that long, subject to scheduler slack.
        """
        millis = self.to_millis(amount)
        logger.debug("Sleeping %d ms (%d %s)", millis, amount, self.value)
        time.sleep(millis / 1000)

    def sleep_with(self, amount: int, sleeper: Callable[[timedelta], T]) -> T:
        """Hand the computed timedelta to ``sleeper`` and return its result."""
        return sleeper(self.to_duration(amount))

    def sleep_with_external(
        self, amount: int, sleeper: Callable[[relativedelta], T]
    ) -> T:
        return sleeper(self.to_external_duration(amount))

    @classmethod
    def from_name(cls, name: str) -> "TimeUnit | None":
        """Return the unit whose canonical name is exactly ``name``, or None."""
        if not isinstance(name, str):
            return None
        return _BY_NAME.get(name)

    @classmethod
    def from_name_case_insensitive(cls, name: str) -> "TimeUnit | None":
        """Like :meth:`from_name`, but ``"SECONDS"`` and ``"seconds"`` also match."""
        if not isinstance(name, str):
            return None
        return _BY_LOWER_NAME.get(name.lower())


_SCALES: dict[TimeUnit, int] = {
    TimeUnit.NANOSECONDS: NANOSECOND,
    TimeUnit.MICROSECONDS: MICROSECOND,
    TimeUnit.MILLISECONDS: MILLISECOND,
    TimeUnit.SECONDS: SECOND,
    TimeUnit.MINUTES: MINUTE,
    TimeUnit.HOURS: HOUR,
    TimeUnit.DAYS: DAY,
}

_BY_NAME: dict[str, TimeUnit] = {unit.value: unit for unit in TimeUnit}
_BY_LOWER_NAME: dict[str, TimeUnit] = {unit.value.lower(): unit for unit in TimeUnit}
