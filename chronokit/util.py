"""Scale constants and helpers for chronokit.

Scale constants express one unit of each granularity in nanoseconds.
They are exact integer multiples of one another, so every conversion
between units is a single multiplication followed by a floor division.
"""

# Time unit scales (all values in nanoseconds)
NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24

# Magnitudes live in the unsigned 64-bit range; signed conversions in the
# signed one.
U64_MAX = 2**64 - 1
I64_MAX = 2**63 - 1


class TimeUnitOverflowError(OverflowError):
    """A conversion left the 64-bit range."""


def check_magnitude(amount: int, limit: int = U64_MAX) -> int:
    """Validate an integer magnitude and return it unchanged."""
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(
            f"Time unit magnitude must be an int.\n"
            f"Got {type(amount).__name__!r}: {amount!r}\n"
            f"Example: TimeUnit.SECONDS.to_millis(30)"
        )
    if amount < 0:
        raise ValueError(
            f"Time unit magnitude must be non-negative, got {amount}.\n"
            f"Magnitudes count whole units; express a negative offset "
            f"by subtracting the converted duration instead."
        )
    if amount > limit:
        raise TimeUnitOverflowError(
            f"Time unit magnitude {amount} exceeds the supported maximum "
            f"({limit})."
        )
    return amount
