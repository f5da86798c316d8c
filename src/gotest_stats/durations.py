"""
Duration conversion and formatting.

Durations are integer nanoseconds. Formatting follows the notation used by
Go's ``time.Duration`` (``1.5s``, ``200ms``, ``1m30s``) since reports are
compared against output of the Go toolchain.
"""

from typing import Tuple

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND

MIN_DURATION = -(1 << 63)


def from_seconds(elapsed: float) -> int:
    """
    Convert elapsed seconds to a nanosecond duration.

    The fractional nanosecond part is truncated toward zero. Values outside
    the signed 64-bit nanosecond range map to MIN_DURATION, as the Go
    float-to-int64 conversion does on amd64.

    Args:
        elapsed: Elapsed time in seconds (may be negative)

    Returns:
        Duration in nanoseconds
    """
    value = elapsed * SECOND
    if not MIN_DURATION <= value < -MIN_DURATION:
        return MIN_DURATION
    return int(value)


def _format_fraction(value: int, precision: int) -> Tuple[str, int]:
    """Split off ``precision`` decimal digits, dropping trailing zeros."""
    scale = 10**precision
    digits = f"{value % scale:0{precision}d}".rstrip("0")
    fraction = f".{digits}" if digits else ""
    return fraction, value // scale


def format_duration(duration: int) -> str:
    """
    Format a nanosecond duration in Go duration notation.

    Args:
        duration: Duration in nanoseconds

    Returns:
        Human-readable duration, e.g. "1.5s", "200ms", "2h0m1s", "0s"
    """
    if duration == 0:
        return "0s"

    sign = "-" if duration < 0 else ""
    value = abs(duration)

    if value < SECOND:
        if value < MICROSECOND:
            return f"{sign}{value}ns"
        if value < MILLISECOND:
            fraction, whole = _format_fraction(value, 3)
            return f"{sign}{whole}{fraction}µs"
        fraction, whole = _format_fraction(value, 6)
        return f"{sign}{whole}{fraction}ms"

    fraction, whole = _format_fraction(value, 9)
    text = f"{whole % 60}{fraction}s"
    minutes = whole // 60
    if minutes > 0:
        text = f"{minutes % 60}m{text}"
        hours = minutes // 60
        if hours > 0:
            text = f"{hours}h{text}"
    return sign + text
