"""Small helpers shared by the simulation: lenient integer parsing and a millisecond clock."""

from __future__ import annotations

import time

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def parse_int(text: str) -> int:
    """Parse a leading decimal integer from ``text`` leniently.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Text with no digits yields 0. The
    result is wrapped to a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]

    digits = []
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)

    value = int("".join(digits)) if digits else 0
    return _wrap_int32(sign * value)


def current_time_ms() -> int:
    """Return the wall-clock time in whole milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000