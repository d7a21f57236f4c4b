"""Seconds/nanoseconds time values and their normalized arithmetic.

A normalized value satisfies ``0 <= nanoseconds < NSEC_PER_SEC``. For
negative values only ``seconds`` is negative: half a second before the
epoch is ``Timespec(-1, 500_000_000)``.

INVARIANT: Every arithmetic result passes through :func:`normalize`.
Equality and comparison read the raw fields and never normalize.
"""

from __future__ import annotations

from dataclasses import dataclass

MSEC_PER_SEC = 1_000
USEC_PER_SEC = 1_000_000
NSEC_PER_SEC = 1_000_000_000


@dataclass(frozen=True)
class Timespec:
    """A point in time or a duration as whole seconds plus nanoseconds."""

    seconds: int = 0
    nanoseconds: int = 0

    @classmethod
    def zero(cls) -> Timespec:
        return cls(0, 0)

    def as_dict(self) -> dict[str, int]:
        return {"seconds": self.seconds, "nanoseconds": self.nanoseconds}

    def __add__(self, other: object) -> Timespec:
        if not isinstance(other, Timespec):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: object) -> Timespec:
        if not isinstance(other, Timespec):
            return NotImplemented
        return sub(self, other)


def _trunc_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """Divide rounding toward zero; the remainder takes the dividend's sign.

    Python's ``//`` floors, so the quotient is computed on the magnitude
    and the sign put back afterwards.
    """
    quotient = abs(dividend) // divisor
    if dividend < 0:
        quotient = -quotient
    return quotient, dividend - quotient * divisor


def normalize(seconds: int, nanoseconds: int) -> Timespec:
    """Fold any nanosecond count into *seconds* and return a normalized value.

    *nanoseconds* may be negative or span many seconds, e.g. the sum of two
    normalized values.

    Examples:
        >>> normalize(5, 1_500_000_000)
        Timespec(seconds=6, nanoseconds=500000000)
        >>> normalize(0, -500_000_000)
        Timespec(seconds=-1, nanoseconds=500000000)
        >>> normalize(0, -1_000_000_000)
        Timespec(seconds=-1, nanoseconds=0)
    """
    carry, remainder = _trunc_divmod(nanoseconds, NSEC_PER_SEC)
    seconds += carry

    # remainder has the dividend's sign; borrow a second to make it >= 0
    if remainder < 0:
        remainder += NSEC_PER_SEC
        seconds -= 1

    return Timespec(seconds, remainder)


def equal(a: Timespec, b: Timespec) -> bool:
    """Return True if both fields are identical (no normalization)."""
    return a.seconds == b.seconds and a.nanoseconds == b.nanoseconds


def compare(a: Timespec, b: Timespec) -> int:
    """Three-way compare: ``<0`` if a < b, ``0`` if equal, ``>0`` if a > b.

    Only the sign of the result is meaningful. On equal seconds the raw
    nanosecond difference is returned.
    """
    if a.seconds < b.seconds:
        return -1
    if a.seconds > b.seconds:
        return 1
    return a.nanoseconds - b.nanoseconds


def is_valid(t: Timespec) -> bool:
    """Check for a normalized, non-negative timestamp.

    Stricter than :func:`is_normalized`: negative durations such as
    ``Timespec(-5, 0)`` are rejected.
    """
    if t.seconds < 0:
        return False
    return 0 <= t.nanoseconds < NSEC_PER_SEC


def is_normalized(t: Timespec) -> bool:
    """Check the normalized invariant alone; seconds may be negative."""
    return 0 <= t.nanoseconds < NSEC_PER_SEC


def to_ns(t: Timespec) -> int:
    return t.seconds * NSEC_PER_SEC + t.nanoseconds


def from_ns(nanoseconds: int) -> Timespec:
    return normalize(0, nanoseconds)


def add(a: Timespec, b: Timespec) -> Timespec:
    return normalize(a.seconds + b.seconds, a.nanoseconds + b.nanoseconds)


def sub(a: Timespec, b: Timespec) -> Timespec:
    """Return ``a - b``."""
    return normalize(a.seconds - b.seconds, a.nanoseconds - b.nanoseconds)


def add_ns(t: Timespec, nanoseconds: int) -> Timespec:
    """Return *t* moved forward by *nanoseconds* (expected non-negative)."""
    return normalize(t.seconds, t.nanoseconds + nanoseconds)


def sub_ns(t: Timespec, nanoseconds: int) -> Timespec:
    """Return *t* moved back by *nanoseconds* (expected non-negative)."""
    return normalize(t.seconds, t.nanoseconds - nanoseconds)
