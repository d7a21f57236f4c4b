"""
Property-based tests for time value invariants using Hypothesis.

Field ranges deliberately go well past one second (and past 64 bits) to
exercise carry and borrow in both directions.
"""

from hypothesis import given
from hypothesis import strategies as st

from tsctl.domain.timespec import (
    NSEC_PER_SEC,
    Timespec,
    add,
    compare,
    from_ns,
    is_normalized,
    normalize,
    sub,
    to_ns,
)

seconds = st.integers(min_value=-(2**70), max_value=2**70)
nanoseconds = st.integers(min_value=-(2**80), max_value=2**80)
normalized = st.builds(
    Timespec,
    seconds,
    st.integers(min_value=0, max_value=NSEC_PER_SEC - 1),
)
any_timespec = st.builds(Timespec, seconds, nanoseconds)


@given(seconds, nanoseconds)
def test_normalize_bounds_nanoseconds(s: int, n: int):
    """Normalization always yields 0 <= nanoseconds < 1e9."""
    assert is_normalized(normalize(s, n))


@given(seconds, nanoseconds)
def test_normalize_preserves_value(s: int, n: int):
    """The total nanosecond count survives normalization."""
    assert to_ns(normalize(s, n)) == s * NSEC_PER_SEC + n


@given(seconds, nanoseconds)
def test_normalize_matches_floor_divmod(s: int, n: int):
    """Truncate-then-borrow agrees with floor-style divmod."""
    carry, rem = divmod(n, NSEC_PER_SEC)
    assert normalize(s, n) == Timespec(s + carry, rem)


@given(nanoseconds)
def test_nanosecond_round_trip(n: int):
    assert to_ns(from_ns(n)) == n


@given(normalized)
def test_timespec_round_trip(t: Timespec):
    assert from_ns(to_ns(t)) == t


@given(any_timespec, any_timespec)
def test_add_commutes(a: Timespec, b: Timespec):
    assert add(a, b) == add(b, a)


@given(any_timespec)
def test_sub_self_is_zero(a: Timespec):
    assert sub(a, a) == Timespec(0, 0)


@given(normalized)
def test_compare_self_is_zero(a: Timespec):
    assert compare(a, a) == 0


@given(normalized, normalized)
def test_compare_matches_total_order(a: Timespec, b: Timespec):
    """For normalized values, compare's sign agrees with the nanosecond totals."""
    cmp = compare(a, b)
    diff = to_ns(a) - to_ns(b)
    assert (cmp > 0) == (diff > 0)
    assert (cmp < 0) == (diff < 0)


@given(any_timespec, any_timespec)
def test_sub_undoes_add(a: Timespec, b: Timespec):
    assert to_ns(sub(add(a, b), b)) == to_ns(a)
