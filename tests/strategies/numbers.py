"""Hypothesis strategies for number formatter inputs.

Event-Emitting Strategies (HypoFuzz-Optimized):
    - whole_parts: Emits magnitude buckets (zero, small, grouped, 64-bit edge)
    - fitting_fractions: Emits padding width buckets

Python 3.11+.
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from cldrnum.constants import MAX_FRACTION, MAX_SCALE, MAX_WHOLE, MIN_WHOLE

__all__ = [
    "MAX_FRACTION",
    "MAX_WHOLE",
    "MIN_WHOLE",
    "fitting_fractions",
    "fixed_scales",
    "fractions",
    "invalid_scales",
    "valid_scales",
    "whole_parts",
]


@composite
def whole_parts(draw: st.DrawFn) -> int:
    """Generate signed 64-bit whole parts, biased toward grouping boundaries."""
    value = draw(
        st.one_of(
            st.sampled_from([0, 1, -1, 999, 1000, -1000, 100000, 1000000, MIN_WHOLE, MAX_WHOLE]),
            st.integers(min_value=-(10**6), max_value=10**6),
            st.integers(min_value=MIN_WHOLE, max_value=MAX_WHOLE),
        )
    )
    magnitude = abs(value)
    if magnitude == 0:
        event("whole=zero")
    elif magnitude < 1000:
        event("whole=ungrouped")
    elif magnitude < 2**32:
        event("whole=grouped")
    else:
        event("whole=wide")
    return value


def fractions() -> st.SearchStrategy[int]:
    """Generate unsigned 64-bit fractional magnitudes."""
    return st.one_of(
        st.sampled_from([0, 1, 10, 100, 101, 1010, MAX_FRACTION]),
        st.integers(min_value=0, max_value=MAX_FRACTION),
    )


def fixed_scales() -> st.SearchStrategy[int]:
    """Generate fixed scales 0-20."""
    return st.integers(min_value=0, max_value=MAX_SCALE)


def valid_scales() -> st.SearchStrategy[int]:
    """Generate every supported scale, natural included."""
    return st.integers(min_value=-1, max_value=MAX_SCALE)


def invalid_scales() -> st.SearchStrategy[int]:
    """Generate scales outside {-1} and 0-20."""
    return st.one_of(
        st.integers(max_value=-2),
        st.integers(min_value=MAX_SCALE + 1),
    )


@composite
def fitting_fractions(draw: st.DrawFn, scale: int) -> int:
    """Generate a fractional magnitude whose digit count fits a fixed scale."""
    if scale == 0:
        return 0
    upper = min(10**scale - 1, MAX_FRACTION)
    value = draw(st.integers(min_value=0, max_value=upper))
    padding = scale - len(str(value))
    event(f"padding={min(padding, 3)}")
    return value
