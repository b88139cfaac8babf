"""
Property helpers for validating sorting results.

Used by the tests and by the benchmark harness as a sanity check after each
counted run.

Public API (stable):
    is_nondecreasing(xs) -> bool
    first_nondecreasing_violation_index(xs) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    is_stable(before, after) -> bool
    assert_sorted_permutation(before, after) -> None

Notes
-----
- Multiset checks need hashable elements (they go through `Counter`).
- Stability cannot be seen on bare values; `is_stable` expects Tagged
  elements (see `sortkit.datasets.make_tagged`) whose tags record input order.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Optional, Sequence

from sortkit.datasets import Tagged

__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "is_stable",
    "assert_sorted_permutation",
]


def is_nondecreasing(xs: Sequence[Any]) -> bool:
    """Return True iff xs[i] <= xs[i+1] for all i."""
    return first_nondecreasing_violation_index(xs) is None


def first_nondecreasing_violation_index(xs: Sequence[Any]) -> Optional[int]:
    """
    Return the first index i where xs[i] > xs[i+1], or None if nondecreasing.

    Useful for precise error messages:
        i = first_nondecreasing_violation_index(out)
        assert i is None, f"not nondecreasing at i={i}: {out[i]} > {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        if xs[i] > xs[i + 1]:
            return i
    return None


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Return True iff `a` and `b` hold exactly the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Any], b: Sequence[Any]) -> Dict[Any, int]:
    """
    Return value -> (count in a - count in b), omitting zero differences.

    Empty dict means identical multiplicities.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}


def is_stable(before: Sequence[Tagged], after: Sequence[Tagged]) -> bool:
    """
    True iff every group of equal keys appears in `after` in the same tag
    order as in `before`.
    """
    def tags_by_key(xs: Sequence[Tagged]) -> Dict[Any, list]:
        groups: Dict[Any, list] = {}
        for item in xs:
            groups.setdefault(item.key, []).append(item.tag)
        return groups

    return tags_by_key(before) == tags_by_key(after)


def assert_sorted_permutation(before: Sequence[Any], after: Sequence[Any]) -> None:
    """
    Assert that `after` is a nondecreasing rearrangement of `before`.

    Raises AssertionError naming the first problem found.
    """
    if len(before) != len(after):
        raise AssertionError(f"Length changed from {len(before)} to {len(after)}")
    i = first_nondecreasing_violation_index(after)
    if i is not None:
        raise AssertionError(f"Not nondecreasing at i={i}: {after[i]!r} > {after[i + 1]!r}")
    diff = permutation_counter_diff(before, after)
    if diff:
        raise AssertionError(f"Not a permutation of the input; count diff: {diff}")
