"""
Oracle for sorting correctness.

Ground truth is `BuiltinSort`, the strategy that delegates to Python's own
(stable, deterministic) list sort. Every other sorter must reproduce its
output exactly; for stable sorters that holds even on Tagged inputs.

Public API (stable):
    oracle_sort(a: Sequence) -> list
    equals_oracle(a: Sequence, out: Sequence) -> bool

The oracle never mutates its input and always returns a new list.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from sortkit.algorithms.builtin import BuiltinSort

ORACLE_NAME: str = BuiltinSort.name

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]

_ORACLE = BuiltinSort()


def oracle_sort(a: Sequence[Any]) -> List[Any]:
    """Return a new list with the elements of `a` in nondecreasing order."""
    out = list(a)
    _ORACLE.sort(out)
    return out


def equals_oracle(a: Sequence[Any], out: Sequence[Any]) -> bool:
    """True iff `out` equals `oracle_sort(a)` element-wise."""
    return list(out) == oracle_sort(a)
