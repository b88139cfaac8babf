"""
Delegating sort: hands the work to Python's built-in sort (Timsort).

Serves as the reference implementation for the oracle in
`sortkit.validate.oracle` and as a baseline in benchmarks.
"""

from __future__ import annotations

from typing import Any, MutableSequence

from .base import Sorter

__all__ = ["BuiltinSort"]


class BuiltinSort(Sorter):
    name = "builtin"

    def sort(self, seq: MutableSequence[Any]) -> None:
        if isinstance(seq, list):
            seq.sort()
            return
        # Generic mutable sequences: write the sorted values back by index.
        for i, item in enumerate(sorted(seq)):
            seq[i] = item
