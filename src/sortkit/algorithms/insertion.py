"""
Insertion sort.

The sequence is split into a sorted prefix and an unsorted suffix; each outer
iteration moves the first unsorted element into its place in the prefix.

Two variants, selected by the `smart` flag:

- smart=False ("dumb"):
    Walk the new element leftward with adjacent swaps while its left
    neighbour is strictly greater.

- smart=True:
    Binary-search the prefix for the insertion index, then rotate the range
    [index, unsorted] one step to the right. `bisect_right` places the new
    element after any equal ones, so this variant is stable too. Comparisons
    drop to O(n log n) but element movement stays O(n^2).
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Any, MutableSequence

from .base import Sorter, rotate_right, swap

__all__ = ["InsertionSort"]


@dataclass(frozen=True)
class InsertionSort(Sorter):
    smart: bool

    @property
    def name(self) -> str:  # type: ignore[override]
        return "insertion-smart" if self.smart else "insertion-dumb"

    def sort(self, seq: MutableSequence[Any]) -> None:
        # [ sorted | not sorted ]
        for unsorted in range(1, len(seq)):
            if self.smart:
                i = bisect_right(seq, seq[unsorted], 0, unsorted)
                rotate_right(seq, i, unsorted)
            else:
                i = unsorted
                while i > 0 and seq[i - 1] > seq[i]:
                    swap(seq, i - 1, i)
                    i -= 1
