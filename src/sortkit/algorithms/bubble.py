"""
Bubble sort.

Repeatedly steps through the sequence, comparing each element with its left
neighbour and swapping the pair when it is out of order, until a full pass
makes no swap. Equal neighbours are never swapped, so the sort is stable.

Complexity: O(n^2) comparisons worst/average; an already sorted input costs a
single pass of n-1 comparisons.
"""

from __future__ import annotations

from typing import Any, MutableSequence

from .base import Sorter, swap

__all__ = ["BubbleSort"]


class BubbleSort(Sorter):
    name = "bubble"

    def sort(self, seq: MutableSequence[Any]) -> None:
        swapped = True
        while swapped:
            swapped = False
            for i in range(1, len(seq)):
                if seq[i] < seq[i - 1]:
                    swap(seq, i, i - 1)
                    swapped = True
