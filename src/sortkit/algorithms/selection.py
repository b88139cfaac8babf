"""
Selection sort.

For each position, find the minimum of the remaining suffix and swap it into
place. The scan uses a strict `<`, so the first occurrence of the minimum
wins. Makes at most n-1 swaps and always O(n^2) comparisons. Not stable: a
long-range swap can carry an element past an equal one.
"""

from __future__ import annotations

from typing import Any, MutableSequence

from .base import Sorter, swap

__all__ = ["SelectionSort"]


class SelectionSort(Sorter):
    name = "selection"

    def sort(self, seq: MutableSequence[Any]) -> None:
        n = len(seq)
        # [ sorted | not sorted ]
        for unsorted in range(n):
            smallest = unsorted
            for i in range(unsorted + 1, n):
                if seq[i] < seq[smallest]:
                    smallest = i
            if smallest != unsorted:
                swap(seq, unsorted, smallest)
