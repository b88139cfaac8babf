"""
Quick sort (Hoare-style partition, first element as pivot).

Layout of a range during partitioning:

    [ pivot | <= pivot ... | unsorted | ... > pivot ]
              ^left                     ^right

The left cursor advances while its element is <= pivot, the right cursor
retreats while its element is > pivot; when both are stuck the two elements
are swapped and both cursors move. Once they cross, the pivot is swapped to
the boundary and each side is sorted.

Only the smaller side is sorted by a recursive call; the larger side is
handled by the next iteration of the loop, so the stack stays O(log n) deep
whatever the input.

Known property: the pivot is always the first element of the range, so
already sorted (or reverse sorted) input degrades to O(n^2) comparisons.
"""

from __future__ import annotations

from typing import Any, MutableSequence

from .base import Sorter, swap

__all__ = ["QuickSort"]


class QuickSort(Sorter):
    name = "quick"

    def sort(self, seq: MutableSequence[Any]) -> None:
        # [ unsorted | pivot | unsorted ]
        _quicksort(seq, 0, len(seq))


def _quicksort(seq: MutableSequence[Any], lo: int, hi: int) -> None:
    """Sort the half-open range seq[lo:hi] in place."""
    while hi - lo > 2:
        mid = _partition(seq, lo, hi)
        if mid - lo < hi - mid - 1:
            _quicksort(seq, lo, mid)
            lo = mid + 1
        else:
            _quicksort(seq, mid + 1, hi)
            hi = mid
    if hi - lo == 2 and seq[lo] > seq[lo + 1]:
        swap(seq, lo, lo + 1)


def _partition(seq: MutableSequence[Any], lo: int, hi: int) -> int:
    """Partition seq[lo:hi] around seq[lo] and return the pivot's final index."""
    pivot = seq[lo]
    # Cursors are offsets into the remainder seq[lo+1:hi].
    rest = lo + 1
    left = 0
    right = hi - lo - 2
    while left <= right:
        if seq[rest + left] <= pivot:
            left += 1
        elif seq[rest + right] > pivot:
            right -= 1
        else:
            swap(seq, rest + left, rest + right)
            left += 1
            right -= 1

    # seq[lo+1 : lo+1+left] is <= pivot; its last slot becomes the pivot's home.
    mid = lo + left
    swap(seq, lo, mid)
    assert mid == lo or seq[mid - 1] <= seq[mid], "partition left a larger element before the pivot"
    return mid
