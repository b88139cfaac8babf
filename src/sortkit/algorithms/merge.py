"""
Merge sort without an auxiliary buffer.

Ranges are split at the midpoint and both halves are sorted recursively. The
merge step works in place: while the left cursor's element is <= the right
cursor's element it just advances; otherwise the right element is rotated
into position (range [start, start2] rotated one step right) and all three
markers move up by one.

When the last element of the left half is already <= the first element of
the right half the merge is skipped, so a sorted input costs exactly n-1
comparisons.

Comparisons are O(n log n) but element movement is O(n^2) in the worst case.
Recursion depth is ceil(log2 n). Stable.
"""

from __future__ import annotations

from typing import Any, MutableSequence

from .base import Sorter, rotate_right

__all__ = ["MergeSort"]


class MergeSort(Sorter):
    name = "merge"

    def sort(self, seq: MutableSequence[Any]) -> None:
        if len(seq) <= 1:
            return
        _merge_sort(seq, 0, len(seq) - 1)


def _merge_sort(seq: MutableSequence[Any], left: int, right: int) -> None:
    # inclusive bounds
    if left < right:
        mid = (left + right) // 2
        _merge_sort(seq, left, mid)
        _merge_sort(seq, mid + 1, right)
        _merge(seq, left, mid, right)


def _merge(seq: MutableSequence[Any], start: int, mid: int, end: int) -> None:
    start2 = mid + 1
    if seq[mid] <= seq[start2]:
        return
    while start <= mid and start2 <= end:
        if seq[start] <= seq[start2]:
            start += 1
        else:
            rotate_right(seq, start, start2)
            start += 1
            mid += 1
            start2 += 1
