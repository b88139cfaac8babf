"""
Heap sort.

The sequence itself holds a binary max-heap: the parent of index i is
(i - 1) // 2 and its children are 2i + 1 and 2i + 2.

Phase 1 (heapify): sift down every subtree root, from the parent of the last
index back to 0.
Phase 2 (extraction): swap the root (maximum) with the last element of the
active range, shrink the range, and sift the new root down.

O(n log n) worst case, no extra storage, not stable.
"""

from __future__ import annotations

from typing import Any, MutableSequence

from .base import Sorter, swap

__all__ = ["HeapSort"]


class HeapSort(Sorter):
    name = "heap"

    def sort(self, seq: MutableSequence[Any]) -> None:
        if len(seq) <= 1:
            return
        _heapify(seq)
        end = len(seq) - 1
        while end > 0:
            swap(seq, 0, end)
            end -= 1
            _sift_down(seq, 0, end)


def _parent(i: int) -> int:
    return (i - 1) // 2


def _left_child(i: int) -> int:
    return 2 * i + 1


def _heapify(seq: MutableSequence[Any]) -> None:
    end = len(seq) - 1
    for start in range(_parent(end), -1, -1):
        _sift_down(seq, start, end)


def _sift_down(seq: MutableSequence[Any], start: int, end: int) -> None:
    """
    Restore the max-heap property below `start`, looking only at indices
    up to and including `end`.
    """
    root = start
    while _left_child(root) <= end:
        child = _left_child(root)
        target = root
        if seq[target] < seq[child]:
            target = child
        if child + 1 <= end and seq[target] < seq[child + 1]:
            target = child + 1
        if target == root:
            return
        swap(seq, root, target)
        root = target
