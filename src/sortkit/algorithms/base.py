"""
Sorting capability contract.

Every algorithm in `sortkit.algorithms` is a `Sorter`: an object with a single
`sort(seq)` method that permutes a mutable sequence into nondecreasing order
**in place** and returns None.

Public API (stable):
    Sorter                  # abstract base class
    sort(seq, sorter)       # generic entry point
    swap(seq, i, j)
    rotate_right(seq, start, end)

Conventions:
- Sorters only read, compare, and write elements by index. They never resize
  the sequence and never build a second sequence of comparable size
  (BuiltinSort excepted; it hands the work to Python's own sort).
- Ordering is the element's own total order (`<`, `<=`, ...). There is no key
  or comparator argument.
- Callers own the sequence; no sorter keeps a reference after `sort` returns.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, MutableSequence

__all__ = ["Sorter", "sort", "swap", "rotate_right"]


class Sorter(ABC):
    """Abstract base class for in-place sorting strategies."""

    #: Short label used in benchmark output (e.g. "quick").
    name: str = "sorter"

    @abstractmethod
    def sort(self, seq: MutableSequence[Any]) -> None:
        """
        Sort `seq` in place into nondecreasing order.

        Parameters
        ----------
        seq : MutableSequence
            Sequence of mutually comparable elements. Its length must not
            change while the call is running.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def sort(seq: MutableSequence[Any], sorter: Sorter) -> None:
    """Sort `seq` in place with the given strategy."""
    sorter.sort(seq)


def swap(seq: MutableSequence[Any], i: int, j: int) -> None:
    seq[i], seq[j] = seq[j], seq[i]


def rotate_right(seq: MutableSequence[Any], start: int, end: int) -> None:
    """
    Rotate the inclusive range seq[start..end] one step to the right.

    seq[end] lands at `start` and seq[start:end] shifts up by one. Elements
    are moved one at a time so no temporary copy of the range is made.
    """
    if end <= start:
        return
    last = seq[end]
    for k in range(end, start, -1):
        seq[k] = seq[k - 1]
    seq[start] = last
