"""
sortkit: interchangeable in-place sorting algorithms.

    from sortkit import sort, MergeSort
    xs = [5, 1, 4, 2, 3]
    sort(xs, MergeSort())   # xs == [1, 2, 3, 4, 5]

Subpackages:
    sortkit.algorithms   # the Sorter contract and its implementations
    sortkit.datasets     # input generators
    sortkit.validate     # oracle + property checks
    sortkit.bench        # comparison counting, timing, experiment runner
"""

from .algorithms import (
    SORTERS,
    BubbleSort,
    BuiltinSort,
    HeapSort,
    InsertionSort,
    MergeSort,
    QuickSort,
    SelectionSort,
    Sorter,
    all_sorters,
    make_sorter,
    sort,
)

__version__ = "0.1.0"

__all__ = [
    "Sorter",
    "sort",
    "BubbleSort",
    "InsertionSort",
    "SelectionSort",
    "QuickSort",
    "HeapSort",
    "MergeSort",
    "BuiltinSort",
    "SORTERS",
    "make_sorter",
    "all_sorters",
]
