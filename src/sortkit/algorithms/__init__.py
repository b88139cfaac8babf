"""
Sorting algorithms public API.

Every strategy implements the `Sorter` contract (sort a mutable sequence in
place, return None), so callers can swap them freely:

    from sortkit.algorithms import QuickSort, sort
    xs = [5, 1, 4, 2, 3]
    sort(xs, QuickSort())

Registry:
    SORTERS                      # name -> Sorter class
    make_sorter(name, config)    # build a sorter from a name + config dict
    all_sorters()                # one instance of every strategy/variant
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Type

from .base import Sorter, rotate_right, sort, swap
from .bubble import BubbleSort
from .builtin import BuiltinSort
from .heap import HeapSort
from .insertion import InsertionSort
from .merge import MergeSort
from .quick import QuickSort
from .selection import SelectionSort

SORTERS: Dict[str, Type[Sorter]] = {
    "bubble": BubbleSort,
    "insertion": InsertionSort,
    "selection": SelectionSort,
    "quick": QuickSort,
    "heap": HeapSort,
    "merge": MergeSort,
    "builtin": BuiltinSort,
}

__all__ = [
    "Sorter",
    "sort",
    "swap",
    "rotate_right",
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


def make_sorter(name: str, config: Optional[Dict[str, Any]] = None) -> Sorter:
    """
    Build a sorter from its registry name and a config dict.

    Only "insertion" takes configuration: {"smart": bool} (required).
    Every other algorithm accepts an empty or missing config.

    Raises
    ------
    ValueError
        Unknown name, non-dict config, or unexpected/invalid config keys.
    """
    if name not in SORTERS:
        raise ValueError(f"Unknown algorithm: {name!r}. Supported: {sorted(SORTERS)}")
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ValueError(f"Algorithm '{name}': 'config' must be a dict if provided")

    if name == "insertion":
        extra = set(config) - {"smart"}
        if extra:
            raise ValueError(f"Algorithm 'insertion': unexpected config keys {sorted(extra)}")
        if "smart" not in config:
            raise ValueError("Algorithm 'insertion': config.smart must be provided (true/false)")
        smart = config["smart"]
        if not isinstance(smart, bool):
            raise ValueError(f"Algorithm 'insertion': config.smart must be a bool; got {smart!r}")
        return InsertionSort(smart=smart)

    if config:
        raise ValueError(f"Algorithm '{name}' takes no config; got keys {sorted(config)}")
    return SORTERS[name]()


def all_sorters() -> List[Sorter]:
    """One instance of every strategy, with both insertion variants."""
    return [
        BubbleSort(),
        InsertionSort(smart=False),
        InsertionSort(smart=True),
        SelectionSort(),
        QuickSort(),
        HeapSort(),
        MergeSort(),
        BuiltinSort(),
    ]
