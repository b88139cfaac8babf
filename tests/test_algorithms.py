"""
Algorithm-specific behaviour: comparison budgets, recursion depth, swap
counts, heap helpers, range rotation and the registry.
"""

from __future__ import annotations

import math
import random

import pytest

from sortkit import (
    SORTERS,
    BubbleSort,
    BuiltinSort,
    HeapSort,
    InsertionSort,
    MergeSort,
    QuickSort,
    SelectionSort,
    all_sorters,
    make_sorter,
)
from sortkit.algorithms import heap, merge, quick, selection
from sortkit.algorithms.base import rotate_right
from sortkit.bench.measure import count_comparisons


def _shuffled(n: int, seed: int) -> list:
    xs = list(range(n))
    random.Random(seed).shuffle(xs)
    return xs


# ------------------------- bubble ------------------------- #

def test_bubble_sorted_input_takes_one_pass() -> None:
    # one pass over 5 elements = 4 comparisons, no swaps, done
    assert count_comparisons(BubbleSort(), [1, 2, 3, 4, 5]) == 4


def test_bubble_reversed_input_takes_n_passes() -> None:
    assert count_comparisons(BubbleSort(), [5, 4, 3, 2, 1]) == 5 * 4


@pytest.mark.parametrize("n", [0, 1])
def test_bubble_trivial_inputs_make_no_comparisons(n: int) -> None:
    assert count_comparisons(BubbleSort(), list(range(n))) == 0


# ------------------------- insertion ------------------------- #

def test_insertion_requires_explicit_flag() -> None:
    with pytest.raises(TypeError):
        InsertionSort()  # type: ignore[call-arg]


def test_insertion_names_and_equality() -> None:
    assert InsertionSort(smart=True).name == "insertion-smart"
    assert InsertionSort(smart=False).name == "insertion-dumb"
    assert InsertionSort(smart=True) == InsertionSort(smart=True)
    assert InsertionSort(smart=True) != InsertionSort(smart=False)


def test_binary_insertion_uses_fewer_comparisons_on_reversed_input() -> None:
    data = list(range(64, 0, -1))
    dumb = count_comparisons(InsertionSort(smart=False), data)
    smart = count_comparisons(InsertionSort(smart=True), data)
    assert dumb == 64 * 63 // 2
    assert smart < dumb // 4


# ------------------------- selection ------------------------- #

@pytest.mark.parametrize("data", [list(range(30)), list(range(30, 0, -1)), _shuffled(30, 3)])
def test_selection_comparisons_do_not_depend_on_order(data: list) -> None:
    n = len(data)
    assert count_comparisons(SelectionSort(), data) == n * (n - 1) // 2


def test_selection_makes_at_most_n_minus_one_swaps(monkeypatch) -> None:
    calls = []
    real_swap = selection.swap

    def counting_swap(seq, i, j):
        calls.append((i, j))
        real_swap(seq, i, j)

    monkeypatch.setattr(selection, "swap", counting_swap)

    xs = _shuffled(50, 9)
    SelectionSort().sort(xs)
    assert xs == list(range(50))
    assert len(calls) <= 49
    assert all(i != j for i, j in calls)

    calls.clear()
    SelectionSort().sort(xs)
    assert calls == []


# ------------------------- quick ------------------------- #

def test_quick_sorted_input_is_quadratic() -> None:
    n = 100
    comps = count_comparisons(QuickSort(), list(range(n)))
    # 2(m-1) comparisons per range of length m >= 3, plus one for the final pair
    assert comps == n * (n - 1) - 1
    assert comps >= n * (n - 1) // 2


def test_quick_random_input_is_far_from_quadratic() -> None:
    n = 500
    comps = count_comparisons(QuickSort(), _shuffled(n, 42))
    assert comps < n * (n - 1) // 8


def _track_depth(monkeypatch, module, fn_name: str) -> dict:
    stats = {"depth": 0, "max": 0}
    original = getattr(module, fn_name)

    def tracking(*args):
        stats["depth"] += 1
        stats["max"] = max(stats["max"], stats["depth"])
        try:
            original(*args)
        finally:
            stats["depth"] -= 1

    monkeypatch.setattr(module, fn_name, tracking)
    return stats


def test_quick_sorted_input_stays_shallow(monkeypatch) -> None:
    n = 300
    stats = _track_depth(monkeypatch, quick, "_quicksort")
    xs = list(range(n))
    QuickSort().sort(xs)
    assert xs == list(range(n))
    # the empty left side is the only recursive call at every step
    assert stats["max"] <= 2
    assert count_comparisons(QuickSort(), list(range(n))) == n * (n - 1) - 1


@pytest.mark.parametrize(
    "data",
    [list(range(5000)), list(range(5000, 0, -1))],
    ids=["sorted", "reversed"],
)
def test_quick_sorts_large_adversarial_input(data: list) -> None:
    xs = list(data)
    QuickSort().sort(xs)
    assert xs == sorted(data)


def test_quick_recursion_depth_is_logarithmic_on_random_input(monkeypatch) -> None:
    n = 512
    stats = _track_depth(monkeypatch, quick, "_quicksort")
    xs = _shuffled(n, 7)
    QuickSort().sort(xs)
    assert xs == list(range(n))
    assert stats["max"] <= math.ceil(math.log2(n)) + 1


def test_quick_handles_all_equal_elements() -> None:
    xs = [3] * 200
    QuickSort().sort(xs)
    assert xs == [3] * 200


# ------------------------- heap ------------------------- #

def _is_max_heap(xs: list) -> bool:
    return all(xs[(i - 1) // 2] >= xs[i] for i in range(1, len(xs)))


def test_heapify_builds_max_heap() -> None:
    xs = _shuffled(101, 5)
    heap._heapify(xs)
    assert _is_max_heap(xs)
    assert xs[0] == 100


def test_sift_down_respects_end_bound() -> None:
    xs = [1, 5, 4, 9]
    # index 3 lies outside the active range, so 9 must not move up
    heap._sift_down(xs, 0, 2)
    assert xs == [5, 1, 4, 9]


def test_heap_sort_is_n_log_n_in_comparisons() -> None:
    n = 1024
    for data in (list(range(n)), list(range(n, 0, -1)), _shuffled(n, 1)):
        assert count_comparisons(HeapSort(), data) <= 2 * n * math.log2(n) + 4 * n


# ------------------------- merge ------------------------- #

@pytest.mark.parametrize("n", [2, 3, 17, 64, 100])
def test_merge_sorted_input_costs_n_minus_one_comparisons(n: int) -> None:
    assert count_comparisons(MergeSort(), list(range(n))) == n - 1


def test_merge_recursion_depth_is_logarithmic(monkeypatch) -> None:
    n = 1000
    stats = _track_depth(monkeypatch, merge, "_merge_sort")
    xs = list(range(n))
    MergeSort().sort(xs)
    assert stats["max"] <= math.ceil(math.log2(n)) + 1


def test_merge_single_merge_step() -> None:
    xs = [1, 4, 7, 2, 3, 9]
    merge._merge(xs, 0, 2, 5)
    assert xs == [1, 2, 3, 4, 7, 9]


# ------------------------- builtin ------------------------- #

class _Box:
    """Minimal mutable sequence without a sort() method."""

    def __init__(self, items):
        self._items = list(items)

    def __len__(self):
        return len(self._items)

    def __getitem__(self, i):
        return self._items[i]

    def __setitem__(self, i, v):
        self._items[i] = v

    def __iter__(self):
        return iter(self._items)


def test_builtin_handles_non_list_sequences() -> None:
    box = _Box([3, 1, 2])
    BuiltinSort().sort(box)  # type: ignore[arg-type]
    assert list(box) == [1, 2, 3]


# ------------------------- shared primitives ------------------------- #

@pytest.mark.parametrize(
    "start,end,expected",
    [
        (0, 4, [4, 0, 1, 2, 3]),
        (1, 3, [0, 3, 1, 2, 4]),
        (2, 2, [0, 1, 2, 3, 4]),
        (3, 1, [0, 1, 2, 3, 4]),
    ],
)
def test_rotate_right(start: int, end: int, expected: list) -> None:
    xs = [0, 1, 2, 3, 4]
    rotate_right(xs, start, end)
    assert xs == expected


# ------------------------- registry ------------------------- #

def test_registry_covers_every_strategy() -> None:
    assert set(SORTERS) == {"bubble", "insertion", "selection", "quick", "heap", "merge", "builtin"}
    names = [s.name for s in all_sorters()]
    assert len(names) == len(set(names)) == 8


@pytest.mark.parametrize("name", ["bubble", "selection", "quick", "heap", "merge", "builtin"])
def test_make_sorter_plain(name: str) -> None:
    s = make_sorter(name)
    assert isinstance(s, SORTERS[name])
    assert make_sorter(name, {}).name == s.name


def test_make_sorter_insertion() -> None:
    assert make_sorter("insertion", {"smart": True}) == InsertionSort(smart=True)
    assert make_sorter("insertion", {"smart": False}) == InsertionSort(smart=False)


@pytest.mark.parametrize(
    "name,config",
    [
        ("shell", None),
        ("insertion", None),
        ("insertion", {"smart": "yes"}),
        ("insertion", {"smart": True, "gap": 3}),
        ("quick", {"pivot": "median"}),
        ("heap", ["not", "a", "dict"]),
    ],
)
def test_make_sorter_rejects_bad_input(name: str, config) -> None:
    with pytest.raises(ValueError):
        make_sorter(name, config)
