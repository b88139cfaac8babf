"""Tests for the oracle and property helpers."""

from __future__ import annotations

import pytest

from sortkit.datasets import make_tagged
from sortkit.validate import (
    ORACLE_NAME,
    assert_sorted_permutation,
    equals_oracle,
    first_nondecreasing_violation_index,
    is_nondecreasing,
    is_permutation,
    is_stable,
    oracle_sort,
    permutation_counter_diff,
)


def test_oracle_returns_new_sorted_list() -> None:
    a = [3, 1, 2]
    out = oracle_sort(a)
    assert out == [1, 2, 3]
    assert a == [3, 1, 2]
    assert ORACLE_NAME == "builtin"
    assert equals_oracle(a, [1, 2, 3])
    assert not equals_oracle(a, [1, 3, 2])


def test_nondecreasing_helpers() -> None:
    assert is_nondecreasing([])
    assert is_nondecreasing([1, 1, 2])
    assert not is_nondecreasing([1, 3, 2])
    assert first_nondecreasing_violation_index([1, 3, 2, 0]) == 1
    assert first_nondecreasing_violation_index([0, 0]) is None


def test_permutation_helpers() -> None:
    assert is_permutation([1, 2, 2], [2, 1, 2])
    assert not is_permutation([1, 2, 2], [1, 1, 2])
    assert not is_permutation([1], [1, 1])
    assert permutation_counter_diff([1, 2, 2], [1, 1, 2]) == {2: 1, 1: -1}
    assert permutation_counter_diff([4, 5], [5, 4]) == {}


def test_is_stable() -> None:
    before = make_tagged([1, 0, 1])
    kept = [before[1], before[0], before[2]]
    swapped = [before[1], before[2], before[0]]
    assert is_stable(before, kept)
    assert not is_stable(before, swapped)


def test_assert_sorted_permutation() -> None:
    assert_sorted_permutation([3, 1, 2], [1, 2, 3])
    with pytest.raises(AssertionError, match="Length changed"):
        assert_sorted_permutation([1, 2], [1])
    with pytest.raises(AssertionError, match="i=0"):
        assert_sorted_permutation([1, 2], [2, 1])
    with pytest.raises(AssertionError, match="permutation"):
        assert_sorted_permutation([1, 2], [1, 1])
