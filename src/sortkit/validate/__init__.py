"""
Validation utilities public API.

Re-exports:
    - Oracle:
        ORACLE_NAME
        oracle_sort
        equals_oracle

    - Property checks:
        is_nondecreasing
        first_nondecreasing_violation_index
        is_permutation
        permutation_counter_diff
        is_stable
        assert_sorted_permutation
"""

from .oracle import ORACLE_NAME, equals_oracle, oracle_sort
from .properties import (
    assert_sorted_permutation,
    first_nondecreasing_violation_index,
    is_nondecreasing,
    is_permutation,
    is_stable,
    permutation_counter_diff,
)

__all__ = [
    "ORACLE_NAME",
    "oracle_sort",
    "equals_oracle",
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "is_stable",
    "assert_sorted_permutation",
]
