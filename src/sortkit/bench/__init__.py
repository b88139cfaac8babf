"""
Benchmark package public API.

    from sortkit.bench import count_comparisons, time_sort_call

The experiment runner lives in `sortkit.bench.runner` (CLI: `sortkit-bench`).
"""

from .measure import ComparisonCounter, Counted, count_comparisons, time_sort_call

__all__ = ["ComparisonCounter", "Counted", "count_comparisons", "time_sort_call"]
