"""
Measurement harness for in-place sorters: comparison counts and wall time.

Comparison counting wraps every element in `Counted`, whose comparison
operators bump a shared `ComparisonCounter` before comparing the wrapped
values. Sorters only ever compare elements, so the count is exact and
independent of the machine.

Timing measures exactly one `sorter.sort(copy)` call per sample with a
monotonic high-resolution clock. Copying, GC and warmup happen outside the
timed block.

Public API (stable):
    ComparisonCounter
    Counted
    count_comparisons(sorter, a) -> int
    time_sort_call(...) -> dict

time_sort_call result schema:
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns for each completed sample
        "status": "ok" | "timeout" | "error",
        "error": str | None,                # populated if status == "error"
        "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
    }
"""

from __future__ import annotations

import gc
import logging
import time
from typing import Any, Dict, List, Sequence

from sortkit.algorithms.base import Sorter
from sortkit.validate.oracle import oracle_sort

__all__ = ["ComparisonCounter", "Counted", "count_comparisons", "time_sort_call"]

logger = logging.getLogger(__name__)


# ------------------------- comparison counting ------------------------- #

class ComparisonCounter:
    """Mutable tally shared by all `Counted` elements of one run."""

    __slots__ = ("count",)

    def __init__(self) -> None:
        self.count = 0

    def reset(self) -> None:
        self.count = 0


class Counted:
    """Element wrapper that counts every comparison made against it."""

    __slots__ = ("value", "counter")

    def __init__(self, value: Any, counter: ComparisonCounter) -> None:
        self.value = value
        self.counter = counter

    def __lt__(self, other: "Counted") -> bool:
        self.counter.count += 1
        return self.value < other.value

    def __le__(self, other: "Counted") -> bool:
        self.counter.count += 1
        return self.value <= other.value

    def __gt__(self, other: "Counted") -> bool:
        self.counter.count += 1
        return self.value > other.value

    def __ge__(self, other: "Counted") -> bool:
        self.counter.count += 1
        return self.value >= other.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Counted):
            return NotImplemented
        self.counter.count += 1
        return self.value == other.value

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Counted):
            return NotImplemented
        self.counter.count += 1
        return self.value != other.value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Counted({self.value!r})"


def count_comparisons(sorter: Sorter, a: Sequence[Any]) -> int:
    """
    Sort a wrapped copy of `a` with `sorter` and return how many element
    comparisons it made. `a` is not modified.

    Raises
    ------
    AssertionError
        If the sorter's output does not match the oracle.
    """
    counter = ComparisonCounter()
    wrapped = [Counted(x, counter) for x in a]
    sorter.sort(wrapped)
    out = [c.value for c in wrapped]
    if out != oracle_sort(a):
        raise AssertionError(f"{sorter.name}: output differs from the oracle")
    logger.debug("%s: n=%d comparisons=%d", sorter.name, len(a), counter.count)
    return counter.count


# ------------------------- timing ------------------------- #

def time_sort_call(
    *,
    sorter: Sorter,
    a: Sequence[Any],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
) -> Dict[str, Any]:
    """
    Time `repeats` calls of `sorter.sort` on fresh copies of `a`.

    Parameters
    ----------
    sorter : Sorter
        Strategy under test; its `name` labels the result.
    a : sequence
        Input values. Never sorted directly; every call gets its own list copy.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, make one untimed call first.
    disable_gc : bool
        If True, collect and disable the GC for the timed loop, then restore it.
    timeout_seconds : float
        Per-sample threshold. A sample over it is kept, status becomes
        "timeout" and sampling stops.

    Returns
    -------
    dict
        See module docstring for the exact schema.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    samples_ns: List[int] = []
    result: Dict[str, Any] = {
        "algo": sorter.name,
        "repeats": repeats,
        "samples_ns": samples_ns,
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    if warmup and repeats > 0:
        try:
            sorter.sort(list(a))
        except Exception as e:
            logger.warning("%s: warmup failed on n=%d: %r", sorter.name, len(a), e)
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            arg = list(a)
            try:
                t0 = time.perf_counter_ns()
                sorter.sort(arg)
                t1 = time.perf_counter_ns()
            except Exception as e:
                logger.warning("%s: run %d failed on n=%d: %r", sorter.name, r, len(a), e)
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            samples_ns.append(elapsed)
            if elapsed > threshold_ns:
                logger.info("%s: sample %d exceeded %.3fs on n=%d", sorter.name, r, timeout_seconds, len(a))
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        # Leave the GC disabled if the caller had it disabled.
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
