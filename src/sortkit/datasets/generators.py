"""
Input generators for exercising and benchmarking the sorters.

Distributions (spec = {"dist": ..., "params": {...}}):

- "random":
    Integers drawn uniformly from params["range"] == [lo, hi] (inclusive,
    required).

- "sorted":
    [0, 1, ..., n-1]. Worst case for QuickSort's first-element pivot, best
    case for BubbleSort and MergeSort.

- "reversed":
    [n-1, ..., 0].

- "nearly_sorted":
    Start from [0..n-1] and apply ceil(swap_frac * n) random index swaps
    (params["swap_frac"] in [0.0, 1.0], default 0.05).

- "few_uniques":
    Pick up to k distinct values (params["k"] >= 1, optional inclusive
    params["range"], default [0, 4294967295]) and fill the array by sampling
    among them.

- "small_range":
    Like "random" over a small domain; params["min_val"]/params["max_val"]
    default to 0/255, or give params["range"].

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]
    make_tagged(keys: Iterable) -> list[Tagged]

Conventions:
- Returns plain Python lists; sorters stay NumPy-agnostic.
- The caller owns the RNG (seeded upstream). "sorted" and "reversed" ignore it.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Tuple

import numpy as np

__all__ = ["SUPPORTED_DISTS", "make_dataset", "Tagged", "make_tagged"]


# ------------------------- tagged elements ------------------------- #

class Tagged(NamedTuple):
    """
    A (key, tag) pair ordered by `key` alone.

    Two Tagged values with equal keys compare equal whatever their tags, so a
    sorter cannot tell them apart; the tag records input position and lets
    tests observe whether equal keys kept their relative order.
    """

    key: Any
    tag: int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tagged):
            return NotImplemented
        return self.key == other.key

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Tagged):
            return NotImplemented
        return self.key != other.key

    def __lt__(self, other: "Tagged") -> bool:
        return self.key < other.key

    def __le__(self, other: "Tagged") -> bool:
        return self.key <= other.key

    def __gt__(self, other: "Tagged") -> bool:
        return self.key > other.key

    def __ge__(self, other: "Tagged") -> bool:
        return self.key >= other.key

    def __hash__(self) -> int:
        return hash(self.key)


def make_tagged(keys: Iterable[Any]) -> List[Tagged]:
    """Tag each key with its input position: [Tagged(k0, 0), Tagged(k1, 1), ...]."""
    return [Tagged(k, i) for i, k in enumerate(keys)]


# ------------------------- distributions ------------------------- #

def _gen_random(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    lo, hi = _parse_inclusive_range(params, required=True, default=(0, 0), where="random")
    # Generator.integers is half-open; +1 makes `hi` inclusive.
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _gen_sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n))


def _gen_reversed(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n - 1, -1, -1))


def _gen_nearly_sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    swap_frac = _parse_swap_frac(params)
    arr = list(range(n))
    # ceil so that any nonzero fraction makes at least one swap
    num_swaps = int(np.ceil(swap_frac * n))
    if num_swaps == 0:
        return arr
    pairs = rng.integers(0, n, size=(num_swaps, 2))
    for i, j in pairs.tolist():
        # i == j is a no-op swap
        arr[i], arr[j] = arr[j], arr[i]
    return arr


def _gen_few_uniques(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    k = _parse_k(params)
    lo, hi = _parse_inclusive_range(params, required=False, default=(0, 4294967295), where="few_uniques")
    actual_k = int(min(k, n, hi - lo + 1))
    if actual_k == 0:
        return []

    # Draw from `rng` (not the random module) so output depends only on the seed.
    values: List[int] = []
    seen = set()
    while len(values) < actual_k:
        for v in rng.integers(lo, hi + 1, size=2 * (actual_k - len(values))).tolist():
            if v not in seen:
                seen.add(v)
                values.append(v)
                if len(values) == actual_k:
                    break

    return [values[t] for t in rng.integers(0, actual_k, size=n).tolist()]


def _gen_small_range(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    if "range" in params:
        lo, hi = _parse_inclusive_range(params, required=True, default=(0, 255), where="small_range")
    else:
        lo_raw = params.get("min_val", 0)
        hi_raw = params.get("max_val", 255)
        if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
            raise ValueError("small_range.params.min_val/max_val must be integers")
        lo, hi = int(lo_raw), int(hi_raw)
        if lo > hi:
            raise ValueError(f"small_range invalid: min > max ({lo} > {hi})")
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


_GENERATORS: Dict[str, Callable[[int, Dict[str, Any], np.random.Generator], List[int]]] = {
    "random": _gen_random,
    "sorted": _gen_sorted,
    "reversed": _gen_reversed,
    "nearly_sorted": _gen_nearly_sorted,
    "few_uniques": _gen_few_uniques,
    "small_range": _gen_small_range,
}

SUPPORTED_DISTS = frozenset(_GENERATORS)


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate a list of `n` integers following `spec`.

    Parameters
    ----------
    n : int
        Number of elements, >= 0.
    spec : dict
        {"dist": <one of SUPPORTED_DISTS>, "params": {...}}; see module docstring.
    rng : numpy.random.Generator
        Random source owned by the caller.

    Returns
    -------
    list[int]

    Raises
    ------
    ValueError
        Invalid `n`, malformed spec, unsupported dist or bad params.
    """
    if not isinstance(n, int) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist")
    if dist not in _GENERATORS:
        raise ValueError(f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}")

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")

    return _GENERATORS[dist](n, params, rng)


# ------------------------- helpers ------------------------- #

def _parse_inclusive_range(
    params: Dict[str, Any], *, required: bool, default: Tuple[int, int], where: str
) -> Tuple[int, int]:
    if "range" not in params:
        if required:
            raise ValueError(f"{where}.params.range must be provided as [min, max] (inclusive)")
        return default

    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"{where}.params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError(f"{where}.params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"{where}.params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    val = params.get("swap_frac", 0.05)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}") from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}")
    return x


def _parse_k(params: Dict[str, Any]) -> int:
    if "k" not in params:
        raise ValueError("few_uniques.params.k must be provided (int >= 1)")
    k = params["k"]
    if not isinstance(k, int) or isinstance(k, bool) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    return k


def _is_int_like(x: Any) -> bool:
    # Python ints and NumPy integer scalars (YAML gives plain ints)
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
