"""
Experiment runner: comparison counts and timings for every configured sorter
over a sweep of input sizes, driven by a YAML config.

Usage (from repo root):
    sortkit-bench experiments/configs/01_random_comparisons.yaml
    python -m sortkit.bench.runner experiments/configs/01_random_comparisons.yaml --log-level DEBUG

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - results.jsonl           # one JSON line per timing sample / failure
    - summary.csv             # median + IQR time and comparison count per (algo, n)
    - values.dat              # "algorithm n comparisons time" table for plotting
    - (console) rich summary table

Design notes:
- For each size n, ONE dataset is generated and every algorithm sorts a copy of it.
- Comparisons are counted on a separate, untimed run (the counting wrapper
  would distort timings).
- On timeout/error for an algorithm at size n, larger sizes are skipped for it.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import logging
import os
import platform
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from tqdm import tqdm

from sortkit.algorithms import Sorter, make_sorter
from sortkit.bench.measure import count_comparisons, time_sort_call
from sortkit.datasets import make_dataset

__all__ = ["AlgoSpec", "load_config", "run_experiment", "main"]

logger = logging.getLogger(__name__)
_console = Console()

REQUIRED_KEYS = (
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "algorithms",
)

SUMMARY_COLUMNS = ["algo", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns", "comparisons"]


# ------------------------- data structures ------------------------- #

@dataclass(frozen=True)
class AlgoSpec:
    label: str
    sorter: Sorter
    config: Dict[str, Any] = field(default_factory=dict)


# ------------------------- helpers: IO & meta ------------------------- #

def load_config(path: Path) -> Dict[str, Any]:
    """Read and validate an experiment config. Raises ValueError on bad input."""
    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config {path} must be a YAML mapping")

    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    sizes = cfg["sizes"]
    if not isinstance(sizes, list) or not sizes:
        raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")
    if any(not isinstance(n, int) or isinstance(n, bool) or n < 0 for n in sizes):
        raise ValueError(f"Config 'sizes' must hold nonnegative integers; got {sizes}")
    if not isinstance(cfg["dataset"], dict):
        raise ValueError("Config 'dataset' must be a mapping with 'dist' and 'params'")
    if not isinstance(cfg["algorithms"], list) or not cfg["algorithms"]:
        raise ValueError("Config 'algorithms' must be a non-empty list")
    return cfg


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _timestamp() -> str:
    return _dt.datetime.now().strftime("%Y%m%d_%H%M%S")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    run_dir = base_dir / f"{_timestamp()}_{experiment_name}"
    suffix = 1
    while run_dir.exists():
        suffix += 1
        run_dir = base_dir / f"{_timestamp()}_{experiment_name}_{suffix}"
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


def _resolve_algorithms(cfg_algos: List[Dict[str, Any]]) -> List[AlgoSpec]:
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in cfg_algos:
        if not isinstance(entry, dict):
            raise ValueError(f"Each algorithm entry must be a mapping; got {entry!r}")
        name = entry.get("name")
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        config = entry.get("config") or {}
        sorter = make_sorter(name, config)

        label = entry.get("label") or sorter.name
        if not isinstance(label, str) or any(ch.isspace() for ch in label):
            raise ValueError(
                f"Algorithm label must be a string without whitespace (values.dat is space separated); got {label!r}"
            )
        if label in seen:
            raise ValueError(f"Duplicate algorithm label in config: {label}")
        seen.add(label)
        specs.append(AlgoSpec(label=label, sorter=sorter, config=config))
    return specs


# ------------------------- aggregation ------------------------- #

def _iqr_ns(times: pd.Series) -> int:
    return int(times.quantile(0.75) - times.quantile(0.25))


def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    out = (
        df.groupby(["algo", "n"], as_index=False)
        .agg(
            samples_ok=("time_ns", "count"),
            median_ns=("time_ns", "median"),
            iqr_ns=("time_ns", _iqr_ns),
            min_ns=("time_ns", "min"),
            max_ns=("time_ns", "max"),
            comparisons=("comparisons", "first"),
        )
    )
    int_cols = ["median_ns", "iqr_ns", "min_ns", "max_ns", "comparisons"]
    out[int_cols] = out[int_cols].astype("int64")
    return out[SUMMARY_COLUMNS].sort_values(["algo", "n"], ignore_index=True)


def _write_values_dat(summary: pd.DataFrame, path: Path) -> None:
    """Whitespace-separated `algorithm n comparisons time` table (time in seconds)."""
    values = pd.DataFrame(
        {
            "algorithm": summary["algo"],
            "n": summary["n"],
            "comparisons": summary["comparisons"],
            "time": summary["median_ns"] / 1e9,
        }
    )
    with path.open("w", encoding="utf-8") as f:
        f.write("algorithm n comparisons time\n")
        for row in values.itertuples(index=False):
            f.write(f"{row.algorithm} {row.n} {row.comparisons} {row.time:.9f}\n")


def _print_rich_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    table = Table(title="Benchmark Summary (comparisons / median ms)")
    table.add_column("Algorithm", style="bold")
    picks = sorted({sizes[0], sizes[len(sizes) // 2], sizes[-1]})
    for npick in picks:
        table.add_column(f"n={npick}", justify="right")

    for algo in summary["algo"].unique():
        row = [algo]
        for npick in picks:
            s = summary[(summary["algo"] == algo) & (summary["n"] == npick)]
            if s.empty:
                row.append("—")
            else:
                comps = int(s["comparisons"].values[0])
                median_ms = int(s["median_ns"].values[0]) / 1e6
                row.append(f"{comps:,} / {median_ms:.2f}")
        table.add_row(*row)
    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path) -> Path:
    """Run the sweep described by `config_path` and return the run directory."""
    cfg = load_config(config_path)

    experiment_name = str(cfg["experiment_name"])
    output_dir = Path(cfg["output_dir"])
    sizes: List[int] = list(cfg["sizes"])
    repeats = int(cfg["repeats"])
    warmup = bool(cfg["warmup"])
    disable_gc = bool(cfg["disable_gc"])
    timeout_seconds = float(cfg["timeout_seconds"])
    dataset_spec: Dict[str, Any] = dict(cfg["dataset"])

    algos = _resolve_algorithms(list(cfg["algorithms"]))

    run_dir = _ensure_run_dir(output_dir, experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    values_path = run_dir / "values.dat"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    rng = np.random.default_rng(int(cfg["seed"]))
    skipped = {a.label: False for a in algos}

    _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    _console.print(f"[bold]Experiment:[/bold] {experiment_name}")
    _console.print(f"[bold]Algorithms:[/bold] {', '.join(a.label for a in algos)}")
    logger.info("dataset=%s sizes=%s repeats=%d", dataset_spec, sizes, repeats)

    for n in tqdm(sizes, desc="Sizes", unit="n"):
        base_a = make_dataset(int(n), dataset_spec, rng)

        for algo in algos:
            if skipped[algo.label]:
                continue

            try:
                comparisons = count_comparisons(algo.sorter, base_a)
            except Exception as e:
                logger.error("%s failed while counting comparisons at n=%d: %r", algo.label, n, e)
                skipped[algo.label] = True
                _append_jsonl(
                    {"algo": algo.label, "n": int(n), "status": "error", "error": repr(e), "config": algo.config},
                    results_path,
                )
                continue

            res = time_sort_call(
                sorter=algo.sorter,
                a=base_a,
                repeats=repeats,
                warmup=warmup,
                disable_gc=disable_gc,
                timeout_seconds=timeout_seconds,
            )

            for trial_idx, t_ns in enumerate(res["samples_ns"]):
                _append_jsonl(
                    {
                        "algo": algo.label,
                        "n": int(n),
                        "dataset": dataset_spec,
                        "trial": trial_idx,
                        "time_ns": int(t_ns),
                        "comparisons": comparisons,
                        "config": algo.config,
                    },
                    results_path,
                )

            status = res["status"]
            if status != "ok":
                skipped[algo.label] = True
                logger.warning("%s: %s at n=%d; skipping larger sizes", algo.label, status, n)
                _append_jsonl(
                    {
                        "algo": algo.label,
                        "n": int(n),
                        "status": status,
                        "error": res["error"],
                        "timed_out_on_repeat": res["timed_out_on_repeat"],
                        "config": algo.config,
                    },
                    results_path,
                )

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)
    _write_values_dat(summary_df, values_path)

    _print_rich_summary(summary_df, sizes)
    _console.print("[bold green]Done.[/bold green] Wrote:")
    for path in (results_path, summary_path, values_path, meta_path, cfg_resolved_path):
        _console.print(f" - {path}")

    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Count comparisons and time sorting algorithms from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    p.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(message)s",
        handlers=[RichHandler(console=_console, show_path=False)],
    )
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
