"""
Timing harness comparing insertion sort across ints, strings and rationals.

All randomness flows through an explicit numpy Generator so a run is
reproducible from its seed.
"""
from __future__ import annotations
import json
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

from config import BenchConfig
from log import get_logger
from rational import Rational
from sorting import insertion_sort_int, insertion_sort_rational, insertion_sort_str

logger = get_logger(__name__)

KINDS: Tuple[str, ...] = ("int", "str", "rational")

LABELS: Dict[str, str] = {
    "int": "integer",
    "str": "string",
    "rational": "rational",
}


@dataclass
class BenchResult:
    kind: str
    size: int
    timings_us: List[float] = field(default_factory=list)

    @property
    def mean_us(self) -> float:
        if not self.timings_us:
            return 0.0
        return float(np.mean(self.timings_us))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "size": self.size,
            "timings_us": list(self.timings_us),
            "mean_us": self.mean_us,
        }


def random_ints(rng: np.random.Generator, n: int, low: int, high: int) -> List[int]:
    return rng.integers(low, high, size=n).tolist()


def random_string(rng: np.random.Generator, length: int, alphabet: str) -> str:
    idx = rng.integers(0, len(alphabet), size=length)
    return "".join(alphabet[i] for i in idx)


def random_strings(
    rng: np.random.Generator, n: int, length: int, alphabet: str
) -> List[str]:
    return [random_string(rng, length, alphabet) for _ in range(n)]


def random_rationals(
    rng: np.random.Generator, n: int, low: int, high: int
) -> List[Rational]:
    if low == 0 and high == 1:
        raise ValueError("range [0, 1) has no nonzero denominator")
    nums = rng.integers(low, high, size=n)
    dens = rng.integers(low, high, size=n)
    # redraw zero denominators until none remain
    zeros = dens == 0
    while zeros.any():
        dens[zeros] = rng.integers(low, high, size=int(zeros.sum()))
        zeros = dens == 0
    return [Rational(a, b) for a, b in zip(nums.tolist(), dens.tolist())]


def time_sort(sort_fn: Callable[[List[Any]], List[Any]], data: List[Any]) -> float:
    """Run `sort_fn` on `data` once and return the elapsed microseconds."""
    start = time.perf_counter_ns()
    sort_fn(data)
    end = time.perf_counter_ns()
    return (end - start) / 1000.0


def _workloads(
    config: BenchConfig, rng: np.random.Generator
) -> Dict[str, Tuple[Callable[[int], List[Any]], Callable[[List[Any]], List[Any]]]]:
    return {
        "int": (
            lambda n: random_ints(rng, n, config.low, config.high),
            insertion_sort_int,
        ),
        "str": (
            lambda n: random_strings(rng, n, config.string_length, config.alphabet),
            insertion_sort_str,
        ),
        "rational": (
            lambda n: random_rationals(rng, n, config.low, config.high),
            insertion_sort_rational,
        ),
    }


def run_benchmark(
    config: BenchConfig, rng: Optional[np.random.Generator] = None
) -> List[BenchResult]:
    """Time every kind at every size, `config.trials` fresh lists each."""
    if rng is None:
        rng = np.random.default_rng(config.seed)
    workloads = _workloads(config, rng)
    results: List[BenchResult] = []
    logger.info(
        "benchmark started",
        extra={"sizes": list(config.sizes), "trials": config.trials},
    )
    for size in config.sizes:
        by_kind = {kind: BenchResult(kind, size) for kind in KINDS}
        for trial in range(config.trials):
            for kind in KINDS:
                make, sort_fn = workloads[kind]
                data = make(size)
                elapsed = time_sort(sort_fn, data)
                by_kind[kind].timings_us.append(elapsed)
                logger.debug(
                    "trial done",
                    extra={"kind": kind, "size": size, "trial": trial, "us": elapsed},
                )
        for kind in KINDS:
            logger.info(
                "size done",
                extra={"kind": kind, "size": size, "mean_us": by_kind[kind].mean_us},
            )
        results.extend(by_kind.values())
    return results


def render_table(results: List[BenchResult]) -> str:
    blocks: List[str] = []
    for kind in KINDS:
        rows = [r for r in results if r.kind == kind]
        if not rows:
            continue
        lines = [f"runtime of {LABELS[kind]} type:"]
        for r in rows:
            lines.append(f"n = {r.size}: {r.mean_us:.2f} microseconds")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def render_json(results: List[BenchResult]) -> str:
    return json.dumps([r.to_dict() for r in results], indent=2)
