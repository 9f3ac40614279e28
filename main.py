#!/usr/bin/env python3
"""
Command line entry point.

    python main.py bench [--config FILE] [--sizes N ...] [--trials N] [--seed N]
    python main.py harmonic N
    python main.py sort {int,str,rational} VALUE ...
"""
from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from bench import render_json, render_table, run_benchmark
from config import BenchConfig, ConfigError, load_config
from log import LOG_LEVELS, get_logger
from rational import Rational, harmonic_sum
from sorting import insertion_sort_int, insertion_sort_rational, insertion_sort_str

SUCCESS = 0
USER_ERROR = 1
CONFIG_ERROR = 2
RUNTIME_ERROR = 3


def _level(args: argparse.Namespace) -> str:
    return args.log_level or "INFO"


def parse_rational(text: str) -> Rational:
    """Parse "N/D" or "N" into a Rational; the denominator must be nonzero."""
    num, sep, den = text.strip().partition("/")
    try:
        r = Rational(int(num), int(den) if sep else 1)
    except ValueError:
        raise ValueError(f"not a rational: {text!r}") from None
    if r.denominator() == 0:
        raise ValueError(f"zero denominator in {text!r}")
    return r


def _cmd_bench(args: argparse.Namespace) -> int:
    logger = get_logger("main.bench", log_level=_level(args))
    try:
        config = load_config(Path(args.config)) if args.config else BenchConfig()
        config = config.with_overrides(
            sizes=args.sizes, trials=args.trials, seed=args.seed, log_level=args.log_level
        )
    except ConfigError as err:
        logger.error("configuration error", extra={"error": str(err)})
        return CONFIG_ERROR
    get_logger("bench", log_level=config.log_level)
    results = run_benchmark(config)
    if args.format == "json":
        print(render_json(results))
    else:
        print(render_table(results))
    return SUCCESS


def _cmd_harmonic(args: argparse.Namespace) -> int:
    logger = get_logger("main.harmonic", log_level=_level(args))
    try:
        h = harmonic_sum(args.n)
    except ValueError as err:
        logger.error("bad argument", extra={"error": str(err)})
        return USER_ERROR
    print(f"{h} = {h.to_float():.6f}")
    return SUCCESS


_SORTERS: Dict[str, Callable[[List[str]], List[object]]] = {
    "int": lambda values: insertion_sort_int([int(v) for v in values]),
    "str": lambda values: insertion_sort_str(list(values)),
    "rational": lambda values: insertion_sort_rational([parse_rational(v) for v in values]),
}


def _cmd_sort(args: argparse.Namespace) -> int:
    logger = get_logger("main.sort", log_level=_level(args))
    try:
        out = _SORTERS[args.kind](args.values)
    except ValueError as err:
        logger.error("bad value", extra={"kind": args.kind, "error": str(err)})
        return USER_ERROR
    print(" ".join(str(v) for v in out))
    return SUCCESS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ratsort",
        description="Exact rationals and an insertion sort benchmark.",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging verbosity, default INFO (logs go to stderr).",
    )
    sub = parser.add_subparsers(dest="command")

    p_bench = sub.add_parser("bench", help="Time insertion sort on ints, strings and rationals.")
    p_bench.add_argument("--config", default=None, help="YAML benchmark config.")
    p_bench.add_argument("--sizes", type=int, nargs="+", default=None, help="List sizes to time.")
    p_bench.add_argument("--trials", type=int, default=None, help="Trials per size.")
    p_bench.add_argument("--seed", type=int, default=None, help="Random seed.")
    p_bench.add_argument("--format", choices=["table", "json"], default="table")
    p_bench.set_defaults(func=_cmd_bench)

    p_harm = sub.add_parser("harmonic", help="Print 1 + 1/2 + ... + 1/n exactly.")
    p_harm.add_argument("n", type=int)
    p_harm.set_defaults(func=_cmd_harmonic)

    p_sort = sub.add_parser("sort", help="Insertion-sort values given on the command line.")
    p_sort.add_argument("kind", choices=sorted(_SORTERS))
    p_sort.add_argument("values", nargs="*")
    p_sort.set_defaults(func=_cmd_sort)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return USER_ERROR
    try:
        return args.func(args)
    except ArithmeticError as err:
        get_logger("main", log_level=_level(args)).error(
            "arithmetic failure", extra={"error": str(err)}, exc_info=True
        )
        return RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
