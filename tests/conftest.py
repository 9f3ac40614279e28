"""
Shared pytest fixtures.

Loggers created during a test hold the stream pytest swapped in for that
test, so handlers for the loggers the CLI and tests create are dropped
afterwards.
"""
import logging
import textwrap
from pathlib import Path

import numpy as np
import pytest

from config import BenchConfig

_TEST_LOGGER_PREFIXES = ("main", "ratsort.test")


@pytest.fixture(autouse=True)
def _reset_loggers():
    yield
    for name in list(logging.Logger.manager.loggerDict):
        if name.startswith(_TEST_LOGGER_PREFIXES):
            logging.getLogger(name).handlers.clear()


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture()
def small_config() -> BenchConfig:
    return BenchConfig(sizes=[5, 10], trials=2, seed=7)


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    content = textwrap.dedent("""\
        sizes: [10, 20]
        trials: 2
        low: -50
        high: 50
        string_length: 3
        seed: 11
        log_level: debug
    """)
    path = tmp_path / "bench.yaml"
    path.write_text(content, encoding="utf-8")
    return path
