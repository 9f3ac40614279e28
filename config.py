"""
Benchmark configuration: a frozen pydantic model and a YAML loader.

Defaults reproduce the classic run: sizes 1000..10000, three trials each,
ints drawn from [-10000, 10000), four-letter strings.
"""
from __future__ import annotations
import string
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from log import LOG_LEVELS

DEFAULT_SIZES = [1000 * (i + 1) for i in range(10)]


class ConfigError(Exception):
    """Base for all configuration errors."""


class ConfigLoadError(ConfigError):
    """The config file cannot be read or is not a YAML mapping."""


class ConfigValidationError(ConfigError):
    """The config parses but violates the schema."""


class BenchConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    sizes: List[int] = Field(default_factory=lambda: list(DEFAULT_SIZES), min_length=1)
    trials: int = Field(default=3, ge=1)
    low: int = -10000
    high: int = 10000
    string_length: int = Field(default=4, ge=1)
    alphabet: str = Field(default=string.ascii_letters, min_length=1)
    seed: Optional[int] = Field(default=None, ge=0)
    log_level: str = "INFO"

    @field_validator("sizes")
    @classmethod
    def _positive_sizes(cls, v: List[int]) -> List[int]:
        bad = [s for s in v if s < 1]
        if bad:
            raise ValueError(f"sizes must be positive, got {bad}")
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return upper

    @model_validator(mode="after")
    def _range_not_empty(self) -> "BenchConfig":
        if self.low >= self.high:
            raise ValueError(f"low ({self.low}) must be below high ({self.high})")
        # a range of only {0} leaves no usable denominator
        if self.low == 0 and self.high == 1:
            raise ValueError("range [0, 1) has no nonzero denominator")
        return self

    def with_overrides(self, **overrides: Any) -> "BenchConfig":
        """Return a validated copy with every non-None override applied."""
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return validate_config(data)


def validate_config(data: Dict[str, Any], source: str = "<overrides>") -> BenchConfig:
    try:
        return BenchConfig.model_validate(data)
    except ValidationError as err:
        raise ConfigValidationError(f"Config validation failed for {source}:\n{err}") from err


def _read_yaml_file(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        raise ConfigLoadError(f"Config file not found: {config_path}")
    if not config_path.is_file():
        raise ConfigLoadError(f"Config path is not a file: {config_path}")
    try:
        raw_text = config_path.read_text(encoding="utf-8")
    except OSError as err:
        raise ConfigLoadError(f"Cannot read config file {config_path}: {err}") from err
    try:
        parsed = yaml.safe_load(raw_text)
    except yaml.YAMLError as err:
        raise ConfigLoadError(f"Invalid YAML in {config_path}: {err}") from err
    # an empty file means "all defaults"
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ConfigLoadError(
            f"Config file must contain a YAML mapping, got {type(parsed).__name__}"
        )
    return parsed


def load_config(config_path: Path) -> BenchConfig:
    return validate_config(_read_yaml_file(config_path), source=str(config_path))
