"""Pipeline configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from bean_grades.exceptions import ConfigurationError
from bean_grades.schema import SENSORY_ATTRIBUTES

DEFAULT_QUALITY_LADDER: tuple[tuple[float, str], ...] = (
    (90.0, "Outstanding"),
    (85.0, "Excellent"),
    (80.0, "Very Good"),
    (75.0, "Good"),
)

ENV_PREFIX = "BEAN_GRADES_"


def _safe_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _safe_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _env(name: str) -> str | None:
    value = os.getenv(ENV_PREFIX + name)
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass(frozen=True)
class PipelineConfig:
    top_n: int = 5
    min_sample_count: int = 5
    unknown_label: str = "Unknown"
    other_label: str = "Other"
    quality_ladder: tuple[tuple[float, str], ...] = DEFAULT_QUALITY_LADDER
    fallback_category: str = "Fair"
    sensory_attributes: tuple[str, ...] = SENSORY_ATTRIBUTES
    radar_upper: float = 10.0
    radar_lower: float = 0.0
    country_names_version: str = "v1"
    country_names_path: str | None = None
    country_names: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.top_n < 1:
            raise ConfigurationError(f"top_n must be positive, got {self.top_n}")
        if self.min_sample_count < 0:
            raise ConfigurationError(f"min_sample_count must not be negative, got {self.min_sample_count}")
        if not self.unknown_label or not self.other_label:
            raise ConfigurationError("unknown_label and other_label must be non-empty")
        thresholds = [threshold for threshold, _ in self.quality_ladder]
        if any(upper <= lower for upper, lower in zip(thresholds, thresholds[1:])):
            raise ConfigurationError(f"quality_ladder thresholds must be strictly descending: {thresholds}")
        if not self.fallback_category or not all(label for _, label in self.quality_ladder):
            raise ConfigurationError("quality_ladder labels and fallback_category must be non-empty")
        if not self.sensory_attributes:
            raise ConfigurationError("sensory_attributes must not be empty")
        if self.radar_lower >= self.radar_upper:
            raise ConfigurationError(
                f"radar_lower ({self.radar_lower}) must be below radar_upper ({self.radar_upper})"
            )

    @classmethod
    def from_env(cls) -> "PipelineConfig":
        defaults = cls()
        return cls(
            top_n=_safe_int(_env("TOP_N"), defaults.top_n),
            min_sample_count=_safe_int(_env("MIN_SAMPLE_COUNT"), defaults.min_sample_count),
            unknown_label=_env("UNKNOWN_LABEL") or defaults.unknown_label,
            other_label=_env("OTHER_LABEL") or defaults.other_label,
            radar_upper=_safe_float(_env("RADAR_UPPER"), defaults.radar_upper),
            radar_lower=_safe_float(_env("RADAR_LOWER"), defaults.radar_lower),
            country_names_version=_env("COUNTRY_NAMES_VERSION") or defaults.country_names_version,
            country_names_path=_env("COUNTRY_NAMES_PATH"),
        )
