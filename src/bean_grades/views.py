"""Table shapes handed to chart renderers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TypeVar

import numpy as np
import pandas as pd

from bean_grades.classify import category_frequencies
from bean_grades.config import PipelineConfig
from bean_grades.normalization import CountryNameTable, LabelMapping
from bean_grades.schema import (
    COUNTRY_COLUMN,
    NORMALIZED_PROCESSING_COLUMN,
    SCORE_COLUMN,
    GroupSummary,
    SensoryProfile,
)

T = TypeVar("T")

CHOROPLETH_COLUMNS = ["region", "mean_score", "count"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChoroplethTable:
    """Mean score per map region plus the labels that failed to join."""

    frame: pd.DataFrame
    mapping: LabelMapping

    @property
    def unmapped(self) -> set[str]:
        return self.mapping.unmapped

    @property
    def unmatched(self) -> set[str]:
        return self.mapping.unmatched


def category_counts(cleaned: pd.DataFrame, column: str = COUNTRY_COLUMN) -> pd.DataFrame:
    """(key, count) pairs, most frequent first; ties keep first-seen order."""
    counts = category_frequencies(cleaned[column])
    return pd.DataFrame({"key": counts.index.tolist(), "count": counts.tolist()}, columns=["key", "count"])


def score_points(
    cleaned: pd.DataFrame,
    key: str = NORMALIZED_PROCESSING_COLUMN,
    value: str = SCORE_COLUMN,
) -> pd.DataFrame:
    """Long-form (key, value) rows, one per sample with a value."""
    points = cleaned[[key, value]].copy()
    points.columns = ["key", "value"]
    return points.dropna(subset=["value"]).reset_index(drop=True)


def radar_frame(profile: SensoryProfile, config: PipelineConfig | None = None) -> pd.DataFrame:
    """Profile as a radar-chart table.

    The first two rows are the axis bounds (``max`` then ``min``) taken from
    ``config.radar_upper`` and ``config.radar_lower``; the third is the profile
    itself. Columns follow ``config.sensory_attributes`` so every chart shares
    an axis order.
    """
    config = config or PipelineConfig()
    attributes = list(config.sensory_attributes)
    rows = [
        [config.radar_upper] * len(attributes),
        [config.radar_lower] * len(attributes),
        [profile.means.get(name, np.nan) for name in attributes],
    ]
    return pd.DataFrame(rows, index=["max", "min", profile.key], columns=attributes)


def choropleth_table(
    summaries: Iterable[GroupSummary],
    table: CountryNameTable,
    known_regions: Iterable[str] | None = None,
) -> ChoroplethTable:
    """Mean score keyed by boundary-dataset region name.

    Keys that normalize to the same region are merged with a count-weighted
    mean. Regions missing from ``known_regions`` stay in the frame; they just
    will not join to a shape.
    """
    summaries = list(summaries)
    mapping = table.apply([summary.key for summary in summaries], known_regions=known_regions)

    merged: dict[str, tuple[float, int]] = {}
    for summary, region in zip(summaries, mapping.labels):
        total, count = merged.get(region, (0.0, 0))
        merged[region] = (total + summary.mean_score * summary.count, count + summary.count)

    rows = [(region, total / count if count else np.nan, count) for region, (total, count) in merged.items()]
    if mapping.unmapped:
        logger.debug("labels with no name table entry: %s", ", ".join(sorted(mapping.unmapped)))
    return ChoroplethTable(frame=pd.DataFrame(rows, columns=CHOROPLETH_COLUMNS), mapping=mapping)


def render_profiles(profiles: Iterable[SensoryProfile], render: Callable[[SensoryProfile], T]) -> list[T]:
    """Apply an injected renderer to each profile, in order."""
    artifacts = []
    for profile in profiles:
        logger.debug("rendering profile for %r", profile.key)
        artifacts.append(render(profile))
    return artifacts
