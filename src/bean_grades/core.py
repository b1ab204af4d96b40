"""Core analysis function."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from functools import partial

import pandas as pd

from bean_grades.aggregate import sensory_profiles, summarize_scores
from bean_grades.classify import clean_samples
from bean_grades.config import PipelineConfig
from bean_grades.ingest import DatasetInput, load_dataset, prepare_dataset
from bean_grades.normalization import CountryNameTable
from bean_grades.ranking import rank_summaries, retain_profiles
from bean_grades.schema import GroupSummary, SensoryProfile
from bean_grades.views import ChoroplethTable, choropleth_table, radar_frame, render_profiles

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CoffeeAnalysis:
    """Every stage's output from one pass over the dataset."""

    cleaned: pd.DataFrame
    summaries: list[GroupSummary]
    ranked_summaries: list[GroupSummary]
    profiles: list[SensoryProfile]
    choropleth: ChoroplethTable
    dropped: int
    config: PipelineConfig

    def radar_frames(self) -> list[pd.DataFrame]:
        """Radar-chart table for each retained profile, bounded by the config."""
        return render_profiles(self.profiles, partial(radar_frame, config=self.config))


def analyze(
    data: DatasetInput,
    *,
    config: PipelineConfig | None = None,
    country_names: CountryNameTable | None = None,
    known_regions: Iterable[str] | None = None,
) -> CoffeeAnalysis:
    """Clean, classify, aggregate and rank a coffee ratings table.

    Args:
        data: Input - DataFrame, or path to a CSV file (str or Path).
        config: Pipeline configuration. Defaults to ``PipelineConfig()``.
        country_names: Name table for the map join. Defaults to the table
            built from ``config``.
        known_regions: Region names of the boundary dataset, used to report
            labels that will not be shaded.

    Returns:
        CoffeeAnalysis with the cleaned table, all and ranked score summaries,
        retained sensory profiles and the choropleth table.

    Raises:
        DatasetError: If the data cannot be read or lacks required columns.
        ConfigurationError: If the country name table cannot be loaded.
    """
    config = config or PipelineConfig()
    table = country_names or CountryNameTable.from_config(config)

    raw = load_dataset(data)
    prepared = prepare_dataset(raw, config.sensory_attributes)
    cleaned = clean_samples(prepared, config)

    summaries = summarize_scores(cleaned)
    ranked = rank_summaries(summaries, config)
    profiles = retain_profiles(sensory_profiles(cleaned, config.sensory_attributes), config)
    choropleth = choropleth_table(ranked, table, known_regions=known_regions)

    logger.info(
        "analyzed %d samples: %d groups, %d retained with at least %d samples",
        len(cleaned),
        len(summaries),
        len(ranked),
        config.min_sample_count,
    )
    return CoffeeAnalysis(
        cleaned=cleaned,
        summaries=summaries,
        ranked_summaries=ranked,
        profiles=profiles,
        choropleth=choropleth,
        dropped=len(raw) - len(cleaned),
        config=config,
    )
