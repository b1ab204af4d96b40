"""Completeness filtering and categorical derivations."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence

import pandas as pd

from bean_grades.config import DEFAULT_QUALITY_LADDER, PipelineConfig
from bean_grades.schema import (
    COUNTRY_COLUMN,
    NORMALIZED_PROCESSING_COLUMN,
    PROCESSING_COLUMN,
    QUALITY_COLUMN,
    SCORE_COLUMN,
    SENSORY_ATTRIBUTES,
    VARIETY_COLUMN,
    CleanedSample,
)

logger = logging.getLogger(__name__)


def quality_category(
    score: float,
    ladder: Iterable[tuple[float, str]] = DEFAULT_QUALITY_LADDER,
    fallback: str = "Fair",
) -> str:
    """Map a cup score onto the quality ladder.

    Thresholds are inclusive lower bounds checked from the highest down, so a
    score of exactly 90 is "Outstanding" rather than "Excellent".
    """
    for threshold, label in sorted(ladder, key=lambda step: step[0], reverse=True):
        if score >= threshold:
            return label
    return fallback


def category_frequencies(values: pd.Series) -> pd.Series:
    """Count of each distinct value, most frequent first.

    Equally frequent values keep the order in which they were first seen.
    ``value_counts`` does not promise that order for ties, so the counts come
    from an unsorted groupby followed by a stable sort. Missing values are
    not counted.
    """
    counts = values.groupby(values, sort=False).size()
    return counts.sort_values(ascending=False, kind="stable")


def rank_categories(values: pd.Series) -> list[str]:
    """Return distinct values by descending frequency, ties by first appearance."""
    return category_frequencies(values).index.tolist()


def fill_missing(values: pd.Series, label: str) -> pd.Series:
    return values.where(_present(values), label)


def lump_categories(values: pd.Series, top_n: int, other_label: str) -> pd.Series:
    """Keep the ``top_n`` most frequent labels and map the rest to ``other_label``."""
    ranked = rank_categories(values)
    keep = ranked[:top_n]
    lumped = ranked[top_n:]
    if lumped:
        logger.debug("keeping %s, lumping %s into %r", keep, lumped, other_label)
    return values.where(values.isin(keep), other_label)


def normalize_processing_methods(
    values: pd.Series,
    *,
    top_n: int = 5,
    unknown_label: str = "Unknown",
    other_label: str = "Other",
) -> pd.Series:
    """Fill blank methods with ``unknown_label`` then collapse rare ones.

    The filled-in label competes for the top ``top_n`` like any other value.
    """
    return lump_categories(fill_missing(values, unknown_label), top_n, other_label)


def clean_samples(frame: pd.DataFrame, config: PipelineConfig | None = None) -> pd.DataFrame:
    """Drop incomplete rows and derive the quality and processing labels.

    Rows missing a score or a country are excluded. Survivors keep their input
    order. The derived columns are computed from the original columns only, so
    cleaning an already cleaned table returns the same table.

    Args:
        frame: Table with the dataset's column names.
        config: Pipeline configuration. Defaults to ``PipelineConfig()``.

    Returns:
        A new table with ``quality_category`` and
        ``normalized_processing_method`` columns added.
    """
    config = config or PipelineConfig()

    complete = frame[SCORE_COLUMN].notna() & _present(frame[COUNTRY_COLUMN])
    cleaned = frame.loc[complete].copy().reset_index(drop=True)
    dropped = len(frame) - len(cleaned)
    if dropped:
        logger.info("dropped %d of %d rows missing score or country", dropped, len(frame))

    cleaned[QUALITY_COLUMN] = pd.Series(
        [quality_category(score, config.quality_ladder, config.fallback_category) for score in cleaned[SCORE_COLUMN]],
        index=cleaned.index,
        dtype=object,
    )
    cleaned[NORMALIZED_PROCESSING_COLUMN] = normalize_processing_methods(
        cleaned[PROCESSING_COLUMN],
        top_n=config.top_n,
        unknown_label=config.unknown_label,
        other_label=config.other_label,
    )
    return cleaned


def iter_cleaned_samples(
    cleaned: pd.DataFrame,
    attributes: Sequence[str] = SENSORY_ATTRIBUTES,
) -> Iterator[CleanedSample]:
    """Yield one CleanedSample per row of a cleaned table."""
    for row in cleaned.to_dict("records"):
        yield CleanedSample(
            score=row[SCORE_COLUMN],
            country_of_origin=row[COUNTRY_COLUMN],
            processing_method=row[PROCESSING_COLUMN],
            variety=row[VARIETY_COLUMN],
            sensory={name: row[name] for name in attributes},
            quality_category=row[QUALITY_COLUMN],
            normalized_processing_method=row[NORMALIZED_PROCESSING_COLUMN],
        )


def _present(values: pd.Series) -> pd.Series:
    return values.notna() & values.astype(str).str.strip().ne("")
