"""Per-group score summaries and sensory profiles."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import pandas as pd

from bean_grades.schema import COUNTRY_COLUMN, SCORE_COLUMN, SENSORY_ATTRIBUTES, GroupSummary, SensoryProfile

SUMMARY_COLUMNS = ["key", "mean_score", "median_score", "count"]

logger = logging.getLogger(__name__)


def summarize_scores(
    cleaned: pd.DataFrame,
    key: str = COUNTRY_COLUMN,
    score: str = SCORE_COLUMN,
) -> list[GroupSummary]:
    """Mean, median and count of the score for every distinct key.

    Groups come back in the order their key first appears in ``cleaned``.
    """
    scores = cleaned[score].astype(float)
    stats = scores.groupby(cleaned[key], sort=False).agg(["mean", "median", "size"])
    summaries = [
        GroupSummary(
            key=str(group_key),
            mean_score=float(row["mean"]),
            median_score=float(row["median"]),
            count=int(row["size"]),
        )
        for group_key, row in stats.iterrows()
    ]
    logger.debug("summarized %d groups by %r", len(summaries), key)
    return summaries


def sensory_profiles(
    cleaned: pd.DataFrame,
    attributes: Sequence[str] = SENSORY_ATTRIBUTES,
    key: str = COUNTRY_COLUMN,
) -> list[SensoryProfile]:
    """Per-key mean of each sensory attribute.

    Each attribute is averaged over the samples where it is present, so one
    missing attribute does not discard the rest of the sample. A key with no
    values at all for an attribute keeps NaN for it.
    """
    attributes = list(attributes)
    numeric = cleaned[attributes].astype(float)
    grouped = numeric.groupby(cleaned[key], sort=False)
    means = grouped.mean()
    counts = grouped.size()

    return [
        SensoryProfile(
            key=str(group_key),
            means={name: float(row[name]) for name in attributes},
            count=int(counts[group_key]),
        )
        for group_key, row in means.iterrows()
    ]


def summaries_frame(summaries: Sequence[GroupSummary]) -> pd.DataFrame:
    return pd.DataFrame([summary.model_dump() for summary in summaries], columns=SUMMARY_COLUMNS)


def profiles_frame(profiles: Sequence[SensoryProfile], attributes: Sequence[str] = SENSORY_ATTRIBUTES) -> pd.DataFrame:
    """One row per profile: key, count and one column per attribute."""
    columns = ["key", "count", *attributes]
    rows = [{"key": profile.key, "count": profile.count, **profile.means} for profile in profiles]
    return pd.DataFrame(rows, columns=columns)
