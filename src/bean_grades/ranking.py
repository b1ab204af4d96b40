"""Threshold filtering and ordering of per-group results."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar

from bean_grades.config import PipelineConfig
from bean_grades.schema import GroupSummary, SensoryProfile

G = TypeVar("G", GroupSummary, SensoryProfile)

logger = logging.getLogger(__name__)


def filter_groups(
    groups: Sequence[G],
    *,
    min_count: int = 5,
    sort_by: str | None = None,
    descending: bool = True,
) -> list[G]:
    """Keep groups with at least ``min_count`` samples, optionally ordered.

    Args:
        groups: Summaries or profiles in discovery order.
        min_count: Inclusive lower bound on ``count``.
        sort_by: Attribute to order by. ``None`` keeps discovery order.
        descending: Sort direction when ``sort_by`` is given.

    Returns:
        The retained groups. Ties on ``sort_by`` keep discovery order. An
        empty list is a valid result.
    """
    retained = [group for group in groups if group.count >= min_count]
    if len(retained) < len(groups):
        logger.info(
            "retained %d of %d groups with at least %d samples",
            len(retained),
            len(groups),
            min_count,
        )
    if sort_by is not None:
        retained = sorted(retained, key=lambda group: getattr(group, sort_by), reverse=descending)
    return retained


def rank_summaries(summaries: Sequence[GroupSummary], config: PipelineConfig | None = None) -> list[GroupSummary]:
    """Retained summaries, highest mean score first."""
    config = config or PipelineConfig()
    return filter_groups(summaries, min_count=config.min_sample_count, sort_by="mean_score")


def retain_profiles(profiles: Sequence[SensoryProfile], config: PipelineConfig | None = None) -> list[SensoryProfile]:
    """Retained profiles in discovery order."""
    config = config or PipelineConfig()
    return filter_groups(profiles, min_count=config.min_sample_count)
