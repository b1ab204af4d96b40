"""Data models for bean-grades."""

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

SCORE_COLUMN = "total_cup_points"
COUNTRY_COLUMN = "country_of_origin"
PROCESSING_COLUMN = "processing_method"
VARIETY_COLUMN = "variety"
QUALITY_COLUMN = "quality_category"
NORMALIZED_PROCESSING_COLUMN = "normalized_processing_method"

SENSORY_ATTRIBUTES: tuple[str, ...] = (
    "aroma",
    "flavor",
    "aftertaste",
    "acidity",
    "body",
    "balance",
    "uniformity",
    "clean_cup",
    "sweetness",
)

REQUIRED_COLUMNS: tuple[str, ...] = (SCORE_COLUMN, COUNTRY_COLUMN, PROCESSING_COLUMN, VARIETY_COLUMN)


def _nan_to_none(value):
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


class Sample(BaseModel):
    """One coffee-quality record as supplied by the dataset."""

    model_config = ConfigDict(frozen=True)

    score: float | None = None
    country_of_origin: str | None = None
    processing_method: str | None = None
    variety: str | None = None
    sensory: dict[str, float | None] = Field(default_factory=dict)

    @field_validator("score", "country_of_origin", "processing_method", "variety", mode="before")
    @classmethod
    def _missing_values(cls, value):
        return _nan_to_none(value)

    @field_validator("sensory", mode="before")
    @classmethod
    def _missing_sensory_values(cls, value):
        if isinstance(value, dict):
            return {name: _nan_to_none(item) for name, item in value.items()}
        return value


class CleanedSample(Sample):
    """Sample that passed the completeness filter, with derived labels."""

    score: float
    country_of_origin: str
    quality_category: str = Field(min_length=1)
    normalized_processing_method: str = Field(min_length=1)


class GroupSummary(BaseModel):
    """Score summary for all cleaned samples sharing a key."""

    model_config = ConfigDict(frozen=True)

    key: str
    mean_score: float
    median_score: float
    count: int = Field(ge=0)


class SensoryProfile(BaseModel):
    """Mean sensory attributes for all cleaned samples sharing a key.

    Attributes with no present values for the group hold NaN.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    means: dict[str, float]
    count: int = Field(ge=0)
