"""Data models for label normalization output."""

from typing import Literal

from pydantic import BaseModel, Field

Method = Literal["exact", "passthrough"]


class NormalizedLabel(BaseModel):
    """Normalized representation for a single raw label."""

    raw: str
    normalized: str
    method: Method = "passthrough"


class LabelMapping(BaseModel):
    """Result of running a batch of labels through a name table."""

    table_version: str | None = None
    items: list[NormalizedLabel] = Field(default_factory=list)
    unmapped: set[str] = Field(default_factory=set)
    unmatched: set[str] = Field(default_factory=set)

    @property
    def labels(self) -> list[str]:
        return [item.normalized for item in self.items]

    def as_dict(self) -> dict[str, str]:
        return {item.raw: item.normalized for item in self.items}
