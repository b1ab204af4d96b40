"""Country name table for joining aggregates to map boundaries."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from bean_grades.config import PipelineConfig
from bean_grades.exceptions import ConfigurationError
from bean_grades.normalization.repository import NameTableRepository
from bean_grades.normalization.types import LabelMapping, NormalizedLabel

logger = logging.getLogger(__name__)


class CountryNameTable:
    """Exact-match rename table.

    Labels with an entry are replaced by the entry's value; every other label
    passes through unchanged.
    """

    def __init__(self, names: Mapping[str, str] | None = None, *, version: str | None = None):
        self._names: dict[str, str] = dict(names or {})
        self.version = version

    @classmethod
    def packaged(cls, version: str = "v1") -> CountryNameTable:
        repo = NameTableRepository(version=version)
        return cls(repo.names, version=version)

    @classmethod
    def from_json(cls, path: str | Path) -> CountryNameTable:
        """Load a table from a JSON object of ``{"dataset spelling": "map spelling"}``."""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise ConfigurationError(f"Country name table not found: {path}") from exc
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Country name table is not valid JSON: {path}") from exc

        if not isinstance(data, dict) or not all(
            isinstance(key, str) and isinstance(value, str) for key, value in data.items()
        ):
            raise ConfigurationError(f"Country name table must map strings to strings: {path}")
        return cls(data, version=path.stem)

    @classmethod
    def from_config(cls, config: PipelineConfig) -> CountryNameTable:
        """Packaged table for the configured version, extended by any overrides."""
        table = cls.packaged(config.country_names_version)
        if config.country_names_path:
            table = table.extend(cls.from_json(config.country_names_path).names)
        if config.country_names:
            table = table.extend(config.country_names)
        return table

    @property
    def names(self) -> dict[str, str]:
        return dict(self._names)

    def __contains__(self, label: object) -> bool:
        return label in self._names

    def __len__(self) -> int:
        return len(self._names)

    def extend(self, names: Mapping[str, str]) -> CountryNameTable:
        """Return a new table with ``names`` added; new entries win on conflict."""
        return CountryNameTable({**self._names, **names}, version=self.version)

    def normalize(self, label: str) -> str:
        return self._names.get(label, label)

    def normalize_one(self, label: str) -> NormalizedLabel:
        if label in self._names:
            return NormalizedLabel(raw=label, normalized=self._names[label], method="exact")
        return NormalizedLabel(raw=label, normalized=label)

    def apply(self, labels: Iterable[str], known_regions: Iterable[str] | None = None) -> LabelMapping:
        """Normalize a batch of labels and report what could not be matched.

        Args:
            labels: Labels as they appear in the aggregated data.
            known_regions: Region names of the boundary dataset. When given,
                normalized labels missing from it are reported as unmatched.

        Returns:
            LabelMapping with one item per input label, the labels that had no
            table entry, and the normalized labels with no boundary region.
        """
        items = [self.normalize_one(label) for label in labels]
        unmapped = {item.raw for item in items if item.method == "passthrough"}

        unmatched: set[str] = set()
        if known_regions is not None:
            regions = set(known_regions)
            unmatched = {item.normalized for item in items if item.normalized not in regions}
            if unmatched:
                logger.warning(
                    "%d labels match no boundary region and will not be shaded: %s",
                    len(unmatched),
                    ", ".join(sorted(unmatched)),
                )

        return LabelMapping(table_version=self.version, items=items, unmapped=unmapped, unmatched=unmatched)
