"""Packaged country name tables."""

from __future__ import annotations

from importlib import import_module

from bean_grades.exceptions import ConfigurationError


class NameTableRepository:
    """Loads a versioned country name table from packaged data."""

    def __init__(self, version: str = "v1"):
        self.version = version
        self.names: dict[str, str] = self._load_names()

    def _load_names(self) -> dict[str, str]:
        try:
            module = import_module(f"bean_grades.normalization.data.{self.version}")
        except ModuleNotFoundError as exc:
            raise ConfigurationError(f"Unknown country name table version: {self.version}") from exc
        return dict(module.COUNTRY_NAMES)
