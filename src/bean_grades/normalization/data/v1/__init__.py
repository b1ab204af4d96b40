"""Country name table v1."""

from bean_grades.normalization.data.v1.country_names import COUNTRY_NAMES

__all__ = ["COUNTRY_NAMES"]
