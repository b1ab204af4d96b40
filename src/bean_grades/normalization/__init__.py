"""Country label normalization for bean-grades."""

from bean_grades.normalization.repository import NameTableRepository
from bean_grades.normalization.table import CountryNameTable
from bean_grades.normalization.types import LabelMapping, NormalizedLabel

__all__ = [
    "CountryNameTable",
    "LabelMapping",
    "NameTableRepository",
    "NormalizedLabel",
]
