"""bean-grades: Clean, classify and aggregate coffee quality ratings for charting."""

from bean_grades.config import PipelineConfig
from bean_grades.core import CoffeeAnalysis, analyze
from bean_grades.normalization import CountryNameTable
from bean_grades.schema import CleanedSample, GroupSummary, Sample, SensoryProfile

__version__ = "0.1.0"

__all__ = [
    "analyze",
    "CleanedSample",
    "CoffeeAnalysis",
    "CountryNameTable",
    "GroupSummary",
    "PipelineConfig",
    "Sample",
    "SensoryProfile",
    "__version__",
]
