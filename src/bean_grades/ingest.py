"""Dataset loading and column preparation."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path

import pandas as pd

from bean_grades.exceptions import DatasetError
from bean_grades.schema import (
    COUNTRY_COLUMN,
    PROCESSING_COLUMN,
    REQUIRED_COLUMNS,
    SCORE_COLUMN,
    SENSORY_ATTRIBUTES,
    VARIETY_COLUMN,
    Sample,
)

DatasetInput = str | Path | pd.DataFrame

TEXT_COLUMNS = (COUNTRY_COLUMN, PROCESSING_COLUMN, VARIETY_COLUMN)

logger = logging.getLogger(__name__)


def load_dataset(source: DatasetInput) -> pd.DataFrame:
    """Load the raw ratings table.

    Args:
        source: A DataFrame (copied, never mutated) or a path to a CSV file.

    Returns:
        The raw table with its original columns.

    Raises:
        DatasetError: If the file is missing or cannot be parsed.
    """
    if isinstance(source, pd.DataFrame):
        return source.copy()

    path = Path(source)
    if not path.is_file():
        raise DatasetError(f"Dataset not found: {path}")
    try:
        frame = pd.read_csv(path)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError, OSError) as exc:
        raise DatasetError(f"Could not read dataset {path}: {exc}") from exc

    logger.info("loaded %d rows from %s", len(frame), path)
    return frame


def prepare_dataset(frame: pd.DataFrame, attributes: Sequence[str] = SENSORY_ATTRIBUTES) -> pd.DataFrame:
    """Check required columns and coerce them to numeric / trimmed text.

    Blank strings become missing values. Extra columns pass through untouched.
    """
    missing = [column for column in (*REQUIRED_COLUMNS, *attributes) if column not in frame.columns]
    if missing:
        raise DatasetError(f"Dataset is missing required columns: {', '.join(missing)}")

    prepared = frame.copy()
    for column in (SCORE_COLUMN, *attributes):
        numeric = pd.to_numeric(prepared[column], errors="coerce").astype(float)
        coerced = int((numeric.isna() & prepared[column].notna()).sum())
        if coerced:
            logger.warning("%d non-numeric values in %r treated as missing", coerced, column)
        prepared[column] = numeric

    for column in TEXT_COLUMNS:
        prepared[column] = prepared[column].map(_clean_text).astype(object)

    return prepared


def iter_samples(frame: pd.DataFrame, attributes: Sequence[str] = SENSORY_ATTRIBUTES) -> Iterator[Sample]:
    """Yield one Sample per row of a prepared table."""
    for row in frame.to_dict("records"):
        yield Sample(
            score=row[SCORE_COLUMN],
            country_of_origin=row[COUNTRY_COLUMN],
            processing_method=row[PROCESSING_COLUMN],
            variety=row[VARIETY_COLUMN],
            sensory={name: row[name] for name in attributes},
        )


def _clean_text(value) -> str | None:
    if value is None or pd.isna(value):
        return None
    text = str(value).strip()
    return text or None
