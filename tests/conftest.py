import pandas as pd
import pytest

from bean_grades.schema import (
    COUNTRY_COLUMN,
    PROCESSING_COLUMN,
    SCORE_COLUMN,
    SENSORY_ATTRIBUTES,
    VARIETY_COLUMN,
)

COLUMNS = [SCORE_COLUMN, COUNTRY_COLUMN, PROCESSING_COLUMN, VARIETY_COLUMN, *SENSORY_ATTRIBUTES]


def build_ratings(rows: list[dict]) -> pd.DataFrame:
    records = []
    for row in rows:
        record = {
            SCORE_COLUMN: 82.0,
            COUNTRY_COLUMN: "Ethiopia",
            PROCESSING_COLUMN: "Washed / Wet",
            VARIETY_COLUMN: "Other",
            **{name: 7.5 for name in SENSORY_ATTRIBUTES},
        }
        record.update(row)
        records.append(record)
    return pd.DataFrame(records, columns=COLUMNS)


@pytest.fixture
def make_ratings():
    """Factory for rating tables; each row overrides the defaults."""
    return build_ratings
