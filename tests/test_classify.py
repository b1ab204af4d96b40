"""Tests for completeness filtering and label derivation."""

import numpy as np
import pandas as pd
import pytest

from bean_grades import PipelineConfig
from bean_grades.classify import (
    clean_samples,
    iter_cleaned_samples,
    lump_categories,
    normalize_processing_methods,
    quality_category,
    rank_categories,
)


@pytest.mark.parametrize(
    ("score", "expected"),
    [
        (95.0, "Outstanding"),
        (90.0, "Outstanding"),
        (89.999, "Excellent"),
        (85.0, "Excellent"),
        (84.99, "Very Good"),
        (80.0, "Very Good"),
        (75.0, "Good"),
        (74.9, "Fair"),
        (0.0, "Fair"),
    ],
)
def test_quality_category_boundaries(score, expected):
    assert quality_category(score) == expected


def test_quality_category_checks_highest_threshold_first():
    ladder = [(80.0, "Very Good"), (90.0, "Outstanding")]

    assert quality_category(92.0, ladder) == "Outstanding"


def test_rank_categories_breaks_ties_by_first_seen():
    values = pd.Series(["b", "a", "c", "a", "b", "c"])

    assert rank_categories(values) == ["b", "a", "c"]


def test_lump_categories_keeps_top_n():
    values = pd.Series(["x", "x", "y", "z"])

    result = lump_categories(values, top_n=2, other_label="Other")

    assert result.tolist() == ["x", "x", "y", "Other"]


def test_normalize_processing_methods_lumps_rare_and_unknown():
    raw = (
        ["Washed"] * 10
        + ["Natural"] * 8
        + ["Honey"] * 6
        + ["Pulped Natural"] * 4
        + ["Wet Hulled"] * 3
        + ["Anaerobic"] * 2
        + [None]
    )

    result = normalize_processing_methods(pd.Series(raw, dtype=object), top_n=5)

    assert set(result) == {"Washed", "Natural", "Honey", "Pulped Natural", "Wet Hulled", "Other"}
    assert result.iloc[-1] == "Other"
    assert (result.iloc[-3:-1] == "Other").all()


def test_unknown_survives_when_frequent():
    raw = [None, None, None, "Washed", "Natural"]

    result = normalize_processing_methods(pd.Series(raw, dtype=object), top_n=2)

    assert result.tolist() == ["Unknown", "Unknown", "Unknown", "Washed", "Other"]


def test_blank_processing_method_counts_as_unknown():
    result = normalize_processing_methods(pd.Series(["  ", "", "Washed"]), top_n=5)

    assert result.tolist() == ["Unknown", "Unknown", "Washed"]


def test_clean_samples_drops_incomplete_rows(make_ratings):
    frame = make_ratings(
        [
            {"total_cup_points": 85.0, "country_of_origin": "Kenya"},
            {"total_cup_points": np.nan, "country_of_origin": "Kenya"},
            {"total_cup_points": 80.0, "country_of_origin": None},
            {"total_cup_points": 81.0, "country_of_origin": "  "},
            {"total_cup_points": 79.0, "country_of_origin": "Brazil"},
        ]
    )

    cleaned = clean_samples(frame)

    assert cleaned["country_of_origin"].tolist() == ["Kenya", "Brazil"]
    assert cleaned["total_cup_points"].tolist() == [85.0, 79.0]
    assert cleaned["quality_category"].tolist() == ["Excellent", "Good"]


def test_clean_samples_scenario_categories(make_ratings):
    scores = [95, 90, 85, 80, 75, 60]
    frame = make_ratings([{"total_cup_points": float(s), "country_of_origin": "X"} for s in scores])

    cleaned = clean_samples(frame)

    assert cleaned["quality_category"].tolist() == [
        "Outstanding",
        "Outstanding",
        "Excellent",
        "Very Good",
        "Good",
        "Fair",
    ]


def test_clean_samples_does_not_mutate_input(make_ratings):
    frame = make_ratings([{"processing_method": None}])
    before = frame.copy()

    clean_samples(frame)

    pd.testing.assert_frame_equal(frame, before)


def test_clean_samples_is_idempotent(make_ratings):
    methods = ["Washed", "Natural", None, "Honey", "Semi-washed", "Washed", "Other", "Pulped"]
    frame = make_ratings(
        [
            {"total_cup_points": 70.0 + i * 3, "processing_method": method, "country_of_origin": f"C{i % 3}"}
            for i, method in enumerate(methods)
        ]
    )
    config = PipelineConfig(top_n=3)

    once = clean_samples(frame, config)
    twice = clean_samples(once, config)

    pd.testing.assert_frame_equal(once, twice)


def test_normalized_method_never_empty(make_ratings):
    frame = make_ratings(
        [{"processing_method": value} for value in ["Washed", None, "", "Natural", "Honey", "Rare"]]
    )
    config = PipelineConfig(top_n=2)

    cleaned = clean_samples(frame, config)

    ranked = ["Unknown", "Washed"]
    allowed = set(ranked) | {"Other"}
    assert set(cleaned["normalized_processing_method"]) <= allowed
    assert cleaned["normalized_processing_method"].str.len().min() > 0


def test_clean_samples_custom_ladder(make_ratings):
    frame = make_ratings([{"total_cup_points": 60.0}, {"total_cup_points": 40.0}])
    config = PipelineConfig(quality_ladder=((50.0, "Pass"),), fallback_category="Fail")

    cleaned = clean_samples(frame, config)

    assert cleaned["quality_category"].tolist() == ["Pass", "Fail"]


def test_clean_samples_empty_input(make_ratings):
    cleaned = clean_samples(make_ratings([]))

    assert cleaned.empty
    assert "quality_category" in cleaned.columns
    assert "normalized_processing_method" in cleaned.columns


def test_iter_cleaned_samples(make_ratings):
    frame = make_ratings([{"total_cup_points": 86.0, "aroma": np.nan}])

    samples = list(iter_cleaned_samples(clean_samples(frame)))

    assert len(samples) == 1
    assert samples[0].quality_category == "Excellent"
    assert samples[0].normalized_processing_method == "Washed / Wet"
    assert samples[0].sensory["aroma"] is None
    assert samples[0].sensory["flavor"] == 7.5


def test_iter_cleaned_samples_with_custom_ladder(make_ratings):
    frame = make_ratings([{"total_cup_points": 60.0}, {"total_cup_points": 40.0}])
    config = PipelineConfig(quality_ladder=((50.0, "Pass"),), fallback_category="Fail")

    samples = list(iter_cleaned_samples(clean_samples(frame, config)))

    assert [sample.quality_category for sample in samples] == ["Pass", "Fail"]


def test_rank_categories_skips_missing_values():
    values = pd.Series(["a", None, "b", "b"], dtype=object)

    assert rank_categories(values) == ["b", "a"]
