"""Tests for score report schema parsing."""

import pytest

from config.schemas import (
    FeatureContribution,
    HistoryPoint,
    MalformedReportError,
    ScoreReport,
)


def test_from_payload_maps_wire_fields(sample_payload):
    """Test that camelCase wire keys map onto the report fields."""
    report = ScoreReport.from_payload(sample_payload)

    assert report.subject_name == "Beta Industries"
    assert report.score == 688
    assert report.explanation.startswith("Leverage rose")
    assert report.feature_contributions[1] == FeatureContribution(
        "Debt-to-Equity Ratio", "Strongly Negative"
    )
    assert report.history[-1] == HistoryPoint("2025-05-01", 688)


def test_from_payload_preserves_contribution_order(sample_payload):
    report = ScoreReport.from_payload(sample_payload)

    features = [c.feature for c in report.feature_contributions]
    assert features == ["Revenue Growth", "Debt-to-Equity Ratio", "Cash Reserves"]


def test_to_payload_matches_source(sample_payload):
    report = ScoreReport.from_payload(sample_payload)
    assert report.to_payload() == sample_payload


@pytest.mark.parametrize("field", ["name", "score", "explanation", "featureContributions", "history"])
def test_missing_field_is_rejected(sample_payload, field):
    del sample_payload[field]

    with pytest.raises(MalformedReportError, match=field):
        ScoreReport.from_payload(sample_payload)


def test_wrong_types_are_rejected(sample_payload):
    sample_payload["score"] = "750"
    with pytest.raises(MalformedReportError):
        ScoreReport.from_payload(sample_payload)

    sample_payload["score"] = True
    with pytest.raises(MalformedReportError):
        ScoreReport.from_payload(sample_payload)


def test_non_object_items_are_rejected(sample_payload):
    sample_payload["featureContributions"] = ["Revenue Growth"]
    with pytest.raises(MalformedReportError):
        ScoreReport.from_payload(sample_payload)

    with pytest.raises(MalformedReportError):
        ScoreReport.from_payload(["not", "a", "report"])


def test_invalid_history_date_is_rejected(sample_payload):
    sample_payload["history"][0]["date"] = "March 2025"
    with pytest.raises(MalformedReportError, match="March 2025"):
        ScoreReport.from_payload(sample_payload)

