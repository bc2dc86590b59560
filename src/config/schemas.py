"""Schema definitions for the score report exchanged with the score backend."""

from dataclasses import dataclass
from datetime import date as Date
from typing import Any, List, Mapping, Tuple, TypedDict

from utils.datetime import parse_iso_date


# ---- Wire format (JSON returned by GET /api/score) ----
class FeatureContributionPayload(TypedDict):
    feature: str
    contribution: str  # e.g. "Strongly Positive", "Neutral", "Negative"


class HistoryPointPayload(TypedDict):
    date: str  # ISO date, YYYY-MM-DD
    score: int


class ScoreReportPayload(TypedDict):
    name: str
    score: int
    explanation: str
    featureContributions: List[FeatureContributionPayload]
    history: List[HistoryPointPayload]


class MalformedReportError(ValueError):
    """Raised when a payload does not have the shape of a score report."""


def _require(payload: Mapping[str, Any], key: str, kind: type) -> Any:
    if not isinstance(payload, Mapping):
        raise MalformedReportError(f"expected an object, got {type(payload).__name__}")
    if key not in payload:
        raise MalformedReportError(f"missing field '{key}'")
    value = payload[key]
    # bool is an int subclass; a score of True is not a score
    if kind is int and isinstance(value, bool):
        raise MalformedReportError(f"field '{key}' must be int, got bool")
    if not isinstance(value, kind):
        raise MalformedReportError(
            f"field '{key}' must be {kind.__name__}, got {type(value).__name__}"
        )
    return value


# ---- Domain model ----
@dataclass(frozen=True)
class FeatureContribution:
    feature: str
    direction: str  # "Positive" anywhere in the label means a favourable effect


@dataclass(frozen=True)
class HistoryPoint:
    date: str
    score: int

    def as_date(self) -> Date:
        return parse_iso_date(self.date)


@dataclass(frozen=True)
class ScoreReport:
    """One company's credit score, its explanation, factors and history."""

    subject_name: str
    score: int
    explanation: str
    feature_contributions: Tuple[FeatureContribution, ...] = ()
    history: Tuple[HistoryPoint, ...] = ()

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ScoreReport":
        """Build a report from its JSON payload.

        Raises:
            MalformedReportError: if a field is missing or has the wrong type.
        """
        contributions = []
        for item in _require(payload, "featureContributions", list):
            contributions.append(
                FeatureContribution(
                    feature=_require(item, "feature", str),
                    direction=_require(item, "contribution", str),
                )
            )

        history = []
        for item in _require(payload, "history", list):
            point = HistoryPoint(
                date=_require(item, "date", str),
                score=_require(item, "score", int),
            )
            try:
                point.as_date()
            except ValueError as e:
                raise MalformedReportError(f"invalid history date '{point.date}'") from e
            history.append(point)

        return cls(
            subject_name=_require(payload, "name", str),
            score=_require(payload, "score", int),
            explanation=_require(payload, "explanation", str),
            feature_contributions=tuple(contributions),
            history=tuple(history),
        )

    def to_payload(self) -> ScoreReportPayload:
        return ScoreReportPayload(
            name=self.subject_name,
            score=self.score,
            explanation=self.explanation,
            featureContributions=[
                FeatureContributionPayload(feature=c.feature, contribution=c.direction)
                for c in self.feature_contributions
            ],
            history=[
                HistoryPointPayload(date=p.date, score=p.score) for p in self.history
            ],
        )
