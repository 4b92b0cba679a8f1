"""Confidence score value objects.

A ``ConfidenceResult`` is the auditable output of one evaluation: five bounded
factors, their clamped sum, the derived classification and the ordered
reasoning trail that explains every branch taken.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Final

from .enums import MatchClassification

NAME_MATCH_MAX: Final[int] = 30
LOCATION_MATCH_MAX: Final[int] = 25
AGE_MATCH_MAX: Final[int] = 20
DATA_CORRELATION_MAX: Final[int] = 15
SOURCE_RELIABILITY_MAX: Final[int] = 10

SCORE_MIN: Final[int] = 0
SCORE_MAX: Final[int] = 100

_CLASSIFICATION_FLOORS: Final[tuple[tuple[int, MatchClassification], ...]] = (
    (80, MatchClassification.CONFIRMED),
    (60, MatchClassification.LIKELY),
    (40, MatchClassification.POSSIBLE),
    (20, MatchClassification.UNLIKELY),
)


def classify_confidence(score: int) -> MatchClassification:
    """Map a final score onto its classification tier."""

    for floor, classification in _CLASSIFICATION_FLOORS:
        if score >= floor:
            return classification
    return MatchClassification.REJECTED


def clamp_score(value: int) -> int:
    return max(SCORE_MIN, min(SCORE_MAX, value))


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True, kw_only=True)
class ConfidenceFactors:
    name_match: int = 0
    location_match: int = 0
    age_match: int = 0
    data_correlation: int = 0
    source_reliability: int = 0
    projection_source: str | None = None
    projection_weight: float | None = None

    def __post_init__(self) -> None:
        bounds = (
            ("name_match", self.name_match, NAME_MATCH_MAX),
            ("location_match", self.location_match, LOCATION_MATCH_MAX),
            ("age_match", self.age_match, AGE_MATCH_MAX),
            ("data_correlation", self.data_correlation, DATA_CORRELATION_MAX),
            ("source_reliability", self.source_reliability, SOURCE_RELIABILITY_MAX),
        )
        for name, value, upper in bounds:
            if not 0 <= value <= upper:
                raise ValueError(f"{name} must be within [0, {upper}], got {value}")
        if self.projection_weight is not None and not 0 < self.projection_weight <= 1:
            raise ValueError(
                f"projection_weight must be within (0, 1], got {self.projection_weight}"
            )

    @property
    def total(self) -> int:
        return (
            self.name_match
            + self.location_match
            + self.age_match
            + self.data_correlation
            + self.source_reliability
        )

    def match_factor_count(self) -> int:
        """Count match evidence factors; source reliability is trust, not evidence."""

        evidence = (self.name_match, self.location_match, self.age_match, self.data_correlation)
        return sum(1 for value in evidence if value > 0)


@dataclass(frozen=True, slots=True, kw_only=True)
class ConfidenceResult:
    score: int
    classification: MatchClassification
    factors: ConfidenceFactors
    reasoning: tuple[str, ...]
    validated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if not SCORE_MIN <= self.score <= SCORE_MAX:
            raise ValueError(f"Confidence score must be within [0, 100], got {self.score}")
        if not self.reasoning:
            raise ValueError("Confidence result requires at least one reasoning entry")

    @property
    def is_projected(self) -> bool:
        return self.classification is MatchClassification.PROJECTED
