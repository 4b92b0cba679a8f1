from __future__ import annotations

import pytest

from exposurelink.domain.model import (
    ConfidenceFactors,
    ConfidenceResult,
    MatchClassification,
    clamp_score,
    classify_confidence,
)


@pytest.mark.parametrize(
    ("score", "expected"),
    [
        (100, MatchClassification.CONFIRMED),
        (80, MatchClassification.CONFIRMED),
        (79, MatchClassification.LIKELY),
        (60, MatchClassification.LIKELY),
        (59, MatchClassification.POSSIBLE),
        (40, MatchClassification.POSSIBLE),
        (39, MatchClassification.UNLIKELY),
        (20, MatchClassification.UNLIKELY),
        (19, MatchClassification.REJECTED),
        (0, MatchClassification.REJECTED),
    ],
)
def test_classification_floors(score: int, expected: MatchClassification) -> None:
    assert classify_confidence(score) is expected


def test_clamp_score() -> None:
    assert clamp_score(130) == 100
    assert clamp_score(-5) == 0
    assert clamp_score(42) == 42


def test_factors_are_bounded() -> None:
    with pytest.raises(ValueError, match="name_match must be within \\[0, 30\\]"):
        ConfidenceFactors(name_match=31)
    with pytest.raises(ValueError, match="source_reliability"):
        ConfidenceFactors(source_reliability=-1)
    with pytest.raises(ValueError, match="projection_weight"):
        ConfidenceFactors(projection_source="SPOKEO", projection_weight=0)


def test_match_factor_count_ignores_source_reliability() -> None:
    factors = ConfidenceFactors(name_match=30, age_match=5, source_reliability=10)

    assert factors.total == 45
    assert factors.match_factor_count() == 2


def test_result_requires_reasoning_and_valid_score() -> None:
    factors = ConfidenceFactors()

    with pytest.raises(ValueError, match="reasoning"):
        ConfidenceResult(
            score=0, classification=MatchClassification.REJECTED, factors=factors, reasoning=()
        )
    with pytest.raises(ValueError, match="within \\[0, 100\\]"):
        ConfidenceResult(
            score=101,
            classification=MatchClassification.CONFIRMED,
            factors=factors,
            reasoning=("over the top",),
        )


def test_projected_results_are_flagged() -> None:
    result = ConfidenceResult(
        score=81,
        classification=MatchClassification.PROJECTED,
        factors=ConfidenceFactors(projection_source="SPOKEO", projection_weight=0.9),
        reasoning=("PROJECTED: based on confirmed exposure on Spokeo (score 90)",),
    )

    assert result.is_projected
    assert result.validated_at.tzinfo is not None
