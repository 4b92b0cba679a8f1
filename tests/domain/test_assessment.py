from __future__ import annotations

from typing import TYPE_CHECKING

from exposurelink.config import ScoringConfig
from exposurelink.domain.assessment import ExposureAssessor
from exposurelink.domain.model import ExtractedRecord, MatchClassification

if TYPE_CHECKING:
    from exposurelink.domain.model import ReferenceProfile
    from exposurelink.domain.projection import ExposureProjector
    from exposurelink.domain.validation import ProfileValidator


def test_assess_scores_batch_then_projects(
    validator: ProfileValidator, projector: ExposureProjector, profile: ReferenceProfile
) -> None:
    assessor = ExposureAssessor(validator=validator, projector=projector)
    records = {
        "SPOKEO": ExtractedRecord(name="John Michael Smith", city="Austin", state="TX", age=44),
        "WHITEPAGES": ExtractedRecord(name="Jane Doe", city="Miami", state="FL"),
    }

    assessment = assessor.assess(profile, records)

    scores = {obs.source_key: obs.result.score for obs in assessment.direct}
    assert scores == {"SPOKEO": 85, "WHITEPAGES": 10}

    projected_keys = {exposure.source_key for exposure in assessment.projected}
    assert projected_keys.isdisjoint(records)
    assert "RADARIS" in projected_keys
    assert all(
        exposure.confidence.classification is MatchClassification.PROJECTED
        for exposure in assessment.projected
    )
    assert assessment.stats.qualifying_sources == 1

    exposures = assessment.exposures(ScoringConfig())
    assert [observation.source_key for observation in exposures] == ["SPOKEO"]
