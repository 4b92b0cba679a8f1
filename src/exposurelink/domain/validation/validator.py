"""Confidence validator: scores one extracted record against a reference profile.

The score is the clamped sum of five bounded factors. A factor-count gate then
guards against thin evidence: a record backed by fewer than ``min_factors``
independent kinds of match evidence (a common name alone, say) is clamped
below the reject threshold no matter how high that single factor scored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from exposurelink.config import ScoringConfig
from exposurelink.domain.clock import utc_now
from exposurelink.domain.model import (
    ConfidenceFactors,
    ConfidenceResult,
    clamp_score,
    classify_confidence,
)

from .factors import (
    score_age,
    score_correlation,
    score_location,
    score_name,
    score_source_reliability,
)

if TYPE_CHECKING:
    from exposurelink.domain.clock import Clock
    from exposurelink.domain.model import ExtractedRecord, ReferenceProfile
    from exposurelink.domain.network import SourceGraph

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProfileValidator:
    """Deterministic multi-factor scorer bound to one known-catalog registry."""

    graph: SourceGraph
    config: ScoringConfig = field(default_factory=ScoringConfig)
    clock: Clock = utc_now

    def validate(
        self,
        profile: ReferenceProfile,
        extracted: ExtractedRecord,
        source: str,
    ) -> ConfidenceResult:
        """Score ``extracted`` (observed at catalog ``source``) against ``profile``."""

        now = self.clock()
        name = score_name(profile, extracted)
        location = score_location(profile, extracted)
        age = score_age(profile, extracted, today=now.date())
        correlation = score_correlation(profile, extracted)
        reliability = score_source_reliability(self.graph, source)

        factors = ConfidenceFactors(
            name_match=name.score,
            location_match=location.score,
            age_match=age.score,
            data_correlation=correlation.score,
            source_reliability=reliability.score,
        )
        reasoning = [
            *name.reasoning,
            *location.reasoning,
            *age.reasoning,
            *correlation.reasoning,
            *reliability.reasoning,
        ]
        score = clamp_score(factors.total)

        matched = factors.match_factor_count()
        required = self.config.min_factors
        log.debug(
            "%s: factors matched %s/%s (name=%s, loc=%s, age=%s, data=%s, source=%s)",
            source,
            matched,
            required,
            factors.name_match,
            factors.location_match,
            factors.age_match,
            factors.data_correlation,
            factors.source_reliability,
        )

        if matched < required:
            ceiling = self.config.gate_ceiling
            gate_line = (
                f"PRECISION CHECK: only {matched} match factor(s) present (need {required}+)"
            )
            if score > ceiling:
                gate_line += f"; score capped at {ceiling} to prevent a false positive"
                log.info(
                    "%s: score %s capped to %s (%s match factor(s), need %s)",
                    source,
                    score,
                    ceiling,
                    matched,
                    required,
                )
                score = ceiling
            reasoning.append(gate_line)
        else:
            reasoning.append(
                f"PRECISION CHECK: {matched} match factors present ({required} needed)"
            )

        return ConfidenceResult(
            score=score,
            classification=classify_confidence(score),
            factors=factors,
            reasoning=tuple(reasoning),
            validated_at=now,
        )
