"""Batch assessment: score every observed record, then project from the batch.

This mirrors how scan collaborators drive the core: one extracted record per
catalog goes through the validator, and the complete scored batch (not just
the confident part) is handed to the projector so directly observed catalogs
are never overridden by projections.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from exposurelink.domain.projection import ScoredObservation

if TYPE_CHECKING:
    from collections.abc import Mapping

    from exposurelink.config import ScoringConfig
    from exposurelink.domain.model import ExtractedRecord, ReferenceProfile
    from exposurelink.domain.projection import (
        ExposureProjector,
        ProjectedExposure,
        ProjectionStats,
    )
    from exposurelink.domain.validation import ProfileValidator

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Assessment:
    direct: tuple[ScoredObservation, ...]
    projected: tuple[ProjectedExposure, ...]
    stats: ProjectionStats

    def exposures(self, config: ScoringConfig) -> tuple[ScoredObservation, ...]:
        """Direct observations strong enough to become exposure records."""

        return tuple(
            observation
            for observation in self.direct
            if config.creates_exposure(observation.result.score)
        )


@dataclass(frozen=True, slots=True)
class ExposureAssessor:
    validator: ProfileValidator
    projector: ExposureProjector

    def assess(
        self,
        profile: ReferenceProfile,
        records: Mapping[str, ExtractedRecord],
    ) -> Assessment:
        direct = tuple(
            ScoredObservation(source_key=key, result=self.validator.validate(profile, record, key))
            for key, record in records.items()
        )
        projected, stats = self.projector.project(direct, profile)
        log.info(
            "Assessed %s observed catalogs, projected onto %s more",
            len(direct),
            len(projected),
        )
        return Assessment(direct=direct, projected=projected, stats=stats)
