"""Exposure propagation engine.

Catalogs resell records sourced from the same few aggregators, so a confirmed
hit on one catalog implies likely presence on related catalogs nobody fetched.
The projector walks the relationship graph from every sufficiently confident
observation and emits decayed, explicitly labelled ``PROJECTED`` results.

Guarantees:
- a catalog present anywhere in the input batch is never projected onto
- excluded and unknown catalogs are never projected onto
- each target appears at most once, carrying its highest projected score
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from exposurelink.config import ProjectionConfig
from exposurelink.domain.clock import utc_now
from exposurelink.domain.model import (
    ConfidenceFactors,
    ConfidenceResult,
    MatchClassification,
    SourceCategory,
)
from exposurelink.domain.network import exclusion_reason, severity_for

from .contracts import ProjectedExposure, ProjectionStats, exposed_fields_for

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from exposurelink.domain.clock import Clock
    from exposurelink.domain.model import ReferenceProfile
    from exposurelink.domain.network import SourceGraph

    from .contracts import ScoredObservation

log = logging.getLogger(__name__)


def project_score(source_score: int, weight: float) -> int:
    """Decay ``source_score`` by ``weight``, rounding halves up."""

    return math.floor(source_score * weight + 0.5)


@dataclass(frozen=True, slots=True)
class ExposureProjector:
    graph: SourceGraph
    config: ProjectionConfig = field(default_factory=ProjectionConfig)
    clock: Clock = utc_now

    def project(
        self,
        observations: Sequence[ScoredObservation],
        profile: ReferenceProfile,
    ) -> tuple[tuple[ProjectedExposure, ...], ProjectionStats]:
        """Project exposures from ``observations`` onto related, unobserved catalogs."""

        stats = ProjectionStats()
        qualifying = [
            observation
            for observation in observations
            if observation.result.score >= self.config.min_source_score
        ]
        stats.qualifying_sources = len(qualifying)
        if not qualifying:
            log.info("No qualifying sources for projection")
            return (), stats

        represented = {observation.source_key for observation in observations}
        projected: dict[str, ProjectedExposure] = {}
        validated_at = self.clock()

        for origin in qualifying:
            targets = self.targets_for(origin.source_key, has_address=profile.has_address)
            if not targets:
                log.debug("%s: no relationships to project along", origin.source_key)
                continue

            source_score = origin.result.score
            for target_key, weight in targets.items():
                if target_key in represented:
                    stats.skipped_duplicate += 1
                    continue
                reason = exclusion_reason(self.graph, target_key)
                if reason is not None:
                    log.debug("%s: excluded from projection (%s)", target_key, reason)
                    stats.skipped_excluded += 1
                    continue
                projected_score = project_score(source_score, weight)
                if projected_score < self.config.projection_min_score:
                    stats.skipped_low_score += 1
                    continue
                existing = projected.get(target_key)
                if existing is not None:
                    stats.skipped_duplicate += 1
                    if existing.confidence.score >= projected_score:
                        continue
                projected[target_key] = self._projection(
                    origin_key=origin.source_key,
                    source_score=source_score,
                    target_key=target_key,
                    weight=weight,
                    projected_score=projected_score,
                    validated_at=validated_at,
                )

        results = tuple(projected.values())
        stats.projected_count = len(results)
        log.info(
            "Projected %s exposures from %s qualifying sources "
            "(%s excluded, %s duplicate, %s low-score)",
            stats.projected_count,
            stats.qualifying_sources,
            stats.skipped_excluded,
            stats.skipped_duplicate,
            stats.skipped_low_score,
        )
        return results, stats

    def targets_for(self, origin_key: str, *, has_address: bool) -> dict[str, float]:
        """Candidate targets for one origin, keeping the strongest weight per target.

        Origins missing from the graph have no known relationships and yield
        nothing.
        """

        category = self.graph.category_of(origin_key)
        if category is None:
            return {}

        targets: dict[str, float] = {}

        def offer(key: str, weight: float) -> None:
            if key == origin_key:
                return
            targets[key] = max(targets.get(key, 0.0), weight)

        for rule in self.graph.rules_from(category):
            if rule.target_category is SourceCategory.PROPERTY_RECORDS and not has_address:
                continue
            for key in self.graph.sources_in(rule.target_category):
                offer(key, rule.weight)

        for subsidiary in self.graph.subsidiaries_of(origin_key):
            offer(subsidiary, self.config.subsidiary_weight)

        parent = self.graph.parent_of(origin_key)
        if parent is not None:
            offer(parent, self.config.subsidiary_weight)
            for sibling in self.graph.siblings_of(origin_key):
                offer(sibling, self.config.sibling_weight)

        return targets

    def _projection(
        self,
        *,
        origin_key: str,
        source_score: int,
        target_key: str,
        weight: float,
        projected_score: int,
        validated_at: datetime,
    ) -> ProjectedExposure:
        target = self.graph.source(target_key)
        if target is None or target.contact is None:  # pragma: no cover - excluded upstream
            raise ValueError(f"Cannot project onto {target_key}: unknown catalog or no contact")
        origin = self.graph.source(origin_key)
        origin_name = origin.name if origin is not None else origin_key

        confidence = ConfidenceResult(
            score=projected_score,
            classification=MatchClassification.PROJECTED,
            factors=ConfidenceFactors(projection_source=origin_key, projection_weight=weight),
            reasoning=(
                f"PROJECTED: based on confirmed exposure on {origin_name} (score {source_score})",
                f"Relationship weight: {weight} ({origin_key} -> {target_key})",
                f"Projected score: {source_score} x {weight} = {projected_score}",
            ),
            validated_at=validated_at,
        )
        return ProjectedExposure(
            source_key=target_key,
            source_name=target.name,
            contact=target.contact,
            severity=severity_for(self.graph, target_key),
            exposed_fields=exposed_fields_for(target.category),
            data_preview=(
                f"Your information is likely available on {target.name} "
                f"based on confirmed exposure on {origin_name}"
            ),
            confidence=confidence,
        )
