"""Application entry points wiring the packaged catalog and environment config."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from exposurelink.adapters.catalog import default_source_graph
from exposurelink.config import get_projection_config, get_scoring_config
from exposurelink.domain.assessment import Assessment, ExposureAssessor
from exposurelink.domain.projection import ExposureProjector
from exposurelink.domain.validation import ProfileValidator

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from exposurelink.domain.model import ConfidenceResult, ExtractedRecord, ReferenceProfile
    from exposurelink.domain.network import SourceGraph
    from exposurelink.domain.projection import (
        ProjectedExposure,
        ProjectionStats,
        ScoredObservation,
    )


log = getLogger(__name__)


def build_validator(*, graph: SourceGraph | None = None) -> ProfileValidator:
    if graph is None:
        graph = default_source_graph()
    return ProfileValidator(graph=graph, config=get_scoring_config())


def build_projector(*, graph: SourceGraph | None = None) -> ExposureProjector:
    if graph is None:
        graph = default_source_graph()
    return ExposureProjector(graph=graph, config=get_projection_config())


def validate(
    profile: ReferenceProfile,
    extracted: ExtractedRecord,
    source: str,
) -> ConfidenceResult:
    """Score one extracted record using the configured catalog and thresholds."""

    return build_validator().validate(profile, extracted, source)


def project(
    observations: Sequence[ScoredObservation],
    profile: ReferenceProfile,
) -> tuple[tuple[ProjectedExposure, ...], ProjectionStats]:
    """Project exposures from a scored batch using the configured catalog."""

    return build_projector().project(observations, profile)


def assess(
    profile: ReferenceProfile,
    records: Mapping[str, ExtractedRecord],
    *,
    graph: SourceGraph | None = None,
) -> Assessment:
    """Validate every observed record, then project from the whole batch."""

    effective_graph = graph if graph is not None else default_source_graph()
    assessor = ExposureAssessor(
        validator=build_validator(graph=effective_graph),
        projector=build_projector(graph=effective_graph),
    )
    log.info(
        "Starting assessment of %s observed catalogs against %s known catalogs",
        len(records),
        len(effective_graph),
    )
    return assessor.assess(profile, records)
