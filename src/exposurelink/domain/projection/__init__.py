"""Exposure propagation across the source relationship graph."""

from __future__ import annotations

from .contracts import (
    CATEGORY_EXPOSED_FIELDS,
    DEFAULT_EXPOSED_FIELDS,
    ProjectedExposure,
    ProjectionStats,
    ScoredObservation,
    exposed_fields_for,
)
from .projector import ExposureProjector, project_score

__all__ = [
    "CATEGORY_EXPOSED_FIELDS",
    "DEFAULT_EXPOSED_FIELDS",
    "ExposureProjector",
    "ProjectedExposure",
    "ProjectionStats",
    "ScoredObservation",
    "exposed_fields_for",
    "project_score",
]
