"""Public domain model surface."""

from __future__ import annotations

from exposurelink.domain.model.confidence import (
    AGE_MATCH_MAX,
    DATA_CORRELATION_MAX,
    LOCATION_MATCH_MAX,
    NAME_MATCH_MAX,
    SOURCE_RELIABILITY_MAX,
    ConfidenceFactors,
    ConfidenceResult,
    clamp_score,
    classify_confidence,
)
from exposurelink.domain.model.enums import (
    ExposedField,
    MatchClassification,
    RemovalMethod,
    Severity,
    SourceCategory,
)
from exposurelink.domain.model.profile import Address, ExtractedRecord, ReferenceProfile
from exposurelink.domain.model.source import CategoryProjectionRule, Source

__all__ = [  # noqa: RUF022
    # inputs
    "Address",
    "ExtractedRecord",
    "ReferenceProfile",
    # confidence
    "ConfidenceFactors",
    "ConfidenceResult",
    "clamp_score",
    "classify_confidence",
    "AGE_MATCH_MAX",
    "DATA_CORRELATION_MAX",
    "LOCATION_MATCH_MAX",
    "NAME_MATCH_MAX",
    "SOURCE_RELIABILITY_MAX",
    # catalog
    "CategoryProjectionRule",
    "Source",
    # enums
    "ExposedField",
    "MatchClassification",
    "RemovalMethod",
    "Severity",
    "SourceCategory",
]
