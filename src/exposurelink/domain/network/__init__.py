"""Source relationship graph and the static rules evaluated against it."""

from __future__ import annotations

from .coverage import confirmed_parents, skippable_subsidiaries
from .exclusion import (
    EXCLUDED_CATEGORIES,
    ExclusionReason,
    exclusion_reason,
    is_excluded_from_projection,
)
from .graph import CatalogError, KnownMatch, SourceGraph
from .severity import severity_for

__all__ = [
    "EXCLUDED_CATEGORIES",
    "CatalogError",
    "ExclusionReason",
    "KnownMatch",
    "SourceGraph",
    "confirmed_parents",
    "exclusion_reason",
    "is_excluded_from_projection",
    "severity_for",
    "skippable_subsidiaries",
]
