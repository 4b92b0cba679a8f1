"""Severity tiers attached to exposures for collaborator prioritisation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from exposurelink.domain.model import Severity, SourceCategory

if TYPE_CHECKING:
    from .graph import SourceGraph

_MEDIUM_CATEGORIES: Final[frozenset[SourceCategory]] = frozenset(
    {SourceCategory.PROFESSIONAL_B2B, SourceCategory.MARKETING}
)


def severity_for(graph: SourceGraph, key: str) -> Severity:
    if key in graph.high_severity_keys:
        return Severity.HIGH
    if graph.category_of(key) in _MEDIUM_CATEGORIES:
        return Severity.MEDIUM
    return Severity.LOW
