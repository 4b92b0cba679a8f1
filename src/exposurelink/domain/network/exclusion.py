"""Rules deciding which catalogs may never receive a projected exposure."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Final

from exposurelink.domain.model import RemovalMethod, SourceCategory

if TYPE_CHECKING:
    from .graph import SourceGraph


EXCLUDED_CATEGORIES: Final[frozenset[SourceCategory]] = frozenset(
    {
        SourceCategory.SOCIAL_MEDIA,
        SourceCategory.BREACH_DATABASE,
        SourceCategory.DARK_WEB,
        SourceCategory.AI_SERVICE,
        SourceCategory.DIRECT_RELATIONSHIP,
        SourceCategory.GRAY_AREA,
        SourceCategory.SERVICE_PROVIDER,
        SourceCategory.COVERAGE_PLACEHOLDER,
    }
)


class ExclusionReason(StrEnum):
    NOT_IN_GRAPH = "not_in_graph"
    EXCLUSION_LIST = "exclusion_list"
    CATEGORY = "category"
    NOT_REMOVABLE = "not_removable"
    NO_CONTACT = "no_contact"


def exclusion_reason(graph: SourceGraph, key: str) -> ExclusionReason | None:
    """Return why ``key`` must not be a projection target, or ``None`` if it may be.

    Unknown catalogs are excluded rather than guessed at, as are catalogs that
    offer no opt-out URL or removal email.
    """

    source = graph.source(key)
    if source is None:
        return ExclusionReason.NOT_IN_GRAPH
    if key in graph.excluded_keys:
        return ExclusionReason.EXCLUSION_LIST
    if source.category in EXCLUDED_CATEGORIES:
        return ExclusionReason.CATEGORY
    if source.removal_method is RemovalMethod.NOT_REMOVABLE and source.contact is None:
        return ExclusionReason.NOT_REMOVABLE
    if source.contact is None:
        return ExclusionReason.NO_CONTACT
    return None


def is_excluded_from_projection(graph: SourceGraph, key: str) -> bool:
    return exclusion_reason(graph, key) is not None
