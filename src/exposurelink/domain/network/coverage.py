"""Scan planning helpers derived from ownership links.

When a parent catalog is confirmed, its subsidiaries resell the same records
and projection reaches them at the subsidiary weight. Scan collaborators can
use these helpers to skip fetching those children.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from exposurelink.domain.projection import ScoredObservation

    from .graph import SourceGraph


def confirmed_parents(
    observations: Iterable[ScoredObservation],
    graph: SourceGraph,
    *,
    threshold: int,
) -> frozenset[str]:
    """Keys of observed parents scoring at least ``threshold``."""

    return frozenset(
        observation.source_key
        for observation in observations
        if observation.result.score >= threshold and graph.subsidiaries_of(observation.source_key)
    )


def skippable_subsidiaries(
    observations: Iterable[ScoredObservation],
    graph: SourceGraph,
    *,
    threshold: int,
) -> frozenset[str]:
    skippable: set[str] = set()
    for parent in confirmed_parents(observations, graph, threshold=threshold):
        skippable.update(graph.subsidiaries_of(parent))
    return frozenset(skippable)
