"""Source relationship graph.

The graph is an immutable configuration value: build it once per process (see
``exposurelink.adapters.catalog``) and hand the same instance to every
validator and projector. Tests build small graphs directly through
``SourceGraph.build``.

Two kinds of edges exist:
- category rules: every catalog in a source category relates to every catalog
  in the target category with the rule weight
- ownership: a catalog's ``parent`` links it to the parent and to siblings
  sharing that parent
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from exposurelink.domain.normalization import normalize_source_key

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from exposurelink.domain.model import CategoryProjectionRule, Source, SourceCategory

_MIN_FUZZY_KEY_LENGTH: Final[int] = 4


class CatalogError(ValueError):
    """Raised when a catalog directory cannot form a consistent graph."""


class KnownMatch(StrEnum):
    """How a catalog key relates to the known-catalog registry."""

    EXACT = "exact"
    FUZZY = "fuzzy"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class SourceGraph:
    """Read-only directory of catalogs plus their weighted relationships."""

    _sources: Mapping[str, Source]
    _keys_by_category: Mapping[SourceCategory, tuple[str, ...]]
    _subsidiaries: Mapping[str, tuple[str, ...]]
    _rules_by_category: Mapping[SourceCategory, tuple[CategoryProjectionRule, ...]]
    _normalized_keys: Mapping[str, str]
    excluded_keys: frozenset[str]
    high_severity_keys: frozenset[str]

    @classmethod
    def build(
        cls,
        sources: Iterable[Source],
        rules: Iterable[CategoryProjectionRule] = (),
        *,
        excluded_keys: Iterable[str] = (),
        high_severity_keys: Iterable[str] = (),
    ) -> SourceGraph:
        by_key: dict[str, Source] = {}
        for source in sources:
            if source.key in by_key:
                raise CatalogError(f"Duplicate catalog key: {source.key}")
            by_key[source.key] = source

        keys_by_category: defaultdict[SourceCategory, list[str]] = defaultdict(list)
        subsidiaries: defaultdict[str, list[str]] = defaultdict(list)
        for source in by_key.values():
            keys_by_category[source.category].append(source.key)
            if source.parent is None:
                continue
            if source.parent == source.key:
                raise CatalogError(f"Catalog {source.key} lists itself as parent")
            if source.parent not in by_key:
                raise CatalogError(
                    f"Catalog {source.key} references unknown parent {source.parent}"
                )
            subsidiaries[source.parent].append(source.key)

        rules_by_category: defaultdict[SourceCategory, list[CategoryProjectionRule]] = (
            defaultdict(list)
        )
        seen_edges: set[tuple[SourceCategory, SourceCategory]] = set()
        for rule in rules:
            edge = (rule.source_category, rule.target_category)
            if edge in seen_edges:
                raise CatalogError(
                    f"Duplicate projection rule: {rule.source_category} -> {rule.target_category}"
                )
            seen_edges.add(edge)
            rules_by_category[rule.source_category].append(rule)

        normalized_keys: dict[str, str] = {}
        for key in by_key:
            normalized_keys.setdefault(normalize_source_key(key), key)

        return cls(
            _sources=MappingProxyType(by_key),
            _keys_by_category=MappingProxyType(
                {category: tuple(keys) for category, keys in keys_by_category.items()}
            ),
            _subsidiaries=MappingProxyType(
                {parent: tuple(children) for parent, children in subsidiaries.items()}
            ),
            _rules_by_category=MappingProxyType(
                {category: tuple(items) for category, items in rules_by_category.items()}
            ),
            _normalized_keys=MappingProxyType(normalized_keys),
            excluded_keys=frozenset(excluded_keys),
            high_severity_keys=frozenset(high_severity_keys),
        )

    def __len__(self) -> int:
        return len(self._sources)

    def __contains__(self, key: object) -> bool:
        return key in self._sources

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(self._sources)

    def is_known(self, key: str) -> bool:
        return key in self._sources

    def source(self, key: str) -> Source | None:
        return self._sources.get(key)

    def category_of(self, key: str) -> SourceCategory | None:
        source = self._sources.get(key)
        return source.category if source is not None else None

    def sources_in(self, category: SourceCategory) -> tuple[str, ...]:
        return self._keys_by_category.get(category, ())

    def rules_from(self, category: SourceCategory) -> tuple[CategoryProjectionRule, ...]:
        return self._rules_by_category.get(category, ())

    def parent_of(self, key: str) -> str | None:
        source = self._sources.get(key)
        return source.parent if source is not None else None

    def subsidiaries_of(self, key: str) -> tuple[str, ...]:
        return self._subsidiaries.get(key, ())

    def siblings_of(self, key: str) -> tuple[str, ...]:
        parent = self.parent_of(key)
        if parent is None:
            return ()
        return tuple(sibling for sibling in self.subsidiaries_of(parent) if sibling != key)

    def match_known(self, key: str) -> tuple[KnownMatch, str | None]:
        """Look ``key`` up in the registry, exactly first, then by containment.

        Containment only considers registry keys of at least four characters so
        short keys cannot vouch for arbitrary catalogs.
        """

        if key in self._sources:
            return KnownMatch.EXACT, key
        normalized = normalize_source_key(key)
        if not normalized:
            return KnownMatch.UNKNOWN, None
        exact = self._normalized_keys.get(normalized)
        if exact is not None:
            return KnownMatch.EXACT, exact
        for candidate, original in self._normalized_keys.items():
            if len(candidate) < _MIN_FUZZY_KEY_LENGTH:
                continue
            if candidate in normalized or (
                len(normalized) >= _MIN_FUZZY_KEY_LENGTH and normalized in candidate
            ):
                return KnownMatch.FUZZY, original
        return KnownMatch.UNKNOWN, None
