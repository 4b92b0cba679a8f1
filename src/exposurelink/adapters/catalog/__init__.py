"""Catalog directory adapter (JSON document -> ``SourceGraph``)."""

from __future__ import annotations

from .loader import default_source_graph, graph_from_document, load_source_graph, parse_catalog
from .schema import CatalogDocument, CatalogSourceEntry, CategoryRuleEntry

__all__ = [
    "CatalogDocument",
    "CatalogSourceEntry",
    "CategoryRuleEntry",
    "default_source_graph",
    "graph_from_document",
    "load_source_graph",
    "parse_catalog",
]
