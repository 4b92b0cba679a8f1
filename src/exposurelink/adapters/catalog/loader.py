"""Load the catalog directory into a ``SourceGraph``."""

from __future__ import annotations

import logging
from functools import cache
from importlib import resources
from typing import TYPE_CHECKING

from pydantic import ValidationError

from exposurelink.config import get_catalog_path
from exposurelink.domain.model import CategoryProjectionRule, Source
from exposurelink.domain.network import CatalogError, SourceGraph

from .schema import CatalogDocument

if TYPE_CHECKING:
    from pathlib import Path

log = logging.getLogger(__name__)

_PACKAGED_CATALOG = "catalog.json"


def parse_catalog(raw: str | bytes) -> SourceGraph:
    """Validate a catalog JSON document and build the graph it describes."""

    try:
        document = CatalogDocument.model_validate_json(raw)
    except ValidationError as exc:
        raise CatalogError(f"Invalid catalog document: {exc.error_count()} error(s)") from exc
    return graph_from_document(document)


def graph_from_document(document: CatalogDocument) -> SourceGraph:
    sources = [
        Source(
            key=entry.key,
            name=entry.name,
            category=entry.category,
            parent=entry.parent,
            opt_out_url=entry.opt_out_url,
            privacy_email=entry.privacy_email,
            removal_method=entry.removal_method,
        )
        for entry in document.sources
    ]
    rules = [
        CategoryProjectionRule(
            source_category=entry.source,
            target_category=entry.target,
            weight=entry.weight,
        )
        for entry in document.category_rules
    ]
    return SourceGraph.build(
        sources,
        rules,
        excluded_keys=document.excluded,
        high_severity_keys=document.high_severity,
    )


def load_source_graph(path: Path | None = None) -> SourceGraph:
    """Load a catalog file, defaulting to the directory shipped with the package."""

    if path is None:
        raw = resources.files(__package__).joinpath("data", _PACKAGED_CATALOG).read_bytes()
        origin = f"packaged {_PACKAGED_CATALOG}"
    else:
        raw = path.read_bytes()
        origin = str(path)
    graph = parse_catalog(raw)
    log.info("Loaded %s catalogs from %s", len(graph), origin)
    return graph


@cache
def default_source_graph() -> SourceGraph:
    """Process-wide graph: ``EXPOSURELINK_CATALOG_PATH`` if set, else the packaged one."""

    return load_source_graph(get_catalog_path())
