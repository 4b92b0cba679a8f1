from __future__ import annotations

from collections.abc import Iterator  # noqa: TC003
from typing import TYPE_CHECKING

import pytest

from exposurelink import app
from exposurelink.adapters.catalog import default_source_graph
from exposurelink.domain.model import ExtractedRecord, MatchClassification

if TYPE_CHECKING:
    from exposurelink.domain.model import ReferenceProfile
    from exposurelink.domain.network import SourceGraph

RECORD = ExtractedRecord(
    name="John Michael Smith",
    city="Austin",
    state="TX",
    phones=("512-555-0147",),
)


@pytest.fixture(autouse=True)
def _packaged_catalog(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in (
        "EXPOSURELINK_CATALOG_PATH",
        "EXPOSURELINK_MIN_FACTORS",
        "EXPOSURELINK_REJECT_THRESHOLD",
        "EXPOSURELINK_MIN_SOURCE_SCORE",
    ):
        monkeypatch.delenv(name, raising=False)
    default_source_graph.cache_clear()
    yield
    default_source_graph.cache_clear()


def test_validate_uses_packaged_catalog(profile: ReferenceProfile) -> None:
    result = app.validate(profile, RECORD, "SPOKEO")

    assert result.factors.source_reliability == 10
    assert result.score == 70
    assert result.classification is MatchClassification.LIKELY


def test_validate_honours_env_gate(
    monkeypatch: pytest.MonkeyPatch, profile: ReferenceProfile
) -> None:
    monkeypatch.setenv("EXPOSURELINK_MIN_FACTORS", "4")

    result = app.validate(profile, RECORD, "SPOKEO")

    assert result.score == 34


def test_project_reaches_ownership_cluster(profile: ReferenceProfile) -> None:
    observation = app.assess(profile, {"CENTEDA": RECORD}).direct[0]

    projected, stats = app.project([observation], profile)
    keys = {exposure.source_key for exposure in projected}

    assert stats.qualifying_sources == 1
    assert {"RADARIS", "PUBLICREPORTS", "VIRTORY"} <= keys
    assert "CENTEDA" not in keys
    assert "LINKEDIN" not in keys


def test_assess_accepts_an_explicit_graph(graph: SourceGraph, profile: ReferenceProfile) -> None:
    assessment = app.assess(profile, {"SPOKEO": RECORD}, graph=graph)

    assert assessment.direct[0].result.score == 70
    assert "WHITEPAGES" in {exposure.source_key for exposure in assessment.projected}
