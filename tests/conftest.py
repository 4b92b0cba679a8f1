from __future__ import annotations

from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

import pytest

from exposurelink.domain.model import Address, ReferenceProfile
from exposurelink.domain.projection import ExposureProjector
from exposurelink.domain.validation import ProfileValidator
from tests.helpers.catalogs import build_graph

if TYPE_CHECKING:
    from collections.abc import Callable

    from exposurelink.domain.network import SourceGraph

NOW = datetime(2024, 10, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    def clock() -> datetime:
        return NOW

    return clock


@pytest.fixture
def graph() -> SourceGraph:
    return build_graph()


@pytest.fixture
def profile() -> ReferenceProfile:
    """John Michael Smith, 44 on ``NOW``, with two known addresses."""

    return ReferenceProfile(
        full_name="John Michael Smith",
        aliases=frozenset({"Johnny Smith"}),
        addresses=(
            Address(street="100 Congress Ave", city="Austin", state="TX", zip_code="78701"),
            Address(city="Denver", state="CO"),
        ),
        date_of_birth=date(1980, 5, 15),
        phones=frozenset({"(512) 555-0147"}),
        emails=frozenset({"john.smith@example.com"}),
    )


@pytest.fixture
def profile_without_address(profile: ReferenceProfile) -> ReferenceProfile:
    return ReferenceProfile(
        full_name=profile.full_name,
        aliases=profile.aliases,
        date_of_birth=profile.date_of_birth,
        phones=profile.phones,
        emails=profile.emails,
    )


@pytest.fixture
def validator(graph: SourceGraph, fixed_clock: Callable[[], datetime]) -> ProfileValidator:
    return ProfileValidator(graph=graph, clock=fixed_clock)


@pytest.fixture
def projector(graph: SourceGraph) -> ExposureProjector:
    return ExposureProjector(graph=graph)
