from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import pytest

from exposurelink.domain.model import (
    Address,
    ExtractedRecord,
    MatchClassification,
    ReferenceProfile,
)

if TYPE_CHECKING:
    from exposurelink.domain.validation import ProfileValidator


@pytest.fixture
def chicago_profile() -> ReferenceProfile:
    return ReferenceProfile(
        full_name="John Smith",
        addresses=(Address(city="Chicago", state="IL"),),
        date_of_birth=date(1980, 1, 1),
        phones=frozenset({"312-555-1234"}),
    )


def test_exact_match_is_confirmed(
    validator: ProfileValidator, chicago_profile: ReferenceProfile
) -> None:
    record = ExtractedRecord(
        name="John Smith", city="Chicago", state="IL", age="44", phones=("312-555-1234",)
    )

    result = validator.validate(chicago_profile, record, "WHITEPAGES")

    assert result.score >= 80
    assert result.classification is MatchClassification.CONFIRMED


def test_common_name_elsewhere_is_rejected(
    validator: ProfileValidator, chicago_profile: ReferenceProfile
) -> None:
    record = ExtractedRecord(name="John Smith", city="New York", state="NY", age="25")

    result = validator.validate(chicago_profile, record, "WHITEPAGES")

    assert result.factors.name_match == 30
    assert result.factors.match_factor_count() == 1
    assert result.score < 35


def test_alias_with_matching_location(validator: ProfileValidator) -> None:
    profile = ReferenceProfile(
        full_name="Robert Johnson",
        aliases=frozenset({"Bob Johnson"}),
        addresses=(Address(city="Austin", state="TX"),),
    )
    record = ExtractedRecord(name="Bob Johnson", city="Austin", state="TX")

    result = validator.validate(profile, record, "SPOKEO")

    assert result.factors.name_match >= 20
    assert result.factors.location_match == 25
