"""Individual factor scorers.

Each scorer returns a ``FactorScore``: the bounded points for its factor and
the reasoning lines explaining which branch applied. Scorers never raise on
missing or malformed data; they score zero and say why.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

import jellyfish

from exposurelink.domain.model import DATA_CORRELATION_MAX
from exposurelink.domain.network import KnownMatch
from exposurelink.domain.normalization import (
    age_on,
    mask_email,
    mask_phone,
    name_tokens,
    normalize_city,
    normalize_email,
    normalize_name,
    normalize_phone,
    normalize_state,
    parse_age,
)

if TYPE_CHECKING:
    from datetime import date

    from exposurelink.domain.model import ExtractedRecord, ReferenceProfile
    from exposurelink.domain.network import SourceGraph

ALIAS_SCORE: Final[int] = 25
EXACT_NAME_SCORE: Final[int] = 30
FIRST_LAST_SCORE: Final[int] = 28
PARTIAL_NAME_SCORE: Final[int] = 20
LAST_NAME_SCORE: Final[int] = 15
FIRST_NAME_SCORE: Final[int] = 10
FUZZY_NAME_SCORE: Final[int] = 10
MAX_FUZZY_DISTANCE: Final[int] = 2
MIN_TOKEN_LENGTH: Final[int] = 2

CITY_STATE_SCORE: Final[int] = 25
STATE_ONLY_SCORE: Final[int] = 15
CITY_ONLY_SCORE: Final[int] = 8

# (maximum absolute difference in years, points)
AGE_TIERS: Final[tuple[tuple[int, int], ...]] = ((0, 20), (2, 15), (5, 10), (10, 5))

PHONE_MATCH_SCORE: Final[int] = 5
EMAIL_MATCH_SCORE: Final[int] = 5
CORRELATION_BONUS_FLOOR: Final[int] = 10
CORRELATION_BONUS: Final[int] = 5

KNOWN_SOURCE_SCORE: Final[int] = 10
FUZZY_SOURCE_SCORE: Final[int] = 9
UNKNOWN_SOURCE_SCORE: Final[int] = 7


@dataclass(frozen=True, slots=True)
class FactorScore:
    score: int
    reasoning: tuple[str, ...]


def _scored(score: int, *reasoning: str) -> FactorScore:
    return FactorScore(score=score, reasoning=reasoning)


def score_name(profile: ReferenceProfile, extracted: ExtractedRecord) -> FactorScore:
    """Name evidence (0-30); the first matching rule wins."""

    profile_name = normalize_name(profile.full_name)
    if not profile_name:
        return _scored(0, "No profile name to compare")

    profile_first, profile_last = name_tokens(profile_name)
    extracted_name = normalize_name(extracted.name)

    if extracted_name:
        for alias in sorted(profile.aliases):
            if normalize_name(alias) == extracted_name:
                return _scored(
                    ALIAS_SCORE, f'Alias match: "{extracted.name}" matches alias "{alias}"'
                )

        extracted_first, extracted_last = name_tokens(extracted_name)
        if profile_name == extracted_name:
            return _scored(EXACT_NAME_SCORE, f'Exact name match: "{extracted.name}"')
        if profile_first == extracted_first and profile_last == extracted_last:
            return _scored(
                FIRST_LAST_SCORE,
                f"First and last name match: {extracted_first} {extracted_last}",
            )
        if extracted_name in profile_name or profile_name in extracted_name:
            return _scored(
                PARTIAL_NAME_SCORE,
                f'Partial name overlap: "{extracted.name}" and "{profile.full_name}"',
            )
        if profile_last == extracted_last and len(profile_last) > MIN_TOKEN_LENGTH:
            return _scored(LAST_NAME_SCORE, f"Last name match only: {extracted_last}")
        if profile_first == extracted_first and len(profile_first) > MIN_TOKEN_LENGTH:
            return _scored(FIRST_NAME_SCORE, f"First name match only: {extracted_first}")
        distance = jellyfish.levenshtein_distance(profile_name, extracted_name)
        if distance <= MAX_FUZZY_DISTANCE:
            return _scored(
                FUZZY_NAME_SCORE,
                f'Fuzzy name match (distance {distance}): "{extracted.name}"',
            )

    if extracted.first_name or extracted.last_name:
        split_first = normalize_name(extracted.first_name)
        split_last = normalize_name(extracted.last_name)
        if split_first and split_last and (split_first, split_last) == (
            profile_first,
            profile_last,
        ):
            return _scored(
                FIRST_LAST_SCORE, f"First+Last name fields match: {split_first} {split_last}"
            )
        if split_last and split_last == profile_last and len(split_last) > MIN_TOKEN_LENGTH:
            return _scored(LAST_NAME_SCORE, f"Last name field match: {split_last}")
        if split_first and split_first == profile_first and len(split_first) > MIN_TOKEN_LENGTH:
            return _scored(FIRST_NAME_SCORE, f"First name field match: {split_first}")

    return _scored(
        0,
        f'Name mismatch: profile="{profile.full_name}", extracted="{extracted.display_name}"',
    )


def score_location(profile: ReferenceProfile, extracted: ExtractedRecord) -> FactorScore:
    """Location evidence (0-25); the best match across all profile addresses wins."""

    if not profile.addresses:
        return _scored(0, "No profile addresses to compare")

    extracted_city = normalize_city(extracted.city)
    extracted_state = normalize_state(extracted.state)
    if not extracted_city and not extracted_state:
        return _scored(0, "No location data in extracted record")

    best = 0
    for address in profile.addresses:
        city_matches = bool(extracted_city) and normalize_city(address.city) == extracted_city
        state_matches = bool(extracted_state) and normalize_state(address.state) == extracted_state
        if city_matches and state_matches:
            best = CITY_STATE_SCORE
            break
        if state_matches:
            best = max(best, STATE_ONLY_SCORE)
        elif city_matches:
            best = max(best, CITY_ONLY_SCORE)

    if best == CITY_STATE_SCORE:
        return _scored(best, f"City+State match: {extracted.city}, {extracted.state}")
    if best == STATE_ONLY_SCORE:
        return _scored(best, f"State match only: {extracted.state}")
    if best == CITY_ONLY_SCORE:
        return _scored(best, f"City match only: {extracted.city}")
    return _scored(
        0,
        f'Location mismatch: extracted "{extracted.city or ""}, {extracted.state or ""}" '
        "not in profile addresses",
    )


def score_age(
    profile: ReferenceProfile, extracted: ExtractedRecord, *, today: date
) -> FactorScore:
    """Age evidence (0-20) against the age implied by the profile's date of birth."""

    if profile.date_of_birth is None:
        return _scored(0, "No profile date of birth to compare")
    if extracted.age is None or extracted.age == "":
        return _scored(0, "No age data in extracted record")

    extracted_age = parse_age(extracted.age)
    if extracted_age is None:
        return _scored(0, f"Could not parse extracted age: {extracted.age!r}")

    profile_age = age_on(profile.date_of_birth, today)
    difference = abs(profile_age - extracted_age)
    for max_difference, points in AGE_TIERS:
        if difference <= max_difference:
            if difference == 0:
                return _scored(points, f"Exact age match: {extracted_age}")
            return _scored(
                points,
                f"Age within {max_difference} years: profile={profile_age}, "
                f"extracted={extracted_age}",
            )
    return _scored(
        0,
        f"Age mismatch: profile={profile_age}, extracted={extracted_age} (diff={difference})",
    )


def score_correlation(profile: ReferenceProfile, extracted: ExtractedRecord) -> FactorScore:
    """Hard-identifier overlap (0-15): phone, email, and a bonus when both line up."""

    reasoning: list[str] = []
    score = 0

    profile_phones = {phone for phone in map(normalize_phone, profile.phones) if phone}
    for candidate in map(normalize_phone, extracted.phones):
        if candidate and candidate in profile_phones:
            score += PHONE_MATCH_SCORE
            reasoning.append(f"Phone match: {mask_phone(candidate)}")
            break

    profile_emails = {email for email in map(normalize_email, profile.emails) if email}
    for candidate in map(normalize_email, extracted.emails):
        if candidate and candidate in profile_emails:
            score += EMAIL_MATCH_SCORE
            reasoning.append(f"Email match: {mask_email(candidate)}")
            break

    if score >= CORRELATION_BONUS_FLOOR:
        score += CORRELATION_BONUS
        reasoning.append(f"Correlation bonus: phone and email both match (+{CORRELATION_BONUS})")

    if score == 0:
        reasoning.append("No phone/email correlation found")

    return FactorScore(score=min(DATA_CORRELATION_MAX, score), reasoning=tuple(reasoning))


def score_source_reliability(graph: SourceGraph, source_key: str) -> FactorScore:
    """Trust in the catalog itself (0-10); not counted as match evidence."""

    match, registered = graph.match_known(source_key)
    if match is KnownMatch.EXACT:
        return _scored(KNOWN_SOURCE_SCORE, f"Known catalog: {registered}")
    if match is KnownMatch.FUZZY:
        return _scored(
            FUZZY_SOURCE_SCORE, f"Catalog {source_key} resembles known catalog {registered}"
        )
    return _scored(UNKNOWN_SOURCE_SCORE, f"Unrecognised catalog: {source_key}")
