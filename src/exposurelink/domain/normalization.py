"""Normalization helpers shared by the factor scorers.

All helpers are total: ``None`` or junk input yields an empty string (or
``None`` for numeric parsers) rather than raising, because missing data is a
scoring outcome, not an error.
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from datetime import date

_NON_LETTERS = re.compile(r"[^a-z\s]")
_NON_DIGITS = re.compile(r"\D")
_NON_ALNUM = re.compile(r"[^A-Z0-9]")
_FIRST_INTEGER = re.compile(r"\d+")
_MAX_AGE_DIGITS: Final = 3

PHONE_DIGITS: Final[int] = 10

STATE_ABBREVIATIONS: Final[dict[str, str]] = {
    "alabama": "AL",
    "alaska": "AK",
    "arizona": "AZ",
    "arkansas": "AR",
    "california": "CA",
    "colorado": "CO",
    "connecticut": "CT",
    "delaware": "DE",
    "florida": "FL",
    "georgia": "GA",
    "hawaii": "HI",
    "idaho": "ID",
    "illinois": "IL",
    "indiana": "IN",
    "iowa": "IA",
    "kansas": "KS",
    "kentucky": "KY",
    "louisiana": "LA",
    "maine": "ME",
    "maryland": "MD",
    "massachusetts": "MA",
    "michigan": "MI",
    "minnesota": "MN",
    "mississippi": "MS",
    "missouri": "MO",
    "montana": "MT",
    "nebraska": "NE",
    "nevada": "NV",
    "new hampshire": "NH",
    "new jersey": "NJ",
    "new mexico": "NM",
    "new york": "NY",
    "north carolina": "NC",
    "north dakota": "ND",
    "ohio": "OH",
    "oklahoma": "OK",
    "oregon": "OR",
    "pennsylvania": "PA",
    "rhode island": "RI",
    "south carolina": "SC",
    "south dakota": "SD",
    "tennessee": "TN",
    "texas": "TX",
    "utah": "UT",
    "vermont": "VT",
    "virginia": "VA",
    "washington": "WA",
    "west virginia": "WV",
    "wisconsin": "WI",
    "wyoming": "WY",
    "district of columbia": "DC",
}


def normalize_name(value: str | None) -> str:
    """Lowercase, drop everything but letters and spaces, collapse whitespace."""

    if not value:
        return ""
    return " ".join(_NON_LETTERS.sub("", value.lower()).split())


def name_tokens(normalized: str) -> tuple[str, str]:
    """Return ``(first, last)`` tokens of an already-normalized name."""

    parts = normalized.split()
    if not parts:
        return "", ""
    return parts[0], parts[-1]


def normalize_city(value: str | None) -> str:
    return normalize_name(value)


def normalize_state(value: str | None) -> str:
    if not value:
        return ""
    cleaned = " ".join(value.lower().split())
    if len(cleaned) == 2:
        return cleaned.upper()
    return STATE_ABBREVIATIONS.get(cleaned, cleaned.upper())


def normalize_phone(value: str | None) -> str:
    """Keep the trailing ten digits so country prefixes do not block a match."""

    if not value:
        return ""
    return _NON_DIGITS.sub("", value)[-PHONE_DIGITS:]


def normalize_email(value: str | None) -> str:
    if not value:
        return ""
    return value.strip().lower()


def normalize_source_key(value: str | None) -> str:
    if not value:
        return ""
    return _NON_ALNUM.sub("", value.upper())


def parse_age(value: int | float | str | None) -> int | None:
    """Return a usable age, or ``None`` when the value carries no plausible integer."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, int | float):
        return int(value) if value >= 0 else None
    match = _FIRST_INTEGER.search(value)
    if match is None or len(match.group()) > _MAX_AGE_DIGITS:
        return None
    return int(match.group())


def age_on(date_of_birth: date, today: date) -> int:
    """Whole years elapsed, not counting a birthday that has not happened yet."""

    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def mask_phone(phone: str) -> str:
    if len(phone) <= 4:
        return "****"
    return "*" * (len(phone) - 4) + phone[-4:]


def mask_email(email: str) -> str:
    local, _, domain = email.partition("@")
    if not domain:
        return "****"
    if len(local) <= 2:
        masked_local = "*" * len(local)
    else:
        masked_local = local[0] + "*" * (len(local) - 2) + local[-1]
    return f"{masked_local}@{domain}"
