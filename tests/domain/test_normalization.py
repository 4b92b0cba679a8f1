from __future__ import annotations

from datetime import date

import pytest

from exposurelink.domain.normalization import (
    age_on,
    mask_email,
    mask_phone,
    name_tokens,
    normalize_email,
    normalize_name,
    normalize_phone,
    normalize_source_key,
    normalize_state,
    parse_age,
)


def test_normalize_name_strips_punctuation_and_whitespace() -> None:
    assert normalize_name("  John   O'Neil-Smith Jr. ") == "john oneilsmith jr"
    assert normalize_name(None) == ""


def test_name_tokens_use_first_and_last_word() -> None:
    assert name_tokens("john michael smith") == ("john", "smith")
    assert name_tokens("cher") == ("cher", "cher")
    assert name_tokens("") == ("", "")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("TX", "TX"), ("tx", "TX"), ("Texas", "TX"), (" new  york ", "NY"), ("Ontario", "ONTARIO")],
)
def test_normalize_state(raw: str, expected: str) -> None:
    assert normalize_state(raw) == expected


def test_normalize_phone_keeps_trailing_ten_digits() -> None:
    assert normalize_phone("+1 (512) 555-0147") == "5125550147"
    assert normalize_phone("555-0147") == "5550147"
    assert normalize_phone("") == ""


def test_normalize_email_and_source_key() -> None:
    assert normalize_email("  John.Smith@Example.COM ") == "john.smith@example.com"
    assert normalize_source_key("neighbor-who.com") == "NEIGHBORWHOCOM"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (44, 44),
        (44.7, 44),
        ("44", 44),
        ("Age 44", 44),
        ("44 years old", 44),
        ("unknown", None),
        (-3, None),
        (float("inf"), None),
        (float("nan"), None),
        ("9" * 5000, None),
        ("Age 1234", None),
        (True, None),
        (None, None),
    ],
)
def test_parse_age(raw: int | float | str | None, expected: int | None) -> None:
    assert parse_age(raw) == expected


def test_age_on_counts_only_completed_birthdays() -> None:
    dob = date(1980, 10, 2)

    assert age_on(dob, date(2024, 10, 1)) == 43
    assert age_on(dob, date(2024, 10, 2)) == 44


def test_masking_keeps_only_a_hint() -> None:
    assert mask_phone("5125550147") == "******0147"
    assert mask_email("john.smith@example.com") == "j********h@example.com"
    assert mask_email("jo@example.com") == "**@example.com"
