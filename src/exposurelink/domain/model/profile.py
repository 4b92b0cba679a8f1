"""Inputs supplied by collaborators: the reference profile and scraped records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date


@dataclass(frozen=True, slots=True, kw_only=True)
class Address:
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ReferenceProfile:
    """Normalized description of the person whose exposure is being checked.

    Collaborators build one profile per scan and never mutate it; ``addresses``
    keeps the caller's order while the identifier collections are sets.
    """

    full_name: str
    aliases: frozenset[str] = field(default_factory=frozenset)
    addresses: tuple[Address, ...] = ()
    date_of_birth: date | None = None
    phones: frozenset[str] = field(default_factory=frozenset)
    emails: frozenset[str] = field(default_factory=frozenset)
    usernames: frozenset[str] = field(default_factory=frozenset)

    @property
    def has_address(self) -> bool:
        return bool(self.addresses)


@dataclass(frozen=True, slots=True, kw_only=True)
class ExtractedRecord:
    """Partial data observed at one catalog for a candidate match.

    Every field is optional; ``age`` may be numeric or free text such as
    ``"Age 44"``.
    """

    name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    city: str | None = None
    state: str | None = None
    age: int | float | str | None = None
    phones: tuple[str, ...] = ()
    emails: tuple[str, ...] = ()

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        parts = [part for part in (self.first_name, self.last_name) if part]
        return " ".join(parts) or "unknown"
