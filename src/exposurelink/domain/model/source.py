"""Catalog directory entries and category projection rules."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import RemovalMethod, SourceCategory


@dataclass(frozen=True, slots=True, kw_only=True)
class Source:
    """One catalog where personal data may appear.

    Removal metadata (``opt_out_url``, ``privacy_email``, ``removal_method``)
    is opaque to scoring; projection only reads it to decide whether a target
    can be acted upon at all.
    """

    key: str
    name: str
    category: SourceCategory
    parent: str | None = None
    opt_out_url: str | None = None
    privacy_email: str | None = None
    removal_method: RemovalMethod = RemovalMethod.FORM

    @property
    def contact(self) -> str | None:
        if self.opt_out_url:
            return self.opt_out_url
        if self.privacy_email:
            return f"mailto:{self.privacy_email}"
        return None


@dataclass(frozen=True, slots=True, kw_only=True)
class CategoryProjectionRule:
    source_category: SourceCategory
    target_category: SourceCategory
    weight: float

    def __post_init__(self) -> None:
        if not 0 < self.weight <= 1:
            raise ValueError(
                f"Projection weight must be within (0, 1], got {self.weight} "
                f"for {self.source_category} -> {self.target_category}"
            )
