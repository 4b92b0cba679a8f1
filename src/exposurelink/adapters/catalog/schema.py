"""Minimal Pydantic models for the catalog directory document."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from exposurelink.domain.model import RemovalMethod, SourceCategory  # noqa: TC001


class CatalogBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class CatalogSourceEntry(CatalogBaseModel):
    key: str = Field(min_length=1)
    name: str = Field(min_length=1)
    category: SourceCategory
    parent: str | None = None
    opt_out_url: str | None = None
    privacy_email: str | None = None
    removal_method: RemovalMethod = RemovalMethod.FORM


class CategoryRuleEntry(CatalogBaseModel):
    source: SourceCategory
    target: SourceCategory
    weight: float = Field(gt=0, le=1)


class CatalogDocument(CatalogBaseModel):
    version: int = 1
    sources: list[CatalogSourceEntry] = Field(default_factory=list)
    category_rules: list[CategoryRuleEntry] = Field(default_factory=list)
    excluded: list[str] = Field(default_factory=list)
    high_severity: list[str] = Field(default_factory=list)
