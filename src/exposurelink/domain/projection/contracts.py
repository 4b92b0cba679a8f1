"""Value types exchanged with the projection engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from exposurelink.domain.model import ExposedField, SourceCategory

if TYPE_CHECKING:
    from exposurelink.domain.model import ConfidenceResult, Severity


@dataclass(frozen=True, slots=True)
class ScoredObservation:
    """A validator result paired with the catalog it was observed on."""

    source_key: str
    result: ConfidenceResult


@dataclass(frozen=True, slots=True, kw_only=True)
class ProjectedExposure:
    """Probable exposure on a catalog that was never fetched."""

    source_key: str
    source_name: str
    contact: str
    severity: Severity
    exposed_fields: tuple[ExposedField, ...]
    data_preview: str
    confidence: ConfidenceResult

    @property
    def origin_key(self) -> str | None:
        return self.confidence.factors.projection_source


@dataclass(slots=True)
class ProjectionStats:
    qualifying_sources: int = 0
    projected_count: int = 0
    skipped_excluded: int = 0
    skipped_duplicate: int = 0
    skipped_low_score: int = 0


_PEOPLE_SEARCH_FIELDS = (
    ExposedField.NAME,
    ExposedField.PHONE,
    ExposedField.ADDRESS,
    ExposedField.AGE,
    ExposedField.RELATIVES,
)

CATEGORY_EXPOSED_FIELDS: Final[dict[SourceCategory, tuple[ExposedField, ...]]] = {
    SourceCategory.PEOPLE_SEARCH: _PEOPLE_SEARCH_FIELDS,
    SourceCategory.PHONE_LOOKUP: (ExposedField.NAME, ExposedField.PHONE),
    SourceCategory.BACKGROUND_CHECK: (
        ExposedField.NAME,
        ExposedField.ADDRESS,
        ExposedField.PHONE,
        ExposedField.EMAIL,
    ),
    SourceCategory.PROPERTY_RECORDS: (ExposedField.NAME, ExposedField.ADDRESS),
    SourceCategory.COURT_RECORDS: (ExposedField.NAME, ExposedField.ADDRESS),
    SourceCategory.EMAIL_IDENTITY: (ExposedField.NAME, ExposedField.EMAIL),
    SourceCategory.PROFESSIONAL_B2B: (ExposedField.NAME, ExposedField.EMAIL, ExposedField.PHONE),
    SourceCategory.MARKETING: (ExposedField.NAME, ExposedField.EMAIL, ExposedField.ADDRESS),
}
DEFAULT_EXPOSED_FIELDS: Final[tuple[ExposedField, ...]] = (ExposedField.NAME,)


def exposed_fields_for(category: SourceCategory | None) -> tuple[ExposedField, ...]:
    if category is None:
        return DEFAULT_EXPOSED_FIELDS
    return CATEGORY_EXPOSED_FIELDS.get(category, DEFAULT_EXPOSED_FIELDS)
