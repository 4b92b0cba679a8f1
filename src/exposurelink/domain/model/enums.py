"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class MatchClassification(StrEnum):
    CONFIRMED = "CONFIRMED"
    LIKELY = "LIKELY"
    POSSIBLE = "POSSIBLE"
    UNLIKELY = "UNLIKELY"
    REJECTED = "REJECTED"

    # Inferred from a related catalog, never scored directly:
    PROJECTED = "PROJECTED"


class SourceCategory(StrEnum):
    """Fixed catalog taxonomy used by the relationship graph."""

    PEOPLE_SEARCH = "PEOPLE_SEARCH"
    PHONE_LOOKUP = "PHONE_LOOKUP"
    BACKGROUND_CHECK = "BACKGROUND_CHECK"
    PROPERTY_RECORDS = "PROPERTY_RECORDS"
    COURT_RECORDS = "COURT_RECORDS"
    EMAIL_IDENTITY = "EMAIL_IDENTITY"
    PROFESSIONAL_B2B = "PROFESSIONAL_B2B"
    MARKETING = "MARKETING"
    DATING_RELATIONSHIP = "DATING_RELATIONSHIP"
    FINANCIAL = "FINANCIAL"
    VEHICLE_DRIVING = "VEHICLE_DRIVING"
    GENEALOGY = "GENEALOGY"
    INTERNATIONAL = "INTERNATIONAL"
    EDUCATIONAL = "EDUCATIONAL"
    HEALTHCARE = "HEALTHCARE"
    LOCATION_TRACKING = "LOCATION_TRACKING"
    INSURANCE_RISK = "INSURANCE_RISK"
    IDENTITY_GRAPHS = "IDENTITY_GRAPHS"
    TENANT_SCREENING = "TENANT_SCREENING"
    EMPLOYMENT_HR = "EMPLOYMENT_HR"
    DATA_ENRICHMENT = "DATA_ENRICHMENT"

    # Not third-party brokers; never projection targets:
    SOCIAL_MEDIA = "SOCIAL_MEDIA"
    BREACH_DATABASE = "BREACH_DATABASE"
    DARK_WEB = "DARK_WEB"
    AI_SERVICE = "AI_SERVICE"
    DIRECT_RELATIONSHIP = "DIRECT_RELATIONSHIP"
    GRAY_AREA = "GRAY_AREA"
    SERVICE_PROVIDER = "SERVICE_PROVIDER"
    COVERAGE_PLACEHOLDER = "COVERAGE_PLACEHOLDER"


class RemovalMethod(StrEnum):
    FORM = "FORM"
    EMAIL = "EMAIL"
    BOTH = "BOTH"
    MONITOR = "MONITOR"
    NOT_REMOVABLE = "NOT_REMOVABLE"


class Severity(StrEnum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class ExposedField(StrEnum):
    NAME = "name"
    PHONE = "phone"
    ADDRESS = "address"
    AGE = "age"
    RELATIVES = "relatives"
    EMAIL = "email"
