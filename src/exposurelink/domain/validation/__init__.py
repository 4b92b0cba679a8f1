"""Confidence validation of extracted records against a reference profile."""

from __future__ import annotations

from .factors import (
    FactorScore,
    score_age,
    score_correlation,
    score_location,
    score_name,
    score_source_reliability,
)
from .validator import ProfileValidator

__all__ = [
    "FactorScore",
    "ProfileValidator",
    "score_age",
    "score_correlation",
    "score_location",
    "score_name",
    "score_source_reliability",
]
