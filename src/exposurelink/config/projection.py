"""Projection engine configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_float, optional_env_int, optional_env_str
from .errors import InvalidConfigurationError

MIN_SOURCE_SCORE_ENV: Final[str] = "EXPOSURELINK_MIN_SOURCE_SCORE"
PROJECTION_MIN_SCORE_ENV: Final[str] = "EXPOSURELINK_PROJECTION_MIN_SCORE"
SUBSIDIARY_WEIGHT_ENV: Final[str] = "EXPOSURELINK_SUBSIDIARY_WEIGHT"
SIBLING_WEIGHT_ENV: Final[str] = "EXPOSURELINK_SIBLING_WEIGHT"
CATALOG_PATH_ENV: Final[str] = "EXPOSURELINK_CATALOG_PATH"


@dataclass(frozen=True, slots=True)
class ProjectionConfig:
    min_source_score: int = 50
    projection_min_score: int = 45
    subsidiary_weight: float = 0.95
    sibling_weight: float = 0.90

    def __post_init__(self) -> None:
        for name in ("min_source_score", "projection_min_score"):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise InvalidConfigurationError(f"{name} must be within [0, 100], got {value}")
        for name in ("subsidiary_weight", "sibling_weight"):
            value = getattr(self, name)
            if not 0 < value <= 1:
                raise InvalidConfigurationError(f"{name} must be within (0, 1], got {value}")


def get_projection_config() -> ProjectionConfig:
    defaults = ProjectionConfig()
    return ProjectionConfig(
        min_source_score=optional_env_int(MIN_SOURCE_SCORE_ENV, defaults.min_source_score),
        projection_min_score=optional_env_int(
            PROJECTION_MIN_SCORE_ENV, defaults.projection_min_score
        ),
        subsidiary_weight=optional_env_float(SUBSIDIARY_WEIGHT_ENV, defaults.subsidiary_weight),
        sibling_weight=optional_env_float(SIBLING_WEIGHT_ENV, defaults.sibling_weight),
    )


def get_catalog_path() -> Path | None:
    """Return an operator-supplied catalog file, if one is configured."""

    value = optional_env_str(CATALOG_PATH_ENV)
    return Path(value).expanduser() if value else None
