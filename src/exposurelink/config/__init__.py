"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_float, optional_env_int, optional_env_str
from .errors import ConfigurationError, InvalidConfigurationError
from .projection import ProjectionConfig, get_catalog_path, get_projection_config
from .scoring import ScoringConfig, Triage, get_scoring_config

__all__ = [
    "ConfigurationError",
    "InvalidConfigurationError",
    "ProjectionConfig",
    "ScoringConfig",
    "Triage",
    "get_catalog_path",
    "get_projection_config",
    "get_scoring_config",
    "optional_env_float",
    "optional_env_int",
    "optional_env_str",
]
