from __future__ import annotations

from .logging import LOG_LEVEL_ENV, RedactingFilter, configure_logging, resolve_log_level

__all__ = ["LOG_LEVEL_ENV", "RedactingFilter", "configure_logging", "resolve_log_level"]
