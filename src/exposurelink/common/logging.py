"""Logging setup for exposurelink.

Log lines may name catalogs and scores but never raw identifiers. The
``RedactingFilter`` installed on the root handlers masks anything shaped like
an email address or phone number before it is emitted.
"""

from __future__ import annotations

import logging
import re
from typing import Final

from exposurelink.config import InvalidConfigurationError, optional_env_str

LOG_LEVEL_ENV: Final[str] = "EXPOSURELINK_LOG_LEVEL"

_EMAIL = re.compile(r"[\w.+-]+@[\w-]+\.[\w.-]+")
_PHONE = re.compile(r"\+?\(?\d[\d\s().-]{8,}\d")


class RedactingFilter(logging.Filter):
    """Replace email- and phone-shaped substrings in the rendered message."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _PHONE.sub("[phone]", _EMAIL.sub("[email]", message))
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def resolve_log_level(default: int = logging.INFO) -> int:
    """Return the level named by ``EXPOSURELINK_LOG_LEVEL`` or ``default``."""

    value = optional_env_str(LOG_LEVEL_ENV)
    if value is None:
        return default
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise InvalidConfigurationError(f"{LOG_LEVEL_ENV} is not a log level: {value!r}")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once and attach the redacting filter.

    ``level`` defaults to ``EXPOSURELINK_LOG_LEVEL`` (INFO when unset). Pass
    ``force=True`` to reconfigure during tests or specialised entry points.
    """

    logging.basicConfig(
        level=level if level is not None else resolve_log_level(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    for handler in logging.getLogger().handlers:
        if not any(isinstance(existing, RedactingFilter) for existing in handler.filters):
            handler.addFilter(RedactingFilter())
