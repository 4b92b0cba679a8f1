from __future__ import annotations

import logging
from collections.abc import Iterator  # noqa: TC003

import pytest

from exposurelink.common.logging import RedactingFilter, configure_logging, resolve_log_level
from exposurelink.config import InvalidConfigurationError


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = list(root.handlers)
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in previous_handlers:
        root.addHandler(handler)
    root.setLevel(previous_level)


def _record(msg: str, *args: object) -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, msg, args, None)


def test_configure_logging_installs_redaction(
    restore_root_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("EXPOSURELINK_LOG_LEVEL", raising=False)

    configure_logging(force=True)

    assert restore_root_logger.level == logging.INFO
    assert restore_root_logger.handlers
    handler = restore_root_logger.handlers[0]
    assert any(isinstance(existing, RedactingFilter) for existing in handler.filters)


def test_level_can_come_from_env(
    restore_root_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("EXPOSURELINK_LOG_LEVEL", "debug")

    configure_logging(force=True)

    assert restore_root_logger.level == logging.DEBUG


def test_unknown_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXPOSURELINK_LOG_LEVEL", "chatty")

    with pytest.raises(InvalidConfigurationError, match="EXPOSURELINK_LOG_LEVEL"):
        resolve_log_level()


def test_redacting_filter_masks_identifiers() -> None:
    record = _record(
        "match for %s at %s on %s", "john.smith@example.com", "(512) 555-0147", "SPOKEO"
    )

    assert RedactingFilter().filter(record)
    assert record.getMessage() == "match for [email] at [phone] on SPOKEO"


def test_redacting_filter_leaves_scores_alone() -> None:
    record = _record("%s: score %s capped to %s", "SPOKEO", 38, 34)

    RedactingFilter().filter(record)

    assert record.getMessage() == "SPOKEO: score 38 capped to 34"
