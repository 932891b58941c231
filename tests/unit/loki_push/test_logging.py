"""Tests for structlog-based logging configuration."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterator

import pytest

from loki_push.logging import _resolve_level, configure_logging


pytestmark = pytest.mark.unit_logging


@pytest.fixture
def restore_root_logger(monkeypatch: pytest.MonkeyPatch) -> Iterator[logging.Logger]:
    for name in ("LOKI_PUSH_LOG_LEVEL", "LOKI_PUSH_LOG_JSON", "LOKI_PUSH_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.mark.parametrize(
    ("value", "debug", "expected"),
    [
        (None, False, logging.INFO),
        (None, True, logging.DEBUG),
        ("warning", False, logging.WARNING),
        ("10", False, logging.DEBUG),
        (logging.ERROR, False, logging.ERROR),
        ("bogus", False, logging.INFO),
    ],
)
def test_resolve_level(value: str | int | None, debug: bool, expected: int) -> None:
    assert _resolve_level(value, debug) == expected


def test_configure_logging_writes_json_file(
    tmp_path: Path, restore_root_logger: logging.Logger
) -> None:
    log_file = tmp_path / "push.log"

    configure_logging(level="DEBUG", log_file=str(log_file), json=True, force=True)
    logging.getLogger("loki_push.sender").debug("pushed %d entries", 3)
    for handler in restore_root_logger.handlers:
        handler.flush()

    line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["event"] == "pushed 3 entries"
    assert payload["level"] == "debug"
    assert "timestamp" in payload
    assert restore_root_logger.level == logging.DEBUG


def test_configure_logging_respects_env(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    restore_root_logger: logging.Logger,
) -> None:
    monkeypatch.setenv("LOKI_PUSH_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("LOKI_PUSH_LOG_FILE", str(tmp_path / "env.log"))

    configure_logging(force=True)

    assert restore_root_logger.level == logging.ERROR
    assert any(
        isinstance(handler, logging.FileHandler)
        for handler in restore_root_logger.handlers
    )
