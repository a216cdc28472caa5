from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
and log file rotation logic.
"""

import logging
from pathlib import Path

import pytest

from wordtally.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
    shutdown_logging,
)
from wordtally.infra.logging.core import _QUEUE_LISTENER_ATTR
from wordtally.infra.logging.handlers import _HANDLER_TAG_ATTR, _is_our_handler


def _our_handlers():
    return [h for h in logging.getLogger().handlers if _is_our_handler(h)]


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach application handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def test_logging_idempotency() -> None:
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    first = _our_handlers()
    configure_logging(cfg)

    assert _our_handlers() == first
    assert len(first) == 1


def test_force_replaces_handlers() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    old_listener = getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR)

    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert len(_our_handlers()) == 1
    assert getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR) is not old_listener
    assert logging.getLogger().level == logging.DEBUG


def test_foreign_handlers_are_preserved() -> None:
    root = logging.getLogger()
    foreign = logging.NullHandler()
    root.addHandler(foreign)
    try:
        configure_logging(LoggingConfig(level="INFO"))
        configure_logging(LoggingConfig(level="INFO"), force=True)
        assert foreign in root.handlers
    finally:
        root.removeHandler(foreign)


def test_handlers_are_tagged() -> None:
    configure_logging(LoggingConfig(level="INFO"))

    for h in _our_handlers():
        assert getattr(h, _HANDLER_TAG_ATTR) is True


def test_file_logging_writes_records(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "run.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    get_logger("wordtally.test").info("counting words")
    shutdown_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "counting words" in content
    assert "wordtally.test" in content


def test_log_rotation(tmp_path: Path) -> None:
    log_file = tmp_path / "rotate.log"
    configure_logging(LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=200,
        backup_count=1,
    ))

    logger = get_logger("wordtally.rotate")
    for _ in range(20):
        logger.debug("A fairly long diagnostic line to force the rotation." * 2)
    shutdown_logging()

    assert log_file.exists()
    assert (tmp_path / "rotate.log.1").exists()


def test_unopenable_log_file_does_not_break_console(tmp_path: Path, capsys) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", encoding="utf-8")

    configure_logging(LoggingConfig(level="INFO", log_file=str(blocker / "run.log")))

    assert len(_our_handlers()) == 1
    assert "Cannot open log file" in capsys.readouterr().err


def test_default_log_path(isolated_home: Path) -> None:
    path = get_default_log_path()

    assert path.startswith(str(isolated_home))
    assert path.endswith("wordtally.log")
