# tests/test_logging_setup.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from taskpad.logging_setup import setup_logging


@pytest.fixture()
def restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_file_handler_gets_debug_and_console_filters_noise(
    tmp_path: Path, restore_root_logging: None
) -> None:
    setup_logging(log_dir=tmp_path, console_level=logging.INFO)

    logging.getLogger("taskpad.test").debug("debug line")
    logging.getLogger("somelib").warning("third-party warning")
    for h in logging.getLogger().handlers:
        h.flush()

    content = (tmp_path / "taskpad.log").read_text("utf-8")
    assert "debug line" in content
    assert "third-party warning" in content

    console = [h for h in logging.getLogger().handlers if not isinstance(h, logging.FileHandler)]
    assert len(console) == 1
    record = logging.LogRecord("somelib", logging.WARNING, __file__, 1, "x", None, None)
    assert not console[0].filter(record)
    record = logging.LogRecord("taskpad.core", logging.INFO, __file__, 1, "x", None, None)
    assert console[0].filter(record)


def test_no_file_handler_when_disabled(tmp_path: Path, restore_root_logging: None) -> None:
    setup_logging(log_dir=tmp_path / "logs", log_to_file=False)
    assert not any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)
    assert not (tmp_path / "logs").exists()
