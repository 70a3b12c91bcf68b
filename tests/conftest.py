# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.core.controller import Controller
from taskpad.core.state import AppState
from taskpad.tasks.task_ids import TaskIdFactory
from taskpad.tasks.task_store import TaskStore

from .fakes import FakeClock, MemoryStorage

TODAY = date(2026, 10, 19)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI commands.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskpad",
        log_level="INFO",
        log_to_file=False,
        data_dir=tmp_path,
        storage_path=tmp_path / "local_storage.json",
        storage_key="tasks",
        default_priority="low",
        default_filter="all",
        progress_bar_width=10,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def store(storage: MemoryStorage, clock: FakeClock) -> TaskStore:
    return TaskStore(storage, id_factory=TaskIdFactory(clock=clock))


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """
    AppState wired with the in-memory storage fake.

    The real TaskStore is used because its behaviour is what the
    controller tests are about.
    """
    return AppState(settings=settings, task_store=store)


@pytest.fixture()
def controller(state: AppState) -> Controller:
    ctl = Controller(state, today=lambda: TODAY)
    ctl.start()
    return ctl
