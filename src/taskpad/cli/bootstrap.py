# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the storage slot, task store and controller together.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.controller import Controller, RenderCallback
from ..core.state import AppState, TaskForm
from ..storage.local_storage import LocalStorage
from ..tasks.task_models import Priority, TaskFilter
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    default_priority = Priority.from_raw(getattr(settings, "default_priority", "low"))
    store = TaskStore(
        LocalStorage(settings.storage_path),
        key=settings.storage_key,
        default_priority=default_priority,
    )
    logger.debug("TaskStore wired to %s key=%s", settings.storage_path, settings.storage_key)

    return AppState(
        settings=settings,
        task_store=store,
        current_filter=TaskFilter(getattr(settings, "default_filter", "all")),
        form=TaskForm(priority=default_priority),
    )


def create_controller(
    state: AppState,
    *,
    on_render: RenderCallback | None = None,
) -> Controller:
    """Build the controller and run the initial load + render."""
    controller = Controller(state, on_render=on_render)
    controller.start()
    return controller
