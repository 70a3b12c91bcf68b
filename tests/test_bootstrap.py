# tests/test_bootstrap.py

from __future__ import annotations

from types import SimpleNamespace

from taskpad.cli.bootstrap import create_controller, create_initial_state
from taskpad.tasks.task_models import Priority, TaskFilter


def test_bootstrap_wires_file_storage(settings: SimpleNamespace) -> None:
    settings.default_priority = "medium"
    settings.default_filter = "pending"

    state = create_initial_state(settings=settings)
    assert state.current_filter is TaskFilter.PENDING
    assert state.form.priority is Priority.MEDIUM
    assert state.task_store.default_priority is Priority.MEDIUM

    rendered = []
    controller = create_controller(state, on_render=rendered.append)
    assert len(rendered) == 1
    assert controller.view is rendered[0]

    task = state.task_store.add("persisted")
    assert task is not None
    assert settings.storage_path.exists()

    reloaded = create_initial_state(settings=settings)
    create_controller(reloaded)
    assert [t.text for t in reloaded.task_store.tasks] == ["persisted"]
    assert reloaded.task_store.tasks[0].priority is Priority.MEDIUM
