# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_models import Priority, TaskFilter
from ..tasks.task_store import TaskStore
from .edit_modal import EditModal


@dataclass(slots=True)
class TaskForm:
    """Draft values of the "add task" form."""

    text: str = ""
    due_date: str = ""
    priority: Priority = Priority.LOW

    def reset(self, priority: Priority = Priority.LOW) -> None:
        self.text = ""
        self.due_date = ""
        self.priority = priority


@dataclass
class AppState:
    # Settings are kept on the state so commands can read them without globals.
    settings: Any

    task_store: TaskStore

    current_filter: TaskFilter = TaskFilter.ALL
    edit_modal: EditModal = field(default_factory=EditModal)
    form: TaskForm = field(default_factory=TaskForm)
