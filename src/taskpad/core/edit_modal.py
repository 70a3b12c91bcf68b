# src/taskpad/core/edit_modal.py

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..tasks.task_models import Priority, Task
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EditModal:
    """
    Edit dialog bound to at most one task.

    Closed: task_id is None. Open: task_id names the task being edited and
    text/due_date/priority hold the draft values.
    """

    task_id: int | None = None
    text: str = ""
    due_date: str = ""
    priority: Priority = Priority.LOW

    @property
    def is_open(self) -> bool:
        return self.task_id is not None

    def open(self, task: Task) -> None:
        self.task_id = task.id
        self.text = task.text
        self.due_date = task.due_date or ""
        self.priority = task.priority or Priority.LOW
        logger.debug("Edit modal opened for task id=%s", task.id)

    def update(
        self,
        *,
        text: str | None = None,
        due_date: str | None = None,
        priority: Priority | str | None = None,
    ) -> bool:
        """Change draft fields. Returns False (and changes nothing) while closed."""
        if not self.is_open:
            return False
        new_priority = Priority(priority) if priority is not None else self.priority
        if text is not None:
            self.text = text
        if due_date is not None:
            self.due_date = due_date.strip()
        self.priority = new_priority
        return True

    def save(self, store: TaskStore) -> Task | None:
        """
        Write the draft through store.edit and close.

        Blank text leaves the modal open with the draft untouched.
        """
        if self.task_id is None or not self.text.strip():
            return None

        task = store.edit(self.task_id, self.text, self.due_date, self.priority)
        self.close()
        return task

    def close(self) -> None:
        self.task_id = None
        self.text = ""
        self.due_date = ""
        self.priority = Priority.LOW
