# src/taskpad/tasks/task_store.py

from __future__ import annotations

import json
import logging
from typing import Any

from ..core.errors import StorageReadError, StorageWriteError, ValidationError
from ..core.ports import KeyValueStorage
from .task_ids import TaskIdFactory
from .task_models import Priority, Task

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "tasks"


def clean_text(text: str | None) -> str:
    """Trim task text; raise ValidationError if nothing is left."""
    value = (text or "").strip()
    if not value:
        raise ValidationError("task text must not be empty")
    return value


def encode_tasks(tasks: list[Task]) -> str:
    return json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)


def decode_tasks(raw: str) -> list[Task]:
    """
    Decode the persisted JSON array.

    Raises json.JSONDecodeError on invalid JSON. Bad entries are skipped,
    and a repeated id keeps only its first entry.
    """
    data: Any = json.loads(raw)
    if not isinstance(data, list):
        logger.warning("Stored tasks are not a JSON array (got %s); ignoring.", type(data).__name__)
        return []

    out: list[Task] = []
    seen: set[int] = set()
    for entry in data:
        if not isinstance(entry, dict):
            logger.warning("Skipping non-object task entry: %r", entry)
            continue
        try:
            task = Task.from_dict(entry)
        except ValueError as e:
            logger.warning("Skipping invalid task entry: %s", e)
            continue
        if task.id in seen:
            logger.warning("Skipping duplicate task id=%s", task.id)
            continue
        seen.add(task.id)
        out.append(task)
    return out


class TaskStore:
    """
    In-memory task collection persisted to one storage slot.

    Every successful mutation saves the whole collection immediately.
    Storage failures never propagate: a failed load starts empty, a failed
    save is logged and the in-memory state is kept.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        id_factory: TaskIdFactory | None = None,
        default_priority: Priority = Priority.LOW,
    ) -> None:
        self._storage = storage
        self._key = key
        self._ids = id_factory or TaskIdFactory()
        self._default_priority = default_priority
        self._tasks: list[Task] = []

    # ---- read access ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def count(self) -> int:
        return len(self._tasks)

    @property
    def default_priority(self) -> Priority:
        return self._default_priority

    def get(self, task_id: int) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    # ---- persistence ----

    def load(self) -> list[Task]:
        """Replace the in-memory collection with the persisted one."""
        tasks: list[Task] = []
        try:
            raw = self._storage.get_item(self._key)
            if raw:
                tasks = decode_tasks(raw)
        except (StorageReadError, json.JSONDecodeError):
            logger.exception("Error loading tasks from storage key=%s; starting empty.", self._key)
            tasks = []

        self._tasks = tasks
        for t in tasks:
            self._ids.observe(t.id)
        logger.info("TaskStore loaded key=%s total=%d", self._key, len(tasks))
        return list(tasks)

    def save(self) -> bool:
        try:
            self._storage.set_item(self._key, encode_tasks(self._tasks))
        except StorageWriteError:
            logger.exception("Error saving tasks to storage key=%s", self._key)
            return False
        return True

    # ---- mutations ----

    def add(
        self,
        text: str,
        due_date: str = "",
        priority: Priority | str | None = None,
    ) -> Task | None:
        try:
            value = clean_text(text)
        except ValidationError:
            logger.debug("Ignoring add with blank text.")
            return None

        task = Task(
            id=self._ids.next_id(),
            text=value,
            completed=False,
            due_date=(due_date or "").strip(),
            priority=self._priority(priority),
        )
        self._tasks.append(task)
        self.save()
        logger.debug("Task added id=%s priority=%s due=%s", task.id, task.priority, task.due_date)
        return task

    def toggle(self, task_id: int) -> Task | None:
        task = self.get(task_id)
        if task is None:
            logger.debug("Ignoring toggle of unknown task id=%s", task_id)
            return None
        task.completed = not task.completed
        self.save()
        return task

    def edit(
        self,
        task_id: int,
        text: str,
        due_date: str = "",
        priority: Priority | str | None = None,
    ) -> Task | None:
        try:
            value = clean_text(text)
        except ValidationError:
            logger.debug("Ignoring edit of id=%s with blank text.", task_id)
            return None

        task = self.get(task_id)
        if task is None:
            logger.debug("Ignoring edit of unknown task id=%s", task_id)
            return None

        task.text = value
        task.due_date = (due_date or "").strip()
        task.priority = self._priority(priority)
        self.save()
        return task

    def delete(self, task_id: int) -> bool:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        if len(self._tasks) == before:
            return False
        self.save()
        return True

    def _priority(self, raw: Priority | str | None) -> Priority:
        if raw is None or raw == "":
            return self._default_priority
        return Priority.from_raw(raw)
