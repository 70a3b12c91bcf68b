# src/taskpad/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def from_raw(cls, raw: Any) -> Priority:
        """Lenient parse used when decoding stored data (unknown -> LOW)."""
        if not raw:
            return cls.LOW
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            return cls.LOW


class TaskFilter(StrEnum):
    """Which subset of the collection the list view shows."""

    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"

    def matches(self, task: Task) -> bool:
        if self is TaskFilter.COMPLETED:
            return task.completed
        if self is TaskFilter.PENDING:
            return not task.completed
        return True


@dataclass(slots=True)
class Task:
    id: int
    text: str
    completed: bool = False
    # "" means no due date; otherwise an ISO-8601 date-time string ("2026-10-20T18:00").
    due_date: str = ""
    priority: Priority = Priority.LOW

    def to_dict(self) -> dict[str, Any]:
        # Keys match the persisted JSON layout.
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "dueDate": self.due_date,
            "priority": self.priority.value,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        """
        Build a Task from a decoded JSON object.

        Raises ValueError if the entry has no usable id or no text.
        """
        tid = raw.get("id")
        if isinstance(tid, bool) or not isinstance(tid, (int, float, str)):
            raise ValueError(f"bad task id: {tid!r}")
        if isinstance(tid, float) and not tid.is_integer():
            raise ValueError(f"bad task id: {tid!r}")
        try:
            task_id = int(tid)
        except (ValueError, OverflowError):
            raise ValueError(f"bad task id: {tid!r}") from None

        text = str(raw.get("text") or "").strip()
        if not text:
            raise ValueError(f"task {task_id} has no text")

        due = raw.get("dueDate")
        return cls(
            id=task_id,
            text=text,
            # Only a JSON true counts; "false" or 1 must not flip a task to done.
            completed=raw.get("completed") is True,
            due_date=due if isinstance(due, str) else "",
            priority=Priority.from_raw(raw.get("priority")),
        )
