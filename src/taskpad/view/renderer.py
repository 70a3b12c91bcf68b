# src/taskpad/view/renderer.py

"""
Pure rendering: (tasks, filter) -> TaskListView.

Nothing here touches storage or prints; text_view.py turns the result
into terminal output.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime

from ..tasks.task_models import Priority, Task, TaskFilter

EMPTY_COLLECTION_MESSAGE = "No tasks yet. Add one to get started!"
EMPTY_FILTER_MESSAGE = "No tasks match the current filter."


@dataclass(frozen=True, slots=True)
class Progress:
    completed: int
    total: int
    percent: float

    @property
    def rounded(self) -> int:
        # Halves round up (2.5 -> 3), unlike Python's banker's round().
        return int(math.floor(self.percent + 0.5))


@dataclass(frozen=True, slots=True)
class TaskRow:
    position: int
    id: int
    text: str
    completed: bool
    priority: Priority
    due_label: str


@dataclass(frozen=True, slots=True)
class TaskListView:
    active_filter: TaskFilter
    rows: tuple[TaskRow, ...]
    empty_message: str | None
    progress: Progress
    date_line: str

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def row_by_position(self, position: int) -> TaskRow | None:
        if 1 <= position <= len(self.rows):
            return self.rows[position - 1]
        return None


def filter_tasks(tasks: Iterable[Task], active_filter: TaskFilter) -> list[Task]:
    return [t for t in tasks if active_filter.matches(t)]


def compute_progress(tasks: Sequence[Task]) -> Progress:
    total = len(tasks)
    completed = sum(1 for t in tasks if t.completed)
    percent = (completed / total) * 100 if total > 0 else 0.0
    return Progress(completed=completed, total=total, percent=percent)


def format_due_date(raw: str) -> str:
    """'2026-10-20T18:00' -> 'Due: Oct 20, 2026 18:00'; empty -> ''."""
    if not raw:
        return ""
    try:
        dt = datetime.fromisoformat(raw)
    except ValueError:
        return f"Due: {raw}"
    if "T" not in raw and " " not in raw.strip():
        return f"Due: {dt:%b} {dt.day}, {dt.year}"
    return f"Due: {dt:%b} {dt.day}, {dt.year} {dt:%H:%M}"


def format_date_line(today: date) -> str:
    """Header date, e.g. 'Monday, October 19, 2026'."""
    return f"{today:%A}, {today:%B} {today.day}, {today.year}"


def render_view(
    tasks: Sequence[Task],
    active_filter: TaskFilter,
    *,
    today: date | None = None,
) -> TaskListView:
    visible = filter_tasks(tasks, active_filter)

    if not tasks:
        empty_message: str | None = EMPTY_COLLECTION_MESSAGE
    elif not visible:
        empty_message = EMPTY_FILTER_MESSAGE
    else:
        empty_message = None

    rows = tuple(
        TaskRow(
            position=i,
            id=t.id,
            text=t.text,
            completed=t.completed,
            priority=t.priority,
            due_label=format_due_date(t.due_date),
        )
        for i, t in enumerate(visible, start=1)
    )

    return TaskListView(
        active_filter=active_filter,
        rows=rows,
        empty_message=empty_message,
        progress=compute_progress(tasks),
        date_line=format_date_line(today or date.today()),
    )
