# src/taskpad/view/text_view.py

from __future__ import annotations

import math

from ..core.edit_modal import EditModal
from ..tasks.task_models import Priority, TaskFilter
from .renderer import Progress, TaskListView, TaskRow

PRIORITY_TAGS: dict[Priority, str] = {
    Priority.LOW: "[low ]",
    Priority.MEDIUM: "[med ]",
    Priority.HIGH: "[HIGH]",
}


def format_progress(progress: Progress, *, bar_width: int = 20) -> str:
    # Half-up, like Progress.rounded, so the bar and the number agree.
    filled = int(math.floor(bar_width * progress.percent / 100 + 0.5))
    filled = max(0, min(bar_width, filled))
    bar = "#" * filled + "-" * (bar_width - filled)
    return f"[{bar}] {progress.rounded}% Complete"


def format_filters(active: TaskFilter) -> str:
    parts = []
    for f in TaskFilter:
        parts.append(f"<{f.value}>" if f is active else f" {f.value} ")
    return "Filter: " + " ".join(parts)


def format_row(row: TaskRow) -> str:
    box = "[x]" if row.completed else "[ ]"
    line = f"{row.position:>3}. {box} {PRIORITY_TAGS[row.priority]} {row.text}"
    if row.due_label:
        line += f"  ({row.due_label})"
    return line


def format_view(view: TaskListView, *, bar_width: int = 20, title: str = "taskpad") -> str:
    lines = [
        f"{title} | {view.date_line}",
        format_filters(view.active_filter),
        "",
    ]
    if view.empty_message is not None:
        lines.append(f"  {view.empty_message}")
    else:
        lines.extend(format_row(r) for r in view.rows)
    lines.append("")
    lines.append(format_progress(view.progress, bar_width=bar_width))
    return "\n".join(lines)


def format_modal(modal: EditModal) -> str:
    if not modal.is_open:
        return "Edit dialog is closed."
    return (
        f"Editing task {modal.task_id}:\n"
        f"  text:     {modal.text}\n"
        f"  due:      {modal.due_date or '-'}\n"
        f"  priority: {modal.priority.value}\n"
        "Use /set text|due|priority <value>, then /save. /close or /cancel discards."
    )
