# src/taskpad/core/controller.py

"""
Event dispatch for the task list.

Every UI action is an Event routed through one dispatch table. A handler
mutates AppState (through TaskStore / EditModal), then the controller
re-renders and passes the fresh view to the on_render callback.
Handlers run to completion before the next event is dispatched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from enum import StrEnum
from typing import Any

from ..tasks.task_models import Priority, TaskFilter
from ..view.renderer import TaskListView, render_view
from .state import AppState

logger = logging.getLogger(__name__)

RenderCallback = Callable[[TaskListView], None]
EventHandler = Callable[[AppState, dict[str, Any]], None]


class Event(StrEnum):
    SUBMIT_TASK = "submit_task"
    TOGGLE_TASK = "toggle_task"
    DELETE_TASK = "delete_task"
    OPEN_EDIT = "open_edit"
    UPDATE_EDIT = "update_edit"
    SAVE_EDIT = "save_edit"
    CLOSE_EDIT = "close_edit"
    CLICK_OUTSIDE = "click_outside"
    SET_FILTER = "set_filter"
    RENDER = "render"


def on_submit_task(state: AppState, payload: dict[str, Any]) -> None:
    raw_priority = payload.get("priority")
    priority = Priority(raw_priority) if raw_priority else state.task_store.default_priority

    form = state.form
    form.text = str(payload.get("text", ""))
    form.due_date = str(payload.get("due_date") or "")
    form.priority = priority

    task = state.task_store.add(form.text, form.due_date, form.priority)
    if task is not None:
        # Blank input keeps the draft, like a form that refuses to clear.
        form.reset(state.task_store.default_priority)


def on_toggle_task(state: AppState, payload: dict[str, Any]) -> None:
    state.task_store.toggle(int(payload["task_id"]))


def on_delete_task(state: AppState, payload: dict[str, Any]) -> None:
    task_id = int(payload["task_id"])
    state.task_store.delete(task_id)
    if state.edit_modal.task_id == task_id:
        state.edit_modal.close()


def on_open_edit(state: AppState, payload: dict[str, Any]) -> None:
    task = state.task_store.get(int(payload["task_id"]))
    if task is None:
        return
    state.edit_modal.open(task)


def on_update_edit(state: AppState, payload: dict[str, Any]) -> None:
    state.edit_modal.update(
        text=payload.get("text"),
        due_date=payload.get("due_date"),
        priority=payload.get("priority"),
    )


def on_save_edit(state: AppState, payload: dict[str, Any]) -> None:
    state.edit_modal.save(state.task_store)


def on_close_edit(state: AppState, payload: dict[str, Any]) -> None:
    state.edit_modal.close()


def on_set_filter(state: AppState, payload: dict[str, Any]) -> None:
    state.current_filter = TaskFilter(payload["filter"])


def on_render(state: AppState, payload: dict[str, Any]) -> None:
    return


HANDLERS: dict[Event, EventHandler] = {
    Event.SUBMIT_TASK: on_submit_task,
    Event.TOGGLE_TASK: on_toggle_task,
    Event.DELETE_TASK: on_delete_task,
    Event.OPEN_EDIT: on_open_edit,
    Event.UPDATE_EDIT: on_update_edit,
    Event.SAVE_EDIT: on_save_edit,
    Event.CLOSE_EDIT: on_close_edit,
    # Clicking the backdrop discards the draft exactly like the close control.
    Event.CLICK_OUTSIDE: on_close_edit,
    Event.SET_FILTER: on_set_filter,
    Event.RENDER: on_render,
}


class Controller:
    def __init__(
        self,
        state: AppState,
        *,
        on_render: RenderCallback | None = None,
        today: Callable[[], date] | None = None,
    ) -> None:
        self.state = state
        self._on_render = on_render
        self._today = today or date.today
        self._handlers: dict[Event, EventHandler] = dict(HANDLERS)
        self.view: TaskListView | None = None

    def start(self) -> TaskListView:
        """Load persisted tasks, then render for the first time."""
        self.state.task_store.load()
        return self.render()

    def dispatch(self, event: Event | str, **payload: Any) -> TaskListView:
        """
        Apply one event and re-render.

        Raises ValueError for an unknown event or an invalid payload value
        (e.g. an unknown filter or priority); the state is left unchanged then.
        """
        kind = Event(event)
        handler = self._handlers[kind]
        logger.debug("Dispatch %s payload=%s", kind.value, payload)
        handler(self.state, payload)
        return self.render()

    def render(self) -> TaskListView:
        self.view = render_view(
            self.state.task_store.tasks,
            self.state.current_filter,
            today=self._today(),
        )
        if self._on_render is not None:
            self._on_render(self.view)
        return self.view
