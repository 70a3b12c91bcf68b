# src/taskpad/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.controller import Controller, Event
from ..tasks.task_models import Priority, TaskFilter
from ..view.renderer import TaskListView
from ..view.text_view import format_modal, format_view

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[Controller, list[str]], str]
CommandHandler3 = Callable[[Controller, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

PRIORITY_VALUES = ", ".join(p.value for p in Priority)
FILTER_VALUES = " | ".join(f.value for f in TaskFilter)


class CommandRegistry:
    """Slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        controller: Controller,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(controller, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(controller, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  Plain text without a leading / adds it as a task.")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- helpers ----

def _show(controller: Controller, view: TaskListView) -> str:
    settings = controller.state.settings
    return format_view(
        view,
        bar_width=int(getattr(settings, "progress_bar_width", 20)),
        title=str(getattr(settings, "app_name", "taskpad")),
    )


def _resolve_ref(controller: Controller, ref: str) -> int | None:
    """
    Map a user reference to a task id.

    Accepts the 1-based position in the current view ("3" or "#3")
    or a full task id.
    """
    raw = ref.lstrip("#")
    if not raw.isdigit():
        return None
    n = int(raw)

    view = controller.view or controller.render()
    row = view.row_by_position(n)
    if row is not None:
        return row.id
    if controller.state.task_store.get(n) is not None:
        return n
    return None


def parse_add_args(args: list[str]) -> tuple[str, str, str | None]:
    """
    Split "/add" arguments into (text, due_date, priority).

    Flags: --due <datetime>, --priority/-p <low|medium|high>.
    Raises ValueError on a flag without a value.
    """
    words: list[str] = []
    due = ""
    priority: str | None = None
    i = 0
    while i < len(args):
        tok = args[i]
        if tok in ("--due", "-d", "--priority", "-p"):
            if i + 1 >= len(args):
                raise ValueError(f"{tok} needs a value")
            value = args[i + 1]
            if tok in ("--due", "-d"):
                due = value
            else:
                priority = value.lower()
            i += 2
            continue
        words.append(tok)
        i += 1
    return " ".join(words), due, priority


# ---- commands ----

def cmd_help(controller: Controller, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(controller: Controller, args: list[str]) -> str:
    return _show(controller, controller.dispatch(Event.RENDER))


def cmd_add(controller: Controller, args: list[str]) -> str:
    """
    /add Buy milk
    /add Call mom --due 2026-10-20T18:00 --priority high
    """
    try:
        text, due, priority = parse_add_args(args)
    except ValueError as e:
        return f"{e}. Usage: /add <text> [--due <YYYY-MM-DDTHH:MM>] [--priority {PRIORITY_VALUES}]"

    if priority is not None and priority not in {p.value for p in Priority}:
        return f"Unknown priority: {priority}. Use one of: {PRIORITY_VALUES}."

    view = controller.dispatch(Event.SUBMIT_TASK, text=text, due_date=due, priority=priority)
    return _show(controller, view)


def cmd_toggle(controller: Controller, args: list[str]) -> str:
    if not args:
        return "Usage: /done <#position or id>"
    task_id = _resolve_ref(controller, args[0])
    if task_id is None:
        return f"No task {args[0]} in the current view."
    return _show(controller, controller.dispatch(Event.TOGGLE_TASK, task_id=task_id))


def cmd_delete(
    controller: Controller,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    if not args:
        return "Usage: /delete <#position or id>"
    task_id = _resolve_ref(controller, args[0])
    if task_id is None:
        return f"No task {args[0]} in the current view."

    task = controller.state.task_store.get(task_id)
    view = controller.dispatch(Event.DELETE_TASK, task_id=task_id)
    if emit and task is not None:
        emit(f"Deleted: {task.text}")
    return _show(controller, view)


def cmd_edit(controller: Controller, args: list[str]) -> str:
    if not args:
        return "Usage: /edit <#position or id>"
    task_id = _resolve_ref(controller, args[0])
    if task_id is None:
        return f"No task {args[0]} in the current view."
    controller.dispatch(Event.OPEN_EDIT, task_id=task_id)
    return format_modal(controller.state.edit_modal)


def cmd_set(controller: Controller, args: list[str]) -> str:
    """
    /set text <new text>
    /set due <YYYY-MM-DDTHH:MM>   (/set due - clears it)
    /set priority <low|medium|high>
    """
    modal = controller.state.edit_modal
    if not modal.is_open:
        return "No task is being edited. Use /edit <#position or id> first."
    if len(args) < 2 and not (args and args[0].lower() == "due"):
        return "Usage: /set text|due|priority <value>"

    field_name = args[0].lower()
    value = " ".join(args[1:])

    if field_name == "text":
        controller.dispatch(Event.UPDATE_EDIT, text=value)
    elif field_name == "due":
        controller.dispatch(Event.UPDATE_EDIT, due_date="" if value in ("", "-") else value)
    elif field_name == "priority":
        if value.lower() not in {p.value for p in Priority}:
            return f"Unknown priority: {value}. Use one of: {PRIORITY_VALUES}."
        controller.dispatch(Event.UPDATE_EDIT, priority=value.lower())
    else:
        return "Usage: /set text|due|priority <value>"

    return format_modal(modal)


def cmd_save(controller: Controller, args: list[str]) -> str:
    modal = controller.state.edit_modal
    if not modal.is_open:
        return "No task is being edited."
    view = controller.dispatch(Event.SAVE_EDIT)
    if modal.is_open:
        # Blank text: the dialog stays open with the draft.
        return format_modal(modal)
    return _show(controller, view)


def cmd_close(controller: Controller, args: list[str]) -> str:
    if not controller.state.edit_modal.is_open:
        return "No task is being edited."
    return "Edit discarded.\n" + _show(controller, controller.dispatch(Event.CLOSE_EDIT))


def cmd_cancel(controller: Controller, args: list[str]) -> str:
    if not controller.state.edit_modal.is_open:
        return "No task is being edited."
    return "Edit discarded.\n" + _show(controller, controller.dispatch(Event.CLICK_OUTSIDE))


def cmd_filter(controller: Controller, args: list[str]) -> str:
    if not args:
        return f"Current filter: {controller.state.current_filter.value}. Use /filter {FILTER_VALUES}."
    try:
        view = controller.dispatch(Event.SET_FILTER, filter=args[0].lower())
    except ValueError:
        return f"Unknown filter: {args[0]}. Use /filter {FILTER_VALUES}."
    return _show(controller, view)


def cmd_status(controller: Controller, args: list[str]) -> str:
    state = controller.state
    settings = state.settings
    modal = state.edit_modal
    editing = f"task {modal.task_id}" if modal.is_open else "none"
    return (
        "Status:\n"
        f"  Storage: {getattr(settings, 'storage_path', '?')} (key={getattr(settings, 'storage_key', '?')})\n"
        f"  Tasks: {state.task_store.count}\n"
        f"  Filter: {state.current_filter.value}\n"
        f"  Editing: {editing}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add",
    cmd_add,
    help_text=f"Add a task: /add <text> [--due <YYYY-MM-DDTHH:MM>] [--priority {PRIORITY_VALUES}].",
    aliases=["a"],
)
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("done", cmd_toggle, help_text="Toggle completion: /done <#|id>.", aliases=["toggle", "x"])
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <#|id>.", aliases=["rm", "del"])
registry.register("edit", cmd_edit, help_text="Open the edit dialog: /edit <#|id>.")
registry.register("set", cmd_set, help_text="Change a field in the edit dialog: /set text|due|priority <value>.")
registry.register("save", cmd_save, help_text="Save the edit dialog.")
registry.register("close", cmd_close, help_text="Close the edit dialog without saving.")
registry.register("cancel", cmd_cancel, help_text="Dismiss the edit dialog without saving.")
registry.register("filter", cmd_filter, help_text=f"Choose the view: /filter {FILTER_VALUES}.", aliases=["f"])
registry.register("status", cmd_status, help_text="Show storage location and current view state.")
