# tests/test_commands.py

from __future__ import annotations

import pytest

from taskpad.cli.commands import CommandRegistry, parse_add_args
from taskpad.cli.commands import registry as command_registry
from taskpad.connectors.console_connector import handle_line
from taskpad.core.controller import Controller
from taskpad.tasks.task_models import Priority, TaskFilter


def test_command_registry_routes_2_and_3_params(controller: Controller) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}

    def h2(controller, args):
        called["h2"] += 1
        return "h2"

    def h3(controller, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b")

    assert reg.handle(controller, "/a x") == "h2"
    assert reg.handle(controller, "/b y", emit=lambda _: None) == "h3"
    assert called["h2"] == 1
    assert called["h3"] == 1


def test_command_registry_unknown_and_non_command(controller: Controller) -> None:
    reg = CommandRegistry()
    assert reg.handle(controller, "hello") is None
    assert "Unknown command" in (reg.handle(controller, "/nope") or "")
    assert "Empty command" in (reg.handle(controller, "/") or "")


def test_parse_add_args() -> None:
    assert parse_add_args(["Buy", "milk"]) == ("Buy milk", "", None)
    assert parse_add_args(["Call", "--due", "2026-10-20T18:00", "mom", "-p", "HIGH"]) == (
        "Call mom",
        "2026-10-20T18:00",
        "high",
    )
    with pytest.raises(ValueError):
        parse_add_args(["x", "--priority"])


def test_add_list_toggle_delete_flow(controller: Controller) -> None:
    out = command_registry.handle(controller, "/add Buy milk --priority high")
    assert out is not None
    assert "[HIGH] Buy milk" in out
    assert "0% Complete" in out

    # plain text is shorthand for /add
    out = handle_line(controller, "Walk the dog")
    assert out is not None
    assert "2. [ ] [low ] Walk the dog" in out

    out = command_registry.handle(controller, "/done 1")
    assert out is not None
    assert "1. [x] [HIGH] Buy milk" in out
    assert "50% Complete" in out

    deleted: list[str] = []
    out = command_registry.handle(controller, "/rm #2", emit=deleted.append)
    assert deleted == ["Deleted: Walk the dog"]
    assert out is not None
    assert "Walk the dog" not in out
    assert controller.state.task_store.count == 1


def test_add_rejects_unknown_priority(controller: Controller) -> None:
    out = command_registry.handle(controller, "/add x --priority urgent")
    assert out is not None and out.startswith("Unknown priority")
    assert controller.state.task_store.count == 0


def test_refs_accept_full_id(controller: Controller) -> None:
    command_registry.handle(controller, "/add a")
    task_id = controller.state.task_store.tasks[0].id

    command_registry.handle(controller, f"/done {task_id}")
    assert controller.state.task_store.get(task_id).completed is True  # type: ignore[union-attr]


def test_refs_unknown(controller: Controller) -> None:
    assert command_registry.handle(controller, "/done 4") == "No task 4 in the current view."
    assert command_registry.handle(controller, "/delete abc") == "No task abc in the current view."
    assert (command_registry.handle(controller, "/edit") or "").startswith("Usage")


def test_edit_dialog_commands(controller: Controller) -> None:
    command_registry.handle(controller, "/add Buy milk")

    out = command_registry.handle(controller, "/edit 1")
    assert out is not None and "text:     Buy milk" in out

    command_registry.handle(controller, "/set text Buy oat milk")
    command_registry.handle(controller, "/set due 2026-10-21T08:00")
    out = command_registry.handle(controller, "/set priority medium")
    assert out is not None and "priority: medium" in out

    out = command_registry.handle(controller, "/save")
    assert out is not None and "Buy oat milk" in out
    task = controller.state.task_store.tasks[0]
    assert (task.text, task.due_date, task.priority) == (
        "Buy oat milk",
        "2026-10-21T08:00",
        Priority.MEDIUM,
    )
    assert not controller.state.edit_modal.is_open


def test_set_due_dash_clears(controller: Controller) -> None:
    command_registry.handle(controller, "/add a --due 2026-10-21")
    command_registry.handle(controller, "/edit 1")
    command_registry.handle(controller, "/set due -")
    command_registry.handle(controller, "/save")
    assert controller.state.task_store.tasks[0].due_date == ""


def test_save_with_blank_text_keeps_dialog(controller: Controller) -> None:
    command_registry.handle(controller, "/add a")
    command_registry.handle(controller, "/edit 1")
    controller.state.edit_modal.text = "   "

    out = command_registry.handle(controller, "/save")
    assert out is not None and out.startswith("Editing task")
    assert controller.state.task_store.tasks[0].text == "a"


@pytest.mark.parametrize("command", ["/close", "/cancel"])
def test_close_and_cancel_discard(controller: Controller, command: str) -> None:
    command_registry.handle(controller, "/add a")
    command_registry.handle(controller, "/edit 1")
    command_registry.handle(controller, "/set text b")

    out = command_registry.handle(controller, command)
    assert out is not None and out.startswith("Edit discarded.")
    assert controller.state.task_store.tasks[0].text == "a"


def test_dialog_commands_when_closed(controller: Controller) -> None:
    assert (command_registry.handle(controller, "/set text x") or "").startswith("No task is being edited")
    assert command_registry.handle(controller, "/save") == "No task is being edited."
    assert command_registry.handle(controller, "/close") == "No task is being edited."


def test_filter_command(controller: Controller) -> None:
    command_registry.handle(controller, "/add a")
    command_registry.handle(controller, "/add b")
    command_registry.handle(controller, "/done 1")

    out = command_registry.handle(controller, "/filter completed")
    assert controller.state.current_filter is TaskFilter.COMPLETED
    assert out is not None and "<completed>" in out
    assert "1. [x] [low ] a" in out
    assert "b" not in out.split("\n", 3)[3]

    out = command_registry.handle(controller, "/filter later")
    assert out is not None and out.startswith("Unknown filter")
    assert controller.state.current_filter is TaskFilter.COMPLETED


def test_positions_follow_the_filtered_view(controller: Controller) -> None:
    command_registry.handle(controller, "/add a")
    command_registry.handle(controller, "/add b")
    command_registry.handle(controller, "/done 1")
    command_registry.handle(controller, "/filter pending")

    # "1" now means "b", the first pending task
    command_registry.handle(controller, "/delete 1")
    assert [t.text for t in controller.state.task_store.tasks] == ["a"]


def test_status_and_help(controller: Controller) -> None:
    out = command_registry.handle(controller, "/status")
    assert out is not None and "Tasks: 0" in out and "Filter: all" in out
    out = command_registry.handle(controller, "/help")
    assert out is not None and "/add" in out and "/filter" in out
