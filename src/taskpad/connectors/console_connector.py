# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.controller import Controller

logger = logging.getLogger(__name__)

PROMPT = "taskpad> "
EDIT_PROMPT = "taskpad[edit]> "


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def _rewrite_prev_line(line: str) -> None:
    """
    Replace the last terminal line with `line`.
    Best-effort: if not a TTY, just print a new line.
    """
    try:
        if sys.stdout.isatty():
            sys.stdout.write("\033[1A\033[2K\r")
            sys.stdout.write(line + "\n")
            sys.stdout.flush()
        else:
            print(line)
    except OSError:
        print(line)


def handle_line(controller: Controller, user_input: str, emit=None) -> str | None:
    """
    Route one line of input: slash commands go to the registry,
    plain text is added as a new task.
    """
    line = user_input.strip()
    if not line:
        return None
    if not line.startswith("/"):
        line = "/add " + line
    return command_registry.handle(controller, line, emit=emit)


def run_console_loop(controller: Controller, initial_view: str | None = None) -> None:
    logger.info("Console connector started.")
    _print_ts("[CONSOLE] Type a task to add it. Use /help for commands. Use /exit to quit.\n")

    if initial_view:
        print(initial_view)
        print()

    def emit(text: str) -> None:
        print(f"[{_ts_local()}] {text}", flush=True)

    while True:
        prompt = EDIT_PROMPT if controller.state.edit_modal.is_open else PROMPT
        try:
            user_input = input(prompt).strip()
            _rewrite_prev_line(f"[{_ts_local()}] {prompt}{user_input}")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = handle_line(controller, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            print(reply)
            print()

    logger.info("Console connector finished.")
