# src/taskpad/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads the saved tasks and runs the
console REPL in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_controller, create_initial_state
from ..cli.commands import cmd_list
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s...", settings.app_name)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)
    controller = create_controller(state)

    try:
        run_console_loop(controller, initial_view=cmd_list(controller, []))
    finally:
        # Mutations save as they happen; nothing is flushed here.
        logger.info("Bye.")


if __name__ == "__main__":
    main()
