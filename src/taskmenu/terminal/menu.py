# SPDX-License-Identifier: MIT

import logging
from typing import Callable

from taskmenu.errors import EndOfInputError, InvalidInputError
from taskmenu.state import AppState
from taskmenu.terminal.prompt import Prompter
from taskmenu.terminal.search import search_tasks_interactive
from taskmenu.terminal.stats import stats_interactive
from taskmenu.terminal.task import (
    complete_task_interactive,
    create_task_interactive,
    delete_task_interactive,
    edit_task_interactive,
    list_tasks_interactive,
)
from taskmenu.terminal.validate import validate_int_in_range
from taskmenu.view.views import message
from taskmenu.view.views.menu import menu_view

logger = logging.getLogger(__name__)

EXIT_ACTION = 0

ACTIONS: dict[int, Callable[[AppState, Prompter], None]] = {
    1: list_tasks_interactive,
    2: create_task_interactive,
    3: complete_task_interactive,
    4: edit_task_interactive,
    5: delete_task_interactive,
    6: search_tasks_interactive,
    7: stats_interactive,
}


def run_menu(state: AppState, prompter: Prompter) -> None:
    """
    Run the menu loop until the user exits or input runs out.

    End of input ends the session the same way as choosing exit.
    """
    try:
        while True:
            menu_view(prompter.console)
            answer = prompter.ask(f"Choose an action ({EXIT_ACTION}-{len(ACTIONS)}): ")
            try:
                action = validate_int_in_range(answer, EXIT_ACTION, len(ACTIONS))
            except InvalidInputError:
                message.error(
                    prompter.console,
                    f"Invalid input. Choose an item {EXIT_ACTION}-{len(ACTIONS)}.",
                )
                continue
            if action == EXIT_ACTION:
                logger.debug("Exit selected")
                return
            ACTIONS[action](state, prompter)
            if state.config["pause_after_action"]:
                prompter.ask("\nPress Enter to continue...")
    except EndOfInputError:
        logger.info("End of input, leaving the menu")
