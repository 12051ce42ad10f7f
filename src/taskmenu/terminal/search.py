# SPDX-License-Identifier: MIT

from taskmenu.model.priority import PRIORITIES
from taskmenu.model.search_field import SearchField
from taskmenu.service.search import search_tasks
from taskmenu.state import AppState
from taskmenu.terminal.prompt import Prompter, choose_from_list, prompt_int_in_range
from taskmenu.view.views import message
from taskmenu.view.views.menu import options_view
from taskmenu.view.views.task import tasks_view

SEARCH_OPTIONS: list[tuple[SearchField, str]] = [
    (SearchField.TITLE, "By title"),
    (SearchField.DESCRIPTION, "By description"),
    (SearchField.CATEGORY, "By category"),
    (SearchField.PRIORITY, "By priority"),
    (SearchField.OVERDUE, "Overdue tasks"),
]


def search_tasks_interactive(state: AppState, prompter: Prompter) -> None:
    options_view(prompter.console, "\nSearch:", [label for _, label in SEARCH_OPTIONS])
    choice = prompt_int_in_range(
        prompter, f"Your choice (1-{len(SEARCH_OPTIONS)}): ", 1, len(SEARCH_OPTIONS)
    )
    if choice is None:
        return
    field = SEARCH_OPTIONS[choice - 1][0]

    query = ""
    match field:
        case SearchField.TITLE:
            query = prompter.ask("Part of the title: ")
        case SearchField.DESCRIPTION:
            query = prompter.ask("Part of the description: ")
        case SearchField.CATEGORY:
            category = choose_from_list(
                prompter, "Choose category:", state.categories.get_all_categories()
            )
            if category is None:
                return
            query = category
        case SearchField.PRIORITY:
            priority = choose_from_list(prompter, "Choose priority:", PRIORITIES)
            if priority is None:
                return
            query = priority

    results = search_tasks(state.tasks.get_all_tasks(), field, query)
    if not results:
        message.info(prompter.console, "Nothing found")
        return
    tasks_view(prompter.console, f"search: {field}", results)
