# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from taskmenu.errors import TaskMenuError
from taskmenu.model.priority import PRIORITIES
from taskmenu.model.status_filter import StatusFilter
from taskmenu.model.task import Task
from taskmenu.query.filter import filter_by_status
from taskmenu.query.sort import group_by_category, sort_within_group
from taskmenu.state import AppState
from taskmenu.template.task import get_task_template
from taskmenu.terminal.prompt import (
    Prompter,
    choose_from_list,
    prompt_date,
    prompt_int_in_range,
    prompt_non_empty,
)
from taskmenu.terminal.validate import validate_task_id
from taskmenu.time import date_from_str_optional, date_to_str, today
from taskmenu.view.views import message
from taskmenu.view.views.header import header
from taskmenu.view.views.menu import options_view
from taskmenu.view.views.task import tasks_by_category_view

logger = logging.getLogger(__name__)

CONFIRM_TOKENS = ("y", "yes", "д")

STATUS_OPTIONS: list[StatusFilter] = [
    StatusFilter.ALL,
    StatusFilter.ACTIVE,
    StatusFilter.COMPLETED,
]


def choose_category(
    state: AppState, prompter: Prompter, title: str, allow_empty: bool = False
) -> Optional[str]:
    """
    Pick an existing category or type a new one.

    A new label is only returned here, adding it to the category set is left
    to the repository when the task is saved.
    """
    categories = state.categories.get_all_categories()
    options_view(prompter.console, title, categories + ["Create new category"])
    skip = " or Enter to skip" if allow_empty else ""
    selection = prompt_int_in_range(
        prompter,
        f"Your choice (1-{len(categories) + 1}){skip}: ",
        1,
        len(categories) + 1,
        allow_empty=allow_empty,
    )
    if selection is None:
        return None
    if selection == len(categories) + 1:
        return prompt_non_empty(prompter, "New category name: ", "Category")
    return categories[selection - 1]


def find_task_interactive(state: AppState, prompter: Prompter) -> Optional[Task]:
    answer = prompter.ask("Enter task ID: ")
    try:
        return state.tasks.get_task_strict(validate_task_id(answer))
    except TaskMenuError as e:
        logger.debug("Task lookup failed for %r: %s", answer, e)
        message.error(prompter.console, str(e))
        return None


def create_task_interactive(state: AppState, prompter: Prompter) -> None:
    header(prompter.console, "new task")

    task = get_task_template()
    task["title"] = prompt_non_empty(prompter, "Task title: ", "Title")
    task["description"] = prompter.ask("Description (or Enter to skip): ")
    priority = choose_from_list(prompter, "\nChoose priority:", PRIORITIES)
    if priority is None:
        raise ValueError("priority choice cannot be skipped")
    task["priority"] = priority
    category = choose_category(state, prompter, "\nAvailable categories:")
    if category is None:
        raise ValueError("category choice cannot be skipped")
    task["category"] = category
    task["due"] = prompt_date(
        prompter, "Due date (DD.MM.YYYY or Enter for today): ", today()
    )

    id = state.tasks.save_new_task(task)
    message.success(prompter.console, f"Task '{task['title']}' added with ID: {id}")


def list_tasks_interactive(state: AppState, prompter: Prompter) -> None:
    tasks = state.tasks.get_all_tasks()
    if not tasks:
        message.info(prompter.console, "Task list is empty")
        return

    option = prompt_int_in_range(
        prompter,
        "Status filter: 1. All  2. Active  3. Completed\n"
        "Your choice (1-3) or Enter for 'All': ",
        1,
        3,
        allow_empty=True,
    )
    status = STATUS_OPTIONS[(option or 1) - 1]

    filtered = filter_by_status(tasks, status)
    if not filtered:
        message.info(prompter.console, "Nothing found for this filter")
        return

    groups = {
        category: sort_within_group(category_tasks)
        for category, category_tasks in group_by_category(filtered).items()
    }
    tasks_by_category_view(prompter.console, f"tasks: {status}", groups)


def complete_task_interactive(state: AppState, prompter: Prompter) -> None:
    task = find_task_interactive(state, prompter)
    if task is None:
        return
    if not state.tasks.complete_task(task["id"]):
        message.warning(prompter.console, "Task is already completed")
        return
    message.success(prompter.console, f"Task '{task['title']}' marked as completed")


def edit_task_interactive(state: AppState, prompter: Prompter) -> None:
    task = find_task_interactive(state, prompter)
    if task is None:
        return
    if task["completed"]:
        message.error(prompter.console, "A completed task cannot be edited")
        return

    message.info(prompter.console, "Leave a field empty to keep its current value")

    # Blank keeps the current title only while that title is itself non-blank.
    title: Optional[str] = prompter.ask(f"Title [{task['title']}]: ")
    if title == "":
        if task["title"].strip() == "":
            message.error(prompter.console, "Title cannot be empty")
            return
        title = None

    current_description = task["description"] if task["description"].strip() else "-"
    description: Optional[str] = prompter.ask(f"Description [{current_description}]: ")
    if description == "":
        description = None

    priority = choose_from_list(
        prompter,
        f"New priority (current: {task['priority']}):",
        PRIORITIES,
        allow_empty=True,
    )
    category = choose_category(
        state,
        prompter,
        f"\nAvailable categories (current: {task['category']}):",
        allow_empty=True,
    )

    due_answer = prompter.ask(
        f"Due date [{date_to_str(task['due'])}] (DD.MM.YYYY) or Enter: "
    )
    due = None
    if due_answer != "":
        due = date_from_str_optional(due_answer)
        if due is None:
            message.error(prompter.console, "Invalid date, changes not saved")
            return

    try:
        state.tasks.modify_task(
            task["id"],
            title=title,
            description=description,
            priority=priority,
            due=due,
            category=category,
        )
    except TaskMenuError as e:
        message.error(prompter.console, str(e))
        return
    message.success(prompter.console, "Changes saved")


def delete_task_interactive(state: AppState, prompter: Prompter) -> None:
    task = find_task_interactive(state, prompter)
    if task is None:
        return
    confirm = prompter.ask(f"Delete task '{task['title']}'? (y/N) ").lower()
    if confirm not in CONFIRM_TOKENS:
        message.info(prompter.console, "Operation cancelled")
        return
    state.tasks.delete_task(task["id"])
    message.success(prompter.console, "Task deleted")
