# tests/conftest.py

from __future__ import annotations

import io
from collections.abc import Callable, Iterable

import pendulum
import pytest
from rich.console import Console

from taskmenu.configuration import get_default_configuration
from taskmenu.model.task import Task
from taskmenu.state import AppState
from taskmenu.template.task import get_task_template
from taskmenu.terminal.prompt import Prompter

from .fakes import ScriptedInput


@pytest.fixture()
def state() -> AppState:
    """Fresh in-memory state with the pause after each action turned off."""
    config = get_default_configuration()
    config["pause_after_action"] = False
    return AppState(config=config)


@pytest.fixture()
def console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture()
def output(console: Console) -> Callable[[], str]:
    def read() -> str:
        return console.file.getvalue()  # type: ignore[attr-defined]

    return read


@pytest.fixture()
def prompter(console: Console) -> Callable[[Iterable[str]], Prompter]:
    def make(lines: Iterable[str]) -> Prompter:
        return Prompter(console, ScriptedInput(lines))

    return make


@pytest.fixture()
def make_task() -> Callable[..., Task]:
    def make(
        title: str = "Task",
        description: str = "",
        priority: str = "Low",
        category: str = "Work",
        due: pendulum.Date | None = None,
        completed: bool = False,
        id: int = 1,
    ) -> Task:
        task = get_task_template()
        task["id"] = id
        task["title"] = title
        task["description"] = description
        task["priority"] = priority
        task["category"] = category
        if due is not None:
            task["due"] = due
        task["completed"] = completed
        return task

    return make
