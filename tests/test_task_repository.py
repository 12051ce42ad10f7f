# tests/test_task_repository.py

from __future__ import annotations

from copy import deepcopy

import pendulum
import pytest

from taskmenu.errors import InvalidInputError, TaskCompletedError, TaskNotFoundError
from taskmenu.model.category import DEFAULT_CATEGORIES
from taskmenu.model.task_id import TASK_ID_BASE
from taskmenu.repository.category import CategoryRepository
from taskmenu.state import AppState
from taskmenu.time import today


def test_ids_start_above_base_and_strictly_increase(state: AppState, make_task) -> None:
    ids = [state.tasks.save_new_task(make_task(title=f"t{i}")) for i in range(5)]

    assert ids[0] > TASK_ID_BASE
    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)


def test_ids_are_not_reused_after_delete(state: AppState, make_task) -> None:
    first = state.tasks.save_new_task(make_task())
    state.tasks.delete_task(first)

    second = state.tasks.save_new_task(make_task())

    assert second > first


def test_save_new_task_stamps_fresh_fields(state: AppState, make_task) -> None:
    id = state.tasks.save_new_task(make_task(completed=True, id=5))

    task = state.tasks.get_task_strict(id)
    assert task["completed"] is False
    assert task["created"] == today()
    assert task["id"] == id


def test_save_new_task_registers_unknown_category(state: AppState, make_task) -> None:
    state.tasks.save_new_task(make_task(category="Bills"))

    assert state.categories.get_all_categories() == DEFAULT_CATEGORIES + ["Bills"]


def test_save_new_task_rejects_blank_title(state: AppState, make_task) -> None:
    with pytest.raises(InvalidInputError):
        state.tasks.save_new_task(make_task(title="  "))
    assert state.tasks.get_all_tasks() == []


def test_lookup_of_unknown_id(state: AppState) -> None:
    assert state.tasks.get_task(4242) is None
    with pytest.raises(TaskNotFoundError):
        state.tasks.get_task_strict(4242)
    with pytest.raises(TaskNotFoundError):
        state.tasks.delete_task(4242)


def test_complete_task_is_one_way(state: AppState, make_task) -> None:
    id = state.tasks.save_new_task(make_task())

    assert state.tasks.complete_task(id) is True
    assert state.tasks.complete_task(id) is False
    assert state.tasks.get_task_strict(id)["completed"] is True


def test_modify_task_applies_all_given_fields(state: AppState, make_task) -> None:
    id = state.tasks.save_new_task(make_task(title="Old"))

    state.tasks.modify_task(
        id,
        title="New",
        priority="High",
        due=pendulum.Date(2030, 1, 1),
        category="Garden",
    )

    task = state.tasks.get_task_strict(id)
    assert task["title"] == "New"
    assert task["priority"] == "High"
    assert task["due"] == pendulum.Date(2030, 1, 1)
    assert task["category"] == "Garden"
    assert task["description"] == ""
    assert state.categories.category_exists("Garden")


def test_modify_completed_task_changes_nothing(state: AppState, make_task) -> None:
    id = state.tasks.save_new_task(make_task(title="Done"))
    state.tasks.complete_task(id)
    before = deepcopy(state.tasks.get_task_strict(id))

    with pytest.raises(TaskCompletedError):
        state.tasks.modify_task(id, title="Changed", category="Other")

    assert state.tasks.get_task_strict(id) == before
    assert not state.categories.category_exists("Other")


def test_modify_with_invalid_value_changes_nothing(state: AppState, make_task) -> None:
    id = state.tasks.save_new_task(make_task(title="Keep"))
    before = deepcopy(state.tasks.get_task_strict(id))

    with pytest.raises(InvalidInputError):
        state.tasks.modify_task(id, title="Changed", priority="Critical")

    assert state.tasks.get_task_strict(id) == before


def test_category_repository_keeps_insertion_order_without_duplicates() -> None:
    categories = CategoryRepository(["b", "a"])

    assert categories.add_category("c") is True
    assert categories.add_category("a") is False
    assert categories.add_category("A") is True

    assert categories.get_all_categories() == ["b", "a", "c", "A"]
