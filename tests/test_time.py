# tests/test_time.py

from __future__ import annotations

import pendulum
import pytest

from taskmenu.time import (
    date_from_str,
    date_from_str_optional,
    date_to_str,
    is_overdue,
)


def test_parses_day_month_year() -> None:
    assert date_from_str("05.03.2024") == pendulum.Date(2024, 3, 5)
    assert date_from_str_optional("29.02.2024") == pendulum.Date(2024, 2, 29)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "2024-03-05",
        "5.3.2024",
        "31.02.2024",
        "29.02.2023",
        "32.01.2024",
        "05.13.2024",
        "tomorrow",
        # non-ASCII digits
        "١٠.١٠.٢٠٣٠",
    ],
)
def test_rejects_anything_else(text: str) -> None:
    assert date_from_str_optional(text) is None
    with pytest.raises(ValueError):
        date_from_str(text)


def test_formats_with_leading_zeros() -> None:
    assert date_to_str(pendulum.Date(2024, 1, 9)) == "09.01.2024"


def test_overdue_only_for_open_tasks_before_now(make_task) -> None:
    now = pendulum.Date(2024, 6, 15)

    assert is_overdue(make_task(due=pendulum.Date(2024, 6, 14)), now)
    assert not is_overdue(make_task(due=pendulum.Date(2024, 6, 15)), now)
    assert not is_overdue(make_task(due=pendulum.Date(2024, 6, 16)), now)
    assert not is_overdue(
        make_task(due=pendulum.Date(2024, 6, 14), completed=True), now
    )


def test_completing_clears_overdue_without_touching_due(make_task) -> None:
    task = make_task(due=pendulum.Date(2000, 1, 1))
    assert is_overdue(task)

    task["completed"] = True

    assert not is_overdue(task)
    assert task["due"] == pendulum.Date(2000, 1, 1)
