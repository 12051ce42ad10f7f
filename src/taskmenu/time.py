# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum

from taskmenu.model.task import Task

DATE_FORMAT = "DD.MM.YYYY"
DATE_PATTERN = re.compile(r"^[0-9]{2}\.[0-9]{2}\.[0-9]{4}$")


def today() -> pendulum.Date:
    return pendulum.today("local").date()


def date_to_str(date: pendulum.Date) -> str:
    return date.format(DATE_FORMAT)


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'DD.MM.YYYY' string into a pendulum.Date.

    Raises ValueError for anything that is not exactly that pattern or not a
    real calendar date.
    """
    if not DATE_PATTERN.match(date_str):
        raise ValueError(f"Date must be in DD.MM.YYYY format, got '{date_str}'")
    return pendulum.from_format(date_str, DATE_FORMAT).date()


def date_from_str_optional(date_str: Optional[str]) -> Optional[pendulum.Date]:
    """Parse a 'DD.MM.YYYY' string, returning None instead of raising."""
    if date_str is None:
        return None
    try:
        return date_from_str(date_str.strip())
    except ValueError:
        return None


def is_overdue(task: Task, now: Optional[pendulum.Date] = None) -> bool:
    if task["completed"]:
        return False
    if now is None:
        now = today()
    return task["due"] < now
