# SPDX-License-Identifier: MIT

import re

import pendulum

from taskmenu.errors import InvalidInputError
from taskmenu.model.task_id import TaskId
from taskmenu.time import date_from_str_optional


def validate_int_in_range(raw: str, low: int, high: int) -> int:
    if not re.match(r"^[+-]?\d+$", raw.strip()):
        raise InvalidInputError(f"Error: enter a number between {low} and {high}")
    number = int(raw)
    if not (low <= number <= high):
        raise InvalidInputError(f"Error: enter a number between {low} and {high}")
    return number


def validate_non_empty(raw: str, name: str) -> str:
    if raw.strip() == "":
        raise InvalidInputError(f"{name} cannot be empty")
    return raw


def validate_date(raw: str) -> pendulum.Date:
    date = date_from_str_optional(raw)
    if date is None:
        raise InvalidInputError("Invalid date format, expected DD.MM.YYYY")
    return date


def validate_task_id(raw: str) -> TaskId:
    if not re.match(r"^[+-]?\d+$", raw.strip()):
        raise InvalidInputError("Invalid ID")
    return int(raw)
