# SPDX-License-Identifier: MIT

from typing import TypedDict


class Stats(TypedDict):
    total: int
    completed: int
    active: int
    overdue: int
    percent_complete: int
    by_priority: dict[str, int]
    by_category: dict[str, int]
