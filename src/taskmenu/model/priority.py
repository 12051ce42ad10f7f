# SPDX-License-Identifier: MIT

from enum import StrEnum


class Priority(StrEnum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    URGENT = "Urgent"


# Canonical order, used for choice lists and statistics
PRIORITIES: list[str] = [priority.value for priority in Priority]
