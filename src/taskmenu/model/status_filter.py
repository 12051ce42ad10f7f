# SPDX-License-Identifier: MIT

from enum import StrEnum


class StatusFilter(StrEnum):
    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"
