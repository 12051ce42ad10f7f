# SPDX-License-Identifier: MIT

from enum import StrEnum


class SearchField(StrEnum):
    TITLE = "title"
    DESCRIPTION = "description"
    CATEGORY = "category"
    PRIORITY = "priority"
    OVERDUE = "overdue"
