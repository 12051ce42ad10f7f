# SPDX-License-Identifier: MIT

DEFAULT_CATEGORIES: list[str] = ["Work", "Personal", "Study", "Health", "Finance"]
