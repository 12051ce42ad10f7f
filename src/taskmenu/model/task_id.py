# SPDX-License-Identifier: MIT

from typing import TypeAlias

TaskId: TypeAlias = int

UNSET_TASK_ID: TaskId = 0

# Generated ids start above this so they never collide with seeded data.
TASK_ID_BASE: TaskId = 1000
