# SPDX-License-Identifier: MIT

from dataclasses import dataclass, field

from taskmenu.configuration import Configuration, get_default_configuration
from taskmenu.repository.category import CategoryRepository
from taskmenu.repository.task import TaskRepository


@dataclass
class AppState:
    """Everything one session works on; discarded when the process exits."""

    config: Configuration = field(default_factory=get_default_configuration)
    categories: CategoryRepository = field(default_factory=CategoryRepository)
    tasks: TaskRepository = field(init=False)

    def __post_init__(self) -> None:
        self.tasks = TaskRepository(self.categories)
