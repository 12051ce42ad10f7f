# SPDX-License-Identifier: MIT

from taskmenu.service.stats import compute_stats
from taskmenu.state import AppState
from taskmenu.terminal.prompt import Prompter
from taskmenu.view.views.stats import stats_view


def stats_interactive(state: AppState, prompter: Prompter) -> None:
    stats = compute_stats(
        state.tasks.get_all_tasks(), state.categories.get_all_categories()
    )
    stats_view(prompter.console, stats)
