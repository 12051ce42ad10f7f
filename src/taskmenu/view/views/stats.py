# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from taskmenu.color import get_priority_color
from taskmenu.model.stats import Stats
from taskmenu.view.util import colorize
from taskmenu.view.views.header import header


def stats_view(console: Console, stats: Stats) -> None:
    header(console, "statistics")

    summary_table = Table(box=box.SIMPLE, show_header=False)
    summary_table.add_column("property")
    summary_table.add_column("value", justify="right")
    summary_table.add_row("total", str(stats["total"]))
    summary_table.add_row("completed", str(stats["completed"]))
    summary_table.add_row("active", str(stats["active"]))
    summary_table.add_row("overdue", str(stats["overdue"]))
    summary_table.add_row("percent complete", f"{stats['percent_complete']}%")
    console.print(summary_table)

    priority_table = Table(box=box.SIMPLE, title="by priority", title_justify="left")
    priority_table.add_column("priority")
    priority_table.add_column("tasks", justify="right")
    for priority, count in stats["by_priority"].items():
        priority_table.add_row(
            colorize(escape(priority), get_priority_color(priority)), str(count)
        )
    console.print(priority_table)

    category_table = Table(box=box.SIMPLE, title="by category", title_justify="left")
    category_table.add_column("category")
    category_table.add_column("tasks", justify="right")
    for category, count in stats["by_category"].items():
        category_table.add_row(escape(category), str(count))
    console.print(category_table)
