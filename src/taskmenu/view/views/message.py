# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.markup import escape

from taskmenu.color import ERROR_COLOR, SUCCESS_COLOR, WARNING_COLOR
from taskmenu.view.util import colorize


def success(console: Console, message: str) -> None:
    console.print(colorize(escape(message), SUCCESS_COLOR))


def warning(console: Console, message: str) -> None:
    console.print(colorize(escape(message), WARNING_COLOR))


def error(console: Console, message: str) -> None:
    console.print(colorize(escape(message), ERROR_COLOR))


def info(console: Console, message: str) -> None:
    console.print(escape(message))
