# SPDX-License-Identifier: MIT

import logging
from enum import StrEnum
from typing import Callable, Optional, TypeVar

import pendulum
from rich.console import Console
from rich.markup import escape

from taskmenu.errors import EndOfInputError, InvalidInputError
from taskmenu.terminal.validate import (
    validate_date,
    validate_int_in_range,
    validate_non_empty,
)
from taskmenu.view.views import message
from taskmenu.view.views.menu import options_view

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PromptState(StrEnum):
    PROMPTING = "prompting"
    VALIDATING = "validating"
    ACCEPTED = "accepted"
    ABORTED = "aborted"


class Prompter:
    """Line-oriented input paired with the console prompts are printed on."""

    def __init__(
        self, console: Console, read_line: Optional[Callable[[], str]] = None
    ) -> None:
        self.console = console
        self._read_line = read_line if read_line is not None else input

    def ask(self, text: str) -> str:
        self.console.print(escape(text), end="")
        try:
            return self._read_line().strip()
        except EOFError:
            raise EndOfInputError() from None


def prompt_until_valid(
    prompter: Prompter,
    text: str,
    validate: Callable[[str], T],
    allow_empty: bool = False,
) -> Optional[T]:
    """
    Ask until `validate` accepts the answer.

    Args:
        prompter: Where to read answers from and report rejections to
        text: The prompt text
        validate: Converts an answer, raising InvalidInputError to reject it
        allow_empty: A blank answer aborts the prompt instead of being validated

    Returns:
        The validated value, or None if the prompt was aborted
    """
    state = PromptState.PROMPTING
    answer = ""
    value: Optional[T] = None
    while True:
        match state:
            case PromptState.PROMPTING:
                answer = prompter.ask(text)
                state = PromptState.VALIDATING
            case PromptState.VALIDATING:
                if allow_empty and answer == "":
                    state = PromptState.ABORTED
                    continue
                try:
                    value = validate(answer)
                    state = PromptState.ACCEPTED
                except InvalidInputError as e:
                    logger.debug("Rejected input %r: %s", answer, e)
                    message.error(prompter.console, str(e))
                    state = PromptState.PROMPTING
            case PromptState.ACCEPTED:
                return value
            case PromptState.ABORTED:
                return None


def prompt_int_in_range(
    prompter: Prompter, text: str, low: int, high: int, allow_empty: bool = False
) -> Optional[int]:
    return prompt_until_valid(
        prompter,
        text,
        lambda answer: validate_int_in_range(answer, low, high),
        allow_empty=allow_empty,
    )


def prompt_non_empty(prompter: Prompter, text: str, name: str) -> str:
    value = prompt_until_valid(
        prompter, text, lambda answer: validate_non_empty(answer, name)
    )
    if value is None:
        raise ValueError("required prompt cannot be aborted")
    return value


def prompt_date(prompter: Prompter, text: str, default: pendulum.Date) -> pendulum.Date:
    """Ask for a DD.MM.YYYY date; a blank answer picks `default`."""
    value = prompt_until_valid(
        prompter,
        text,
        lambda answer: default if answer == "" else validate_date(answer),
    )
    if value is None:
        raise ValueError("required prompt cannot be aborted")
    return value


def choose_from_list(
    prompter: Prompter, title: str, options: list[str], allow_empty: bool = False
) -> Optional[str]:
    options_view(prompter.console, title, options)
    skip = " or Enter to skip" if allow_empty else ""
    selection = prompt_int_in_range(
        prompter,
        f"Your choice (1-{len(options)}){skip}: ",
        1,
        len(options),
        allow_empty=allow_empty,
    )
    if selection is None:
        return None
    return options[selection - 1]
