# tests/test_prompt.py

from __future__ import annotations

import pendulum
import pytest

from taskmenu.errors import EndOfInputError, InvalidInputError
from taskmenu.terminal.prompt import (
    choose_from_list,
    prompt_date,
    prompt_int_in_range,
    prompt_non_empty,
    prompt_until_valid,
)


def test_reprompts_until_validator_accepts(prompter, output) -> None:
    def validate(answer: str) -> str:
        if answer != "ok":
            raise InvalidInputError("not ok")
        return answer.upper()

    assert prompt_until_valid(prompter(["no", "nope", "ok"]), "> ", validate) == "OK"
    assert output().count("not ok") == 2


def test_blank_answer_aborts_when_allowed(prompter) -> None:
    assert prompt_int_in_range(prompter([""]), "> ", 1, 3, allow_empty=True) is None


def test_int_range_rejects_out_of_range_and_text(prompter, output) -> None:
    assert prompt_int_in_range(prompter(["0", "x", "", "3"]), "> ", 1, 3) == 3
    assert output().count("enter a number between 1 and 3") == 3


def test_non_empty_prompt(prompter) -> None:
    assert prompt_non_empty(prompter(["", "   ", "Title"]), "> ", "Title") == "Title"


def test_date_prompt_defaults_and_validates(prompter, output) -> None:
    default = pendulum.Date(2024, 6, 15)

    assert prompt_date(prompter([""]), "> ", default) == default
    assert prompt_date(prompter(["31.02.2024", "01.03.2024"]), "> ", default) == (
        pendulum.Date(2024, 3, 1)
    )
    assert "Invalid date format" in output()


def test_choose_from_list_returns_label(prompter, output) -> None:
    assert choose_from_list(prompter(["2"]), "Pick:", ["a", "b"]) == "b"
    assert "2. b" in output()


def test_end_of_input_is_raised(prompter) -> None:
    with pytest.raises(EndOfInputError):
        prompt_non_empty(prompter([]), "> ", "Title")
