# SPDX-License-Identifier: MIT

from typing import TypedDict

APP_NAME = "taskmenu"


class Configuration(TypedDict):
    use_color: bool
    show_header: bool
    pause_after_action: bool
    verbose: bool


def get_default_configuration() -> Configuration:
    return {
        "use_color": True,
        "show_header": True,
        "pause_after_action": True,
        "verbose": False,
    }
