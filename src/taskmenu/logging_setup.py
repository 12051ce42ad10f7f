# SPDX-License-Identifier: MIT

import logging
import sys


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the interactive terminal usable:
    - allow taskmenu logs at the configured level
    - suppress third-party noise unless ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "taskmenu" or record.name.startswith("taskmenu."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(console_level: int = logging.WARNING) -> None:
    """
    Configure a single stderr handler so logs never mix with the menu on stdout.

    Call this once, before the first log call.
    """
    root = logging.getLogger()
    root.setLevel(console_level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
