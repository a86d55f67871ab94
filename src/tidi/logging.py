# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Diagnostic output helpers with optional colour support."""

from __future__ import annotations

import logging
import sys
from functools import cache

from rich.console import Console
from rich.text import Text


def detect_tty() -> bool:
    """Return ``True`` when stderr appears to be backed by a terminal.

    Returns:
        bool: ``True`` when ``sys.stderr`` reports TTY support, ``False`` otherwise.
    """

    try:
        return sys.stderr.isatty()
    except (AttributeError, ValueError):
        return False


@cache
def _console(color: bool) -> Console:
    return Console(
        stderr=True,
        color_system="auto" if color else None,
        no_color=not color,
        soft_wrap=True,
    )


def diagnostic_console(*, use_color: bool | None = None) -> Console:
    """Return the console used for diagnostic messages.

    Args:
        use_color: Optional explicit colour flag overriding TTY detection.

    Returns:
        Console: Rich console bound to the diagnostic (stderr) stream.
    """

    return _console(detect_tty() if use_color is None else use_color)


def _print_line(msg: str, *, style: str, use_color: bool | None) -> None:
    console = diagnostic_console(use_color=use_color)
    text = Text(msg)
    if not console.no_color:
        text.stylize(style)
    console.print(text)


def warn(msg: str, *, use_color: bool | None = None) -> None:
    """Emit a warning message on the diagnostic stream."""

    _print_line(msg, style="yellow", use_color=use_color)


def print_traceback(*, use_color: bool | None = None) -> None:
    """Render the exception currently being handled on the diagnostic stream.

    Must be called from within an ``except`` block.
    """

    diagnostic_console(use_color=use_color).print_exception()


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for ``name``."""

    return logging.getLogger(name)


__all__ = [
    "detect_tty",
    "diagnostic_console",
    "get_logger",
    "print_traceback",
    "warn",
]
