"""User facing output of CLI, library itself never prints and reports via callbacks."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn, TextIO

if TYPE_CHECKING:
    from libnativecc.invocation import MessageLevel

CLI_MESSAGE_COLORS: dict[MessageLevel, str] = {
    "INFO": "\033[94m",
    "WARNING": "\033[93m",
    "ERROR": "\033[91m",
}
CLI_COLOR_RESET = "\033[0m"


def cli_message(
    level: MessageLevel,
    text: str,
    *,
    verbose: bool = True,
) -> None:
    """Emit message to user, INFO messages are shown only with verbose flag."""
    if level == "INFO" and not verbose:
        return

    stream = sys.stderr if level == "ERROR" else sys.stdout
    print(_colorize(stream, level, f"[{level}] {text}"), file=stream)


def cli_fatal_abort(text: str) -> NoReturn:
    cli_message(level="ERROR", text=text)
    sys.exit(1)


def cli_compiler_output(text: str) -> None:
    """Display diagnostics captured from compiler process as-is."""
    if text.strip():
        print(text.rstrip(), file=sys.stderr)


def _colorize(stream: TextIO, level: MessageLevel, text: str) -> str:
    if not stream.isatty():
        return text
    return f"{CLI_MESSAGE_COLORS[level]}{text}{CLI_COLOR_RESET}"
