"""Quoting rules of options (response) files that compilers read via `@file` argument.

Each compiler family unquotes options file with its own rules,
so arguments must be written in a way that exactly same argument is read back.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING, assert_never

if TYPE_CHECKING:
    from collections.abc import Iterable

WHITESPACE = " \t\n\r\v\f"
BYTE_ORDER_MARK = "\ufeff"


class OptionsFileSyntax(Enum):
    """Which rules compiler uses to read an options file."""

    # Microsoft C runtime argument rules (`cl.exe`)
    MSVC = auto()

    # GNU libiberty `buildargv` rules (`gcc`, `clang`)
    GCC = auto()


def quote_argument(argument: str, syntax: OptionsFileSyntax) -> str:
    """Quote single argument so it is read back as-is by compiler."""
    match syntax:
        case OptionsFileSyntax.MSVC:
            return _quote_msvc_argument(argument)
        case OptionsFileSyntax.GCC:
            return _quote_gcc_argument(argument)
        case _:
            assert_never(syntax)


def render_options_text(arguments: Iterable[str], syntax: OptionsFileSyntax) -> str:
    """Render arguments into options file content, one argument per line."""
    return "".join(f"{quote_argument(arg, syntax)}\n" for arg in arguments)


def options_file_encoding(syntax: OptionsFileSyntax) -> str:
    """Encoding of options file content.

    `cl.exe` reads options file in ANSI code page unless it starts with byte order mark,
    so non-ASCII paths require UTF-8 with BOM there.
    """
    match syntax:
        case OptionsFileSyntax.MSVC:
            return "utf-8-sig"
        case OptionsFileSyntax.GCC:
            return "utf-8"
        case _:
            assert_never(syntax)


def split_options_text(text: str, syntax: OptionsFileSyntax) -> list[str]:
    """Read arguments back from options file content, same as compiler does."""
    text = text.removeprefix(BYTE_ORDER_MARK)
    match syntax:
        case OptionsFileSyntax.MSVC:
            return _split_msvc_text(text)
        case OptionsFileSyntax.GCC:
            return _split_gcc_text(text)
        case _:
            assert_never(syntax)


def _quote_msvc_argument(argument: str) -> str:
    if argument and not any(c in argument for c in f"{WHITESPACE}\""):
        return argument

    quoted = ['"']
    backslashes = 0
    for char in argument:
        if char == "\\":
            backslashes += 1
            continue
        if char == '"':
            # Escape quote and every backslash before it
            quoted.append("\\" * (backslashes * 2 + 1))
        else:
            quoted.append("\\" * backslashes)
        quoted.append(char)
        backslashes = 0

    # Backslashes before closing quote must not escape it
    quoted.append("\\" * (backslashes * 2))
    quoted.append('"')
    return "".join(quoted)


def _quote_gcc_argument(argument: str) -> str:
    if argument and not any(c in argument for c in f"{WHITESPACE}\"'\\"):
        return argument
    escaped = argument.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _split_gcc_text(text: str) -> list[str]:
    """Split like libiberty `buildargv`: quotes group, backslash escapes next character."""
    arguments: list[str] = []
    current: list[str] = []
    in_argument = False
    quote: str | None = None
    escaped = False

    for char in text:
        if escaped:
            current.append(char)
            escaped = False
            continue
        if char == "\\":
            escaped = True
            in_argument = True
            continue
        if quote is not None:
            if char == quote:
                quote = None
            else:
                current.append(char)
            continue
        if char in "\"'":
            quote = char
            in_argument = True
            continue
        if char in WHITESPACE:
            if in_argument:
                arguments.append("".join(current))
                current.clear()
                in_argument = False
            continue
        current.append(char)
        in_argument = True

    if in_argument:
        arguments.append("".join(current))
    return arguments


def _split_msvc_text(text: str) -> list[str]:
    """Split like Microsoft C runtime (`CommandLineToArgvW` rules).

    2n backslashes before quote -> n backslashes and quote toggles quoting,
    2n+1 backslashes before quote -> n backslashes and literal quote,
    backslashes not followed by quote are literal.
    """
    arguments: list[str] = []
    current: list[str] = []
    in_argument = False
    in_quotes = False
    backslashes = 0

    for char in text:
        if char == "\\":
            backslashes += 1
            in_argument = True
            continue

        if char == '"':
            current.append("\\" * (backslashes // 2))
            if backslashes % 2:
                current.append('"')
            else:
                in_quotes = not in_quotes
            backslashes = 0
            in_argument = True
            continue

        current.append("\\" * backslashes)
        backslashes = 0

        if char in WHITESPACE and not in_quotes:
            if in_argument:
                arguments.append("".join(current))
                current.clear()
                in_argument = False
            continue

        current.append(char)
        in_argument = True

    current.append("\\" * backslashes)
    if in_argument:
        arguments.append("".join(current))
    return arguments
