"""Options files (also known as response or command files).

Compiler reads its arguments from file referenced by single `@file` argument,
used when command line would be too long for host operating system.
"""

from .errors import OptionsFileWriteError
from .syntax import (
    OptionsFileSyntax,
    options_file_encoding,
    quote_argument,
    render_options_text,
    split_options_text,
)
from .writer import (
    OptionsFileWriter,
    keep_linker_arguments_on_command_line,
    keep_nothing_on_command_line,
)

__all__ = [
    "OptionsFileSyntax",
    "OptionsFileWriteError",
    "OptionsFileWriter",
    "keep_linker_arguments_on_command_line",
    "keep_nothing_on_command_line",
    "options_file_encoding",
    "quote_argument",
    "render_options_text",
    "split_options_text",
]
