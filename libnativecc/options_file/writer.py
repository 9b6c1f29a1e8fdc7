"""Writer of options (response) files to bypass command line length limits.

Compiler is called with `@path/to/options.txt` instead of full argument list,
and reads arguments itself from that file.
"""

from __future__ import annotations

import os
from pathlib import Path
from tempfile import mkstemp
from typing import TYPE_CHECKING
from uuid import uuid4

from libnativecc.options_file.errors import OptionsFileWriteError
from libnativecc.options_file.syntax import (
    OptionsFileSyntax,
    options_file_encoding,
    render_options_text,
)
from libnativecc.paths import relativize_to_base

if TYPE_CHECKING:
    from collections.abc import Callable, MutableSequence, Sequence

OPTIONS_FILE_PREFIX = "options-"
OPTIONS_FILE_SUFFIX = ".txt"


def keep_nothing_on_command_line(arguments: Sequence[str]) -> int:
    """All arguments may be spilled into options file."""
    return len(arguments)


def keep_linker_arguments_on_command_line(arguments: Sequence[str]) -> int:
    """Arguments from `/link` onward are passed to linker by `cl.exe`, they stay on command line."""
    try:
        return list(arguments).index("/link")
    except ValueError:
        return len(arguments)


class OptionsFileWriter:
    """Spills compiler arguments into options file inside scratch directory.

    Whether arguments must be spilled at all is decided by caller (compiler), writer always writes.
    Each invocation writes into new uniquely named file, so concurrent compilations may share scratch directory.
    """

    def __init__(
        self,
        syntax: OptionsFileSyntax,
        working_directory: Path,
        temporary_directory: Path,
        *,
        spill_boundary: Callable[[Sequence[str]], int] = keep_nothing_on_command_line,
    ) -> None:
        """:param spill_boundary: Index of first argument that must stay on command line"""
        self.syntax = syntax
        self.working_directory = working_directory
        self.temporary_directory = temporary_directory
        self.spill_boundary = spill_boundary

    def apply(
        self,
        arguments: MutableSequence[str],
        *,
        invocation_id: str | None = None,
    ) -> Path:
        """Replace arguments in place with reference to written options file.

        Arguments that must stay on command line are kept after the reference.
        :return: Path to written options file
        """
        boundary = self.spill_boundary(arguments)
        options_file = self.write(arguments[:boundary], invocation_id=invocation_id)

        reference = relativize_to_base(
            self.working_directory.absolute(),
            options_file.absolute(),
        )
        arguments[:boundary] = [f"@{reference}"]
        return options_file

    def write(
        self,
        arguments: Sequence[str],
        *,
        invocation_id: str | None = None,
    ) -> Path:
        """Write arguments into new options file and return its path.

        File appears under its final name only when fully written.
        :raises OptionsFileWriteError: Scratch directory cannot be created or written
        """
        options_file = self.temporary_directory / (
            f"{OPTIONS_FILE_PREFIX}{invocation_id or uuid4().hex}{OPTIONS_FILE_SUFFIX}"
        )
        content = render_options_text(arguments, self.syntax)

        try:
            self.temporary_directory.mkdir(parents=True, exist_ok=True)
            _write_text_atomic(
                options_file,
                content,
                encoding=options_file_encoding(self.syntax),
            )
        except OSError as e:
            raise OptionsFileWriteError(
                directory=self.temporary_directory,
                reason=e,
            ) from e
        return options_file


def _write_text_atomic(path: Path, text: str, *, encoding: str) -> None:
    fd, tmp = mkstemp(prefix=f"{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="\n") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        Path(tmp).replace(path)
    finally:
        # Left only when write or rename failed
        Path(tmp).unlink(missing_ok=True)
