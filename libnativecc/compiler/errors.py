from collections.abc import Sequence
from pathlib import Path
from typing import get_args

from libnativecc.exceptions import NativeCCError
from libnativecc.toolchains.toolchain import ToolchainFamily


class UnknownToolchainFamilyError(NativeCCError):
    def __init__(self, *args: object, family: str) -> None:
        super().__init__(*args)
        self.family = family

    def __repr__(self) -> str:
        return f"""No arguments builder for toolchain family '{self.family}'!

Tried to compose compiler command, but that compiler family is unknown.

Known families: [{", ".join(get_args(ToolchainFamily.__value__))}]

{self.generic_error_name}"""


class CompilerInvocationError(NativeCCError):
    """Compiler process failed (non-zero exit code) or cannot be spawned at all."""

    def __init__(
        self,
        *args: object,
        command: Sequence[str],
        source_file: Path,
        exit_code: int | None,
        output: str,
    ) -> None:
        super().__init__(*args)
        self.command = command
        self.source_file = source_file
        self.exit_code = exit_code
        self.output = output

    def __repr__(self) -> str:
        status = (
            "cannot be spawned or did not finish in time"
            if self.exit_code is None
            else f"failed with exit code {self.exit_code}"
        )
        return f"""Compilation of '{self.source_file}' failed!

Compiler process {status}.
Command: {" ".join(self.command)}

{self.output.rstrip()}

{self.generic_error_name}"""
