from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Literal

type ToolchainFamily = Literal[
    "visualcpp",
    "gcc",
    "clang",
]

# `cmd.exe` refuses command lines longer than that
VISUALCPP_COMMAND_LINE_LENGTH_LIMIT = 8191

# Default `ARG_MAX` page limit for single argument strings on Linux
POSIX_COMMAND_LINE_LENGTH_LIMIT = 131072


@dataclass(frozen=True)
class Toolchain:
    """Specifications for compiler toolchain that is being invoked."""

    # Toolchain family, selects argument builder
    family: ToolchainFamily

    # Compiler driver executable (resolved via PATH when not absolute)
    executable: Path

    object_file_suffix: Literal[".o", ".obj"]

    # Always pass arguments via options file (e.g `@options.txt`)
    use_options_file: bool

    # Spill into options file when command line is longer than that, `None` means no limit
    command_line_length_limit: int | None

    # Variables set on top of current environment for compiler process
    environment: Mapping[str, str] = field(default_factory=dict)

    # Directories prepended to `PATH` for compiler process
    path: Sequence[Path] = ()

    @staticmethod
    def from_family(family: ToolchainFamily) -> "Toolchain":
        match family:
            case "visualcpp":
                return Toolchain(
                    family=family,
                    executable=Path("cl.exe"),
                    object_file_suffix=".obj",
                    use_options_file=True,
                    command_line_length_limit=VISUALCPP_COMMAND_LINE_LENGTH_LIMIT,
                )
            case "gcc":
                return Toolchain(
                    family=family,
                    executable=Path("gcc"),
                    object_file_suffix=".o",
                    use_options_file=False,
                    command_line_length_limit=POSIX_COMMAND_LINE_LENGTH_LIMIT,
                )
            case "clang":
                return Toolchain(
                    family=family,
                    executable=Path("clang"),
                    object_file_suffix=".o",
                    use_options_file=False,
                    command_line_length_limit=POSIX_COMMAND_LINE_LENGTH_LIMIT,
                )

    def with_executable(self, executable: Path) -> "Toolchain":
        """Same toolchain but with another compiler driver executable."""
        return replace(self, executable=executable)

    def with_options_file(self, *, use_options_file: bool) -> "Toolchain":
        return replace(self, use_options_file=use_options_file)
