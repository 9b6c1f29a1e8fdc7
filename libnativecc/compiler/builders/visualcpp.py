from __future__ import annotations

from typing import TYPE_CHECKING, Final, assert_never

from libnativecc.compiler.builders._builder_protocol import (
    CompilerArgumentsBuilderProtocol,
)
from libnativecc.options_file import (
    OptionsFileSyntax,
    keep_linker_arguments_on_command_line,
)
from libnativecc.paths import relativize_to_base

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from libnativecc.compiler.spec import CompileSpecification
    from libnativecc.toolchains.toolchain import ToolchainFamily


class VisualCppArgumentsBuilder(CompilerArgumentsBuilderProtocol):
    """Arguments for Microsoft Visual C++ compiler (`cl.exe`).

    `cl.exe` does not allow space between flag and its value (e.g `/Fo` and output file),
    so every valued flag is a single concatenated argument.
    """

    # Debug information database (`/Fd`) is named after object file with that suffix
    DEBUG_DATABASE_SUFFIX: Final[str] = ".pdb"

    @property
    def name(self) -> str:
        return "visualcpp"

    @property
    def options_file_syntax(self) -> OptionsFileSyntax:
        return OptionsFileSyntax.MSVC

    @classmethod
    def is_supported(cls, family: ToolchainFamily) -> bool:
        return family == "visualcpp"

    def common_args(self, spec: CompileSpecification) -> list[str]:
        # fmt: off
        args = [
            "/nologo", # No banner in captured output
            "/c", # Only compile, linkage is separate step
        ]
        # fmt: on

        if spec.debuggable:
            args.append("/Zi")
        if spec.optimized:
            args.append("/O2")

        match spec.source_language:
            case "c":
                args.append("/TC")
            case "cpp":
                args.extend(("/TP", "/EHsc"))
            case _:
                assert_never(spec.source_language)

        for macro, value in spec.macros.items():
            args.append(f"/D{macro}" if value is None else f"/D{macro}={value}")

        args.extend(
            f"/I{relativize_to_base(spec.working_directory, path)}"
            for path in spec.include_paths
        )
        return args

    def output_args(self, spec: CompileSpecification, object_file: Path) -> list[str]:
        args: list[str] = []
        if spec.debuggable:
            debug_database = object_file.parent / (
                object_file.name + self.DEBUG_DATABASE_SUFFIX
            )
            args.append(
                f"/Fd{relativize_to_base(spec.working_directory, debug_database)}",
            )

        args.append(f"/Fo{relativize_to_base(spec.working_directory, object_file)}")
        return args

    def pch_args(self, spec: CompileSpecification) -> list[str]:
        if (
            spec.precompiled_header is None
            or spec.precompiled_header_object_file is None
        ):
            # Both must be present, otherwise precompiled header is not used
            return []

        return [
            f"/Yu{spec.precompiled_header}",
            f"/Fp{spec.precompiled_header_object_file.absolute()}",
        ]

    def source_args(self, spec: CompileSpecification) -> list[str]:
        return [relativize_to_base(spec.working_directory, spec.source_file)]

    def spill_boundary(self, arguments: Sequence[str]) -> int:
        return keep_linker_arguments_on_command_line(arguments)
