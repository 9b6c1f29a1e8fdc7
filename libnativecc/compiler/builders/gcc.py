from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from libnativecc.compiler.builders._builder_protocol import (
    CompilerArgumentsBuilderProtocol,
)
from libnativecc.options_file import OptionsFileSyntax
from libnativecc.paths import relativize_to_base

if TYPE_CHECKING:
    from pathlib import Path

    from libnativecc.compiler.spec import CompileSpecification
    from libnativecc.toolchains.toolchain import ToolchainFamily


class GccArgumentsBuilder(CompilerArgumentsBuilderProtocol):
    """Arguments for GCC compatible compiler drivers (`gcc`, `clang`).

    Unlike Visual C++, valued flags are passed as separate arguments (e.g `-o` `output.o`).
    There is no separate debug database, debug information lives inside object file.
    """

    def __init__(self, family: ToolchainFamily = "gcc") -> None:
        self._family = family

    @property
    def name(self) -> str:
        return self._family

    @property
    def options_file_syntax(self) -> OptionsFileSyntax:
        return OptionsFileSyntax.GCC

    @classmethod
    def from_family(cls, family: ToolchainFamily) -> GccArgumentsBuilder:
        return cls(family)

    @classmethod
    def is_supported(cls, family: ToolchainFamily) -> bool:
        return family in ("gcc", "clang")

    def common_args(self, spec: CompileSpecification) -> list[str]:
        match spec.source_language:
            case "c":
                language = "c"
            case "cpp":
                language = "c++"
            case _:
                assert_never(spec.source_language)

        # fmt: off
        args = [
            "-x", language, # Do not infer language from suffix
            "-c", # Only compile, linkage is separate step
        ]
        # fmt: on

        if spec.debuggable:
            args.append("-g")
        if spec.optimized:
            args.append("-O3")

        for macro, value in spec.macros.items():
            args.append(f"-D{macro}" if value is None else f"-D{macro}={value}")

        args.extend(
            f"-I{relativize_to_base(spec.working_directory, path)}"
            for path in spec.include_paths
        )
        return args

    def output_args(self, spec: CompileSpecification, object_file: Path) -> list[str]:
        return ["-o", relativize_to_base(spec.working_directory, object_file)]

    def pch_args(self, spec: CompileSpecification) -> list[str]:
        if (
            spec.precompiled_header is None
            or spec.precompiled_header_object_file is None
        ):
            # Both must be present, otherwise precompiled header is not used
            return []

        # Compiler picks `<header>.gch` up when its directory is searched before header itself
        pch_directory = spec.precompiled_header_object_file.parent
        return [
            f"-I{relativize_to_base(spec.working_directory, pch_directory)}",
            "-include",
            spec.precompiled_header,
        ]

    def source_args(self, spec: CompileSpecification) -> list[str]:
        return [relativize_to_base(spec.working_directory, spec.source_file)]
