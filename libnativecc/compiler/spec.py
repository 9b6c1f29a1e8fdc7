from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

type SourceLanguage = Literal["c", "cpp"]

C_SOURCE_SUFFIXES = {".c"}
CPP_SOURCE_SUFFIXES = {".cpp", ".cc", ".cxx", ".c++", ".cp"}


@dataclass(frozen=True)
class CompileSpecification:
    """Request to compile single source file (compile unit) with given settings.

    Consumed once by compiler and never mutated, transformations return new specification.
    """

    source_file: Path
    object_file: Path

    # Compiler process runs here, all paths in arguments are relative to it
    working_directory: Path

    # Scratch directory for auxiliary files (e.g options file)
    temporary_directory: Path

    include_paths: Sequence[Path] = ()

    # Macro name -> value, `None` is for defined without value (e.g `-DNDEBUG`)
    macros: Mapping[str, str | None] = field(default_factory=dict)

    debuggable: bool = False
    optimized: bool = False

    # Inferred from source file suffix if not specified
    language: SourceLanguage | None = None

    # Last included header name and its compiled form, both or neither
    precompiled_header: str | None = None
    precompiled_header_object_file: Path | None = None

    # Free-form arguments from user, passed as-is
    args: Sequence[str] = ()

    @property
    def has_precompiled_header(self) -> bool:
        return (
            self.precompiled_header is not None
            and self.precompiled_header_object_file is not None
        )

    @property
    def has_inconsistent_precompiled_header(self) -> bool:
        """Only one of precompiled header fields is set, so header is not used at all."""
        return (self.precompiled_header is None) != (
            self.precompiled_header_object_file is None
        )

    @property
    def source_language(self) -> SourceLanguage:
        if self.language is not None:
            return self.language
        if self.source_file.suffix.lower() in CPP_SOURCE_SUFFIXES:
            return "cpp"
        return "c"

    def with_args(self, *args: str) -> CompileSpecification:
        """Same specification with additional user arguments."""
        return replace(self, args=(*self.args, *args))
