from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from libnativecc.compiler.spec import CompileSpecification
from libnativecc.options_file import OptionsFileSyntax
from libnativecc.toolchains.toolchain import ToolchainFamily


class CompilerArgumentsBuilderProtocol(ABC):
    """Knows exact flag spellings of single compiler family.

    All methods are pure functions of compile specification: they never touch filesystem or spawn processes.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def options_file_syntax(self) -> OptionsFileSyntax:
        """Rules that compiler uses to read options file."""
        raise NotImplementedError

    @abstractmethod
    def common_args(self, spec: CompileSpecification) -> list[str]:
        """Arguments shared by every compilation: tool flags, language mode, macros and include paths."""
        ...

    @abstractmethod
    def output_args(self, spec: CompileSpecification, object_file: Path) -> list[str]:
        """Arguments naming output object file (and debug database if compiler emits one)."""
        ...

    @abstractmethod
    def pch_args(self, spec: CompileSpecification) -> list[str]:
        """Arguments to reuse precompiled header, empty unless both header and its object are set."""
        ...

    @abstractmethod
    def source_args(self, spec: CompileSpecification) -> list[str]:
        """Source file itself, placed last."""
        ...

    def spill_boundary(self, arguments: Sequence[str]) -> int:
        """Index of first argument that must stay on command line when spilling into options file."""
        return len(arguments)

    @classmethod
    def from_family(cls, family: ToolchainFamily) -> "CompilerArgumentsBuilderProtocol":
        """Construct builder for given (supported) toolchain family."""
        _ = family
        return cls()

    @classmethod
    @abstractmethod
    def is_supported(cls, family: ToolchainFamily) -> bool:
        """Is given toolchain family supported by that builder?."""
        ...
