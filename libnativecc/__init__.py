"""Native compiler invocation library.

Translates abstract compile specification into exact command line of specific compiler (e.g `cl.exe`, `gcc`),
respecting its flag spelling quirks and command line length limits.
"""

from .compiler import CompileSpecification, NativeCompiler
from .toolchains import Toolchain

__all__ = [
    "CompileSpecification",
    "NativeCompiler",
    "Toolchain",
]
