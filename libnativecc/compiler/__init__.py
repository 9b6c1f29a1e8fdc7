"""Compiler package that translates compile specification into compiler invocation.

Workflow for single source file:
- Specification is (optionally) transformed by spec transformers
- Arguments builder of toolchain family composes arguments (common -> output -> precompiled header -> user -> source)
- If command line is too long (or toolchain always wants that) arguments are spilled into options file
- Compiler process is invoked inside build operation scope and under worker lease
"""

from .compiler import CompileOutcome, CompileState, NativeCompiler
from .errors import CompilerInvocationError, UnknownToolchainFamilyError
from .naming import object_file_for_source
from .spec import CompileSpecification

__all__ = [
    "CompileOutcome",
    "CompileSpecification",
    "CompileState",
    "CompilerInvocationError",
    "NativeCompiler",
    "UnknownToolchainFamilyError",
    "object_file_for_source",
]
