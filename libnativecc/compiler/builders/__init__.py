"""Compiler arguments builders, one per compiler family."""

from ._builder_protocol import CompilerArgumentsBuilderProtocol
from ._get_arguments_builder import get_arguments_builder
from .gcc import GccArgumentsBuilder
from .visualcpp import VisualCppArgumentsBuilder

__all__ = [
    "CompilerArgumentsBuilderProtocol",
    "GccArgumentsBuilder",
    "VisualCppArgumentsBuilder",
    "get_arguments_builder",
]
