from libnativecc.compiler.errors import UnknownToolchainFamilyError
from libnativecc.toolchains.toolchain import Toolchain

from ._builder_protocol import CompilerArgumentsBuilderProtocol
from .gcc import GccArgumentsBuilder
from .visualcpp import VisualCppArgumentsBuilder


def get_arguments_builder(toolchain: Toolchain) -> CompilerArgumentsBuilderProtocol:
    """Get arguments builder for family of that toolchain.

    Selected once at configuration time, compiler itself never inspects builder type.
    :raises UnknownToolchainFamilyError: No builder supports that family
    """
    for builder in (VisualCppArgumentsBuilder, GccArgumentsBuilder):
        if not builder.is_supported(toolchain.family):
            continue
        return builder.from_family(toolchain.family)
    raise UnknownToolchainFamilyError(family=toolchain.family)
