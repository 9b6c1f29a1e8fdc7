from platform import system

from libnativecc.toolchains.toolchain import Toolchain


def infer_host_toolchain() -> Toolchain | None:
    """Try to infer native toolchain from current system."""
    match system():
        case "Windows":
            return Toolchain.from_family("visualcpp")
        case "Darwin":
            return Toolchain.from_family("clang")
        case "Linux":
            return Toolchain.from_family("gcc")
        case _:
            return None
