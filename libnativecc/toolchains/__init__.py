from .infer_host import infer_host_toolchain
from .toolchain import Toolchain, ToolchainFamily

__all__ = ["Toolchain", "ToolchainFamily", "infer_host_toolchain"]
