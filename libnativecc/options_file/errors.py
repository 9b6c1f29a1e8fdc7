from pathlib import Path

from libnativecc.exceptions import NativeCCError


class OptionsFileWriteError(NativeCCError):
    def __init__(self, *args: object, directory: Path, reason: OSError) -> None:
        super().__init__(*args)
        self.directory = directory
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Unable to write options file!

Tried to pass compiler arguments via options file inside scratch directory '{self.directory}',
but it cannot be created or written: {self.reason}

Compile unit is aborted, check permissions and free space of that directory.

{self.generic_error_name}"""
