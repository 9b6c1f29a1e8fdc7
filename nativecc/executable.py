"""Name of running program as user has invoked it, shown in usage line and warnings."""

from __future__ import annotations

import sys
from pathlib import Path

from nativecc.cli.output import cli_message

MODULE_PROGRAM = "python -m nativecc"


def cli_get_executable_program() -> str:
    """Installed script name (e.g `nativecc`), or module invocation when run via `python -m nativecc`."""
    entry = Path(sys.argv[0])
    if entry.name == "__main__.py" and entry.parent.name == "nativecc":
        return MODULE_PROGRAM
    return entry.name


def warn_on_improper_installation(program: str) -> None:
    """Warn if CLI is not run through installed script, e.g from source checkout."""
    if program != MODULE_PROGRAM and not program.endswith(".py"):
        return
    cli_message(
        level="WARNING",
        text=f"Running as '{program}' instead of installed 'nativecc' script, consider `pip install .`",
        verbose=True,  # Shown before verbosity flag is parsed
    )
