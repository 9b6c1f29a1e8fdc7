"""Invocation of compiler (command line tool) as an process."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from subprocess import PIPE, STDOUT, run
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path


@dataclass(frozen=True)
class CompilerInvocation:
    """Everything required to spawn compiler process."""

    executable: Path
    arguments: Sequence[str]
    working_directory: Path

    # Variables set on top of current environment
    environment: Mapping[str, str] = field(default_factory=dict)

    # Directories prepended to `PATH`
    path: Sequence[Path] = ()

    @property
    def command(self) -> list[str]:
        return [str(self.executable), *self.arguments]


@dataclass(frozen=True)
class InvocationResult:
    command: Sequence[str]
    working_directory: Path
    exit_code: int

    # Captured stdout and stderr (interleaved)
    output: str

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


class CommandLineToolInvocationWorker(Protocol):
    def execute(self, invocation: CompilerInvocation) -> InvocationResult:
        """Run given invocation synchronously and report its exit code with output.

        :raises OSError: Process cannot be spawned
        :raises subprocess.TimeoutExpired: Process is killed after worker timeout
        """
        ...


class SubprocessInvocationWorker:
    """Runs compiler as child process, blocks until it exits."""

    def __init__(self, *, timeout: float | None = None) -> None:
        self.timeout = timeout

    def execute(self, invocation: CompilerInvocation) -> InvocationResult:
        process = run(
            invocation.command,
            cwd=invocation.working_directory,
            env=compose_invocation_environment(invocation),
            stdout=PIPE,
            stderr=STDOUT,
            # Do not raise, caller decides on exit code
            check=False,
            shell=False,
            timeout=self.timeout,
        )
        return InvocationResult(
            command=invocation.command,
            working_directory=invocation.working_directory,
            exit_code=process.returncode,
            output=process.stdout.decode(errors="replace"),
        )


def compose_invocation_environment(
    invocation: CompilerInvocation,
    base: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Environment for compiler process: current (or base) one with invocation specific overrides."""
    environment = dict(os.environ if base is None else base)
    environment.update(invocation.environment)

    if invocation.path:
        search_path = [str(path) for path in invocation.path]
        if current_path := environment.get("PATH"):
            search_path.append(current_path)
        environment["PATH"] = os.pathsep.join(search_path)
    return environment
