"""Compiler that drives any toolchain family through its arguments builder.

Single compilation goes through states:
`ASSEMBLING` -> (`SPILLING`) -> `INVOKING` -> `COMPLETED` | `FAILED`
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum, auto
from subprocess import SubprocessError, TimeoutExpired
from typing import TYPE_CHECKING

from libnativecc.compiler.builders import get_arguments_builder
from libnativecc.compiler.errors import CompilerInvocationError
from libnativecc.exceptions import NativeCCError
from libnativecc.invocation import (
    CompilerInvocation,
    SemaphoreWorkerLeaseService,
    SubprocessInvocationWorker,
    TimedBuildOperationExecutor,
)
from libnativecc.options_file import (
    OptionsFileWriteError,
    OptionsFileWriter,
    quote_argument,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from libnativecc.compiler.builders import CompilerArgumentsBuilderProtocol
    from libnativecc.compiler.spec import CompileSpecification
    from libnativecc.invocation import (
        BuildOperationExecutor,
        CommandLineToolInvocationWorker,
        InvocationResult,
        MessageLevel,
        OnMessage,
        WorkerLeaseService,
    )
    from libnativecc.toolchains import Toolchain

type SpecTransformer = Callable[[CompileSpecification], CompileSpecification]
type ArgumentsStage = Callable[[CompileSpecification], list[str]]
type OnStateChange = Callable[[CompileSpecification, CompileState], None]


class CompileState(Enum):
    """State of single compilation."""

    # Composing arguments from specification
    ASSEMBLING = auto()

    # Writing arguments into options file
    SPILLING = auto()

    # Compiler process is running
    INVOKING = auto()

    COMPLETED = auto()
    FAILED = auto()


@dataclass(frozen=True)
class CompileOutcome:
    """Result of single compilation within batch, either result or an error."""

    spec: CompileSpecification
    result: InvocationResult | None
    error: NativeCCError | None

    @property
    def succeeded(self) -> bool:
        return self.error is None


class NativeCompiler:
    """Compiles sources with given toolchain.

    Safe to use from several threads for independent specifications,
    each compilation works on its own arguments list and options file.
    """

    def __init__(  # noqa: PLR0913
        self,
        toolchain: Toolchain,
        builder: CompilerArgumentsBuilderProtocol | None = None,
        *,
        invocation_worker: CommandLineToolInvocationWorker | None = None,
        build_operations: BuildOperationExecutor | None = None,
        worker_leases: WorkerLeaseService | None = None,
        spec_transformers: Sequence[SpecTransformer] = (),
        on_message: OnMessage | None = None,
        on_state_change: OnStateChange | None = None,
    ) -> None:
        self.toolchain = toolchain
        self.builder = builder or get_arguments_builder(toolchain)
        self.invocation_worker = invocation_worker or SubprocessInvocationWorker()
        self.build_operations = build_operations or TimedBuildOperationExecutor(
            on_message,
        )
        self.worker_leases = worker_leases or SemaphoreWorkerLeaseService()
        self.spec_transformers = tuple(spec_transformers)
        self.on_message = on_message
        self.on_state_change = on_state_change

    def transform_spec(self, spec: CompileSpecification) -> CompileSpecification:
        for transformer in self.spec_transformers:
            spec = transformer(spec)
        return spec

    def build_arguments(self, spec: CompileSpecification) -> list[str]:
        """Compose full arguments list for specification, without options file indirection.

        Order is fixed as compilers are order-sensitive:
        common arguments, output, precompiled header, user arguments and source file last.
        """
        return self._assemble_arguments(self.transform_spec(spec))

    def _assemble_arguments(self, spec: CompileSpecification) -> list[str]:
        stages: tuple[ArgumentsStage, ...] = (
            self.builder.common_args,
            lambda s: self.builder.output_args(s, s.object_file),
            self.builder.pch_args,
            lambda s: list(s.args),
            self.builder.source_args,
        )

        arguments: list[str] = []
        for stage in stages:
            arguments.extend(stage(spec))
        return arguments

    def requires_options_file(self, arguments: Sequence[str]) -> bool:
        """Should given arguments be passed via options file instead of command line."""
        if self.toolchain.use_options_file:
            return True
        limit = self.toolchain.command_line_length_limit
        if limit is None:
            return False
        syntax = self.builder.options_file_syntax
        command = (str(self.toolchain.executable), *arguments)
        length = sum(len(quote_argument(arg, syntax)) + 1 for arg in command) - 1
        return length > limit

    def prepare_invocation(self, spec: CompileSpecification) -> CompilerInvocation:
        """Assemble arguments and spill them into options file if required.

        :raises OptionsFileWriteError: Options file cannot be written
        """
        self._set_state(spec, CompileState.ASSEMBLING)
        if spec.has_inconsistent_precompiled_header:
            self._emit(
                "WARNING",
                f"Precompiled header for '{spec.source_file}' is ignored: both header name and its object file must be specified",
            )

        transformed = self.transform_spec(spec)
        arguments = self._assemble_arguments(transformed)

        if self.requires_options_file(arguments):
            self._set_state(spec, CompileState.SPILLING)
            writer = OptionsFileWriter(
                self.builder.options_file_syntax,
                working_directory=transformed.working_directory,
                temporary_directory=transformed.temporary_directory,
                spill_boundary=self.builder.spill_boundary,
            )
            try:
                writer.apply(arguments)
            except OptionsFileWriteError:
                self._set_state(spec, CompileState.FAILED)
                raise

        return CompilerInvocation(
            executable=self.toolchain.executable,
            arguments=arguments,
            working_directory=transformed.working_directory,
            environment=self.toolchain.environment,
            path=self.toolchain.path,
        )

    def compile(self, spec: CompileSpecification) -> InvocationResult:
        """Compile single source file, blocking until compiler exits.

        :raises OptionsFileWriteError: Options file cannot be written, compiler is not invoked
        :raises CompilerInvocationError: Compiler cannot be spawned, timed out or exited with non-zero code
        """
        invocation = self.prepare_invocation(spec)

        self._set_state(spec, CompileState.INVOKING)
        operation_name = f"Compiling {spec.source_file.name} ({self.builder.name})"
        with (
            self.build_operations.operation(operation_name),
            self.worker_leases.lease(),
        ):
            try:
                result = self.invocation_worker.execute(invocation)
            except (OSError, SubprocessError) as e:
                # Not spawned at all or killed on timeout, there is no exit code
                self._set_state(spec, CompileState.FAILED)
                raise CompilerInvocationError(
                    command=invocation.command,
                    source_file=spec.source_file,
                    exit_code=None,
                    output=_interrupted_invocation_output(e),
                ) from e

            if not result.succeeded:
                self._set_state(spec, CompileState.FAILED)
                raise CompilerInvocationError(
                    command=result.command,
                    source_file=spec.source_file,
                    exit_code=result.exit_code,
                    output=result.output,
                )

        self._set_state(spec, CompileState.COMPLETED)
        return result

    def compile_all(
        self,
        specs: Iterable[CompileSpecification],
        *,
        max_workers: int | None = None,
    ) -> list[CompileOutcome]:
        """Compile independent specifications concurrently.

        Failure of one compilation does not affect others, outcomes are in same order as specifications.
        """
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(self._compile_outcome, specs))

    def _compile_outcome(self, spec: CompileSpecification) -> CompileOutcome:
        try:
            result = self.compile(spec)
        except NativeCCError as e:
            return CompileOutcome(spec=spec, result=None, error=e)
        return CompileOutcome(spec=spec, result=result, error=None)

    def _set_state(self, spec: CompileSpecification, state: CompileState) -> None:
        if self.on_state_change:
            self.on_state_change(spec, state)

    def _emit(self, level: MessageLevel, text: str) -> None:
        if self.on_message:
            self.on_message(level, text)


def _interrupted_invocation_output(error: OSError | SubprocessError) -> str:
    """Error text with output compiler managed to emit before being killed (if any)."""
    if not isinstance(error, TimeoutExpired) or not error.output:
        return str(error)

    partial_output = error.output
    if isinstance(partial_output, bytes):
        partial_output = partial_output.decode(errors="replace")
    return f"{partial_output.rstrip()}\n{error}"
