from __future__ import annotations

from typing import TYPE_CHECKING

from libnativecc.compiler import (
    CompileSpecification,
    CompilerInvocationError,
    NativeCompiler,
    object_file_for_source,
)
from libnativecc.invocation import SemaphoreWorkerLeaseService
from nativecc.cache.directory import cleanup_scratch_directory, prepare_scratch_directory
from nativecc.cli.output import cli_compiler_output, cli_message

if TYPE_CHECKING:
    from pathlib import Path

    from libnativecc.compiler import CompileOutcome
    from libnativecc.invocation import MessageLevel
    from nativecc.cli.arguments import CLIArguments


def cli_perform_compile(args: CLIArguments) -> int:
    """Compile all input source files, return exit code for CLI."""
    prepare_scratch_directory(args.scratch_directory)

    compiler = NativeCompiler(
        args.toolchain,
        worker_leases=SemaphoreWorkerLeaseService(args.jobs),
        on_message=lambda level, text: _cli_message(level, text, args=args),
    )
    specs = [
        construct_compile_specification(source, args)
        for source in args.source_filepaths
    ]
    cli_message(
        level="INFO",
        text=f"Compiling {len(specs)} source file(s) with {compiler.builder.name} ({args.toolchain.executable})...",
        verbose=args.verbose,
    )

    try:
        if args.dry_run:
            for spec in specs:
                invocation = compiler.prepare_invocation(spec)
                print(" ".join(invocation.command))
            return 0

        for spec in specs:
            spec.object_file.parent.mkdir(parents=True, exist_ok=True)
        outcomes = compiler.compile_all(specs, max_workers=args.jobs)
    finally:
        if args.cleanup_options_files:
            cleanup_scratch_directory(args.scratch_directory)

    return _report_outcomes(outcomes, verbose=args.verbose)


def construct_compile_specification(
    source: Path,
    args: CLIArguments,
) -> CompileSpecification:
    """Specification for single source file from CLI arguments."""
    return CompileSpecification(
        source_file=source.absolute(),
        object_file=_object_file_for(source, args).absolute(),
        working_directory=args.working_directory,
        temporary_directory=args.scratch_directory,
        include_paths=[path.absolute() for path in args.include_paths],
        macros=args.definitions,
        debuggable=args.debug_symbols,
        optimized=args.optimize,
        language=args.language,
        precompiled_header=args.precompiled_header,
        precompiled_header_object_file=args.precompiled_header_object_file,
    ).with_args(*args.compiler_flags)


def _object_file_for(source: Path, args: CLIArguments) -> Path:
    if args.output_filepath is not None:
        return args.output_filepath
    if args.object_directory is not None:
        return object_file_for_source(
            source,
            args.object_directory,
            args.toolchain.object_file_suffix,
        )
    # Single source without output, object is placed into working directory
    return args.working_directory / source.with_suffix(args.toolchain.object_file_suffix).name


def _report_outcomes(outcomes: list[CompileOutcome], *, verbose: bool) -> int:
    exit_code = 0
    for outcome in outcomes:
        if outcome.result is not None:
            cli_compiler_output(outcome.result.output)
        if outcome.error is None:
            continue
        cli_message("ERROR", repr(outcome.error))
        if exit_code == 0:
            exit_code = (
                isinstance(outcome.error, CompilerInvocationError)
                and outcome.error.exit_code
            ) or 1

    failed = sum(1 for outcome in outcomes if not outcome.succeeded)
    cli_message(
        level="INFO" if failed == 0 else "ERROR",
        text=f"Compiled {len(outcomes) - failed} of {len(outcomes)} source file(s).",
        verbose=verbose,
    )
    return exit_code


def _cli_message(level: MessageLevel, text: str, *, args: CLIArguments) -> None:
    cli_message(level, text, verbose=args.verbose)
