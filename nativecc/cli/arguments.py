from __future__ import annotations

from argparse import ArgumentParser
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal, cast

from libnativecc.toolchains import Toolchain, infer_host_toolchain
from nativecc.cli.output import cli_fatal_abort
from nativecc.executable import cli_get_executable_program, warn_on_improper_installation

if TYPE_CHECKING:
    from argparse import Namespace
    from collections.abc import Sequence

DEFAULT_SCRATCH_DIRECTORY = ".nativecc-cache"


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole compile process."""

    source_filepaths: list[Path]

    # Exactly one of them is set
    output_filepath: Path | None
    object_directory: Path | None

    working_directory: Path
    scratch_directory: Path

    include_paths: list[Path]
    definitions: dict[str, str | None]

    debug_symbols: bool
    optimize: bool
    language: Literal["c", "cpp"] | None

    precompiled_header: str | None
    precompiled_header_object_file: Path | None

    compiler_flags: list[str]

    jobs: int | None
    dry_run: bool
    cleanup_options_files: bool

    verbose: bool
    cli_debug_user_friendly_errors: bool

    toolchain: Toolchain


def parse_cli_arguments(argv: Sequence[str] | None = None) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    parser = _construct_argument_parser()
    args = parser.parse_args(argv)

    source_filepaths = [Path(path) for path in args.source_files]
    if not source_filepaths:
        cli_fatal_abort(text="No source files specified, has nothing to compile")

    output_filepath = Path(args.output) if args.output else None
    object_directory = Path(args.object_directory) if args.object_directory else None
    if output_filepath is None and object_directory is None:
        if len(source_filepaths) > 1:
            cli_fatal_abort(
                text="Several source files require object directory (--object-dir) instead of output file",
            )
    elif output_filepath is not None and len(source_filepaths) > 1:
        cli_fatal_abort(
            text="Output file (-o) cannot be used with several source files, use --object-dir",
        )

    if args.jobs is not None and args.jobs < 1:
        cli_fatal_abort(
            text=f"Jobs count (-j) must be at least 1, got {args.jobs}",
        )

    return CLIArguments(
        source_filepaths=source_filepaths,
        output_filepath=output_filepath,
        object_directory=object_directory,
        working_directory=Path(args.working_directory).absolute(),
        scratch_directory=Path(args.scratch_directory).absolute(),
        include_paths=[Path(include) for include in args.include],
        definitions=_process_definitions(args),
        debug_symbols=args.debug_symbols,
        optimize=args.optimize,
        language=args.language,
        precompiled_header=args.precompiled_header,
        precompiled_header_object_file=(
            Path(args.precompiled_header_object_file)
            if args.precompiled_header_object_file
            else None
        ),
        compiler_flags=cast("list[str]", args.compiler_flags),
        jobs=args.jobs,
        dry_run=args.dry_run,
        cleanup_options_files=args.cleanup_options_files,
        verbose=args.verbose,
        cli_debug_user_friendly_errors=not args.cli_debug,
        toolchain=_process_toolchain(args),
    )


def _process_definitions(args: Namespace) -> dict[str, str | None]:
    """Process CLI propagated macro definitions, `NAME` or `NAME=VALUE`."""
    definitions: dict[str, str | None] = {}
    for cli_definition in cast("list[str]", args.definitions):
        if "=" in cli_definition:
            name, value = cli_definition.split("=", maxsplit=1)
            definitions[name] = value
            continue
        definitions[cli_definition] = None
    return definitions


def _process_toolchain(args: Namespace) -> Toolchain:
    """Toolchain from family flag (or host one) with user overrides."""
    toolchain = (
        Toolchain.from_family(args.toolchain)
        if args.toolchain
        else infer_host_toolchain()
    )
    if toolchain is None:
        return cli_fatal_abort(
            text="Unable to infer toolchain due to no fallback for current operating system, specify --toolchain",
        )

    if args.compiler_executable:
        toolchain = toolchain.with_executable(Path(args.compiler_executable))
    if args.use_options_file is not None:
        toolchain = toolchain.with_options_file(use_options_file=args.use_options_file)
    return toolchain


def _construct_argument_parser() -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    prog = cli_get_executable_program()
    warn_on_improper_installation(prog)

    parser = ArgumentParser(
        description="nativecc - Compile native sources with given toolchain (Visual C++, GCC, Clang) handling its argument quirks and command line length limits",
        add_help=True,
        usage=f"{prog} files... [options] [-o output_file | --object-dir directory]",
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "source_files",
        help="Source files to compile",
        nargs="*",
        default=[],
    )

    output_group = parser.add_argument_group("Output")
    output_argument_group = output_group.add_mutually_exclusive_group(required=False)
    output_argument_group.add_argument(
        "-o",
        dest="output",
        required=False,
        help="Object file emitted by compiler, only for single source file",
    )
    output_argument_group.add_argument(
        "--object-dir",
        dest="object_directory",
        required=False,
        help="Directory for object files, each named after its source file",
    )
    output_group.add_argument(
        "--working-dir",
        dest="working_directory",
        default=".",
        help="Directory that compiler runs in, paths in arguments are relative to it. Defaults to current directory",
    )
    output_group.add_argument(
        "--scratch-dir",
        dest="scratch_directory",
        default=DEFAULT_SCRATCH_DIRECTORY,
        help=f"Directory for options files. Defaults to '{DEFAULT_SCRATCH_DIRECTORY}'",
    )

    toolchain_group = parser.add_argument_group("Toolchain")
    toolchain_group.add_argument(
        "--toolchain",
        "-t",
        dest="toolchain",
        required=False,
        choices=["visualcpp", "gcc", "clang"],
        help="Compiler family, inferred from host system when omitted",
    )
    toolchain_group.add_argument(
        "--compiler",
        dest="compiler_executable",
        required=False,
        help="Compiler executable path to use instead of default one for toolchain",
    )
    options_file_group = toolchain_group.add_mutually_exclusive_group()
    options_file_group.add_argument(
        "--options-file",
        dest="use_options_file",
        action="store_true",
        help="Always pass arguments via options file",
    )
    options_file_group.add_argument(
        "--no-options-file",
        dest="use_options_file",
        action="store_false",
        help="Use options file only when command line is too long",
    )
    toolchain_group.set_defaults(use_options_file=None)
    toolchain_group.add_argument(
        "--cleanup-options-files",
        action="store_true",
        help="Remove options files from scratch directory after compilation",
    )
    toolchain_group.add_argument(
        "-Xc",
        dest="compiler_flags",
        action="append",
        default=[],
        metavar="flag",
        help="Additional flag propagated into compiler as-is (use -Xc=-flag for dashed flags)",
    )

    compile_group = parser.add_argument_group("Compilation")
    compile_group.add_argument(
        "-I",
        "--include",
        dest="include",
        action="append",
        default=[],
        metavar="directory",
        help="Include search path",
    )
    compile_group.add_argument(
        "-D",
        "--define",
        dest="definitions",
        action="append",
        default=[],
        metavar="NAME[=VALUE]",
        help="Macro definition",
    )
    compile_group.add_argument(
        "--debug-symbols",
        "-g",
        action="store_true",
        help="Emit debug information (and debug database for Visual C++)",
    )
    compile_group.add_argument(
        "--optimize",
        "-O",
        action="store_true",
        help="Enable compiler optimizations",
    )
    compile_group.add_argument(
        "--language",
        "-x",
        choices=["c", "cpp"],
        default=None,
        help="Source language, inferred from source file suffix when omitted",
    )
    compile_group.add_argument(
        "--pch-header",
        dest="precompiled_header",
        default=None,
        help="Precompiled header name (last included header), requires --pch-object",
    )
    compile_group.add_argument(
        "--pch-object",
        dest="precompiled_header_object_file",
        default=None,
        help="Compiled precompiled header object file, requires --pch-header",
    )

    runner_group = parser.add_argument_group("Runner")
    runner_group.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=None,
        help="Maximum compiler processes running at once. Defaults to CPU count",
    )
    runner_group.add_argument(
        "--dry-run",
        action="store_true",
        help="Only display commands that would be executed. Options files are still written into scratch directory, so displayed @file references are valid",
    )
    runner_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="If passed will enable INFO level logs",
    )
    runner_group.add_argument(
        "--cli-debug",
        action="store_true",
        help="Do not convert internal errors into user-friendly ones (show traceback)",
    )

    return parser
