from pathlib import Path

import pytest

from nativecc.cli.arguments import DEFAULT_SCRATCH_DIRECTORY, parse_cli_arguments


def test_parse_single_source() -> None:
    args = parse_cli_arguments(
        [
            "foo.c",
            "-t",
            "gcc",
            "-o",
            "build/foo.o",
            "-I",
            "include",
            "-DNDEBUG",
            "-DVERSION=2",
            "-g",
            "-j",
            "4",
        ],
    )

    assert args.source_filepaths == [Path("foo.c")]
    assert args.output_filepath == Path("build/foo.o")
    assert args.object_directory is None
    assert args.include_paths == [Path("include")]
    assert args.definitions == {"NDEBUG": None, "VERSION": "2"}
    assert args.debug_symbols
    assert not args.optimize
    assert args.jobs == 4
    assert args.toolchain.family == "gcc"
    assert args.working_directory == Path.cwd()
    assert args.scratch_directory == (Path.cwd() / DEFAULT_SCRATCH_DIRECTORY)


def test_parse_toolchain_overrides() -> None:
    args = parse_cli_arguments(
        [
            "foo.c",
            "--toolchain",
            "visualcpp",
            "--compiler",
            "C:/msvc/bin/cl.exe",
            "--no-options-file",
        ],
    )
    assert args.toolchain.family == "visualcpp"
    assert args.toolchain.executable == Path("C:/msvc/bin/cl.exe")
    assert not args.toolchain.use_options_file

    default = parse_cli_arguments(["foo.c", "-t", "visualcpp"])
    assert default.toolchain.use_options_file


def test_parse_compiler_flags() -> None:
    args = parse_cli_arguments(["foo.c", "-t", "clang", "-Xc=-Wall", "-Xc=-Werror"])
    assert args.compiler_flags == ["-Wall", "-Werror"]


def test_parse_precompiled_header() -> None:
    args = parse_cli_arguments(
        ["foo.cpp", "-t", "visualcpp", "--pch-header", "stdafx.h", "--pch-object", "stdafx.pch"],
    )
    assert args.precompiled_header == "stdafx.h"
    assert args.precompiled_header_object_file == Path("stdafx.pch")


def test_parse_requires_source_files() -> None:
    with pytest.raises(SystemExit):
        parse_cli_arguments(["-t", "gcc"])


def test_parse_several_sources_require_object_directory() -> None:
    with pytest.raises(SystemExit):
        parse_cli_arguments(["a.c", "b.c", "-t", "gcc"])
    with pytest.raises(SystemExit):
        parse_cli_arguments(["a.c", "b.c", "-t", "gcc", "-o", "a.o"])

    args = parse_cli_arguments(["a.c", "b.c", "-t", "gcc", "--object-dir", "obj"])
    assert args.object_directory == Path("obj")


def test_parse_output_and_object_directory_are_exclusive() -> None:
    with pytest.raises(SystemExit):
        parse_cli_arguments(["a.c", "-o", "a.o", "--object-dir", "obj"])


def test_parse_unknown_toolchain() -> None:
    with pytest.raises(SystemExit):
        parse_cli_arguments(["a.c", "-t", "tcc"])


def test_parse_rejects_non_positive_jobs(capsys: pytest.CaptureFixture[str]) -> None:
    for jobs in ("0", "-1"):
        with pytest.raises(SystemExit) as exc_info:
            parse_cli_arguments(["a.c", "-t", "gcc", "-j", jobs])
        assert exc_info.value.code == 1
    assert "must be at least 1" in capsys.readouterr().err
