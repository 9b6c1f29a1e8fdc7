from pathlib import Path

import pytest

from nativecc.cli.arguments import parse_cli_arguments
from nativecc.cli.compile import cli_perform_compile, construct_compile_specification


def test_construct_specification_from_arguments(tmp_path: Path) -> None:
    args = parse_cli_arguments(
        [
            str(tmp_path / "src" / "foo.c"),
            "-t",
            "visualcpp",
            "--working-dir",
            str(tmp_path),
            "--object-dir",
            str(tmp_path / "obj"),
            "-I",
            str(tmp_path / "include"),
            "-DNDEBUG",
            "-O",
            "-Xc=/W4",
            "-Xc=/permissive-",
        ],
    )
    spec = construct_compile_specification(args.source_filepaths[0], args)

    assert spec.source_file == tmp_path / "src" / "foo.c"
    assert spec.object_file.suffix == ".obj"
    assert spec.object_file.is_relative_to(tmp_path / "obj")
    assert spec.working_directory == tmp_path
    assert spec.include_paths == [tmp_path / "include"]
    assert spec.macros == {"NDEBUG": None}
    assert spec.optimized
    assert spec.args == ("/W4", "/permissive-")


def test_dry_run_prints_commands(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    args = parse_cli_arguments(
        [
            str(tmp_path / "foo.c"),
            "-t",
            "gcc",
            "--working-dir",
            str(tmp_path),
            "--scratch-dir",
            str(tmp_path / "scratch"),
            "-o",
            str(tmp_path / "obj" / "foo.o"),
            "-g",
            "--dry-run",
        ],
    )

    assert cli_perform_compile(args) == 0

    output = capsys.readouterr().out.strip().splitlines()
    assert output[-1] == "gcc -x c -c -g -o obj/foo.o foo.c"
    assert (tmp_path / "scratch" / ".gitignore").exists()


def test_dry_run_spills_visualcpp_arguments(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    args = parse_cli_arguments(
        [
            str(tmp_path / "foo.c"),
            "-t",
            "visualcpp",
            "--working-dir",
            str(tmp_path),
            "--scratch-dir",
            str(tmp_path / "scratch"),
            "--dry-run",
        ],
    )

    assert cli_perform_compile(args) == 0

    command = capsys.readouterr().out.strip().splitlines()[-1]
    executable, reference = command.split(" ")
    assert executable == "cl.exe"
    assert reference.startswith("@scratch/options-")
    # Displayed command is runnable as-is
    assert (tmp_path / reference.removeprefix("@")).is_file()


def test_cleanup_options_files(tmp_path: Path) -> None:
    args = parse_cli_arguments(
        [
            str(tmp_path / "foo.c"),
            "-t",
            "visualcpp",
            "--working-dir",
            str(tmp_path),
            "--scratch-dir",
            str(tmp_path / "scratch"),
            "--dry-run",
            "--cleanup-options-files",
        ],
    )

    assert cli_perform_compile(args) == 0
    assert [file.name for file in (tmp_path / "scratch").iterdir()] == [".gitignore"]


def test_compile_failure_exit_code(tmp_path: Path) -> None:
    args = parse_cli_arguments(
        [
            str(tmp_path / "foo.c"),
            "-t",
            "gcc",
            "--compiler",
            str(tmp_path / "missing-compiler"),
            "--working-dir",
            str(tmp_path),
            "--scratch-dir",
            str(tmp_path / "scratch"),
        ],
    )

    # Compiler cannot be spawned
    assert cli_perform_compile(args) == 1
