from pathlib import Path

from libnativecc.compiler.builders import GccArgumentsBuilder
from libnativecc.compiler.spec import CompileSpecification
from libnativecc.options_file import OptionsFileSyntax

WORKING_DIRECTORY = Path("/build")


def _spec(**kwargs: object) -> CompileSpecification:
    return CompileSpecification(
        source_file=WORKING_DIRECTORY / "src" / "foo.cpp",
        object_file=WORKING_DIRECTORY / "obj" / "foo.o",
        working_directory=WORKING_DIRECTORY,
        temporary_directory=WORKING_DIRECTORY / "tmp",
        **kwargs,  # type: ignore[arg-type]
    )


def test_gcc_output_args_are_separate() -> None:
    builder = GccArgumentsBuilder()
    spec = _spec(debuggable=True)
    # No separate debug database
    assert builder.output_args(spec, spec.object_file) == ["-o", "obj/foo.o"]


def test_gcc_common_args() -> None:
    builder = GccArgumentsBuilder()
    spec = _spec(
        include_paths=[Path("/build/include")],
        macros={"NDEBUG": None, "LEVEL": "3"},
        debuggable=True,
        optimized=True,
    )
    assert builder.common_args(spec) == [
        "-x",
        "c++",
        "-c",
        "-g",
        "-O3",
        "-DNDEBUG",
        "-DLEVEL=3",
        "-Iinclude",
    ]


def test_gcc_common_args_explicit_language() -> None:
    builder = GccArgumentsBuilder()
    assert builder.common_args(_spec(language="c")) == ["-x", "c", "-c"]


def test_gcc_pch_args() -> None:
    builder = GccArgumentsBuilder()
    spec = _spec(
        precompiled_header="common.h",
        precompiled_header_object_file=Path("/build/pch/common.h.gch"),
    )
    assert builder.pch_args(spec) == ["-Ipch", "-include", "common.h"]
    assert builder.pch_args(_spec(precompiled_header="common.h")) == []


def test_gcc_source_args() -> None:
    assert GccArgumentsBuilder().source_args(_spec()) == ["src/foo.cpp"]


def test_gcc_builder_family_name() -> None:
    assert GccArgumentsBuilder().name == "gcc"
    assert GccArgumentsBuilder.from_family("clang").name == "clang"
    assert GccArgumentsBuilder().options_file_syntax == OptionsFileSyntax.GCC


def test_gcc_spills_everything() -> None:
    arguments = ["-c", "foo.c", "-o", "foo.o"]
    assert GccArgumentsBuilder().spill_boundary(arguments) == len(arguments)
