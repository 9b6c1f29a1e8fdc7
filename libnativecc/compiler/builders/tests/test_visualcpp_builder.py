from pathlib import Path

from libnativecc.compiler.builders import VisualCppArgumentsBuilder
from libnativecc.compiler.spec import CompileSpecification
from libnativecc.options_file import OptionsFileSyntax

WORKING_DIRECTORY = Path("/build")


def _spec(**kwargs: object) -> CompileSpecification:
    return CompileSpecification(
        source_file=WORKING_DIRECTORY / "src" / "foo.c",
        object_file=WORKING_DIRECTORY / "obj" / "foo.o",
        working_directory=WORKING_DIRECTORY,
        temporary_directory=WORKING_DIRECTORY / "tmp",
        **kwargs,  # type: ignore[arg-type]
    )


def test_visualcpp_output_args_debuggable() -> None:
    builder = VisualCppArgumentsBuilder()
    spec = _spec(debuggable=True)
    assert builder.output_args(spec, spec.object_file) == [
        "/Fdobj/foo.o.pdb",
        "/Foobj/foo.o",
    ]


def test_visualcpp_output_args_not_debuggable() -> None:
    builder = VisualCppArgumentsBuilder()
    spec = _spec(debuggable=False)
    assert builder.output_args(spec, spec.object_file) == ["/Foobj/foo.o"]


def test_visualcpp_output_args_outside_working_directory() -> None:
    builder = VisualCppArgumentsBuilder()
    spec = _spec()
    assert builder.output_args(spec, Path("/out/foo.obj")) == ["/Fo../out/foo.obj"]


def test_visualcpp_pch_args() -> None:
    builder = VisualCppArgumentsBuilder()
    spec = _spec(
        precompiled_header="stdafx.h",
        precompiled_header_object_file=Path("/build/pch/stdafx.pch"),
    )
    assert builder.pch_args(spec) == [
        "/Yustdafx.h",
        f"/Fp{Path('/build/pch/stdafx.pch').absolute()}",
    ]


def test_visualcpp_pch_args_requires_both_fields() -> None:
    builder = VisualCppArgumentsBuilder()
    assert builder.pch_args(_spec()) == []
    assert builder.pch_args(_spec(precompiled_header="stdafx.h")) == []
    assert (
        builder.pch_args(
            _spec(precompiled_header_object_file=Path("/build/pch/stdafx.pch")),
        )
        == []
    )


def test_visualcpp_common_args() -> None:
    builder = VisualCppArgumentsBuilder()
    spec = _spec(
        include_paths=[Path("/build/include"), Path("/sdk/include")],
        macros={"NDEBUG": None, "VERSION": "2"},
        debuggable=True,
        optimized=True,
    )
    assert builder.common_args(spec) == [
        "/nologo",
        "/c",
        "/Zi",
        "/O2",
        "/TC",
        "/DNDEBUG",
        "/DVERSION=2",
        "/Iinclude",
        "/I../sdk/include",
    ]


def test_visualcpp_common_args_cpp_source() -> None:
    builder = VisualCppArgumentsBuilder()
    args = builder.common_args(_spec(language="cpp"))
    assert args == ["/nologo", "/c", "/TP", "/EHsc"]


def test_visualcpp_source_args() -> None:
    builder = VisualCppArgumentsBuilder()
    assert builder.source_args(_spec()) == ["src/foo.c"]


def test_visualcpp_options_file_syntax() -> None:
    assert VisualCppArgumentsBuilder().options_file_syntax == OptionsFileSyntax.MSVC


def test_visualcpp_linker_arguments_stay_on_command_line() -> None:
    builder = VisualCppArgumentsBuilder()
    assert builder.spill_boundary(["/c", "foo.c", "/link", "/DEBUG"]) == 2
    assert builder.spill_boundary(["/c", "foo.c"]) == 2
