from pathlib import Path

from libnativecc.compiler import CompileSpecification


def _spec(source: str, **kwargs: object) -> CompileSpecification:
    return CompileSpecification(
        source_file=Path(source),
        object_file=Path("foo.o"),
        working_directory=Path("/build"),
        temporary_directory=Path("/build/tmp"),
        **kwargs,  # type: ignore[arg-type]
    )


def test_source_language_inferred_from_suffix() -> None:
    assert _spec("foo.c").source_language == "c"
    assert _spec("foo.cpp").source_language == "cpp"
    assert _spec("foo.cc").source_language == "cpp"
    assert _spec("FOO.CXX").source_language == "cpp"
    assert _spec("foo.s").source_language == "c"


def test_source_language_explicit() -> None:
    assert _spec("foo.c", language="cpp").source_language == "cpp"


def test_precompiled_header_consistency() -> None:
    assert not _spec("foo.c").has_precompiled_header
    assert not _spec("foo.c").has_inconsistent_precompiled_header

    partial = _spec("foo.c", precompiled_header="stdafx.h")
    assert not partial.has_precompiled_header
    assert partial.has_inconsistent_precompiled_header

    full = _spec(
        "foo.c",
        precompiled_header="stdafx.h",
        precompiled_header_object_file=Path("stdafx.pch"),
    )
    assert full.has_precompiled_header
    assert not full.has_inconsistent_precompiled_header


def test_with_args_returns_new_specification() -> None:
    spec = _spec("foo.c", args=["-Wall"])
    extended = spec.with_args("-Werror", "-Wextra")

    assert extended.args == ("-Wall", "-Werror", "-Wextra")
    assert spec.args == ["-Wall"]
