import sys

import pytest

from nativecc.executable import (
    MODULE_PROGRAM,
    cli_get_executable_program,
    warn_on_improper_installation,
)


def test_installed_script_program(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "argv", ["/usr/local/bin/nativecc", "foo.c"])
    assert cli_get_executable_program() == "nativecc"


def test_module_program(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "argv", ["/src/nativecc/__main__.py", "foo.c"])
    assert cli_get_executable_program() == MODULE_PROGRAM


def test_warning_only_without_installation(capsys: pytest.CaptureFixture[str]) -> None:
    warn_on_improper_installation("nativecc")
    assert capsys.readouterr().out == ""

    warn_on_improper_installation(MODULE_PROGRAM)
    assert "[WARNING]" in capsys.readouterr().out

    warn_on_improper_installation("main.py")
    assert "'main.py'" in capsys.readouterr().out
