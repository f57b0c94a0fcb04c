import importlib
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from tash import __version__

cli_app_module = importlib.import_module("tash.cli.app")


def _invoke(input_text: str, *args: str):
    runner = CliRunner()
    return runner.invoke(cli_app_module.app, ["--no-interactive", *args], input=input_text)


def test_exit_builtin_exits_zero() -> None:
    result = _invoke("exit 3\n")
    assert result.exit_code == 0


def test_end_of_input_exits_zero() -> None:
    result = _invoke("")
    assert result.exit_code == 0


def test_help_output() -> None:
    result = _invoke("help\nexit\n")
    assert result.exit_code == 0
    assert "The Amazing SHell:TASH!" in result.output
    assert "  cd\n" in result.output


def test_failing_external_command_does_not_change_exit_code() -> None:
    result = _invoke(f"{sys.executable} -c raise(SystemExit(5))\n")
    assert result.exit_code == 0


def test_cd_then_eof(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(Path.cwd())
    result = _invoke(f"cd {tmp_path}\n")
    assert result.exit_code == 0
    assert Path.cwd() == tmp_path.resolve()


def test_allocation_error_exits_one(monkeypatch: pytest.MonkeyPatch) -> None:
    from tash.errors import AllocationError
    from tash.loop import InteractionLoop

    def _boom(self) -> None:
        raise AllocationError("no memory")

    monkeypatch.setattr(InteractionLoop, "run", _boom)
    result = _invoke("exit\n")
    assert result.exit_code == 1


def test_version_flag() -> None:
    result = CliRunner().invoke(cli_app_module.app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_null_byte_line_does_not_end_the_shell(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    result = _invoke(f"cd a\x00b\ncd {tmp_path}\nexit\n")
    assert result.exit_code == 0
    assert Path.cwd() == tmp_path.resolve()
