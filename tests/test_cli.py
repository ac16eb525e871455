import builtins
from pathlib import Path

import pytest

from vecta.vecta_cli import main, run_vecta


def test_string_source(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-s", "[1 2 3] + 1"]) == 0
    assert capsys.readouterr().out.strip() == "[2, 3, 4]"


def test_file_source(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = tmp_path / "script.vc"
    script.write_text("[1 2 3] * [1 2 3]\n", encoding="utf-8")
    assert main([str(script)]) == 0
    assert capsys.readouterr().out.strip() == "[1, 4, 9]"


def test_file_holds_a_single_expression(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = tmp_path / "two.vc"
    script.write_text("sq(x) = x * x\nsq([1 2 3])\n", encoding="utf-8")
    assert main([str(script)]) == 1
    assert capsys.readouterr().out.strip() == (
        f"ERROR: expected end of file got variable - {script} <ln: 1, column: 0>"
    )


def test_error_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-s", "1 +"]) == 1
    assert (
        capsys.readouterr().out.strip()
        == "ERROR: unexpected end of file - <string> <ln: 0, column: 3>"
    )


def test_file_error_uses_path_label(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = tmp_path / "bad.vc"
    script.write_text("\nq\n", encoding="utf-8")
    assert main([str(script)]) == 1
    assert capsys.readouterr().out.strip() == (
        f"ERROR: variable 'q' is not defined - {script} <ln: 1, column: 0>"
    )


def test_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "missing.vc")]) == 1
    assert capsys.readouterr().out.startswith("ERROR: ")


def test_ast_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert run_vecta("1 + 2", is_string=True, show_ast=True) == 0
    assert capsys.readouterr().out.splitlines() == ["[ast] >>> ((1) '+' (2))", "3"]


def test_no_source_starts_repl(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(builtins, "input", lambda prompt: "quit")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Vecta REPL." in out
    assert "Exiting Vecta REPL." in out


def test_repl_flag_with_ast(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    lines = iter(["2 * 3", "quit"])
    monkeypatch.setattr(builtins, "input", lambda prompt: next(lines))
    assert main(["--repl", "--ast"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "[ast] >>> ((2) '*' (3))" in out
    assert "6" in out


def test_file_source_goes_through_run_file(monkeypatch: pytest.MonkeyPatch) -> None:
    from vecta import vecta_cli

    calls: list[tuple[str, object]] = []

    def fake_run_file(path: str, on_parsed: object = None) -> None:
        calls.append((path, on_parsed))
        return None

    monkeypatch.setattr(vecta_cli, "run_file", fake_run_file)
    assert main(["prog.vc", "--ast"]) == 1
    assert calls == [("prog.vc", vecta_cli.print_tree)]
