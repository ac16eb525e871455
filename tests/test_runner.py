from pathlib import Path

import pytest

from vecta.vecta_interpreter import Context
from vecta.vecta_ast import ASTNode
from vecta.vecta_runner import evaluate, new_context, parse_source, print_tree, run, run_file
from vecta.vecta_values import Value


def test_new_context_is_empty_and_fresh() -> None:
    a, b = new_context(), new_context()
    assert isinstance(a, Context)
    assert len(a) == 0
    a.set("x", Value.from_int(1))
    assert "x" not in b


def test_run_returns_value(capsys: pytest.CaptureFixture[str]) -> None:
    assert run("[1 2 3] + 1", "<shell>", new_context()) == Value.from_vector(
        [Value.from_int(2), Value.from_int(3), Value.from_int(4)]
    )
    assert capsys.readouterr().out == ""


def test_run_keeps_bindings_in_shared_context() -> None:
    context = new_context()
    run("x = 5\n", "<shell>", context)
    assert run("x + 1\n", "<shell>", context) == Value.from_int(6)


def test_run_without_context_uses_fresh_one(capsys: pytest.CaptureFixture[str]) -> None:
    assert run("x = 5", "<shell>") == Value.from_int(5)
    assert run("x", "<shell>") is None
    assert "variable 'x' is not defined" in capsys.readouterr().out


@pytest.mark.parametrize(
    "source,diagnostic",
    [
        ("1 $ 2", "ERROR: bad character '$' - <shell> <ln: 0, column: 2>"),
        ("(1", "ERROR: expected ')' got end of file - <shell> <ln: 0, column: 2>"),
        ("+", "ERROR: unexpected '+' - <shell> <ln: 0, column: 0>"),
        ("[1 2] # 5", "ERROR: index 5 out of range, max 1 - <shell> <ln: 0, column: 0>"),
        ("y", "ERROR: variable 'y' is not defined - <shell> <ln: 0, column: 0>"),
    ],
)  # type: ignore[misc]
def test_run_prints_diagnostic_and_returns_none(
    source: str, diagnostic: str, capsys: pytest.CaptureFixture[str]
) -> None:
    assert run(source, "<shell>", new_context()) is None
    assert capsys.readouterr().out.strip() == diagnostic


def test_lexical_error_prevents_evaluation() -> None:
    context = new_context()
    assert run("x = 1 $", "<shell>", context) is None
    assert "x" not in context


def test_evaluate_raises() -> None:
    from vecta.vecta_errors import VariableError

    with pytest.raises(VariableError):
        evaluate("nope", "<test>", new_context())


def test_run_file(tmp_path: Path) -> None:
    script = tmp_path / "script.vc"
    script.write_text("v = [1 2 3] * 2\n", encoding="utf-8")
    assert run_file(str(script)) == Value.from_vector(
        [Value.from_int(2), Value.from_int(4), Value.from_int(6)]
    )


def test_run_file_uses_path_as_label(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = tmp_path / "bad.vc"
    script.write_text("x = 1\ny = 2\n", encoding="utf-8")
    assert run_file(str(script)) is None
    assert capsys.readouterr().out.strip() == (
        f"ERROR: expected end of file got variable - {script} <ln: 1, column: 0>"
    )


def test_run_file_missing(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run_file(str(tmp_path / "missing.vc")) is None
    out = capsys.readouterr().out
    assert out.startswith("ERROR: ")
    assert "missing.vc" in out


def test_parse_source_returns_tree_and_span() -> None:
    node, position = parse_source("x = 1 + 2", "<shell>")
    assert node.kind == "set"
    assert (position.start, position.end) == (0, 9)


def test_on_parsed_sees_tree_before_evaluation() -> None:
    seen: list[ASTNode] = []
    context = new_context()
    assert run("v = [1 2] # 1", "<shell>", context, seen.append) == Value.from_int(2)
    assert [str(node) for node in seen] == ["((v) = ([(1) (2)] '#' (1)))"]


def test_on_parsed_not_called_on_syntax_error(capsys: pytest.CaptureFixture[str]) -> None:
    seen: list[ASTNode] = []
    assert run("(1", "<shell>", new_context(), seen.append) is None
    assert seen == []
    assert capsys.readouterr().out.startswith("ERROR: expected ')'")


def test_run_file_with_print_tree(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = tmp_path / "neg.vc"
    script.write_text("-[1 2]\n", encoding="utf-8")
    assert run_file(str(script), print_tree) is not None
    assert capsys.readouterr().out.splitlines() == ["[ast] >>> ('-' [(1) (2)])"]
