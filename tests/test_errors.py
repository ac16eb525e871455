import pytest

from vecta.vecta_ast import ASTNode
from vecta.vecta_errors import (
    BinaryOperationError,
    ExpectNodeError,
    ExpectTokenError,
    IllegalValueError,
    UnaryOperationError,
    UnexpectedTokenError,
    VariableError,
    VectaError,
    VectaIndexError,
    VectaNotImplementedError,
    VectaSyntaxError,
)
from vecta.vecta_lexer import Token
from vecta.vecta_position import Position
from vecta.vecta_values import Type, Value

POS = Position(10, 12, 3, 3, 4, 6)


@pytest.mark.parametrize(
    "error,rendered",
    [
        (
            VectaSyntaxError("bad character '$'", POS, "a.vc"),
            "ERROR: bad character '$' - a.vc <ln: 3, column: 4>",
        ),
        (
            ExpectTokenError("GROUP_OUT", Token("NL"), POS, "<shell>"),
            "ERROR: expected ')' got end of line - <shell> <ln: 3, column: 4>",
        ),
        (
            ExpectNodeError("variable", ASTNode("vector"), POS, "<shell>"),
            "ERROR: expected variable got vector - <shell> <ln: 3, column: 4>",
        ),
        (
            UnexpectedTokenError(Token("VECTOR_OUT", "]"), POS, "<shell>"),
            "ERROR: unexpected ']' - <shell> <ln: 3, column: 4>",
        ),
        (
            VectaNotImplementedError("string", POS, "<shell>"),
            "ERROR: not implemented -> string - <shell> <ln: 3, column: 4>",
        ),
        (
            BinaryOperationError(
                "DIVIDE", Value.from_vector([]), Value.from_function("x", ASTNode("variable", "x")), POS, "<shell>"
            ),
            "ERROR: operation '/' cannot be performed on vector and function - <shell> <ln: 3, column: 4>",
        ),
        (
            UnaryOperationError("SUBTRACT", Value.from_vector([]), POS, "<shell>"),
            "ERROR: operation '-' cannot be performed on vector - <shell> <ln: 3, column: 4>",
        ),
        (
            VectaIndexError(1, 5, POS, "<shell>"),
            "ERROR: index 5 out of range, max 1 - <shell> <ln: 3, column: 4>",
        ),
        (
            IllegalValueError(Value.from_vector([]), Type("vector"), POS, "<shell>"),
            "ERROR: vector illegal for vector - <shell> <ln: 3, column: 4>",
        ),
        (
            VariableError("y", POS, "<shell>"),
            "ERROR: variable 'y' is not defined - <shell> <ln: 3, column: 4>",
        ),
    ],
)  # type: ignore[misc]
def test_error_rendering(error: VectaError, rendered: str) -> None:
    assert str(error) == rendered
    assert isinstance(error, VectaError)
    assert error.args == (rendered,)


def test_errors_compare_by_kind_detail_and_position() -> None:
    a = VariableError("y", POS, "<shell>")
    assert a == VariableError("y", POS.copy(), "<shell>")
    assert a != VariableError("z", POS, "<shell>")
    assert a != VariableError("y", Position(), "<shell>")
    assert a != VectaSyntaxError("variable 'y' is not defined", POS, "<shell>")
    assert len({a, VariableError("y", POS, "<shell>")}) == 1


def test_errors_can_be_raised_and_caught_as_base() -> None:
    with pytest.raises(VectaError) as excinfo:
        raise VectaIndexError(0, 3, POS, "x.vc")
    assert excinfo.value.label == "x.vc"
    assert excinfo.value.position is POS


@pytest.mark.parametrize("cls", VectaError.__subclasses__())  # type: ignore[misc]
def test_every_error_kind_is_documented(cls: type[VectaError]) -> None:
    assert cls.__doc__
