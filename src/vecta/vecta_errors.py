"""
Diagnostics for the VECTA toolchain.

Every stage of the pipeline (lexer, parser, interpreter) reports failure by raising
one of the exceptions below. All of them derive from `VectaError`, carry the
`Position` of the offending source text and the diagnostic label of the input
(a file path or "<shell>"), and render to a single line:

    ERROR: <detail> - <label> <ln: L, column: C>

Classes:
    VectaError: Base class; holds position, label and the rendered detail.
    VectaSyntaxError: Lexical failure (bad character).
    ExpectTokenError: The parser required a specific token and found another.
    ExpectNodeError: An assignment target has the wrong shape.
    UnexpectedTokenError: No parse rule matches the current token.
    VectaNotImplementedError: A node or operator has no evaluation rule.
    BinaryOperationError / UnaryOperationError: Operand types rejected by dispatch.
    VectaIndexError: Vector index out of bounds.
    IllegalValueError: A value of the wrong type where a specific type is required.
    VariableError: Name not bound in the current context.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from vecta.vecta_constants import token_names
from vecta.vecta_position import Position

if TYPE_CHECKING:  # pragma: no cover
    from vecta.vecta_ast import ASTNode
    from vecta.vecta_lexer import Token
    from vecta.vecta_values import Type, Value


class VectaError(Exception):
    """Base class for every diagnostic raised by the VECTA pipeline.

    Attributes:
        position (Position): Source span the diagnostic points at.
        label (str): Diagnostic label of the input unit.
    """

    def __init__(self, position: Position, label: str) -> None:
        self.position = position
        self.label = label
        super().__init__(str(self))

    def detail(self) -> str:
        """Returns the message part of the diagnostic, without label or position."""
        raise NotImplementedError  # pragma: no cover

    def __str__(self) -> str:
        return f"ERROR: {self.detail()} - {self.label} {self.position}"

    def __eq__(self, other: Any) -> bool:
        return (
            type(self) is type(other)
            and self.detail() == other.detail()
            and self.position == other.position
            and self.label == other.label
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.detail(), self.position, self.label))


class VectaSyntaxError(VectaError):
    """A lexical failure, such as a bad character or an out-of-range int literal.

    Attributes:
        message (str): The detail text, e.g. "bad character '$'".
    """

    def __init__(self, message: str, position: Position, label: str) -> None:
        self.message = message
        super().__init__(position, label)

    def detail(self) -> str:
        return self.message


class ExpectTokenError(VectaError):
    """The parser needed `expected` (e.g. `)` or end of line) but found `got`."""

    def __init__(self, expected: str, got: Token, position: Position, label: str) -> None:
        self.expected = expected
        self.got = got
        super().__init__(position, label)

    def detail(self) -> str:
        return f"expected {token_names[self.expected]} got {self.got.name()}"


class ExpectNodeError(VectaError):
    """An assignment target part was not the node kind required.

    Attributes:
        expected (str): Required node kind, e.g. "variable".
        got (ASTNode): The offending node.
    """

    def __init__(self, expected: str, got: ASTNode, position: Position, label: str) -> None:
        self.expected = expected
        self.got = got
        super().__init__(position, label)

    def detail(self) -> str:
        return f"expected {self.expected} got {self.got.name()}"


class UnexpectedTokenError(VectaError):
    """No atom rule starts with `token`."""

    def __init__(self, token: Token, position: Position, label: str) -> None:
        self.token = token
        super().__init__(position, label)

    def detail(self) -> str:
        return f"unexpected {self.token.name()}"


class VectaNotImplementedError(VectaError):
    """The interpreter met a node kind or operator it has no rule for."""

    def __init__(self, what: str, position: Position, label: str) -> None:
        self.what = what
        super().__init__(position, label)

    def detail(self) -> str:
        return f"not implemented -> {self.what}"


class BinaryOperationError(VectaError):
    """A binary operator has no rule for its operand types.

    Attributes:
        op (str): Operator token type, e.g. "ADD".
        left (Value): Left operand.
        right (Value): Right operand.
    """

    def __init__(
        self, op: str, left: Value, right: Value, position: Position, label: str
    ) -> None:
        self.op = op
        self.left = left
        self.right = right
        super().__init__(position, label)

    def detail(self) -> str:
        return (
            f"operation {token_names[self.op]} cannot be performed on "
            f"{self.left.type_()} and {self.right.type_()}"
        )


class UnaryOperationError(VectaError):
    """A unary operator has no rule for its operand type."""

    def __init__(self, op: str, value: Value, position: Position, label: str) -> None:
        self.op = op
        self.value = value
        super().__init__(position, label)

    def detail(self) -> str:
        return f"operation {token_names[self.op]} cannot be performed on {self.value.type_()}"


class VectaIndexError(VectaError):
    """Raised for `v # i` when `i` is outside `0..=max_index`."""

    def __init__(self, max_index: int, index: int, position: Position, label: str) -> None:
        self.max_index = max_index
        self.index = index
        super().__init__(position, label)

    def detail(self) -> str:
        return f"index {self.index} out of range, max {self.max_index}"


class IllegalValueError(VectaError):
    """A value of the wrong type where `type_` is required.

    Raised for non-scalar vector items and for calling a non-function.
    """

    def __init__(self, value: Value, type_: Type, position: Position, label: str) -> None:
        self.value = value
        self.type = type_
        super().__init__(position, label)

    def detail(self) -> str:
        return f"{self.value.type_()} illegal for {self.type}"


class VariableError(VectaError):
    """A variable was read before any assignment bound it."""

    def __init__(self, name: str, position: Position, label: str) -> None:
        self.name = name
        super().__init__(position, label)

    def detail(self) -> str:
        return f"variable '{self.name}' is not defined"


__all__ = [
    "BinaryOperationError",
    "ExpectNodeError",
    "ExpectTokenError",
    "IllegalValueError",
    "UnaryOperationError",
    "UnexpectedTokenError",
    "VariableError",
    "VectaError",
    "VectaIndexError",
    "VectaNotImplementedError",
    "VectaSyntaxError",
]
