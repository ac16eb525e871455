"""
Runtime values and type tags for the VECTA interpreter.

Classes:
    Type: Runtime type tag (int, float, vector, function(param)). Used in
        diagnostics and by the `is` operator.
    Value: An immutable runtime value. Build instances with `Value.from_int`,
        `Value.from_float`, `Value.from_vector` and `Value.from_function`.

A function value captures only its parameter name and its unevaluated body.
It holds no reference to the context it was defined in.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover
    from vecta.vecta_ast import ASTNode

SCALAR_KINDS = ("int", "float")


class Type:
    """Runtime type of a Value.

    Attributes:
        kind (str): "int", "float", "vector" or "function".
        param (str | None): Parameter name for function types, so two functions
            only share a type when their parameter names match.
    """

    def __init__(self, kind: str, param: str | None = None) -> None:
        self.kind = kind
        self.param = param

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Type) and (self.kind, self.param) == (other.kind, other.param)

    def __hash__(self) -> int:
        return hash((self.kind, self.param))

    def __repr__(self) -> str:
        if self.param is not None:
            return f"Type({self.kind}, {self.param!r})"
        return f"Type({self.kind})"

    def __str__(self) -> str:
        return self.kind


class Value:
    """A VECTA runtime value.

    Attributes:
        kind (str): One of "int", "float", "vector", "function".
        data (Any): The Python int or float, the list of element Values, or the
            function body node.
        param (str | None): Parameter name, for functions only.
    """

    __slots__ = ("kind", "data", "param")

    def __init__(self, kind: str, data: Any, param: str | None = None) -> None:
        self.kind = kind
        self.data = data
        self.param = param

    @classmethod
    def from_int(cls, value: int) -> Value:
        return cls("int", value)

    @classmethod
    def from_float(cls, value: float) -> Value:
        return cls("float", value)

    @classmethod
    def from_vector(cls, items: list[Value]) -> Value:
        return cls("vector", list(items))

    @classmethod
    def from_function(cls, param: str, body: ASTNode) -> Value:
        return cls("function", body, param)

    def type_(self) -> Type:
        return Type(self.kind, self.param)

    def is_scalar(self) -> bool:
        return self.kind in SCALAR_KINDS

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Value)
            and self.kind == other.kind
            and self.param == other.param
            and self.data == other.data
        )

    def __hash__(self) -> int:
        if self.kind == "vector":
            return hash((self.kind, tuple(self.data)))
        if self.kind == "function":
            return hash((self.kind, self.param))
        return hash((self.kind, self.data))

    def __repr__(self) -> str:
        if self.kind == "function":
            return f"Value(function, {self.param!r}, {self.data})"
        return f"Value({self.kind}, {self.data!r})"

    def __str__(self) -> str:
        if self.kind == "int":
            return str(self.data)
        if self.kind == "float":
            if math.isnan(self.data):
                return "NaN"
            if math.isinf(self.data):
                return "inf" if self.data > 0 else "-inf"
            return repr(self.data)
        if self.kind == "vector":
            return "[" + ", ".join(str(v) for v in self.data) + "]"
        return f"function({self.param})"


__all__ = ["Type", "Value"]
