"""
Tree-walking interpreter for VECTA ASTs.

Functions:
    binary(op, left, right): Numeric dispatch for a binary operator.
    unary(op, value): Numeric dispatch for a unary operator.
    interpret(node, position, label, context): Evaluates a node against a context.

Classes:
    Context: Insertion-ordered variable bindings, mutated in place by assignment.
    DispatchError: Raised by `binary`/`unary` when the operand types are rejected.

Numeric rules:
    - int (+ - * % ^) int stays int, wrapping to 64 bits; `/` always yields a float.
    - A float operand promotes the other side to float.
    - inf / inf is inf, not NaN; x / 0 follows IEEE-754.
    - vector (op) scalar broadcasts; vector (op) vector zips up to the shorter length.
    - Comparisons yield int 1 or 0.

Function calls run the body in a brand-new Context holding only the function
itself (under the name it was called through) and its parameter. Nothing from
the caller's context is visible inside the call, and nothing leaks back out.
"""

import logging
import math
import operator
from collections.abc import Callable, Iterator
from typing import Any

from vecta.vecta_ast import ASTNode
from vecta.vecta_constants import INT_MAX, INT_MIN
from vecta.vecta_errors import (
    BinaryOperationError,
    ExpectNodeError,
    IllegalValueError,
    UnaryOperationError,
    VariableError,
    VectaIndexError,
    VectaNotImplementedError,
)
from vecta.vecta_position import Position
from vecta.vecta_values import Type, Value

logger = logging.getLogger(__name__)


class DispatchError(Exception):
    """The operator has no rule for the given operand types."""


class Context:
    """Variable bindings for one evaluation scope.

    The REPL keeps a single Context alive across inputs; every function call
    gets a fresh one.
    """

    def __init__(self, bindings: dict[str, Value] | None = None) -> None:
        self.bindings: dict[str, Value] = dict(bindings or {})

    def set(self, name: str, value: Value) -> None:
        """Binds `name`, replacing any earlier binding."""
        self.bindings[name] = value

    def get(self, name: str) -> Value:
        """Returns the value bound to `name`.

        Raises:
            KeyError: If `name` is unbound.
        """
        return self.bindings[name]

    def __contains__(self, name: object) -> bool:
        """Returns True if `name` is bound."""
        return name in self.bindings

    def __len__(self) -> int:
        """Returns the number of bindings."""
        return len(self.bindings)

    def __iter__(self) -> Iterator[str]:
        """Iterates over bound names in insertion order."""
        return iter(self.bindings)

    def items(self) -> list[tuple[str, Value]]:
        """Returns a snapshot of `(name, value)` pairs in insertion order."""
        return list(self.bindings.items())

    def __repr__(self) -> str:
        return f"Context({self.bindings!r})"


def wrap_int(value: int) -> int:
    """Wraps an arbitrary Python int into the signed 64-bit range."""
    if INT_MIN <= value <= INT_MAX:
        return value
    return ((value - INT_MIN) % (1 << 64)) + INT_MIN


def ieee_divide(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _modulo(a: Any, b: Any) -> Any:
    if b == 0:
        raise DispatchError("modulo by zero")
    return a % b


def _float_power(a: float, b: float) -> float:
    """`math.pow`, returning the IEEE-754 infinity or NaN where it would raise."""
    odd = b.is_integer() and b % 2 == 1
    try:
        return math.pow(a, b)
    except OverflowError:
        return -math.inf if a < 0 and odd else math.inf
    except ValueError:
        if a == 0:
            return math.copysign(math.inf, a) if odd else math.inf
        return math.nan


int_ops: dict[str, Callable[[int, int], Any]] = {
    "ADD": operator.add,
    "SUBTRACT": operator.sub,
    "MULTIPLY": operator.mul,
    "MODULO": _modulo,
}

float_ops: dict[str, Callable[[float, float], float]] = {
    "ADD": operator.add,
    "SUBTRACT": operator.sub,
    "MULTIPLY": operator.mul,
    "DIVIDE": ieee_divide,
    "MODULO": _modulo,
    "POWER": _float_power,
}

compare_ops: dict[str, Callable[[Any, Any], bool]] = {
    "EQUAL": operator.eq,
    "NOT_EQUAL": operator.ne,
    "LESS": operator.lt,
    "GREATER": operator.gt,
    "LESS_EQUAL": operator.le,
    "GREATER_EQUAL": operator.ge,
}

arithmetic_tokens = frozenset(float_ops)
binary_tokens = arithmetic_tokens | frozenset(compare_ops) | {"HASHTAG", "TYPE_EQ"}
unary_tokens = frozenset({"SUBTRACT"})

INFINITY = Value.from_float(math.inf)


def _truth(flag: bool) -> Value:
    return Value.from_int(1 if flag else 0)


def _scalar_arith(op: str, left: Value, right: Value) -> Value:
    if left.kind == "int" and right.kind == "int":
        if op == "DIVIDE":
            return Value.from_float(ieee_divide(float(left.data), float(right.data)))
        if op == "POWER":
            if right.data >= 0:
                return Value.from_int(wrap_int(pow(left.data, right.data, 1 << 64)))
            return Value.from_float(_float_power(float(left.data), float(right.data)))
        return Value.from_int(wrap_int(int_ops[op](left.data, right.data)))
    if op == "DIVIDE" and left == INFINITY and right == INFINITY:
        return INFINITY
    return Value.from_float(float_ops[op](float(left.data), float(right.data)))


def _compare(op: str, left: Value, right: Value) -> Value:
    if left.is_scalar() and right.is_scalar():
        if left.kind == "int" and right.kind == "int":
            return _truth(compare_ops[op](left.data, right.data))
        return _truth(compare_ops[op](float(left.data), float(right.data)))
    if left.kind == "vector" and right.kind == "vector":
        element_op = "EQUAL" if op == "NOT_EQUAL" else op
        if op in ("EQUAL", "NOT_EQUAL") and len(left.data) != len(right.data):
            return _truth(op == "NOT_EQUAL")
        holds = True
        for a, b in zip(left.data, right.data):
            holds = binary(element_op, a, b).data != 0
            if not holds:
                break
        return _truth(not holds if op == "NOT_EQUAL" else holds)
    raise DispatchError(op)


def binary(op: str, left: Value, right: Value) -> Value:
    """Applies binary operator `op` (a token type) to two values.

    Raises:
        DispatchError: If `op` has no rule for these operand types.
    """
    if op in arithmetic_tokens:
        if left.is_scalar() and right.is_scalar():
            return _scalar_arith(op, left, right)
        if left.kind == "vector" and right.is_scalar():
            return Value.from_vector([binary(op, v, right) for v in left.data])
        if left.kind == "vector" and right.kind == "vector":
            return Value.from_vector(
                [binary(op, a, b) for a, b in zip(left.data, right.data)]
            )
        raise DispatchError(op)
    if op in compare_ops:
        return _compare(op, left, right)
    if op == "HASHTAG":
        if left.kind == "vector" and right.kind == "int":
            if 0 <= right.data < len(left.data):
                return left.data[right.data]
        raise DispatchError(op)
    if op == "TYPE_EQ":
        return _truth(left.type_() == right.type_())
    raise DispatchError(op)


def unary(op: str, value: Value) -> Value:
    """Applies unary operator `op` to a value.

    Raises:
        DispatchError: If `op` has no rule for this operand type.
    """
    if op == "SUBTRACT":
        if value.kind == "int":
            return Value.from_int(wrap_int(-value.data))
        if value.kind == "float":
            return Value.from_float(-value.data)
        if value.kind == "vector":
            return Value.from_vector([unary(op, v) for v in value.data])
    raise DispatchError(op)


def interpret(node: ASTNode, position: Position, label: str, context: Context) -> Value:
    """Evaluates `node` against `context`.

    Args:
        node (ASTNode): The node to evaluate.
        position (Position): Source span of `node`, used in diagnostics.
        label (str): Diagnostic label of the input unit.
        context (Context): Variable bindings; mutated by assignments.

    Returns:
        Value: The result of the evaluation.

    Raises:
        VectaError: The first semantic error encountered.
    """
    kind = node.kind

    if kind == "int":
        return Value.from_int(node.value)
    if kind == "float":
        return Value.from_float(node.value)
    if kind == "infinity":
        return Value.from_float(math.inf)
    if kind == "pi":
        return Value.from_float(math.pi)

    if kind == "variable":
        try:
            return context.get(node.value)
        except KeyError:
            raise VariableError(node.value, position, label) from None

    if kind == "vector":
        items: list[Value] = []
        for child in node.children:
            value = interpret(child, child.position, label, context)
            if not value.is_scalar():
                raise IllegalValueError(value, Type("vector"), child.position, label)
            items.append(value)
        return Value.from_vector(items)

    if kind == "binary":
        left_node, right_node = node.children
        left = interpret(left_node, left_node.position, label, context)
        right = interpret(right_node, right_node.position, label, context)
        if node.value not in binary_tokens:
            raise VectaNotImplementedError(f"operator {node.value}", position, label)
        try:
            return binary(node.value, left, right)
        except DispatchError:
            if node.value == "HASHTAG" and left.kind == "vector" and right.kind == "int":
                raise VectaIndexError(len(left.data) - 1, right.data, position, label) from None
            raise BinaryOperationError(node.value, left, right, position, label) from None

    if kind == "unary":
        operand_node = node.children[0]
        value = interpret(operand_node, operand_node.position, label, context)
        if node.value not in unary_tokens:
            raise VectaNotImplementedError(f"operator {node.value}", position, label)
        try:
            return unary(node.value, value)
        except DispatchError:
            raise UnaryOperationError(node.value, value, position, label) from None

    if kind == "set":
        return _assign(node, label, context)

    if kind == "call":
        return _call(node, label, context)

    raise VectaNotImplementedError(kind, position, label)


def _assign(node: ASTNode, label: str, context: Context) -> Value:
    target, body = node.children
    if target.kind == "variable":
        value = interpret(body, body.position, label, context)
        context.set(target.value, value)
        return value
    if target.kind == "call":
        name, param = target.children
        for part in (name, param):
            if part.kind != "variable":
                raise ExpectNodeError("variable", part, part.position, label)
        function = Value.from_function(param.value, body)
        context.set(name.value, function)
        return function
    raise ExpectNodeError("variable", target, target.position, label)


def _call(node: ASTNode, label: str, context: Context) -> Value:
    callee, arg = node.children
    argument = interpret(arg, arg.position, label, context)
    function = interpret(callee, callee.position, label, context)
    if function.kind != "function":
        raise IllegalValueError(function, Type("function"), callee.position, label)

    frame = Context()
    if callee.kind == "variable":
        frame.set(callee.value, function)
    frame.set(function.param, argument)
    logger.debug("call %s(%s = %s)", callee, function.param, argument)
    body: ASTNode = function.data
    return interpret(body, body.position, label, frame)


__all__ = ["Context", "DispatchError", "binary", "interpret", "unary"]
