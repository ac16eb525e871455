"""
Defines the abstract syntax tree (AST) node structure for the VECTA language.

Classes:
    ASTNode:
        Represents a node in the syntax tree produced by the parser and walked by
        the interpreter. Every node carries the `Position` of the source it covers.

    ASTDict:
        TypedDict representation for serializing ASTNode instances to plain Python
        dictionaries, suitable for JSON output or debugging.

Node kinds:
    int, float (value = the literal)
    infinity, pi
    variable (value = name)
    vector (children = items)
    binary (value = operator token type, children = [left, right])
    unary (value = operator token type, children = [operand])
    set (children = [target, value]); a `call` target defines a function
    call (children = [callee, argument])

Each child is owned by exactly one parent; the parser never shares subtrees.

Example:
    node = ASTNode("binary", "ADD", [ASTNode("int", 1), ASTNode("int", 2)])
"""

from typing import Any, TypedDict

from vecta.vecta_constants import token_names
from vecta.vecta_position import Position


class ASTDict(TypedDict, total=False):
    """
    TypedDict representation of an ASTNode used for serialization.

    Fields:
        kind (str): The type of AST node (e.g., "binary", "call", "vector").
        value (Any): The node's literal value, variable name or operator.
        line (int): Line where the node starts.
        col (int): Column where the node starts.
        children (List[ASTDict]): Child nodes.
    """

    kind: str
    value: Any
    line: int
    col: int
    children: list["ASTDict"]


_node_names: dict[str, str] = {
    "binary": "binary operation",
    "unary": "unary operation",
    "set": "assignment",
    "call": "function call",
}


class ASTNode:
    """
    Represents a node in the abstract syntax tree (AST) for the VECTA language.

    Args:
        kind (str): The type of node (e.g., "int", "binary", "set").
        value (Any, optional): Literal payload, variable name or operator token type.
        children (list[ASTNode], optional): Child nodes, each with its own position.
        position (Position, optional): Source span covered by the node.

    Methods:
        name(): Human-readable node name for diagnostics.
        to_dict(): Converts the node (and all descendants) into a nested dictionary.
    """

    def __init__(
        self,
        kind: str,
        value: Any = None,
        children: list["ASTNode"] | None = None,
        position: Position | None = None,
    ):
        self.kind = kind
        self.value = value
        self.children: list["ASTNode"] = children or []
        self.position = position if position is not None else Position()

    def name(self) -> str:
        return _node_names.get(self.kind, self.kind)

    def __repr__(self) -> str:
        parts = [f"{self.kind}"]
        if self.value is not None:
            parts.append(f"value={repr(self.value)}")
        if self.children:
            preview = ", ".join(repr(c) for c in self.children[:3])
            if len(self.children) > 3:
                preview += ", ..."
            parts.append(f"children=[{preview}]")
        return f"ASTNode({', '.join(parts)})"

    def __str__(self) -> str:
        if self.kind in ("int", "float", "variable"):
            return f"({self.value})"
        if self.kind == "pi":
            return "(pi)"
        if self.kind == "infinity":
            return "(inf)"
        if self.kind == "vector":
            return "[" + " ".join(str(c) for c in self.children) + "]"
        if self.kind == "binary":
            left, right = self.children
            return f"({left} {token_names[self.value]} {right})"
        if self.kind == "unary":
            return f"({token_names[self.value]} {self.children[0]})"
        if self.kind == "set":
            target, value = self.children
            return f"({target} = {value})"
        if self.kind == "call":
            callee, arg = self.children
            return f"({callee} {arg})"
        return f"({self.kind})"

    def __eq__(self, other: Any) -> bool:
        """Structural equality; positions are not compared."""
        if not isinstance(other, ASTNode):
            return False
        return (
            self.kind == other.kind
            and self.value == other.value
            and self.children == other.children
        )

    def to_dict(self) -> ASTDict:
        return {
            "kind": self.kind,
            "value": self.value,
            "line": self.position.line_start,
            "col": self.position.column_start,
            "children": [c.to_dict() for c in self.children],
        }
