"""
VECTA Language Parser

Parses a VECTA token list into an abstract syntax tree of `ASTNode` objects.

The parser is a classic recursive-descent / precedence-climbing parser. Each
precedence level is a method; every binary step widens the span of the
accumulated left operand with `Position.extend`, so the resulting node's
position covers its entire source text.

Grammar (lowest binding first)
------------------------------
    program    := NL* expr NL* EOF
    expr       := (variable | call) '=' expr | comparison
    comparison := arith (('=' | '!=' | '<' | '>' | '<=' | '>=' | 'is') arith)*
    arith      := term (('+' | '-') term)*
    term       := power (('*' | '/' | '%') power)*
    power      := hash ('^' hash)*
    hash       := factor ('#' factor)*
    factor     := '-' factor | call
    call       := atom ('(' expr ')')*
    atom       := INT | FLOAT | VARIABLE | 'pi' | 'inf' | '(' expr ')' | '[' expr* ']'

Assignment is right-associative and only applies when the left side is a
variable or a call; otherwise '=' is equality. A call requires the '(' to touch
the callee, so `[f (1)]` is a two-element vector and `f(1)` is a call.

Raises
------
UnexpectedTokenError
    No atom rule matches the current token.
ExpectTokenError
    A required terminator (')', end of line, end of file) is missing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from vecta.vecta_ast import ASTNode
from vecta.vecta_constants import arith_tokens, comparison_tokens, term_tokens
from vecta.vecta_errors import ExpectTokenError, UnexpectedTokenError
from vecta.vecta_lexer import Token
from vecta.vecta_position import Position

logger = logging.getLogger(__name__)


class Parser:
    """
    VECTA Parser Class

    Attributes
    ----------
    tokens : list[Token]
        The input token stream, terminated by an 'EOF' token.
    label : str
        Diagnostic label used in error messages.
    position : int
        Current index into the token stream.
    """

    def __init__(self, tokens: list[Token], label: str = "<shell>") -> None:
        self.tokens: list[Token] = tokens
        self.label: str = label
        self.position: int = 0

    def current(self) -> Token:
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        last = self.tokens[-1].position if self.tokens else Position()
        return Token("EOF", None, Position(last.end, last.end, last.line_end, last.line_end, last.column_end, last.column_end))

    def advance(self) -> Token:
        self.position += 1
        return self.current()

    def skip_newlines(self) -> None:
        while self.current().type == "NL":
            self.advance()

    def expect(self, type_: str) -> Token:
        tok = self.current()
        if tok.type != type_:
            raise ExpectTokenError(type_, tok, tok.position, self.label)
        return tok

    def parse(self) -> tuple[ASTNode, Position]:
        """Parse a whole input unit: one expression, optional newlines, then EOF."""
        self.skip_newlines()
        node = self.parse_expr()
        if self.current().type != "EOF":
            self.expect("NL")
            self.skip_newlines()
            self.expect("EOF")
        logger.debug("parsed %s", node)
        return node, node.position

    def parse_expr(self) -> ASTNode:
        left = self.parse_arith()
        if self.current().type == "EQUAL" and left.kind in ("variable", "call"):
            self.advance()
            value = self.parse_expr()
            pos = left.position.copy()
            pos.extend(value.position)
            return ASTNode("set", children=[left, value], position=pos)
        return self.parse_binary_loop(left, comparison_tokens, self.parse_arith)

    def parse_binary_loop(
        self, left: ASTNode, ops: tuple[str, ...], operand: Callable[[], ASTNode]
    ) -> ASTNode:
        """Folds `left (op operand)*` into left-associative binary nodes."""
        while self.current().type in ops:
            op = self.current().type
            self.advance()
            right = operand()
            pos = left.position.copy()
            pos.extend(right.position)
            left = ASTNode("binary", op, [left, right], pos)
        return left

    def parse_arith(self) -> ASTNode:
        return self.parse_binary_loop(self.parse_term(), arith_tokens, self.parse_term)

    def parse_term(self) -> ASTNode:
        return self.parse_binary_loop(self.parse_power(), term_tokens, self.parse_power)

    def parse_power(self) -> ASTNode:
        return self.parse_binary_loop(self.parse_hash(), ("POWER",), self.parse_hash)

    def parse_factor(self) -> ASTNode:
        tok = self.current()
        if tok.type == "SUBTRACT":
            self.advance()
            operand = self.parse_factor()
            pos = tok.position.copy()
            pos.extend(operand.position)
            return ASTNode("unary", "SUBTRACT", [operand], pos)
        return self.parse_call()

    def parse_hash(self) -> ASTNode:
        return self.parse_binary_loop(self.parse_factor(), ("HASHTAG",), self.parse_factor)

    def parse_call(self) -> ASTNode:
        """Parses an atom followed by any number of touching `(arg)` applications.

        The touch test uses the end of the last consumed token, so a grouped
        callee such as `(f)(7)` is measured from its closing ')'.
        """
        node = self.parse_atom()
        while (
            self.current().type == "GROUP_IN"
            and self.current().position.start == self.tokens[self.position - 1].position.end
        ):
            self.advance()
            arg = self.parse_expr()
            closing = self.expect("GROUP_OUT")
            self.advance()
            pos = node.position.copy()
            pos.extend(closing.position)
            node = ASTNode("call", children=[node, arg], position=pos)
        return node

    def parse_atom(self) -> ASTNode:
        tok = self.current()
        pos = tok.position.copy()

        if tok.type in ("INT", "FLOAT", "VARIABLE"):
            self.advance()
            return ASTNode(tok.type.lower(), tok.value, position=pos)

        if tok.type in ("INFINITY", "PI"):
            self.advance()
            return ASTNode(tok.type.lower(), position=pos)

        if tok.type == "GROUP_IN":
            self.advance()
            node = self.parse_expr()
            self.expect("GROUP_OUT")
            self.advance()
            return node

        if tok.type == "VECTOR_IN":
            self.advance()
            items: list[ASTNode] = []
            while self.current().type != "VECTOR_OUT":
                item = self.parse_expr()
                pos.extend(item.position)
                items.append(item)
            pos.extend(self.current().position)
            self.advance()
            return ASTNode("vector", children=items, position=pos)

        raise UnexpectedTokenError(tok, tok.position, self.label)


def parse(tokens: list[Token], label: str) -> tuple[ASTNode, Position]:
    """Parses a token list produced by `lex` into `(node, position)`."""
    return Parser(tokens, label).parse()


__all__ = ["Parser", "parse"]
