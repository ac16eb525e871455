"""
Lexical analyzer for the VECTA expression language.

This module converts raw source text into a list of tokens, each carrying the
`Position` of the text it was read from.

Classes:
    CharacterStream: Reads characters while tracking byte offset, line and column.
    Token: A single token with type, payload value and source position.
    Lexer: Converts a CharacterStream into a sequence of tokens.

Functions:
    lex(text, label): Tokenizes a whole input unit, appending a trailing EOF token.

Features:
    - Skips spaces, tabs, carriage returns and form feeds
    - Collapses a run of newlines into a single NL token
    - Recognizes integers, floats, identifiers and the keywords `is`, `pi`, `inf`/`infinity`
    - Longest-match recognition of operators (`<=` before `<`)

Raises:
    VectaSyntaxError: On the first unrecognized character. Lexing never recovers.

Example:
    >>> [tok.type for tok in lex("x = [1 2.5]", "<shell>")]
    ['VARIABLE', 'EQUAL', 'VECTOR_IN', 'INT', 'FLOAT', 'VECTOR_OUT', 'EOF']
"""

import logging
from typing import Any

from vecta.vecta_constants import (
    INT_MAX,
    WHITESPACE,
    reserved_words,
    token_hashmap,
    token_names,
)
from vecta.vecta_errors import VectaSyntaxError
from vecta.vecta_position import Position

logger = logging.getLogger(__name__)


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


class CharacterStream:
    """
    Reads characters from a source string with offset, line and column tracking.

    Lines and columns are 0-based. `offset` counts bytes of the UTF-8 encoding so
    positions agree with tools that index the file as bytes.

    Attributes:
        source (str): The input source string.
        index (int): Current character index in the source.
        offset (int): Current byte offset in the source.
        line (int): Current line number.
        column (int): Current column number.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.index = 0
        self.offset = 0
        self.line = 0
        self.column = 0

    def next(self) -> str:
        """Consumes and returns the next character.

        Raises:
            EOFError: If reading past the end of the source.
        """
        if self.index >= len(self.source):
            raise EOFError(
                f"CharacterStreamError: Attempted to read past end of source at index=<{self.index}>, line=<{self.line}>"
            )
        char = self.source[self.index]
        if char == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += 1
        self.index += 1
        self.offset += len(char.encode("utf-8"))
        return char

    def peek(self, offset: int = 0) -> str:
        """Returns the character `offset` places ahead, or "" when out of bounds."""
        index = self.index + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def end_of_file(self) -> bool:
        return self.index >= len(self.source)


class Token:
    """A single lexical token.

    Equality is structural over `type` and `value` only; two tokens read from
    different places in the source compare equal when their kind and payload match.

    Attributes:
        type (str): Canonical token type (e.g. 'INT', 'ADD', 'NL', 'EOF').
        value (Any): Payload: an int, a float, a variable name, or the matched lexeme.
        position (Position): Source span of the token.
    """

    def __init__(self, type_: str, value: Any = None, position: Position | None = None):
        self.type = type_
        self.value = value
        self.position = position if position is not None else Position()

    def name(self) -> str:
        """Returns the human-readable name used in diagnostics."""
        return token_names.get(self.type, self.type.lower())

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value!r})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Token)
            and self.type == other.type
            and self.value == other.value
        )

    def __hash__(self) -> int:
        return hash((self.type, self.value))


class Lexer:
    """Lexical analyzer for VECTA.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
    """

    def __init__(self, stream: CharacterStream) -> None:
        self.stream = stream

    def peek(self, offset: int = 0) -> str:
        return self.stream.peek(offset)

    def advance(self) -> str:
        return self.stream.next()

    def skip_whitespace(self) -> None:
        while not self.stream.end_of_file() and self.peek() in WHITESPACE:
            self.advance()

    def span_from(self, start: int, line: int, col: int) -> Position:
        """Builds the position of a lexeme that began at (start, line, col)."""
        return Position(start, self.stream.offset, line, self.stream.line, col, self.stream.column)

    def match_operator(self) -> Token | None:
        """Attempts to match the longest operator or delimiter at the current position.

        Returns:
            Token | None: A Token if a match is found, otherwise None.
        """
        start, line, col = self.stream.offset, self.stream.line, self.stream.column
        max_token = None
        match_len = 0
        candidate = ""

        for i in range(2):
            ch = self.peek(i)
            if ch == "" or _is_letter(ch):
                break
            candidate += ch
            if candidate in token_hashmap:
                max_token = candidate
                match_len = i + 1

        if max_token:
            for _ in range(match_len):
                self.advance()
            return Token(token_hashmap[max_token], max_token, self.span_from(start, line, col))

        return None

    def error_token(self, lexeme: str, start: int, line: int, col: int) -> Token:
        # Bad characters point at a single column, whatever the lexeme's width.
        return Token(
            "ERROR", lexeme, Position(start, self.stream.offset, line, line + 1, col, col + 1)
        )

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream.

        Unrecognized input is returned as an 'ERROR' token; `lex` turns it into a
        `VectaSyntaxError`.
        """
        self.skip_whitespace()

        start, line, col = self.stream.offset, self.stream.line, self.stream.column

        if self.stream.end_of_file():
            return Token("EOF", None, Position(start, start, line, line, col, col))

        ch = self.peek()

        # 1. Newlines
        if ch == "\n":
            count = 0
            while self.peek() == "\n":
                self.advance()
                count += 1
            return Token(
                "NL", "\n" * count, Position(start, self.stream.offset, line, line + count, col, col + count)
            )

        # 2. Identifier or keyword
        if _is_letter(ch):
            ident = ""
            while not self.stream.end_of_file() and (
                _is_letter(self.peek()) or _is_digit(self.peek()) or self.peek() == "_"
            ):
                ident += self.advance()
            if ident in reserved_words:
                return Token(token_hashmap[ident], ident, self.span_from(start, line, col))
            return Token("VARIABLE", ident, self.span_from(start, line, col))

        # 3. Integer or float
        if _is_digit(ch):
            num = ""
            while _is_digit(self.peek()):
                num += self.advance()
            if self.peek() == "." and _is_digit(self.peek(1)):
                num += self.advance()
                while _is_digit(self.peek()):
                    num += self.advance()
                return Token("FLOAT", float(num), self.span_from(start, line, col))
            value = int(num)
            if value > INT_MAX:
                return self.error_token(num, start, line, col)
            return Token("INT", value, self.span_from(start, line, col))

        # 4. Operator or delimiter
        token = self.match_operator()
        if token:
            return token

        # 5. Unknown character
        return self.error_token(self.advance(), start, line, col)


def lex(text: str, label: str) -> list[Token]:
    """Tokenizes `text`, stopping at the first bad character.

    Args:
        text (str): The source text.
        label (str): Diagnostic label for error messages.

    Returns:
        list[Token]: All tokens, ending with exactly one 'EOF' token.

    Raises:
        VectaSyntaxError: If an unrecognized character is encountered.
    """
    lexer = Lexer(CharacterStream(text))
    tokens: list[Token] = []
    while True:
        tok = lexer.next_token()
        if tok.type == "ERROR":
            raise VectaSyntaxError(f"bad character '{tok.value}'", tok.position, label)
        tokens.append(tok)
        if tok.type == "EOF":
            break
    logger.debug("lexed %d tokens from %s", len(tokens), label)
    return tokens


__all__ = ["CharacterStream", "Lexer", "Token", "lex", "token_hashmap"]
