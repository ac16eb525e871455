"""
Token tables shared by the VECTA lexer, parser and diagnostics.

Exports:
    token_hashmap: Maps every fixed lexeme (operators, delimiters, keywords) to its
        canonical token type.
    reserved_words: The subset of `token_hashmap` that looks like an identifier.
    token_names: Human-readable token names used in error messages.
    comparison_tokens / arith_tokens / term_tokens: Operator groups per precedence level.
"""

token_hashmap: dict[str, str] = {
    # Comparison
    "=": "EQUAL",
    "!=": "NOT_EQUAL",
    "<": "LESS",
    ">": "GREATER",
    "<=": "LESS_EQUAL",
    ">=": "GREATER_EQUAL",
    # Arithmetic
    "+": "ADD",
    "-": "SUBTRACT",
    "*": "MULTIPLY",
    "/": "DIVIDE",
    "^": "POWER",
    "%": "MODULO",
    "#": "HASHTAG",
    # Delimiters
    "(": "GROUP_IN",
    ")": "GROUP_OUT",
    "[": "VECTOR_IN",
    "]": "VECTOR_OUT",
    "{": "BRACE_IN",
    "}": "BRACE_OUT",
    # Keywords
    "is": "TYPE_EQ",
    "pi": "PI",
    "inf": "INFINITY",
    "infinity": "INFINITY",
}

reserved_words: frozenset[str] = frozenset(k for k in token_hashmap if k.isalpha())

WHITESPACE = " \t\r\f"

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

token_names: dict[str, str] = {
    "WS": "white space",
    "ERROR": "error",
    "NL": "end of line",
    "EOF": "end of file",
    "INT": "int",
    "FLOAT": "float",
    "INFINITY": "infinity",
    "PI": "pi",
    "VARIABLE": "variable",
    "TYPE_EQ": "'is'",
}
token_names.update(
    {tok: f"'{sym}'" for sym, tok in token_hashmap.items() if not sym.isalpha()}
)

comparison_tokens: tuple[str, ...] = (
    "EQUAL",
    "NOT_EQUAL",
    "LESS",
    "GREATER",
    "LESS_EQUAL",
    "GREATER_EQUAL",
    "TYPE_EQ",
)
arith_tokens: tuple[str, ...] = ("ADD", "SUBTRACT")
term_tokens: tuple[str, ...] = ("MULTIPLY", "DIVIDE", "MODULO")
