"""
Entry points that run the full VECTA pipeline (lex -> parse -> interpret).

Functions:
    new_context() -> Context:
        Creates a fresh, empty evaluation context.
    parse_source(source, label) -> tuple[ASTNode, Position]:
        Lexes and parses one input unit.
    evaluate(source, label, context, on_parsed=None) -> Value:
        Runs the pipeline and raises the first `VectaError`.
    run(source, label, context=None, on_parsed=None) -> Value | None:
        Runs the pipeline, printing the diagnostic and returning None on failure.
    run_file(path, on_parsed=None) -> Value | None:
        Reads a UTF-8 source file and runs it in a fresh context.
    print_tree(node) -> None:
        `on_parsed` hook that prints the parsed tree, used by `--ast` and `ast-mode`.
"""

import logging
from collections.abc import Callable

from vecta.vecta_ast import ASTNode
from vecta.vecta_errors import VectaError
from vecta.vecta_interpreter import Context, interpret
from vecta.vecta_lexer import lex
from vecta.vecta_parser import parse
from vecta.vecta_position import Position
from vecta.vecta_values import Value

logger = logging.getLogger(__name__)

ParsedHook = Callable[[ASTNode], None]


def new_context() -> Context:
    return Context()


def print_tree(node: ASTNode) -> None:
    print(f"[ast] >>> {node}")


def parse_source(source: str, label: str) -> tuple[ASTNode, Position]:
    return parse(lex(source, label), label)


def evaluate(
    source: str, label: str, context: Context, on_parsed: ParsedHook | None = None
) -> Value:
    """Lexes, parses and interprets `source` against `context`.

    Args:
        source (str): The VECTA source text.
        label (str): Diagnostic label.
        context (Context): Bindings, mutated by assignments.
        on_parsed (ParsedHook | None): Called with the tree before it is evaluated.

    Raises:
        VectaError: From whichever stage fails first.
    """
    node, position = parse_source(source, label)
    if on_parsed is not None:
        on_parsed(node)
    return interpret(node, position, label, context)


def run(
    source: str,
    label: str,
    context: Context | None = None,
    on_parsed: ParsedHook | None = None,
) -> Value | None:
    """
    Run one input unit and report any diagnostic.

    Args:
        source (str): The VECTA source text.
        label (str): Diagnostic label, e.g. a file path or "<shell>".
        context (Context | None): Bindings to evaluate against. A fresh context is
            used when omitted; pass the same object to keep variables between calls.
        on_parsed (ParsedHook | None): Passed through to `evaluate`.

    Returns:
        Value | None: The result, or None if any stage failed.

    Side Effects:
        Prints the formatted diagnostic to stdout on failure.
    """
    if context is None:
        context = new_context()
    try:
        return evaluate(source, label, context, on_parsed)
    except VectaError as e:
        logger.debug("%s failed: %r", label, e)
        print(e)
        return None


def run_file(path: str, on_parsed: ParsedHook | None = None) -> Value | None:
    """Runs the file at `path` with a fresh context, using the path as the label."""
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"ERROR: {e}")
        return None
    return run(text, path, new_context(), on_parsed)


__all__ = ["evaluate", "new_context", "parse_source", "print_tree", "run", "run_file"]
