"""
VECTA CLI Entrypoint.

This module provides the command-line interface for evaluating VECTA source code.

Features:
    - Evaluate a source file or an inline string.
    - Print the resulting value, or the diagnostic of the first error.
    - Launch an interactive REPL when no source is given.

Example usage:
    vecta script.vc
    vecta -s "[1 2 3] * 2"
    vecta --repl --verbose

Functions:
    run_vecta(source: str, is_string: bool = False, show_ast: bool = False) -> int:
        Executes the full pipeline and returns a process exit code.

    main(argv: list[str] | None = None) -> int:
        Parses CLI arguments and dispatches to the REPL or `run_vecta`.
"""

import argparse
import logging
import sys

from vecta.vecta_runner import new_context, print_tree, run, run_file


def run_vecta(source: str, is_string: bool = False, show_ast: bool = False) -> int:
    """
    Run the VECTA pipeline on a file or an inline string and print the result.

    Args:
        source (str): Path to a source file, or the code itself with `is_string`.
        is_string (bool): If True, treats `source` as raw code labelled "<string>".
        show_ast (bool): If True, prints the parsed tree before evaluating.

    Returns:
        int: 0 on success, 1 if the file could not be read or evaluation failed.
    """
    on_parsed = print_tree if show_ast else None
    if is_string:
        value = run(source, "<string>", new_context(), on_parsed)
    else:
        value = run_file(source, on_parsed)

    if value is None:
        return 1
    print(value)
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the VECTA CLI.

    Launches the REPL if no source is passed or `--repl` is specified; otherwise
    evaluates the source and returns its exit code.

    Supported flags:
        - `-s`, `--string`: Interpret source as a raw string instead of a file path.
        - `--ast`: Print the parsed tree before evaluating.
        - `--repl`: Launch the interactive REPL.
        - `--verbose`: Log pipeline internals at DEBUG level.
    """
    parser = argparse.ArgumentParser(prog="vecta")
    parser.add_argument("source", nargs="?", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "--ast", action="store_true", help="Print the parsed tree before evaluating"
    )
    parser.add_argument(
        "--repl", action="store_true", help="Launch interactive REPL"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log pipeline internals"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="[%(levelname)s] %(name)s >>> %(message)s"
        )

    if args.repl or args.source is None:
        from vecta.vecta_repl import start_repl

        start_repl(verbose=args.verbose, show_ast=args.ast)
        return 0

    return run_vecta(source=args.source, is_string=args.string, show_ast=args.ast)


if __name__ == "__main__" and not any("pytest" in arg for arg in sys.argv):
    sys.exit(main())
