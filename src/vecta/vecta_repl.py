"""
Interactive read-eval-print loop for VECTA.

Each line is evaluated in one Context that lives for the whole session, so
variables and functions defined on one line are visible on later lines. A line
that fails prints its diagnostic and the session continues.

REPL commands:
    exit / quit     leave the REPL
    vars            list the current bindings
    reset           drop all bindings
    verbose-mode    toggle debug logging of the pipeline
    ast-mode        toggle printing the parsed tree before evaluating
"""

import logging

from vecta.vecta_interpreter import Context
from vecta.vecta_runner import new_context, print_tree, run

SHELL_LABEL = "<shell>"


def set_verbose(verbose: bool) -> None:
    logging.basicConfig(format="[%(levelname)s] %(name)s >>> %(message)s")
    logging.getLogger("vecta").setLevel(logging.DEBUG if verbose else logging.WARNING)


def handle_command(src: str, context: Context, modes: dict[str, bool]) -> bool:
    """Handles a REPL command line. Returns True if `src` was a command."""
    if src == "vars":
        if not len(context):
            print("[vars] >>> (none)")
        for name, value in context.items():
            print(f"{name:>12} = {value}")
        return True
    if src == "reset":
        context.bindings.clear()
        print("[ok] >>> Context cleared.")
        return True
    if src == "verbose-mode":
        modes["verbose"] = not modes["verbose"]
        set_verbose(modes["verbose"])
        print(f"[mode] >>> Verbose mode {'ON' if modes['verbose'] else 'OFF'}")
        return True
    if src == "ast-mode":
        modes["ast"] = not modes["ast"]
        print(f"[mode] >>> AST mode {'ON' if modes['ast'] else 'OFF'}")
        return True
    return False


def eval_line(src: str, context: Context, show_ast: bool = False) -> None:
    """Evaluates one REPL line in the session context and prints its value."""
    value = run(src, SHELL_LABEL, context, print_tree if show_ast else None)
    if value is not None:
        print(value)


def start_repl(verbose: bool = False, show_ast: bool = False) -> None:
    print("Vecta REPL. Type 'exit' or 'quit' to leave.")
    context = new_context()
    modes = {"verbose": verbose, "ast": show_ast}
    if verbose:
        set_verbose(True)

    while True:
        try:
            src = input("> ").strip()
            if not src:
                continue
            if src in ("exit", "quit"):
                print("Exiting Vecta REPL.")
                return
            if handle_command(src, context, modes):
                continue
            eval_line(src, context, modes["ast"])
        except (KeyboardInterrupt, EOFError):
            print("\nExiting Vecta REPL.")
            break


def main() -> None:
    start_repl()


if __name__ == "__main__":
    main()
