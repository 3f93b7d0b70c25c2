"""The interactive read-lex-parse loop of the shell."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, Optional, Sequence, TextIO

from .lexer import format_tokens, lex
from .parser import format_commands, parse

COLOR_BANNER = "\033[38;2;0;189;157m"
COLOR_RESET = "\033[0m"
PROMPT = f"{COLOR_BANNER}bash> {COLOR_RESET}"
GOODBYE = "Saliendo de la shell..."


class ShellExit(Exception):
    """Raised by the exit built-in to end the shell with a status code."""

    def __init__(self, code: int = 0) -> None:
        super().__init__(code)
        self.code = code


def exit_shell(out: Optional[TextIO] = None) -> None:
    """Print the farewell message and end the shell successfully."""
    (sys.stdout if out is None else out).write(GOODBYE + "\n")
    raise ShellExit(0)


def run(lines: Iterable[str], out: Optional[TextIO] = None) -> int:
    """Process input lines, echoing the tokens and commands of each.

    Stops at the ``exit`` built-in or when the lines run out, and returns
    the exit status.
    """
    out = sys.stdout if out is None else out
    try:
        for line in lines:
            tokens = lex(line)
            out.write(format_tokens(tokens))
            commands = parse(tokens)
            out.write(format_commands(commands))
            if commands and commands[0].args and commands[0].args[0].startswith("exit"):
                exit_shell(out)
    except ShellExit as stop:
        return stop.code
    out.write("\n" + GOODBYE + "\n")
    return 0


def _prompted_lines(prompt: str) -> Iterator[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the shell on standard input until end of input or ``exit``."""
    argparse.ArgumentParser(
        prog="minishell", description="A minimal command-line shell."
    ).parse_args(argv)
    try:
        import readline  # noqa: F401  (enables line editing and history)
    except ImportError:
        pass
    return run(_prompted_lines(PROMPT), sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())