"""Grouping tokens into pipeline commands with their redirections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from .lexer import Token, TokenType


@dataclass
class Command:
    """One stage of a pipeline: its words and its input/output files."""

    args: list[str] = field(default_factory=list)
    infile: Optional[str] = None
    outfile: Optional[str] = None
    append: bool = False


def parse(tokens: Iterable[Token]) -> list[Command]:
    """Build the commands of a pipeline from lexed tokens.

    A pipe closes the current command; consecutive pipes do not create empty
    ones. A redirection takes the following token as its file name; a
    redirection at the very end is ignored, as are heredoc markers.
    """
    commands: list[Command] = []
    current: Optional[Command] = None
    stream = iter(tokens)
    for token in stream:
        if token.type is TokenType.PIPE:
            current = None
            continue
        if current is None:
            current = Command()
            commands.append(current)
        if token.type is TokenType.GENERAL:
            current.args.append(token.data)
        elif token.type is TokenType.REDIR_IN:
            target = next(stream, None)
            if target is not None:
                current.infile = target.data
        elif token.type in (TokenType.REDIR_OUT, TokenType.APPEND):
            target = next(stream, None)
            if target is not None:
                current.outfile = target.data
                current.append = token.type is TokenType.APPEND
    return commands


def format_commands(commands: Iterable[Command]) -> str:
    """Render each command with its arguments, files and append flag."""
    lines = []
    for number, command in enumerate(commands):
        lines.append(f"Command {number}:")
        args = command.args or ["NULL"]
        lines.extend(f"  args[{i}]: {arg}" for i, arg in enumerate(args))
        lines.append(f"  infile: {command.infile if command.infile is not None else 'NULL'}")
        lines.append(f"  outfile: {command.outfile if command.outfile is not None else 'NULL'}")
        lines.append(f"  append: {int(command.append)}")
    return "".join(line + "\n" for line in lines)