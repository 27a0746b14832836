"""A minimal interactive shell that runs programs and a few built-in commands."""

from __future__ import annotations

import subprocess
import sys
from typing import Iterable, Optional, TextIO

SHOW_USAGE = "Sorry, show command only supports following options: files , process "
INVALID_COMMAND = "Please enter a valid command"

_SHOW_TARGETS = {"files": "ls", "process": "ps"}


class InvalidCommand(ValueError):
    """The input names a built-in command with missing or unknown options."""


class QuitShell(Exception):
    """The user asked the shell to exit."""


def build_command(args: Iterable[str]) -> list[str]:
    """Turn shell words into the argument list of the program to run.

    ``show files`` runs ``ls`` and ``show process`` runs ``ps``, passing any
    further words along. Raises InvalidCommand for a bad ``show`` and
    QuitShell for ``quit``.
    """
    words = list(args)
    if not words:
        raise InvalidCommand("empty command")
    head, *rest = words
    if head == "show":
        if not rest:
            raise InvalidCommand("please enter valid command")
        program = _SHOW_TARGETS.get(rest[0])
        if program is None:
            raise InvalidCommand("please enter valid command")
        return [program, *rest[1:]]
    if head == "quit":
        raise QuitShell()
    return words


def execute(line: str) -> Optional[int]:
    """Run one input line and return the child's exit status.

    Returns None for a blank line. Raises OSError if the program cannot be
    started, plus whatever build_command raises.
    """
    args = line.split()
    if not args:
        return None
    command = build_command(args)
    return subprocess.run(command).returncode


def repl(input_stream: TextIO, output_stream: TextIO) -> int:
    """Read and run commands until ``quit`` or end of input; return the exit status."""
    print("Hello! Welcome to Myshell", file=output_stream)
    while True:
        output_stream.write("$ ")
        output_stream.flush()
        line = input_stream.readline()
        if not line:
            return 0
        try:
            status = execute(line)
        except QuitShell:
            return 0
        except InvalidCommand:
            print(SHOW_USAGE, file=sys.stderr)
            continue
        except OSError:
            print(INVALID_COMMAND, file=sys.stderr)
            continue
        if status not in (None, 0):
            print("\nChild process failed", file=output_stream)


def main(argv=None) -> int:
    """Run the interactive shell on standard input and output."""
    return repl(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())