"""Small helpers: the current process id and a greeting."""

from __future__ import annotations

import argparse
import os
import sys


def get_process_id() -> int:
    """Return the id of the running process (never zero)."""
    return os.getpid()


def hello_from_lib(message: str) -> str:
    """Print and return a greeting for ``message``."""
    text = f"Printing Hello {message} from library"
    print(text)
    return text


def main(argv=None) -> int:
    """Greet, or print the process id with ``--pid``."""
    parser = argparse.ArgumentParser(prog="basics")
    parser.add_argument("--pid", action="store_true", help="print the process id")
    args = parser.parse_args(argv)
    if args.pid:
        print(get_process_id())
        return 0
    print("Going to call library function")
    hello_from_lib("system programmer")
    return 0


if __name__ == "__main__":
    sys.exit(main())