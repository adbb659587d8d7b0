import shlex
import sys
from collections.abc import Callable
from pathlib import Path

import fncli
from fncli import UsageError

from .core.errors import EverydayError
from .lib import ansi
from .lib.errors import echo, exit_error

PROMPT = "everyday› "

_HELP = [
    ("add NAME...", "add a habit"),
    ("rename REF NAME...", "rename a habit"),
    ("rm REF", "remove a habit and its history"),
    ("toggle REF [-d DAY]", "toggle a day (today, yesterday, mon, -3, 2025-05-01)"),
    ("ls", "list habits"),
    ("grid", "show the habit grid"),
    ("stats", "show streaks and totals"),
    ("prev / next / today", "move the calendar window"),
    ("demo", "load sample habits"),
    ("quit", "leave (nothing is saved)"),
]


def register() -> None:
    fncli.autodiscover(Path(__file__).parent, "everyday")


def execute(args: list[str]) -> int:
    """Run one command against the active session, reporting errors on stderr."""
    try:
        return fncli.dispatch(["everyday", *args]) or 0
    except UsageError as e:
        echo(str(e))
        return 2
    except EverydayError as e:
        echo(str(e))
        return 1


def print_help() -> None:
    width = max(len(usage) for usage, _ in _HELP)
    for usage, desc in _HELP:
        print(f"  {usage:<{width}}  {ansi.dim(desc)}")


def repl(read: Callable[[str], str] = input) -> None:
    print(ansi.bold("everyday") + ansi.dim("  type `help` for commands"))
    while True:
        try:
            line = read(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            return
        try:
            args = shlex.split(line)
        except ValueError as e:
            echo(f"cannot parse input: {e}")
            continue
        if not args:
            continue
        if args[0] in ("quit", "exit"):
            return
        if args[0] in ("help", "?"):
            print_help()
            continue
        execute(args)


def main():
    register()

    user_args = sys.argv[1:]
    if not user_args:
        repl()
        return
    try:
        code = fncli.dispatch(["everyday", *user_args])
    except EverydayError as e:
        exit_error(str(e))
    sys.exit(code)


if __name__ == "__main__":
    main()
