import sys
from typing import NoReturn

__all__ = ["echo", "exit_error"]


def echo(message: str) -> None:
    sys.stderr.write(message + "\n")


def exit_error(message: str, code: int = 1) -> NoReturn:
    echo(message)
    sys.exit(code)
