import sys
from typing import Any


PROGRAM = "pyhtab"


def printf(format: str, *args: Any):
    print(format.format(*args), end="", file=sys.stdout)


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=sys.stderr)


def report_error(format: str, *args: Any):
    printf_err("{0:s}: ", PROGRAM)
    printf_err(format, *args)
    printf_err("\n")
