import sys

from .shared import printf, report_error
from .strarray import create_str_array, free_str_array, init_str_array, str_array_add
from .table import (
    OutOfMemory,
    TableError,
    create_table,
    find_or_insert,
    free_table,
    init_table,
)


def dedup(lines: list[str]) -> list[str] | TableError:
    """Distinct lines in first-seen order."""
    htab = init_table()
    result = create_table(htab, max(len(lines), 1))
    if isinstance(result, TableError):
        return result

    seen = init_str_array()
    if not create_str_array(seen, len(lines)):
        free_table(htab)
        return OutOfMemory()

    try:
        for line in lines:
            filled = htab.filled
            if find_or_insert(htab, line) == 0:
                assert htab.last_error is not None
                return htab.last_error
            if htab.filled > filled:
                str_array_add(seen, line)

        assert seen.strings is not None
        return [s for s in seen.strings[: seen.index] if s is not None]
    finally:
        free_str_array(seen)
        free_table(htab)


def run(lines: list[str]):
    result = dedup(lines)
    if isinstance(result, TableError):
        sys.exit(65)

    for line in result:
        printf("{0:s}\n", line)


def run_file(filepath: str):
    try:
        with open(filepath, encoding="utf-8") as fp:
            lines = fp.read().splitlines()
    except OSError as e:
        report_error("Cannot open '{0:s}': {1:s}", filepath, e.strerror or str(e))
        sys.exit(66)
    except UnicodeDecodeError as e:
        report_error("Cannot decode '{0:s}': {1:s}", filepath, e.reason)
        sys.exit(65)

    run(lines)


def main():
    if len(sys.argv) == 1:
        run(sys.stdin.read().splitlines())
    elif len(sys.argv) == 2:
        run_file(sys.argv[1])
    else:
        printf("Usage: pyhtab [path]\n")
        sys.exit(64)
