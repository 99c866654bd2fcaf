from dataclasses import dataclass

from .shared import report_error


INITIAL_STR_ARRAY_SIZE = 16


@dataclass
class StrArray:
    max: int
    index: int
    strings: list[str | None] | None


def init_str_array() -> StrArray:
    return StrArray(max=0, index=0, strings=None)


def create_str_array(arr: StrArray | None, initial_size: int = INITIAL_STR_ARRAY_SIZE) -> bool:
    if arr is None:
        return False
    if arr.strings is not None:
        report_error("create_str_array() was called with a non empty array")
        return False

    size = max(initial_size, 1)
    try:
        strings: list[str | None] = [None] * size
    except MemoryError:
        report_error("Could not allocate string array")
        return False

    arr.max = size
    arr.index = 0
    arr.strings = strings
    return True


def str_array_add(arr: StrArray | None, s: str | None) -> int:
    if arr is None or arr.strings is None or not isinstance(s, str):
        return -1

    if arr.index == arr.max:
        try:
            arr.strings.extend([None] * arr.max)
        except MemoryError:
            report_error("Could not reallocate string array")
            return -1
        arr.max *= 2

    arr.strings[arr.index] = s
    arr.index += 1
    return arr.index - 1


def str_array_find(arr: StrArray | None, s: str | None) -> int:
    if arr is None or arr.strings is None or s is None:
        return -1

    for i in range(arr.index):
        if arr.strings[i] == s:
            return i
    return -1


def str_array_clear(arr: StrArray | None):
    if arr is None or arr.strings is None:
        return

    for i in range(arr.index):
        arr.strings[i] = None
    arr.index = 0


def free_str_array(arr: StrArray | None):
    str_array_clear(arr)
    if arr is not None:
        arr.strings = None
        arr.max = 0
