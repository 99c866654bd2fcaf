from typing import TYPE_CHECKING

from .shared import printf

if TYPE_CHECKING:
    from .table import HashTable, Slot


def dump_table(htab: "HashTable", name: str):
    printf("== {0:s} ==\n", name)
    if htab.slots is None:
        printf("<not created>\n")
        return

    for index, slot in enumerate(htab.slots):
        if slot is not None:
            print_slot(index, slot)
    printf("{0:d}/{1:d} filled\n", htab.filled, htab.size)


def print_slot(index: int, slot: "Slot"):
    printf("{0:6d} {1:6d} '{2:s}'\n", index, slot.tag, slot.key or "")


def print_probe(key: str, index: int, slot: "Slot | None"):
    printf("probe '{0:s}' ", key)
    if slot is not None:
        print_slot(index, slot)
    else:
        printf("{0:6d}  empty\n", index)
