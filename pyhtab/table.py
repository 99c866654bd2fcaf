"""
Fixed size string table using open addressing and double hashing.

The slot list is one longer than the prime table size and index 0 is
never a home index. Empty slots are None. A slot tag is the home index
of its key, never 0, and a matching tag is checked before comparing the
strings themselves.
"""

from dataclasses import dataclass

from .debug import print_probe
from .shared import report_error


MIN_SIZE = 3
# slots are allocated up front, one pointer each
MAX_SIZE = 0xFFFFFF

_debug_trace_probes = False


def set_debug_trace_probes(b: bool):
    global _debug_trace_probes
    _debug_trace_probes = b


@dataclass(frozen=True)
class TableOk:
    pass


@dataclass(frozen=True)
class TableError:
    pass


@dataclass(frozen=True)
class InvalidArgument(TableError):
    pass


@dataclass(frozen=True)
class OutOfMemory(TableError):
    pass


@dataclass(frozen=True)
class TableFull(TableError):
    pass


@dataclass(frozen=True)
class ProbeExhausted(TableError):
    pass


TableResult = TableOk | TableError


@dataclass
class Slot:
    tag: int
    key: str | None


@dataclass
class HashTable:
    size: int
    filled: int
    slots: list[Slot | None] | None
    last_error: TableError | None


def init_table() -> HashTable:
    return HashTable(size=0, filled=0, slots=None, last_error=None)


def new_slots(count: int) -> list[Slot | None]:
    return [None] * count


def is_prime(number: int) -> bool:
    if number < 3:
        return number == 2
    if number % 2 == 0:
        return False

    divider = 3
    while divider * divider <= number and number % divider != 0:
        divider += 2
    return divider * divider > number


def next_prime(number: int) -> int:
    """Smallest odd prime not below ``number``, and never below MIN_SIZE."""
    number = max(number | 1, MIN_SIZE)
    while not is_prime(number):
        number += 2
    return number


def hash_string(key: str) -> int:
    # sdbm, empirically half the collisions of djb2 on short strings
    r = 0
    for c in key.encode("utf-8", "surrogatepass"):
        r = (c + (r << 6) + (r << 16) - r) & 0xFFFFFFFF
    if r == 0:
        r = 1
    return r


def create_table(htab: HashTable | None, nel: int) -> TableResult:
    if htab is None:
        report_error("Cannot create a table without a table object")
        return InvalidArgument()
    if htab.slots is not None:
        report_error("create_table() was called with a non empty table")
        htab.last_error = InvalidArgument()
        return htab.last_error
    if isinstance(nel, bool) or not isinstance(nel, int) or not 1 <= nel <= MAX_SIZE:
        report_error("Invalid hash table size {0!r}", nel)
        htab.last_error = InvalidArgument()
        return htab.last_error

    size = next_prime(nel)
    try:
        slots = new_slots(size + 1)
    except MemoryError:
        report_error("Could not allocate space for hash table ({0:d} entries)", size)
        htab.last_error = OutOfMemory()
        return htab.last_error

    htab.size = size
    htab.filled = 0
    htab.slots = slots
    htab.last_error = None
    return TableOk()


def free_table(htab: HashTable | None):
    if htab is None or htab.slots is None:
        return

    for i, slot in enumerate(htab.slots):
        if slot is not None:
            slot.tag = 0
            slot.key = None
            htab.slots[i] = None
    htab.filled = 0
    htab.size = 0
    htab.slots = None


def find_or_insert(htab: HashTable | None, key: str | None) -> int:
    """
    Return the slot index holding ``key``, adding the key if it is new.

    0 is returned on failure; the reason is kept in ``htab.last_error``.
    """
    if htab is None:
        return 0
    if htab.slots is None or not isinstance(key, str):
        htab.last_error = InvalidArgument()
        return 0

    slots = htab.slots
    size = htab.size

    # home index, 0 is reserved
    hval = hash_string(key) % size
    if hval == 0:
        hval = 1

    idx = hval
    if _debug_trace_probes:
        print_probe(key, idx, slots[idx])

    if slots[idx] is not None:
        if _matches(slots[idx], hval, key):
            htab.last_error = None
            return idx

        # step for the probe sequence, never 0
        hval2 = 1 + hval % (size - 2)

        while True:
            # size is prime and the step is below it: visits all of 1..size
            if idx <= hval2:
                idx = size + idx - hval2
            else:
                idx -= hval2

            if idx == hval:
                return _probe_exhausted(htab)

            if _debug_trace_probes:
                print_probe(key, idx, slots[idx])

            if slots[idx] is None:
                break
            if _matches(slots[idx], hval, key):
                htab.last_error = None
                return idx

    if htab.filled >= size:
        report_error("Hash table is full ({0:d} entries)", size)
        htab.last_error = TableFull()
        return 0

    slots[idx] = Slot(tag=hval, key=key)
    htab.filled += 1
    htab.last_error = None
    return idx


def table_key(htab: HashTable | None, index: int) -> str | None:
    if htab is None or htab.slots is None:
        return None
    if not 1 <= index <= htab.size:
        return None
    slot = htab.slots[index]
    return slot.key if slot is not None else None


def _matches(slot: Slot | None, hval: int, key: str) -> bool:
    return slot is not None and slot.tag == hval and slot.key == key


def _probe_exhausted(htab: HashTable) -> int:
    if htab.filled >= htab.size:
        report_error("Hash table is full ({0:d} entries)", htab.size)
        htab.last_error = TableFull()
    else:
        report_error(
            "Probe sequence exhausted with {0:d} of {1:d} entries filled",
            htab.filled,
            htab.size,
        )
        htab.last_error = ProbeExhausted()
    return 0
