from typing import Iterable, List, Sequence, TypeVar

from .errors import MalformedInputError

Bit = int
BitSequence = List[int]
SymbolSequence = List[str]

T = TypeVar("T")


# ------------------------------------------------------------
# Cursor: explicit read position, consumed front-to-back only
# ------------------------------------------------------------
class Cursor:
    def __init__(self, items: Sequence[T], what: str = "sequence"):
        self.items = items
        self.pos = 0
        self.what = what

    def next(self) -> T:
        if self.pos >= len(self.items):
            raise MalformedInputError(f"Ran out of {self.what} at position {self.pos}")
        item = self.items[self.pos]
        self.pos += 1
        return item

    @property
    def remaining(self) -> int:
        return len(self.items) - self.pos

    @property
    def exhausted(self) -> bool:
        return self.pos >= len(self.items)

    def __repr__(self):
        return f"Cursor({self.what}, pos={self.pos}/{len(self.items)})"


def check_bits(bits: Iterable[int]) -> BitSequence:
    out = list(bits)
    for i, b in enumerate(out):
        # bool is fine, 2 or "1" is not
        if b not in (0, 1):
            raise MalformedInputError(f"Bad bit {b!r} at {i}")
    return out


# ---------------------------------
# "0101" text form <-> bit lists
# ---------------------------------
def to_bitstring(bits: Iterable[int]) -> str:
    return "".join("1" if b else "0" for b in check_bits(bits))


def from_bitstring(text: str) -> BitSequence:
    bits: BitSequence = []
    for i, ch in enumerate(text):
        if ch == "0":
            bits.append(0)
        elif ch == "1":
            bits.append(1)
        else:
            raise MalformedInputError(f"Bad bit character {ch!r} at {i}")
    return bits
