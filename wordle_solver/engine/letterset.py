"""
Fixed-capacity set over the 26-letter alphabet, backed by a plain int bitmask.

Letters are the normalized indices 0..25 ('a' == 0). Every operation is bit
arithmetic; iteration walks the set bits in ascending order.
"""

from __future__ import annotations
from typing import Iterator

ALPHABET_SIZE = 26
FULL_MASK = (1 << ALPHABET_SIZE) - 1


class LetterSet:
    __slots__ = ("bits",)

    def __init__(self, bits: int = 0):
        self.bits = bits & FULL_MASK

    @classmethod
    def full(cls) -> "LetterSet":
        return cls(FULL_MASK)

    @classmethod
    def single(cls, letter: int) -> "LetterSet":
        return cls(1 << letter)

    def insert(self, letter: int) -> None:
        self.bits |= 1 << letter

    def remove(self, letter: int) -> None:
        self.bits &= ~(1 << letter)

    def contains(self, letter: int) -> bool:
        return self.bits & (1 << letter) != 0

    __contains__ = contains

    def clear(self) -> None:
        self.bits = 0

    def is_empty(self) -> bool:
        return self.bits == 0

    def intersect_with(self, other: "LetterSet") -> None:
        """In-place intersection; `other` is left untouched."""
        self.bits &= other.bits

    def copy(self) -> "LetterSet":
        return LetterSet(self.bits)

    def __len__(self) -> int:
        return bin(self.bits).count("1")

    def __iter__(self) -> Iterator[int]:
        # lowest set bit first; `v & (v - 1)` drops it
        v = self.bits
        while v:
            low = v & -v
            yield low.bit_length() - 1
            v &= v - 1

    def __eq__(self, other) -> bool:
        if not isinstance(other, LetterSet):
            return NotImplemented
        return self.bits == other.bits

    def __repr__(self) -> str:
        letters = "".join(chr(ord("a") + i) for i in self)
        return f"LetterSet({letters!r})"
