"""
Word shape validation shared by the Dictionary, the hint oracle and the
puzzle state.

A word is valid for length N iff:
  - it is a string
  - it is lowercase a–z only (no case folding is attempted)
  - it has exact length N

Valid words are normalized to tuples of ints in 0..25 ('a' == 0).
"""

from __future__ import annotations
from typing import Tuple

from .errors import InvalidWordError

# Normalized word: one letter index per position
Word = Tuple[int, ...]

_A = ord("a")


def is_valid_word(word: str, N: int) -> bool:
    """Return True if `word` is exactly N lowercase ASCII letters."""
    if not isinstance(word, str) or len(word) != N:
        return False
    return all("a" <= ch <= "z" for ch in word)


def check_word(word: str, N: int) -> None:
    """Raise InvalidWordError unless `word` passes is_valid_word."""
    if not is_valid_word(word, N):
        raise InvalidWordError(word, N)


def normalize(word: str) -> Word:
    """'cab' -> (2, 0, 1). Assumes the word was already checked."""
    return tuple(ord(ch) - _A for ch in word)


def denormalize(word: Word) -> str:
    """(2, 0, 1) -> 'cab'."""
    return "".join(chr(_A + c) for c in word)


def to_word(word: str, N: int) -> Word:
    """Validate, then normalize."""
    check_word(word, N)
    return normalize(word)
