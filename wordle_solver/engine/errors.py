"""
Exception types raised by the engine.

All of them derive from ValueError so callers that only care about "bad
input" can catch one thing.
"""

from __future__ import annotations
from typing import Sequence


class WordleError(ValueError):
    """Base class for every error raised by wordle_solver."""


class InvalidWordError(WordleError):
    """A word has the wrong length or is not lowercase a-z."""

    def __init__(self, word: str, expected_len: int):
        self.word = word
        self.expected_len = expected_len
        super().__init__(f"invalid word {word!r} (expected {expected_len} lowercase letters a-z)")


class WrongHintLengthError(WordleError):
    """A hint sequence does not line up with the puzzle's word length."""

    def __init__(self, hints: Sequence, expected_len: int):
        self.hints = list(hints)
        self.expected_len = expected_len
        super().__init__(f"hint has {len(self.hints)} entries, expected {expected_len}")


class InvalidHintError(WordleError):
    """A hint string or `<guess>:<hints>` token could not be parsed."""

    def __init__(self, token: str, reason: str):
        self.token = token
        super().__init__(f"unknown input {token!r}: {reason}")


class InconsistentPuzzleError(WordleError):
    """No dictionary word satisfies the accumulated constraints."""

    def __init__(self):
        super().__init__("puzzle is inconsistent: no word satisfies all hints")
