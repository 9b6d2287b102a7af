"""
The Dictionary: the set of acceptable words for a puzzle.

Built once from raw strings, then immutable:
  - duplicates are dropped and the words are sorted
  - every word is validated (lowercase a–z, exact length) in sorted order,
    so the first failure reported is deterministic
  - words are stored normalized (tuples of 0..25)
"""

from __future__ import annotations
from typing import Iterable, Iterator, Tuple
import logging

from .validation import Word, check_word, is_valid_word, normalize, denormalize

log = logging.getLogger(__name__)


class Dictionary:
    __slots__ = ("_word_length", "_words", "_lookup")

    def __init__(self, word_length: int, words: Tuple[Word, ...]):
        self._word_length = word_length
        self._words = words
        self._lookup = frozenset(words)

    @classmethod
    def build(cls, word_length: int, raw_words: Iterable[str]) -> "Dictionary":
        """
        Dedupe, sort, validate and normalize `raw_words`.

        Raises InvalidWordError for the first (in sorted order) word that has
        the wrong length or contains anything but a–z.
        """
        assert word_length > 0, "word_length must be positive"

        unique = sorted(set(raw_words))
        out = []
        for w in unique:
            check_word(w, word_length)
            out.append(normalize(w))

        log.debug("built dictionary: %d words of length %d", len(out), word_length)
        return cls(word_length, tuple(out))

    @property
    def word_length(self) -> int:
        return self._word_length

    @property
    def words(self) -> Tuple[Word, ...]:
        """Normalized words, sorted."""
        return self._words

    def strings(self) -> list[str]:
        return [denormalize(w) for w in self._words]

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[Word]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        if isinstance(word, str):
            if not is_valid_word(word, self._word_length):
                return False
            word = normalize(word)
        return word in self._lookup

    def __repr__(self) -> str:
        return f"Dictionary(word_length={self._word_length}, size={len(self._words)})"
