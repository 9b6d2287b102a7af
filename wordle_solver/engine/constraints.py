"""
Feasibility and reduction primitives over per-position letter domains.

Given:
  - `slots`: one LetterSet per position (letters still possible there)
  - `counts`: one inclusive (min, max) occurrence range per letter

a word is feasible iff every letter sits in its position's slot and, for
every letter of the alphabet, the number of times the word uses it lies in
that letter's range.

PuzzleState.reduce() is built from the three helpers below; they are kept
as free functions so the search code can reuse them on cloned state.
"""

from __future__ import annotations
from typing import Iterable, List, Sequence, Tuple

from .letterset import ALPHABET_SIZE, LetterSet
from .validation import Word

# (min_occurrences, max_occurrences), inclusive
Range = Tuple[int, int]


def could_be(word: Word, slots: Sequence[LetterSet], counts: Sequence[Range]) -> bool:
    """Feasibility test for one normalized word."""
    occurrences = [0] * ALPHABET_SIZE
    for slot, letter in zip(slots, word):
        if letter not in slot:
            return False
        occurrences[letter] += 1
    for (lo, hi), occ in zip(counts, occurrences):
        if not lo <= occ <= hi:
            return False
    return True


def filter_feasible(words: Iterable[Word], slots: Sequence[LetterSet],
                    counts: Sequence[Range]) -> Tuple[Word, ...]:
    """Keep only the words that could still be the answer (order preserved)."""
    return tuple(w for w in words if could_be(w, slots, counts))


def positional_union(words: Iterable[Word], N: int) -> List[LetterSet]:
    """For each position, the set of letters any of `words` has there."""
    masks = [LetterSet() for _ in range(N)]
    for w in words:
        for mask, letter in zip(masks, w):
            mask.insert(letter)
    return masks


def slots_admitting(letter: int, slots: Sequence[LetterSet]) -> List[int]:
    """Indices of the slots that still allow `letter`."""
    return [i for i, slot in enumerate(slots) if letter in slot]
