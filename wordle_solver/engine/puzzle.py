"""
PuzzleState: the solver's view of one puzzle.

The state never stores the answer. It holds:
  - slots         : one LetterSet per position
  - letter_counts : one inclusive (min, max) occurrence range per letter
  - a cache of the dictionary words that are still feasible

Lifecycle:
  PuzzleState(dictionary)       full domains, counts (0, N), then reduce()
  state.guess(word, hints)      tighten domains from one round of feedback
  state.best_guess(threads)     minimax search (see solvers.minimax)

Domains only ever shrink. A state is *consistent* while every slot is
non-empty and *solved* once every slot is a singleton. Feedback that
contradicts earlier feedback is not an error: it empties the slots, and
best_guess() then reports InconsistentPuzzleError.
"""

from __future__ import annotations
from typing import List, Optional, Sequence, Tuple
import logging

from .constraints import Range, filter_feasible, positional_union, slots_admitting, could_be
from .dictionary import Dictionary
from .errors import WrongHintLengthError
from .letterset import ALPHABET_SIZE, LetterSet
from .scoring import Hint, HINT_RANK
from .validation import Word, denormalize, to_word

log = logging.getLogger(__name__)


class PuzzleState:
    def __init__(self, dictionary: Dictionary):
        N = dictionary.word_length
        self.dictionary = dictionary
        self.slots: List[LetterSet] = [LetterSet.full() for _ in range(N)]
        self.letter_counts: List[Range] = [(0, N)] * ALPHABET_SIZE
        # Feasible words only shrink, so each reduce() filters the previous
        # cache instead of the whole dictionary. Tuples are shared by clones.
        self._feasible: Tuple[Word, ...] = dictionary.words
        self.reduce()

    # ---- inspection ----

    @property
    def word_length(self) -> int:
        return len(self.slots)

    @property
    def feasible_words(self) -> List[str]:
        """Words still consistent with every hint, sorted."""
        return [denormalize(w) for w in self._feasible]

    @property
    def remaining(self) -> int:
        return len(self._feasible)

    def is_consistent(self) -> bool:
        return not any(slot.is_empty() for slot in self.slots)

    def is_solved(self) -> bool:
        return all(len(slot) == 1 for slot in self.slots)

    @property
    def solution(self) -> Optional[str]:
        """The answer once solved, else None."""
        if not self.is_solved():
            return None
        return denormalize(tuple(next(iter(slot)) for slot in self.slots))

    def could_be(self, word) -> bool:
        """
        Is `word` (a string or a normalized tuple) still a possible answer?
        Strings are validated first.
        """
        if isinstance(word, str):
            word = to_word(word, self.word_length)
        return could_be(word, self.slots, self.letter_counts)

    def copy(self) -> "PuzzleState":
        """Independent clone: slots and counts are copied, the word cache is shared."""
        other = PuzzleState.__new__(PuzzleState)
        other.dictionary = self.dictionary
        other.slots = [slot.copy() for slot in self.slots]
        other.letter_counts = list(self.letter_counts)
        other._feasible = self._feasible
        return other

    __copy__ = copy

    # ---- constraint propagation ----

    def reduce(self) -> None:
        """
        Propagate constraints until nothing changes:
          1) refresh the feasible-word cache, then intersect every slot with
             the letters feasible words actually have at that position
          2) if a letter must occur at least `min` times and only `min` (or
             fewer) slots still admit it, those slots are that letter
        """
        N = self.word_length
        passes = 0
        while True:
            passes += 1
            changed = False

            self._feasible = filter_feasible(self._feasible, self.slots, self.letter_counts)

            for slot, mask in zip(self.slots, positional_union(self._feasible, N)):
                before = slot.bits
                slot.intersect_with(mask)
                if slot.bits != before:
                    changed = True

            for letter, (lo, _) in enumerate(self.letter_counts):
                idxs = slots_admitting(letter, self.slots)
                if len(idxs) > lo:
                    continue
                for i in idxs:
                    slot = self.slots[i]
                    before = slot.bits
                    slot.clear()
                    slot.insert(letter)
                    if slot.bits != before:
                        changed = True

            if not changed:
                break

        log.debug("reduce: %d pass(es), %d feasible word(s)", passes, len(self._feasible))

    def guess(self, word: str, hints: Sequence[Hint]) -> None:
        """
        Apply the feedback `hints` received for guessing `word`.

        Raises InvalidWordError if `word` is not N lowercase letters, and
        WrongHintLengthError if there is not exactly one hint per letter.
        The word does not have to be in the dictionary.
        """
        w = to_word(word, self.word_length)
        hints = list(hints)
        if len(hints) != len(w):
            raise WrongHintLengthError(hints, self.word_length)
        self.guess_impl(w, hints)

    def guess_impl(self, word: Word, hints: Sequence[Hint]) -> None:
        """
        State transition for already-validated input.

        Repeated letters are claims against one unknown count: for each
        letter, walk its positions Correct first, then Present, then Absent
        (ties by position). The k-th Correct/Present occurrence (0-based)
        proves the answer has at least k+1 of the letter. An Absent at k > 0
        caps the count at k and rules the letter out at that position only.
        An Absent at k == 0 means the letter is not in the answer at all.
        """
        order = sorted(
            enumerate(zip(word, hints)),
            key=lambda t: (t[1][0], HINT_RANK[t[1][1]], t[0]),
        )

        consistent = True
        prev_letter = None
        occ = 0
        for pos, (letter, hint) in order:
            if letter != prev_letter:
                occ = 0
            lo, hi = self.letter_counts[letter]
            slot = self.slots[pos]

            if hint is Hint.CORRECT or hint is Hint.PRESENT:
                if occ + 1 > hi:
                    consistent = False
                    lo = hi
                else:
                    lo = max(lo, occ + 1)
                if hint is Hint.CORRECT:
                    slot.intersect_with(LetterSet.single(letter))
                else:
                    slot.remove(letter)
            else:
                if occ < lo:
                    consistent = False
                    hi = lo
                else:
                    hi = min(hi, occ)
                if occ == 0:
                    for s in self.slots:
                        s.remove(letter)
                else:
                    # had it been here, this position would be Correct
                    slot.remove(letter)

            self.letter_counts[letter] = (lo, hi)
            prev_letter = letter
            occ += 1

        if not consistent:
            # Count ranges stay ordered; the contradiction shows up as empty slots
            for s in self.slots:
                s.clear()

        self.reduce()

    # ---- search ----

    def best_guess(self, threads: Optional[int] = None):
        """
        Best next guess as a GuessResult(word, worst_case, avg_case).
        See wordle_solver.solvers.minimax for the search itself.
        """
        from ..solvers.minimax import best_guess
        return best_guess(self, threads)

    # ---- display ----

    def render(self) -> str:
        """
        Per-position candidate letters, then per-letter occurrence ranges:

            0: acs
            1: lr
            ...
            { a: 1..2, b: 0..0, ... }
        """
        lines = []
        for i, slot in enumerate(self.slots):
            lines.append(f"{i}: {''.join(chr(ord('a') + c) for c in slot)}")
        ranges = ", ".join(
            f"{chr(ord('a') + letter)}: {lo}..{hi}"
            for letter, (lo, hi) in enumerate(self.letter_counts)
        )
        lines.append("{ " + ranges + " }")
        return "\n".join(lines)

    __str__ = render

    def __repr__(self) -> str:
        return f"PuzzleState(word_length={self.word_length}, remaining={self.remaining})"
