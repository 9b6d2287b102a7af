"""
Wordle-style hints for a single (guess, answer) pair.

Conventions (one character per position, also the CLI input alphabet):
  - 'c' : Correct = right letter in the right position
  - 'p' : Present = letter is in the answer, but elsewhere
  - 'a' : Absent  = letter not present (or present fewer times than guessed)

Algorithm (two-pass, canonical for Wordle):
  1) Count every letter of the answer, then mark all Corrects and consume
     one count for each of them.
  2) Mark Present only while the guessed letter still has a count left;
     everything else is Absent.

Marking Corrects first is what makes repeated letters come out right: a
guessed letter that is Correct somewhere must not be spent as Present
earlier in the word.
"""

from __future__ import annotations
from enum import Enum
from typing import List, Tuple

from .errors import InvalidHintError
from .validation import check_word, normalize
from .letterset import ALPHABET_SIZE


class Hint(Enum):
    CORRECT = "c"
    PRESENT = "p"
    ABSENT = "a"

    @classmethod
    def from_char(cls, ch: str) -> "Hint":
        try:
            return cls(ch)
        except ValueError as e:
            raise InvalidHintError(
                ch, "expected 'c' (correct), 'p' (present), or 'a' (absent)") from e

    def __repr__(self) -> str:
        return f"Hint.{self.name}"


# Sort priority used when replaying a guess: Correct < Present < Absent
HINT_RANK = {Hint.CORRECT: 0, Hint.PRESENT: 1, Hint.ABSENT: 2}


def compute_hint(guess: str, answer: str) -> List[Hint]:
    """
    Compute the hint a game would show for `guess` against `answer`.

    Both words must be lowercase a–z and have the same length (the answer's
    length is the reference); otherwise InvalidWordError is raised.

    Examples:
      compute_hint("hello", "pogos") -> [A, A, A, A, P]
      compute_hint("holop", "pogos") -> [A, C, A, C, P]
    """
    n = len(answer)
    check_word(answer, n)
    check_word(guess, n)
    g_norm = normalize(guess)
    a_norm = normalize(answer)

    counts = [0] * ALPHABET_SIZE
    for ch in a_norm:
        counts[ch] += 1

    hints = [Hint.ABSENT] * n

    # Pass 1: Corrects consume their letter first
    for i, (g, a) in enumerate(zip(g_norm, a_norm)):
        if g == a:
            hints[i] = Hint.CORRECT
            counts[g] -= 1

    # Pass 2: Present while there is budget left
    for i, g in enumerate(g_norm):
        if hints[i] is Hint.CORRECT:
            continue
        if counts[g] > 0:
            hints[i] = Hint.PRESENT
            counts[g] -= 1

    return hints


def parse_hints(text: str) -> List[Hint]:
    """'cpa' -> [Hint.CORRECT, Hint.PRESENT, Hint.ABSENT]"""
    return [Hint.from_char(ch) for ch in text]


def hints_to_str(hints) -> str:
    """Inverse of parse_hints."""
    return "".join(h.value for h in hints)


def parse_guess_token(token: str) -> Tuple[str, List[Hint]]:
    """
    Split a CLI token of the form `<guess>:<hints>`, e.g. "crane:aapca".

    Only the token shape and hint characters are checked here; the guess
    itself is validated by PuzzleState.guess.
    """
    guess, sep, hint_text = token.partition(":")
    if not sep:
        raise InvalidHintError(token, "expected <guess>:<response>")
    try:
        return guess, parse_hints(hint_text)
    except InvalidHintError as e:
        raise InvalidHintError(
            token, f"unknown response {e.token!r} "
                   "(expected 'c' (correct), 'p' (present), or 'a' (absent))") from e
