from .letterset import LetterSet
from .dictionary import Dictionary
from .scoring import Hint, compute_hint, parse_hints, hints_to_str, parse_guess_token
from .puzzle import PuzzleState
from .validation import check_word, is_valid_word
from .errors import (
    WordleError,
    InvalidWordError,
    WrongHintLengthError,
    InvalidHintError,
    InconsistentPuzzleError,
)

__all__ = [
    "LetterSet", "Dictionary", "Hint", "compute_hint", "parse_hints", "hints_to_str",
    "parse_guess_token", "PuzzleState", "check_word", "is_valid_word",
    "WordleError", "InvalidWordError", "WrongHintLengthError", "InvalidHintError",
    "InconsistentPuzzleError",
]
