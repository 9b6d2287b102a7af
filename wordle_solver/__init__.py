"""
wordle_solver: constraint-propagation state + minimax guess search for
Wordle-style puzzles.
"""

from .engine import (
    Dictionary,
    Hint,
    PuzzleState,
    compute_hint,
    InvalidWordError,
    WrongHintLengthError,
    InconsistentPuzzleError,
)
from .solvers import GuessResult, best_guess

__all__ = [
    "Dictionary", "Hint", "PuzzleState", "compute_hint", "best_guess", "GuessResult",
    "InvalidWordError", "WrongHintLengthError", "InconsistentPuzzleError",
]
