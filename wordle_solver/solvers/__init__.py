from .minimax import GuessSearch, GuessResult, best_guess, default_threads

__all__ = ["GuessSearch", "GuessResult", "best_guess", "default_threads"]
