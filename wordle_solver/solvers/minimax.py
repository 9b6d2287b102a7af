"""
Minimax guess search (worst case first, then average case).

Idea:
  For every dictionary word g (feasible or not) and every one of the 3^N
  hint patterns p, clone the puzzle, apply (g, p) and count the words that
  remain. Patterns that leave nothing are impossible and ignored. Then
      worst(g) = max remaining over possible patterns
      avg(g)   = sum remaining / number of possible patterns
  Pick the g minimizing (worst, avg); prefer a g that could itself be the
  answer; finally the lexicographically smallest word.

Pruning:
  A candidate is dropped as soon as its running worst exceeds the best
  worst case any worker has completed so far. Only strictly worse candidates
  are dropped, so the winner does not depend on scheduling.

Concurrency:
  A fixed pool of threads pulls candidates one at a time from a single
  lock-guarded iterator. Each pattern is simulated on a private clone, so
  nothing else is shared except the pruning bound. Worker results are
  merged with the same total order used inside each worker.
"""

from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from itertools import product
from typing import Iterator, List, NamedTuple, Optional, Tuple
import logging
import os
import threading

from wordle_solver.engine.errors import InconsistentPuzzleError
from wordle_solver.engine.scoring import Hint
from wordle_solver.engine.validation import Word, denormalize

log = logging.getLogger(__name__)

# Expansion order for synthetic patterns; prunes fastest in practice
HINT_ORDER = (Hint.PRESENT, Hint.ABSENT, Hint.CORRECT)

# (worst_case, avg_case, 0 if the guess could be the answer else 1, word)
SortKey = Tuple[int, float, int, Word]


class GuessResult(NamedTuple):
    word: str
    worst_case: int
    avg_case: float


def default_threads() -> int:
    """Hardware parallelism, floored at 1."""
    return max(1, os.cpu_count() or 1)


def all_patterns(N: int) -> List[Tuple[Hint, ...]]:
    """Every hint pattern of length N, in HINT_ORDER-major order."""
    return list(product(HINT_ORDER, repeat=N))


class _SharedBound:
    """Best completed worst case across all workers (for pruning only)."""

    def __init__(self):
        self._lock = threading.Lock()
        self._value: Optional[int] = None

    @property
    def value(self) -> Optional[int]:
        return self._value

    def offer(self, worst: int) -> None:
        with self._lock:
            if self._value is None or worst < self._value:
                self._value = worst


class GuessSearch:
    def __init__(self, puzzle):
        self.puzzle = puzzle
        self.patterns = all_patterns(puzzle.word_length)

    def score(self, guess: Word, bound: Optional[_SharedBound] = None) -> Optional[Tuple[int, float]]:
        """
        (worst, avg) remaining for `guess`, or None if it was pruned or no
        pattern is possible.
        """
        worst = 0
        total = 0
        possible_patterns = 0
        for pattern in self.patterns:
            cpy = self.puzzle.copy()
            cpy.guess_impl(guess, pattern)
            possible = cpy.remaining
            if possible == 0:
                continue

            worst = max(worst, possible)
            total += possible
            possible_patterns += 1

            best = bound.value if bound is not None else None
            if best is not None and worst > best:
                return None

        if possible_patterns == 0:
            return None
        return worst, total / possible_patterns

    def _worker(self, candidates: Iterator[Word], lock: threading.Lock,
                bound: _SharedBound) -> Optional[SortKey]:
        best: Optional[SortKey] = None
        evaluated = pruned = 0
        while True:
            with lock:
                guess = next(candidates, None)
            if guess is None:
                break

            evaluated += 1
            scored = self.score(guess, bound)
            if scored is None:
                pruned += 1
                continue

            worst, avg = scored
            key = (worst, avg, 0 if self.puzzle.could_be(guess) else 1, guess)
            if best is None or key < best:
                best = key
            bound.offer(worst)

        log.debug("worker %s: evaluated %d, pruned %d, best %s",
                  threading.current_thread().name, evaluated, pruned,
                  None if best is None else denormalize(best[3]))
        return best

    def run(self, threads: Optional[int] = None) -> GuessResult:
        """
        Run the search with `threads` workers (default: cpu count; 0 -> 1).

        Raises InconsistentPuzzleError if the puzzle has an empty slot or no
        candidate leaves any possible pattern.
        """
        puzzle = self.puzzle
        if not puzzle.is_consistent():
            raise InconsistentPuzzleError()
        if puzzle.is_solved():
            return GuessResult(puzzle.solution, 0, 0.0)

        threads = default_threads() if threads is None else max(1, threads)
        candidates = iter(puzzle.dictionary.words)  # a guess need not be feasible
        lock = threading.Lock()
        bound = _SharedBound()

        log.debug("searching %d candidate(s) x %d pattern(s) on %d thread(s)",
                  len(puzzle.dictionary), len(self.patterns), threads)

        with ThreadPoolExecutor(max_workers=threads, thread_name_prefix="guess") as pool:
            futures = [pool.submit(self._worker, candidates, lock, bound) for _ in range(threads)]
            results = [f.result() for f in futures]

        found = [r for r in results if r is not None]
        if not found:
            raise InconsistentPuzzleError()

        worst, avg, _, word = min(found)
        return GuessResult(denormalize(word), worst, avg)


def best_guess(puzzle, threads: Optional[int] = None) -> GuessResult:
    """Convenience wrapper: GuessSearch(puzzle).run(threads)."""
    return GuessSearch(puzzle).run(threads)

