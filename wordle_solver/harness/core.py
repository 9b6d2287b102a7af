"""
Self-play benchmark primitives.

- play_game:  let the minimax solver play one puzzle with a known answer.
- run_bench:  play every answer in a list on a pool of threads.
- summarize:  min / max / mean / std of guesses needed.

The answer is only used to produce hints (via compute_hint); the solver
itself sees nothing but the hint sequence, exactly as a human player would.
"""

from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, Iterable, List, Optional
import logging
import threading
import time

import numpy as np

from wordle_solver.engine import Dictionary, PuzzleState, compute_hint, hints_to_str
from wordle_solver.solvers import default_threads

log = logging.getLogger(__name__)

# Wordle's turn budget; games are still played to the end, this only sets `success`
WORDLE_MAX_TURNS = 6


def opening_guess(dictionary: Dictionary, threads: Optional[int] = None) -> str:
    """The first guess is the same for every game, so compute it once."""
    return PuzzleState(dictionary).best_guess(threads).word


def play_game(
        dictionary: Dictionary,
        answer: str,
        *,
        first_guess: Optional[str] = None,
        threads: int = 1,
) -> Dict:
    """
    Play until the solver guesses `answer`.

    Args:
        dictionary:  word list the solver guesses from
        answer:      hidden word (must be valid for the dictionary's length)
        first_guess: precomputed opener; searched for when None
        threads:     threads for each best_guess call

    Returns:
        dict with keys: answer, success, guesses, time_ms, history
        where history is a list of (guess, hint_string) pairs.

    Raises InconsistentPuzzleError if `answer` is not in the dictionary
    (the hints eventually rule out every word).
    """
    puzzle = PuzzleState(dictionary)
    history = []

    t0 = time.perf_counter()
    while True:
        if not history and first_guess is not None:
            guess = first_guess
        else:
            guess = puzzle.best_guess(threads).word

        hints = compute_hint(guess, answer)
        puzzle.guess(guess, hints)
        history.append((guess, hints_to_str(hints)))
        if guess == answer:
            break

    dt_ms = (time.perf_counter() - t0) * 1000.0
    return {
        "answer": answer,
        "success": len(history) <= WORDLE_MAX_TURNS,
        "guesses": len(history),
        "time_ms": dt_ms,
        "history": history,
    }


def run_bench(
        dictionary: Dictionary,
        answers: Iterable[str],
        *,
        threads: Optional[int] = None,
        first_guess: Optional[str] = None,
        on_result: Optional[Callable[[Dict], None]] = None,
) -> List[Dict]:
    """
    Play one game per answer. Games run in parallel (one game per thread at a
    time, each game searching single-threaded); answers are pulled from one
    shared iterator.

    `on_result` is called once per finished game (serialized), e.g. to
    advance a progress bar. Results are returned sorted by answer.
    """
    threads = default_threads() if threads is None else max(1, threads)
    if first_guess is None:
        first_guess = opening_guess(dictionary, threads)
    log.info("opening guess: %s", first_guess)

    pending = iter(answers)
    lock = threading.Lock()
    results: List[Dict] = []

    def worker() -> None:
        while True:
            with lock:
                answer = next(pending, None)
            if answer is None:
                return
            r = play_game(dictionary, answer, first_guess=first_guess, threads=1)
            with lock:
                results.append(r)
                if on_result is not None:
                    on_result(r)
            log.debug("%s took %d guesses", answer, r["guesses"])

    with ThreadPoolExecutor(max_workers=threads, thread_name_prefix="bench") as pool:
        futures = [pool.submit(worker) for _ in range(threads)]
        for f in futures:
            f.result()

    results.sort(key=lambda r: r["answer"])
    return results


def summarize(results: List[Dict]) -> Dict:
    """
    Guess-count statistics over a batch (std is the population std).
    An empty batch yields count 0 and NaN statistics.
    """
    counts = np.array([r["guesses"] for r in results], dtype=float)
    if counts.size == 0:
        return {"count": 0, "min": float("nan"), "max": float("nan"),
                "avg": float("nan"), "std": float("nan"), "success_rate": float("nan")}
    return {
        "count": int(counts.size),
        "min": int(counts.min()),
        "max": int(counts.max()),
        "avg": float(counts.mean()),
        "std": float(counts.std()),
        "success_rate": float(np.mean(counts <= WORDLE_MAX_TURNS)),
    }
