from collections import Counter

import pytest
from wordle_solver.engine import (
    Dictionary, PuzzleState, compute_hint, hints_to_str, parse_hints, InconsistentPuzzleError,
)
from wordle_solver.solvers import GuessSearch, best_guess
from wordle_solver.engine.validation import normalize

WORDS = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
WIDER = WORDS + ["slate", "crate", "react", "least", "steal", "tales", "arise", "snare",
                 "spare", "spear", "pears", "reaps", "heart", "earth", "hater", "other"]


def _reference_worst(guess, feasible):
    """Largest group of still-feasible answers that share a hint for `guess`."""
    return max(Counter(hints_to_str(compute_hint(guess, a)) for a in feasible).values())


def test_best_guess_after_one_round():
    puzzle = PuzzleState(Dictionary.build(5, WORDS))
    puzzle.guess("raise", parse_hints("ppaac"))
    res = puzzle.best_guess(1)
    # crane and trace are told apart by either; crane wins on word order
    assert (res.word, res.worst_case, res.avg_case) == ("crane", 1, 1.0)
    assert tuple(res) == ("crane", 1, 1.0)


def test_solved_puzzle_short_circuits():
    puzzle = PuzzleState(Dictionary.build(5, WORDS))
    puzzle.guess("crane", parse_hints("ccccc"))
    assert puzzle.is_solved()
    res = puzzle.best_guess(4)
    assert res.word == "crane"
    assert res.worst_case == 0
    assert res.avg_case == 0.0


def test_inconsistent_puzzle_reports_error():
    puzzle = PuzzleState(Dictionary.build(5, WORDS))
    puzzle.guess("stare", compute_hint("stare", "crane"))
    puzzle.guess("stare", compute_hint("stare", "scoop"))
    assert not puzzle.is_consistent()
    with pytest.raises(InconsistentPuzzleError):
        puzzle.best_guess(2)


@pytest.mark.parametrize("threads", [2, 3, 8])
def test_result_does_not_depend_on_thread_count(threads):
    d = Dictionary.build(5, WIDER)
    single = best_guess(PuzzleState(d), 1)
    assert best_guess(PuzzleState(d), threads) == single

    puzzle = PuzzleState(d)
    puzzle.guess("stare", compute_hint("stare", "heart"))
    assert best_guess(puzzle, threads) == best_guess(puzzle, 1)


def test_zero_threads_means_one():
    puzzle = PuzzleState(Dictionary.build(5, WORDS))
    assert puzzle.best_guess(0) == puzzle.best_guess(1)


def test_first_guess_is_informative():
    d = Dictionary.build(5, WIDER)
    puzzle = PuzzleState(d)
    res = puzzle.best_guess(2)
    assert res.word in d
    assert 0 < res.worst_case < len(d)
    assert res.avg_case <= res.worst_case


def test_worst_case_is_minimax_over_real_hints():
    d = Dictionary.build(5, WIDER)
    puzzle = PuzzleState(d)
    puzzle.guess("raise", compute_hint("raise", "spear"))
    feasible = puzzle.feasible_words
    assert len(feasible) > 1

    res = puzzle.best_guess(2)
    expected = min(_reference_worst(g, feasible) for g in d.strings())
    assert res.worst_case == expected
    assert _reference_worst(res.word, feasible) == expected


def test_score_without_bound_matches_result():
    d = Dictionary.build(5, WIDER)
    puzzle = PuzzleState(d)
    res = puzzle.best_guess(1)
    worst, avg = GuessSearch(puzzle).score(normalize(res.word))
    assert (worst, avg) == (res.worst_case, res.avg_case)


def test_prefers_a_guess_that_could_be_the_answer():
    d = Dictionary.build(3, ["abz", "caa", "cxy", "dxy"])
    puzzle = PuzzleState(d)
    puzzle.guess("abz", parse_hints("aaa"))
    assert puzzle.feasible_words == ["cxy", "dxy"]

    # "caa" splits cxy/dxy just as well but can no longer be the answer
    search = GuessSearch(puzzle)
    assert search.score(normalize("caa")) == search.score(normalize("cxy")) == (1, 1.0)
    assert puzzle.best_guess(2).word == "cxy"
