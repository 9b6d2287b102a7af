import pytest
from wordle_solver.engine import (
    Dictionary, Hint, compute_hint, parse_hints, hints_to_str, parse_guess_token,
    InvalidWordError, InvalidHintError,
)

C, P, A = Hint.CORRECT, Hint.PRESENT, Hint.ABSENT


def test_compute_hint_example():
    assert compute_hint("hello", "pogos") == [A, A, A, A, P]


# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("hello", "pogos", "aaaap"),
    ("holop", "pogas", "acaap"),
    ("holop", "pooas", "acapp"),
    ("holop", "pogos", "acacp"),
    ("holop", "pogao", "acapp"),
    ("holop", "oogaa", "acapa"),
    ("pogos", "hello", "apaaa"),
    ("pogas", "holop", "pcaaa"),
    ("pooas", "holop", "pcpaa"),
    ("pogos", "holop", "pcaca"),
    ("pogao", "holop", "pcaap"),
    ("oogaa", "holop", "pcaaa"),
    ("oogaa", "hloop", "ppaaa"),
    ("oogaa", "hollp", "acaaa"),
    ("belle", "level", "acppp"),
    ("lemon", "level", "ccaaa"),
    ("cools", "scoop", "ppcap"),
    ("raise", "crane", "ppaac"),
    ("stare", "crane", "aacpc"),
    ("crane", "crane", "ccccc"),
])
def test_compute_hint_n5_golden(guess, answer, expected):
    assert hints_to_str(compute_hint(guess, answer)) == expected


# --- N=6 sample tests ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("settle", "letter", "acccpp"),
    ("little", "letter", "caccap"),
    ("planet", "palate", "cppapp"),
    ("kitten", "tinket", "pcppcp"),
])
def test_compute_hint_n6_samples(guess, answer, expected):
    assert hints_to_str(compute_hint(guess, answer)) == expected


@pytest.mark.parametrize("guess,answer", [
    ("eerie", "there"), ("speed", "abide"), ("lolly", "loyal"), ("array", "rarer"),
])
def test_compute_hint_never_overcounts(guess, answer):
    hints = compute_hint(guess, answer)
    for i, h in enumerate(hints):
        assert (h is C) == (guess[i] == answer[i])
    for letter in set(guess):
        marked = sum(1 for g, h in zip(guess, hints) if g == letter and h is not A)
        assert marked <= answer.count(letter)


@pytest.mark.parametrize("guess,answer", [
    ("hell", "pogos"), ("hello", "pogo"), ("Hello", "pogos"), ("hello", "pog0s"),
])
def test_compute_hint_rejects_bad_words(guess, answer):
    with pytest.raises(InvalidWordError):
        compute_hint(guess, answer)


def test_parse_hints_and_tokens():
    assert parse_hints("cpa") == [C, P, A]
    assert hints_to_str([A, C, P]) == "acp"
    assert parse_guess_token("crane:aapca") == ("crane", [A, A, P, C, A])
    with pytest.raises(InvalidHintError):
        parse_guess_token("crane")
    with pytest.raises(InvalidHintError):
        parse_guess_token("crane:aapcx")


def test_dictionary_dedupes_and_sorts():
    d = Dictionary.build(5, ["stare", "crane", "raise", "crane"])
    assert len(d) == 3
    assert d.word_length == 5
    assert d.strings() == ["crane", "raise", "stare"]
    assert d.words[0] == (2, 17, 0, 13, 4)
    assert "crane" in d and "trace" not in d and "cran" not in d


def test_dictionary_reports_first_invalid_in_sorted_order():
    with pytest.raises(InvalidWordError) as ei:
        Dictionary.build(5, ["zzzzz", "abc", "crane", "ABCDE"])
    # "ABCDE" sorts before "abc"
    assert ei.value.word == "ABCDE"
    assert ei.value.expected_len == 5

    with pytest.raises(InvalidWordError) as ei:
        Dictionary.build(5, ["crane", "stares", "abc"])
    assert ei.value.word == "abc"


def test_dictionary_zero_length_is_a_contract_violation():
    with pytest.raises(AssertionError):
        Dictionary.build(0, [])
