import random

import pytest
from spellbee.engine import (Puzzle, build_puzzle_from_pangram, check_guess, find_pangram_candidates,
                             find_random_pangram, generate_puzzle, is_allowed_word, is_seven_unique_letters,
                             letters_of, normalize_word_list, score_word, shuffle_letters, total_score)

LETTERS = tuple("alphine")
WORDS = ["plain", "alphine", "pine", "pal", "plank", "nail", "nail", "hail", "lane",
         "plain", "alpine", "panel", "ape"]


def _puzzle(center=None):
    return build_puzzle_from_pangram(WORDS, "alphine", center)


# --- dictionary normalization ---

def test_normalize_word_list_drops_malformed_lines():
    text = "Apple\r\nox\nhi-fi\n  bee \ncafé\n\nzebra\nbee"
    assert normalize_word_list(text) == ["apple", "bee", "zebra", "bee"]


def test_normalize_word_list_empty():
    assert normalize_word_list("") == []


def test_normalize_word_list_strips_byte_order_mark():
    assert normalize_word_list("\ufeffalphine\nplain") == ["alphine", "plain"]


def test_letters_of_keeps_first_occurrence_order():
    assert letters_of("happy") == ["h", "a", "p", "y"]
    assert is_seven_unique_letters("complex") is True
    assert is_seven_unique_letters("happy") is False


# --- seed selection ---

def test_find_pangram_candidates():
    words = ["happy", "complex", "jukebox", "plain", "complexes", "complex"]
    assert find_pangram_candidates(words) == ["complex", "jukebox", "complex"]


def test_find_random_pangram_none_when_no_candidate():
    assert find_random_pangram([]) is None
    assert find_random_pangram(["plain", "happy"]) is None


def test_find_random_pangram_uses_injected_rng():
    words = ["complex", "jukebox", "planted", "parking"]
    expected = words[random.Random(3).randrange(len(words))]
    assert find_random_pangram(words, rng=random.Random(3)) == expected


# --- puzzle builder ---

@pytest.mark.parametrize("seed", ["happy", "potpies", "ALPHINE", "alph1ne", "", "complexes"])
def test_build_rejects_invalid_seed(seed):
    assert build_puzzle_from_pangram(["happy", "hippo", "poppy", "hop", "zap"], seed) is None


def test_build_alphine():
    p = _puzzle()
    assert p.letters == LETTERS
    assert p.center == "a"
    assert p.pangram == "alphine"
    assert p.allowed_words == ("alphine", "alpine", "hail", "lane", "nail", "panel", "plain")


def test_build_center_letter():
    assert _puzzle("p").allowed_words == ("alphine", "alpine", "panel", "plain")
    # not one of the letters -> falls back to the first letter
    assert _puzzle("z").center == "a"


def test_build_allowed_words_consistent_with_validator():
    p = _puzzle()
    assert list(p.allowed_words) == sorted(set(p.allowed_words))
    for w in p.allowed_words:
        assert is_allowed_word(w, p.letters, p.center)
        assert len(w) >= 4 and p.center in w and set(w) <= p.letter_set


def test_build_empty_dictionary_and_missing_seed():
    assert build_puzzle_from_pangram([], "alphine").allowed_words == ()
    p = build_puzzle_from_pangram(["plain"], "alphine")
    assert p.allowed_words == ("plain",)
    assert p.pangram == "alphine"


@pytest.mark.parametrize("kwargs", [
    dict(letters=tuple("alphin"), center="a", allowed_words=(), pangram="alphin"),
    dict(letters=tuple("alphina"), center="a", allowed_words=(), pangram="alphina"),
    dict(letters=LETTERS, center="z", allowed_words=(), pangram="alphine"),
    dict(letters=LETTERS, center="a", allowed_words=("plain", "hail"), pangram="alphine"),
    dict(letters=LETTERS, center="a", allowed_words=("hail", "hail"), pangram="alphine"),
    dict(letters=LETTERS, center="a", allowed_words=("pine",), pangram="alphine"),
])
def test_puzzle_rejects_broken_invariants(kwargs):
    with pytest.raises(ValueError):
        Puzzle(**kwargs)


def test_puzzle_contains():
    p = _puzzle()
    assert p.contains("plain") and p.contains("alphine")
    assert not p.contains("pine")
    assert not p.contains("zzzz")


def test_shuffle_letters_keeps_rules():
    p = _puzzle("n")
    s = shuffle_letters(p, rng=random.Random(0))
    assert s.letters[0] == "n"
    assert s.letter_set == p.letter_set
    assert s.center == p.center and s.allowed_words == p.allowed_words
    assert p.letters == LETTERS  # original untouched


def test_generate_puzzle():
    p = generate_puzzle(["plain", "alphine"], rng=random.Random(1))
    assert p is not None and p.pangram == "alphine"
    assert generate_puzzle(["plain"]) is None


# --- guess validation ---

@pytest.mark.parametrize("word,expected", [
    ("plain", True),
    ("hail", True),
    ("aaaa", True),
    ("pine", False),   # no center
    ("pal", False),    # too short
    ("plank", False),  # k not in letters
])
def test_is_allowed_word(word, expected):
    assert is_allowed_word(word, LETTERS, "a") is expected


@pytest.mark.parametrize("guess,found,expected", [
    ("", (), "empty"),
    ("plain", ("plain",), "duplicate"),
    ("PLAIN", ("plain",), "duplicate"),
    ("pine", (), "invalid"),
    ("pale", (), "unknown"),   # right shape, not a dictionary word
    ("PLAIN", (), "accepted"),
])
def test_check_guess(guess, found, expected):
    assert check_guess(guess, _puzzle(), found) == expected


# --- scoring ---

@pytest.mark.parametrize("word,expected", [
    ("plan", 1),
    ("hail", 1),
    ("plain", 5),
    ("alpine", 6),
    ("alphine", 14),
    ("alphinee", 15),
])
def test_score_word(word, expected):
    assert score_word(word, LETTERS) == expected


def test_score_monotonic_in_length():
    scores = [score_word("a" * n, LETTERS) for n in range(4, 12)]
    assert scores == sorted(scores)
    assert scores[0] == 1


def test_total_score():
    assert total_score(["plain", "alphine", "hail"], LETTERS) == 20
    assert total_score([], LETTERS) == 0
