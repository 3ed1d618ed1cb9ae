import json
from pathlib import Path

import pytest
from spellbee.engine import build_puzzle_from_pangram
from spellbee.session import GameState, load_session, save_session
from spellbee.session.store import puzzle_from_dict, puzzle_to_dict

WORDS = ["plain", "alphine", "nail", "hail", "lane", "alpine", "panel"]


def test_session_round_trip(tmp_path: Path):
    puzzle = build_puzzle_from_pangram(WORDS, "alphine", "p")
    state = GameState(found_words=("plain", "panel"), current_guess="alp")
    path = tmp_path / "nested" / "session.json"

    save_session(path, puzzle, state)
    p2, s2 = load_session(path)
    assert p2 == puzzle
    assert s2 == state


def test_round_trip_without_puzzle(tmp_path: Path):
    path = tmp_path / "session.json"
    save_session(path, None, GameState())
    assert load_session(path) == (None, GameState())


def test_puzzle_dict_shape():
    d = puzzle_to_dict(build_puzzle_from_pangram(WORDS, "alphine"))
    assert d == {
        "letters": list("alphine"),
        "center": "a",
        "allowed_words": ["alphine", "alpine", "hail", "lane", "nail", "panel", "plain"],
        "pangram": "alphine",
    }
    assert puzzle_from_dict(d).allowed_words[0] == "alphine"


@pytest.mark.parametrize("puzzle", [
    {"letters": list("alphin"), "center": "a", "allowed_words": [], "pangram": "alphin"},
    {"letters": list("alphine"), "center": "a", "allowed_words": ["plain", "hail"], "pangram": "alphine"},
    {"letters": list("alphine"), "center": "a", "allowed_words": []},
])
def test_load_rejects_corrupted_puzzle(tmp_path: Path, puzzle):
    path = tmp_path / "session.json"
    path.write_text(json.dumps({"puzzle": puzzle, "game": {"found_words": [], "current_guess": ""}}),
                    encoding="utf-8")
    with pytest.raises(ValueError):
        load_session(path)


@pytest.mark.parametrize("doc", [
    {"puzzle": None, "game": {"found_words": None, "current_guess": ""}},
    {"puzzle": None, "game": "found_words current_guess"},
    {"puzzle": None, "game": {"found_words": [], "current_guess": 5}},
    {"puzzle": None, "game": {"found_words": [1, 2], "current_guess": ""}},
    {"puzzle": {"letters": list("alphine"), "center": "a", "allowed_words": None, "pangram": "alphine"},
     "game": {"found_words": [], "current_guess": ""}},
    {"puzzle": {"letters": list("alphine"), "center": 1, "allowed_words": [], "pangram": "alphine"},
     "game": {"found_words": [], "current_guess": ""}},
    {"puzzle": ["alphine"], "game": {"found_words": [], "current_guess": ""}},
])
def test_load_rejects_wrong_field_types(tmp_path: Path, doc):
    path = tmp_path / "session.json"
    path.write_text(json.dumps(doc), encoding="utf-8")
    with pytest.raises(ValueError):
        load_session(path)

def test_load_errors(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_session(tmp_path / "missing.json")

    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_session(bad)

    no_game = tmp_path / "no_game.json"
    no_game.write_text("{}", encoding="utf-8")
    with pytest.raises(ValueError):
        load_session(no_game)
