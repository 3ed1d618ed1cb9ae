"""
Session persistence.

Round-trips the active Puzzle and GameState through a small JSON document:

    {
      "puzzle": {"letters": [...7...], "center": "a",
                 "allowed_words": [...sorted...], "pangram": "alphine"},
      "game":   {"found_words": [...], "current_guess": ""}
    }

Every field is preserved. Loading rebuilds the dataclasses, so a file that
breaks a Puzzle/GameState invariant (e.g. 6 letters, unsorted word list)
raises ValueError instead of producing a half-valid game.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Dict, Optional, Tuple

from spellbee.engine import Puzzle
from spellbee.session.state import GameState

PUZZLE_FIELDS = ("letters", "center", "allowed_words", "pangram")
GAME_FIELDS = ("found_words", "current_guess")
LIST_FIELDS = ("letters", "allowed_words", "found_words")


def puzzle_to_dict(puzzle: Puzzle) -> Dict:
    d = asdict(puzzle)
    d["letters"] = list(puzzle.letters)
    d["allowed_words"] = list(puzzle.allowed_words)
    return d


def _check_fields(d, fields, what: str) -> None:
    """Every field present; list fields are lists of str, the rest are str."""
    if not isinstance(d, dict):
        raise ValueError(f"{what} must be a JSON object; got {type(d).__name__}")
    missing = [k for k in fields if k not in d]
    if missing:
        raise ValueError(f"{what} is missing field(s): {missing}")
    for k in fields:
        v = d[k]
        if k in LIST_FIELDS:
            if not isinstance(v, list) or not all(isinstance(x, str) for x in v):
                raise ValueError(f"{what}.{k} must be a list of strings")
        elif not isinstance(v, str):
            raise ValueError(f"{what}.{k} must be a string")


def puzzle_from_dict(d: Dict) -> Puzzle:
    _check_fields(d, PUZZLE_FIELDS, "puzzle")
    return Puzzle(
        letters=tuple(d["letters"]),
        center=d["center"],
        allowed_words=tuple(d["allowed_words"]),
        pangram=d["pangram"],
    )


def state_to_dict(state: GameState) -> Dict:
    return {"found_words": list(state.found_words), "current_guess": state.current_guess}


def state_from_dict(d: Dict) -> GameState:
    _check_fields(d, GAME_FIELDS, "game")
    return GameState(found_words=tuple(d["found_words"]), current_guess=d["current_guess"])


def save_session(path: Path | str, puzzle: Optional[Puzzle], state: GameState) -> str:
    """
    Write the session document (creating parent dirs). Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    doc = {
        "puzzle": puzzle_to_dict(puzzle) if puzzle is not None else None,
        "game": state_to_dict(state),
    }
    with p.open("w", encoding="utf-8") as f:
        json.dump(doc, f, indent=2)
    return str(p)


def load_session(path: Path | str) -> Tuple[Optional[Puzzle], GameState]:
    """
    Read a session document written by save_session.
    Raises FileNotFoundError if the path doesn't exist, ValueError if it is
    not a valid session.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    try:
        doc = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{p} is not valid JSON: {e}") from e
    if not isinstance(doc, dict) or "game" not in doc:
        raise ValueError(f"{p} is not a session document")

    puzzle = puzzle_from_dict(doc["puzzle"]) if doc.get("puzzle") is not None else None
    state = state_from_dict(doc["game"])
    return puzzle, state
