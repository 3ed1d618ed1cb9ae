"""
Game state and its transitions.

A GameState is an immutable value. Every player action returns a NEW state
(the old one is untouched), which keeps undo trivial and lets the engine be
tested without any UI:

  pick_letter(state, "p")          -> current_guess + "p"
  backspace(state)                 -> current_guess minus its last letter
  clear_guess(state)               -> current_guess = ""
  submit_guess(state, puzzle)      -> (new_state, outcome)

Only an "accepted" submission changes found_words (and clears the guess);
every rejection leaves the state exactly as it was.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from spellbee.engine import Puzzle, GuessOutcome, check_guess
from spellbee.engine.dictionary import is_clean_word


@dataclass(frozen=True)
class GameState:
    found_words: Tuple[str, ...] = ()   # unique, sorted for display
    current_guess: str = ""

    def __post_init__(self) -> None:
        words = tuple(self.found_words)
        if len(set(words)) != len(words):
            raise ValueError("found_words must not contain duplicates")
        object.__setattr__(self, "found_words", tuple(sorted(words)))


def new_game() -> GameState:
    """Fresh state for a new puzzle."""
    return GameState()


def pick_letter(state: GameState, letter: str) -> GameState:
    ch = letter.lower()
    if len(ch) != 1 or not is_clean_word(ch):
        raise ValueError(f"expected a single letter a-z; got {letter!r}")
    return replace(state, current_guess=state.current_guess + ch)


def type_word(state: GameState, text: str) -> GameState:
    """Append several letters at once (same rules as pick_letter)."""
    for ch in text:
        state = pick_letter(state, ch)
    return state


def backspace(state: GameState) -> GameState:
    return replace(state, current_guess=state.current_guess[:-1])


def clear_guess(state: GameState) -> GameState:
    return replace(state, current_guess="")


def submit_guess(state: GameState, puzzle: Puzzle) -> Tuple[GameState, GuessOutcome]:
    """Run the submission protocol on the current guess."""
    outcome = check_guess(state.current_guess, puzzle, state.found_words)
    if outcome != "accepted":
        return state, outcome
    guess = state.current_guess.lower()
    return GameState(found_words=state.found_words + (guess,), current_guess=""), outcome
