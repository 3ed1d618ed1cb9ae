"""
Guess validation.

Two separate questions live here:

1) "Does this string have the right shape for this puzzle?"
   `is_allowed_word` is purely structural (no dictionary lookup):
     - at least 4 letters
     - contains the center letter at least once
     - uses only the puzzle's letters (repeats allowed)
   The puzzle builder uses the same function to pick its word list, so a word
   accepted during generation is always accepted here too.

2) "What happens when the player submits this guess?"
   `check_guess` runs the submission protocol in a fixed order and returns an
   outcome instead of raising:
     empty -> duplicate -> invalid (bad shape) -> unknown (not in list) -> accepted
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Collection, Dict, Iterable, Literal

if TYPE_CHECKING:
    from .puzzle import Puzzle

MIN_WORD_LEN = 4

GuessOutcome = Literal["empty", "duplicate", "invalid", "unknown", "accepted"]

# User-facing text for each outcome (what the game shows after a submission).
OUTCOME_MESSAGES: Dict[str, str] = {
    "empty": "",
    "duplicate": "Already found",
    "invalid": "Invalid",
    "unknown": "Not in list",
    "accepted": "Nice!",
}


def is_allowed_word(word: str, letters: Iterable[str], center: str) -> bool:
    """
    Return True if `word` satisfies the structural rules for a puzzle built on
    `letters` with mandatory letter `center`.

    Examples (letters = "alphine", center = "a"):
      is_allowed_word("plain", ...) -> True
      is_allowed_word("pine", ...)  -> False   (no 'a')
      is_allowed_word("pal", ...)   -> False   (too short)
      is_allowed_word("plank", ...) -> False   ('k' not in letters)
    """
    if len(word) < MIN_WORD_LEN:
        return False
    if center not in word:
        return False
    allowed = set(letters)
    return all(ch in allowed for ch in word)


def check_guess(guess: str, puzzle: "Puzzle", found_words: Collection[str]) -> GuessOutcome:
    """
    Classify a submitted guess against `puzzle` and the words already found.

    The guess is lowercased first; nothing else is normalized (a guess with
    spaces or digits is simply "invalid").
    """
    g = guess.lower()
    if not g:
        return "empty"
    if g in found_words:
        return "duplicate"
    if not is_allowed_word(g, puzzle.letters, puzzle.center):
        return "invalid"
    if not puzzle.contains(g):
        return "unknown"
    return "accepted"
