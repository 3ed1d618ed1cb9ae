"""
Interactive session: one dictionary, the active puzzle, and the game state.

The session is the only mutable object in the game. It never edits a Puzzle
or GameState in place; each action computes a new value with the pure
functions in spellbee.engine / spellbee.session.state and swaps it in. The
previous (puzzle, state) pair goes onto an undo stack.

Typical use (what apps/cli/play.py does):

    s = Session(dictionary, seed=7)
    s.new_random_puzzle()
    s.type_word("plain")
    outcome = s.submit()          # "accepted"
    s.stats().overall.remaining
"""

from __future__ import annotations

import random
from typing import List, Optional, Sequence, Tuple

from spellbee.engine import (Puzzle, GuessOutcome, StatsSummary, build_puzzle_from_pangram,
                             compute_stats, find_random_pangram, shuffle_letters, total_score)
from spellbee.engine import scoring
from spellbee.session import state as st
from spellbee.session.state import GameState

Snapshot = Tuple[Optional[Puzzle], GameState]


class Session:
    def __init__(self, dictionary: Sequence[str], *, seed: int | None = None,
                 puzzle: Puzzle | None = None, state: GameState | None = None):
        self.dictionary = list(dictionary)
        self.rng = random.Random(seed)
        self.puzzle: Optional[Puzzle] = puzzle
        self.state: GameState = state or st.new_game()
        self._undo: List[Snapshot] = []

    # ---- puzzle lifecycle ----

    def new_random_puzzle(self) -> Optional[Puzzle]:
        """Pick a random seed; None (state untouched) if the dictionary has none."""
        pangram = find_random_pangram(self.dictionary, rng=self.rng)
        if pangram is None:
            return None
        return self.new_puzzle(pangram)

    def new_puzzle(self, pangram: str, center: str | None = None) -> Optional[Puzzle]:
        """Start a puzzle from a chosen seed; None (state untouched) if it is invalid."""
        p = build_puzzle_from_pangram(self.dictionary, pangram, center)
        if p is None:
            return None
        self._commit(p, st.new_game())
        return p

    def shuffle(self) -> None:
        if self.puzzle is None:
            return
        self._commit(shuffle_letters(self.puzzle, rng=self.rng), self.state)

    # ---- input ----

    def pick(self, letter: str) -> None:
        self._commit(self.puzzle, st.pick_letter(self.state, letter))

    def type_word(self, text: str) -> None:
        self._commit(self.puzzle, st.type_word(self.state, text))

    def backspace(self) -> None:
        self._commit(self.puzzle, st.backspace(self.state))

    def clear(self) -> None:
        self._commit(self.puzzle, st.clear_guess(self.state))

    def submit(self) -> Optional[GuessOutcome]:
        """Submit the current guess; None if there is no puzzle yet."""
        if self.puzzle is None:
            return None
        new_state, outcome = st.submit_guess(self.state, self.puzzle)
        self._commit(self.puzzle, new_state)
        return outcome

    def submit_word(self, text: str) -> Optional[GuessOutcome]:
        """
        Replace the guess with `text` and submit it as one action: an accepted
        word is one undo step, a rejected one only clears the guess (no undo
        step when the guess was already empty).
        """
        if self.puzzle is None:
            return None
        typed = st.type_word(st.clear_guess(self.state), text)
        new_state, outcome = st.submit_guess(typed, self.puzzle)
        if outcome != "accepted":
            new_state = st.clear_guess(new_state)
        self._commit(self.puzzle, new_state)
        return outcome

    def undo(self) -> bool:
        if not self._undo:
            return False
        self.puzzle, self.state = self._undo.pop()
        return True

    # ---- derived views ----

    def score(self) -> int:
        if self.puzzle is None:
            return 0
        return total_score(self.state.found_words, self.puzzle.letters)

    def max_score(self) -> int:
        if self.puzzle is None:
            return 0
        return scoring.max_score(self.puzzle.allowed_words, self.puzzle.letters)

    def stats(self) -> Optional[StatsSummary]:
        if self.puzzle is None:
            return None
        return compute_stats(self.puzzle.allowed_words, self.state.found_words)

    def _commit(self, puzzle: Optional[Puzzle], state: GameState) -> None:
        if puzzle == self.puzzle and state == self.state:
            return
        self._undo.append((self.puzzle, self.state))
        self.puzzle, self.state = puzzle, state
