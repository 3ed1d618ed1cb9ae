"""
Puzzle selection and construction.

Given:
  - a normalized dictionary (see dictionary.py)
  - a seed word with exactly 7 distinct letters (a "pangram")
  - optionally, which of those letters is mandatory (the center)

Produce:
  - an immutable Puzzle: the 7 letters, the center, the sorted/deduplicated
    list of every dictionary word the puzzle accepts, and the seed itself.

Absence is signalled with None, never an exception:
  - find_random_pangram -> None when the dictionary has no 7-letter-set word
  - build_puzzle_from_pangram -> None when the seed is not a valid seed

Randomness is always injectable (`rng: random.Random`) so tests and batch runs
are reproducible.
"""

from __future__ import annotations

import random
from bisect import bisect_left
from dataclasses import dataclass, replace
from typing import FrozenSet, Iterable, List, Optional, Tuple

from .dictionary import PANGRAM_LETTERS, is_clean_word, letters_of
from .validation import is_allowed_word


@dataclass(frozen=True)
class Puzzle:
    """
    One puzzle instance.

    `letters` order is display order only (shuffling reorders it); the rules
    only ever look at the set. The seed (`pangram`) is kept for display and is
    not guaranteed to be in `allowed_words`.
    """
    letters: Tuple[str, ...]
    center: str
    allowed_words: Tuple[str, ...]
    pangram: str

    def __post_init__(self) -> None:
        # Normalize list inputs (e.g. from JSON) to tuples before checking.
        object.__setattr__(self, "letters", tuple(self.letters))
        object.__setattr__(self, "allowed_words", tuple(self.allowed_words))

        if len(self.letters) != PANGRAM_LETTERS or len(set(self.letters)) != PANGRAM_LETTERS:
            raise ValueError(f"puzzle needs {PANGRAM_LETTERS} distinct letters; got {self.letters}")
        for ch in self.letters:
            if len(ch) != 1 or not is_clean_word(ch):
                raise ValueError(f"puzzle letters must be single a-z characters; got {ch!r}")
        if self.center not in self.letters:
            raise ValueError(f"center {self.center!r} is not one of {self.letters}")

        prev = None
        for w in self.allowed_words:
            if prev is not None and w <= prev:
                raise ValueError("allowed_words must be sorted and free of duplicates")
            if not is_allowed_word(w, self.letters, self.center):
                raise ValueError(f"{w!r} is not an allowed word for this puzzle")
            prev = w

    @property
    def letter_set(self) -> FrozenSet[str]:
        return frozenset(self.letters)

    def contains(self, word: str) -> bool:
        """Membership in `allowed_words` (binary search; the tuple is sorted)."""
        i = bisect_left(self.allowed_words, word)
        return i < len(self.allowed_words) and self.allowed_words[i] == word


def find_pangram_candidates(dictionary: Iterable[str]) -> List[str]:
    """
    Words usable as a seed: exactly 7 distinct letters (and so length >= 7).
    Dictionary order is kept and duplicates are not collapsed.
    """
    return [w for w in dictionary if len(set(w)) == PANGRAM_LETTERS and len(w) >= PANGRAM_LETTERS]


def find_random_pangram(
        dictionary: Iterable[str],
        rng: random.Random | None = None,
) -> Optional[str]:
    """
    Pick one seed uniformly at random, or None if the dictionary has none.
    """
    candidates = find_pangram_candidates(dictionary)
    if not candidates:
        return None
    rng = rng or random.Random()
    return candidates[rng.randrange(len(candidates))]


def build_puzzle_from_pangram(
        dictionary: Iterable[str],
        pangram: str,
        center_letter: str | None = None,
) -> Optional[Puzzle]:
    """
    Build the puzzle seeded by `pangram`.

    Steps:
      0) None if the seed is not all lowercase a-z letters ("ALPHINE",
         "alph1ne"); callers lowercase player input before building
      1) letters = distinct letters of the seed, first-occurrence order
      2) None unless there are exactly 7 of them
      3) center = center_letter if it is one of the letters, else letters[0]
      4) allowed_words = every dictionary word passing is_allowed_word,
         deduplicated and sorted ascending

    Examples:
      build_puzzle_from_pangram(words, "happy")   -> None (4 distinct letters)
      build_puzzle_from_pangram(words, "alphine") -> Puzzle(center="a", ...)
    """
    if not is_clean_word(pangram):
        return None
    letters = letters_of(pangram)
    if len(letters) != PANGRAM_LETTERS:
        return None

    center = center_letter if center_letter and center_letter in letters else letters[0]
    letter_set = frozenset(letters)

    allowed = {w for w in dictionary if is_allowed_word(w, letter_set, center)}
    return Puzzle(
        letters=tuple(letters),
        center=center,
        allowed_words=tuple(sorted(allowed)),
        pangram=pangram,
    )


def generate_puzzle(
        dictionary: Iterable[str],
        rng: random.Random | None = None,
) -> Optional[Puzzle]:
    """Pick a random seed and build its puzzle (None if no seed exists)."""
    words = list(dictionary)
    pangram = find_random_pangram(words, rng=rng)
    if pangram is None:
        return None
    return build_puzzle_from_pangram(words, pangram)


def shuffle_letters(puzzle: Puzzle, rng: random.Random | None = None) -> Puzzle:
    """
    New Puzzle with the center first and the other six letters in random
    order. Set, center and word list are unchanged.
    """
    rng = rng or random.Random()
    others = [ch for ch in puzzle.letters if ch != puzzle.center]
    rng.shuffle(others)
    return replace(puzzle, letters=(puzzle.center, *others))
