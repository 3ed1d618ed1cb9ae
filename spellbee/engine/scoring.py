"""
Points for found words.

Conventions:
  - a 4-letter word is worth 1 point
  - a longer word is worth its length
  - a word that uses every puzzle letter (a pangram) earns +7 on top

Each word is scored on its own (no cross-word state); a session's score is the
sum over its found words.

Examples (letters = "alphine"):
  score_word("plan", letters)    -> 1
  score_word("plain", letters)   -> 5
  score_word("alphine", letters) -> 14   (7 + pangram bonus)
"""

from __future__ import annotations

from typing import Collection, Iterable

PANGRAM_BONUS = 7


def is_pangram(word: str, letters: Collection[str]) -> bool:
    """True if `word` uses as many distinct letters as the puzzle has."""
    return len(set(word)) == len(set(letters))


def score_word(word: str, letters: Collection[str]) -> int:
    base = 1 if len(word) == 4 else len(word)
    bonus = PANGRAM_BONUS if is_pangram(word, letters) else 0
    return base + bonus


def total_score(words: Iterable[str], letters: Collection[str]) -> int:
    return sum(score_word(w, letters) for w in words)


def max_score(allowed_words: Iterable[str], letters: Collection[str]) -> int:
    """Score for finding every allowed word in a puzzle."""
    return total_score(allowed_words, letters)
