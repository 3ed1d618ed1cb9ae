"""
Dictionary normalization.

Turns raw word-list text (one word per line, any line ending) into the clean
ordered sequence the rest of the engine works on:
  - lowercase ASCII letters only
  - length >= 3
  - input order preserved, duplicates tolerated (the puzzle builder dedupes)

Malformed lines are dropped silently; nothing here raises.
"""

from __future__ import annotations

import re
from typing import List

# A dictionary is just an ordered list of normalized words.
Dictionary = List[str]

MIN_DICTIONARY_WORD_LEN = 3
PANGRAM_LETTERS = 7

_WORD_RE = re.compile(r"[a-z]+")
_LINE_RE = re.compile(r"\r?\n")
BOM = "\ufeff"


def is_clean_word(word: str) -> bool:
    """True if `word` is one or more lowercase a-z letters and nothing else."""
    return _WORD_RE.fullmatch(word) is not None


def split_lines(text: str) -> List[str]:
    """Split on "\\n" or "\\r\\n" only, dropping a leading byte-order mark."""
    if text.startswith(BOM):
        text = text[len(BOM):]
    return _LINE_RE.split(text)


def normalize_word_list(text: str) -> Dictionary:
    """
    Split `text` into lines and keep only usable words.

    Examples:
      normalize_word_list("Apple\\r\\nox\\nhi-fi\\n  bee \\n") -> ["apple", "bee"]
    """
    out: Dictionary = []
    for raw in split_lines(text):
        w = raw.strip().lower()
        if len(w) >= MIN_DICTIONARY_WORD_LEN and is_clean_word(w):
            out.append(w)
    return out


def letters_of(word: str) -> List[str]:
    """Distinct letters of `word` in order of first occurrence."""
    return list(dict.fromkeys(word))


def is_seven_unique_letters(word: str) -> bool:
    return len(set(word)) == PANGRAM_LETTERS
