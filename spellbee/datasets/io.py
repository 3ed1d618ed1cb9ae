from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from spellbee.engine.dictionary import Dictionary, normalize_word_list

DEFAULT_DICTIONARY = Path(__file__).parent / "data" / "words.txt"


def read_text(p: Path | str) -> str:
    """
    Read a UTF-8 text file (byte-order mark removed, undecodable bytes replaced).
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return p.read_text(encoding="utf-8-sig", errors="replace")


def load_dictionary(p: Path | str = DEFAULT_DICTIONARY) -> Dictionary:
    """Read a word-list file and normalize it (see engine.dictionary)."""
    return normalize_word_list(read_text(p))


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def unique_preserve_order(words: Iterable[str]) -> List[str]:
    seen, out = set(), []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out
