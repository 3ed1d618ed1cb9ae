"""
Dictionary file validator for spellbee.

What this module does:
- Check a word-list file before it is used to generate puzzles.
- Count raw lines, words that survive normalization, unique words and dropped
  lines; compute SHA-256 of the raw file.
- Count pangram candidates (words with exactly 7 distinct letters): a file
  without any cannot seed a random puzzle.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from spellbee.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("spellbee/datasets/data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List
import hashlib

from spellbee.engine import normalize_word_list, find_pangram_candidates
from spellbee.engine.dictionary import split_lines


# -----------------------------
# Dataclass for the structured report
# -----------------------------

@dataclass
class DictionaryReport:
    """Diagnostics and metadata for one dictionary file."""
    path: str               # file path (as given)
    exists: bool            # did the file exist on disk?
    sha256: str             # SHA-256 of raw file bytes (empty string if missing)
    lines: int              # non-blank raw lines
    count: int              # words kept after normalization
    unique_count: int       # unique kept words
    dropped_lines: int      # non-blank lines normalization threw away
    pangram_candidates: int # unique words with exactly 7 distinct letters
    passed: bool
    issues: List[str]       # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


# -----------------------------
# Public API
# -----------------------------

def validate_dictionary(path: str) -> Dict:
    """
    Validate a dictionary file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DictionaryReport) with counts,
        SHA-256, pangram-candidate count, a strict `passed` flag (file exists,
        has at least one word and at least one pangram candidate) and `issues`.
        Dropped lines and duplicates are reported but do not fail the check:
        the game drops such lines silently when it loads a dictionary.
    """
    p = Path(path)
    if not p.exists():
        rep = DictionaryReport(path, False, "", 0, 0, 0, 0, 0, False,
                               [f"dictionary file not found: {path}"])
        return asdict(rep)

    text = p.read_text(encoding="utf-8-sig", errors="replace")
    raw_lines = [ln for ln in split_lines(text) if ln.strip()]
    words = normalize_word_list(text)
    unique = set(words)
    candidates = set(find_pangram_candidates(unique))

    issues: List[str] = []
    if not words:
        issues.append("dictionary contains 0 valid words")
    if not candidates:
        issues.append("no pangram candidates (7-unique-letter words)")

    dropped = len(raw_lines) - len(words)
    if dropped:
        issues.append(f"{dropped} line(s) dropped by normalization")
    if len(words) != len(unique):
        issues.append(f"{len(words) - len(unique)} duplicate word(s)")

    rep = DictionaryReport(
        path=str(p),
        exists=True,
        sha256=_sha256_file(p),
        lines=len(raw_lines),
        count=len(words),
        unique_count=len(unique),
        dropped_lines=dropped,
        pangram_candidates=len(candidates),
        passed=bool(words) and bool(candidates),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=102305 (uniq=102305, dropped=12, sha=abc123...) | pangrams=8841 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, "
        f"dropped={report['dropped_lines']}, sha={sha}) "
        f"| pangrams={report['pangram_candidates']} | {status}"
    )
