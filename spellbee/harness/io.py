"""
I/O utilities for generation runs.

Responsibilities:
- write_csv:      flatten generated puzzles into a tidy CSV (one row per puzzle).
- write_puzzles:  dump the full puzzles (with word lists) as JSON.
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

CSV_FIELDS = ["case", "pangram", "letters", "center", "num_words", "num_pangrams",
              "max_score", "time_ms"]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of generated puzzles to CSV (word lists are left out;
    see write_puzzles).

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS, extrasaction="ignore")
        w.writeheader()
        for r in results:
            row = dict(r)
            row["time_ms"] = round(float(r["time_ms"]), 3)
            w.writerow(row)

    return str(p)


def write_puzzles(results: List[Dict], path: str) -> str:
    """
    Write the generated puzzles in the session-store puzzle shape
    (letters, center, allowed_words, pangram), one object per puzzle.
    """
    puzzles = [
        {
            "letters": list(r["letters"]),
            "center": r["center"],
            "allowed_words": r["words"],
            "pangram": r["pangram"],
        }
        for r in results
    ]
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(puzzles, f, indent=2)
    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (dictionary, count, seed, min_words, outdir)
      - dictionary: output of datasets.validate_dictionary(...)
      - num_puzzles: number of puzzles kept in this batch
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
