"""
Puzzle generation harness core primitives.

- generate_case:  build one puzzle from a given seed word and summarise it.
- generate_batch: draw many random puzzles from a dictionary, reproducibly.

Used to survey a dictionary (how many words / points a typical puzzle has)
and to pre-generate puzzles. These functions are UI-agnostic so they can be
reused by a CLI app, a notebook, or future services without changes.
"""

from __future__ import annotations
import random
import time
from typing import Callable, Dict, List, Optional, Sequence

from spellbee.engine import build_puzzle_from_pangram, find_pangram_candidates, is_pangram, max_score


def generate_case(dictionary: Sequence[str], pangram: str, *, center: str | None = None) -> Optional[Dict]:
    """
    Build the puzzle for `pangram` and return a flat summary row, or None if
    the seed is invalid.

    Returns:
        dict with keys:
            pangram, letters (str), center, num_words, num_pangrams,
            max_score, time_ms, words (list[str])
    """
    t0 = time.perf_counter_ns()
    puzzle = build_puzzle_from_pangram(dictionary, pangram, center)
    dt_ms = (time.perf_counter_ns() - t0) / 1_000_000.0
    if puzzle is None:
        return None

    return {
        "pangram": puzzle.pangram,
        "letters": "".join(puzzle.letters),
        "center": puzzle.center,
        "num_words": len(puzzle.allowed_words),
        "num_pangrams": sum(1 for w in puzzle.allowed_words if is_pangram(w, puzzle.letters)),
        "max_score": max_score(puzzle.allowed_words, puzzle.letters),
        "time_ms": dt_ms,
        "words": list(puzzle.allowed_words),
    }


def generate_batch(
        dictionary: Sequence[str],
        count: int,
        *,
        seed: int | None = None,
        min_words: int = 0,
        on_case: Callable[[int, Optional[Dict]], None] | None = None,
) -> List[Dict]:
    """
    Generate up to `count` random puzzles.

    Each case draws its seed word and center with its own RNG derived from the
    base seed (seed + index), so runs are reproducible but cases differ.
    Puzzles with fewer than `min_words` allowed words are skipped (not retried).
    Returns [] when the dictionary has no pangram candidate.

    `on_case(idx, result_or_None)` is called after every attempt (progress hook).
    """
    if count < 0:
        raise ValueError(f"count must be >= 0; got {count}")

    candidates = find_pangram_candidates(dictionary)
    if not candidates:
        return []

    out: List[Dict] = []
    for idx in range(1, count + 1):
        rng = random.Random(None if seed is None else seed + idx)
        pangram = candidates[rng.randrange(len(candidates))]
        center = rng.choice(sorted(set(pangram)))
        r = generate_case(dictionary, pangram, center=center)
        if r is not None and r["num_words"] < min_words:
            r = None
        if r is not None:
            r["case"] = idx
            out.append(r)
        if on_case is not None:
            on_case(idx, r)
    return out
