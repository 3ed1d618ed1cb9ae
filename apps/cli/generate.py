# apps/cli/generate.py
"""
CLI entry point for generating puzzles in bulk.

This script:
  1) Validates the dictionary file (prints counts + SHA + pangram candidates).
  2) Loads and normalizes the dictionary.
  3) Generates a reproducible batch of random puzzles with a live progress
     indicator and writes:
       - CSV:  one summary row per puzzle
       - JSON: the full puzzles (letters, center, word list, seed)
       - JSON: manifest with config, dictionary report, git commit, etc.

Usage:
    python -m apps.cli.generate --count 200 --seed 7 --min-words 20
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Dict, Optional

from tqdm import tqdm

from spellbee.datasets import DEFAULT_DICTIONARY, load_dictionary, pretty_summary, validate_dictionary
from spellbee.harness import generate_batch, write_csv, write_manifest, write_puzzles
from spellbee.harness.io import git_commit_or_unknown, timestamp_id


def main():
    """
    Parse CLI args, validate the dictionary, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="spellbee: generate puzzles in bulk")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY),
                    help="path to word list (one word per line)")
    ap.add_argument("--count", type=int, default=100, help="number of puzzles to draw")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--min-words", type=int, default=0,
                    help="skip puzzles with fewer allowed words than this")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args()

    # 1) Validate the dictionary and print a one-liner summary
    rep = validate_dictionary(args.dictionary)
    print(pretty_summary(rep))
    if not rep["exists"]:
        print(f"Dictionary not found: {args.dictionary}", file=sys.stderr)
        return 2

    # 2) Load into memory (normalized)
    dictionary = load_dictionary(args.dictionary)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    total = args.count
    start = time.time()
    last_print = 0.0
    bar = tqdm(total=total, ncols=80, desc="Generating", unit="puzzle") if mode == "bar" else None

    def on_case(idx: int, r: Optional[Dict]) -> None:
        nonlocal last_print
        if bar is not None:
            bar.update(1)
        elif mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    # 4) Run batch
    results = generate_batch(dictionary, args.count, seed=args.seed,
                             min_words=args.min_words, on_case=on_case)

    if bar is not None:
        bar.close()
    elif mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    if not results:
        print("No puzzles generated (no pangram found, or --min-words too high)")

    # 5) Write outputs (CSV + puzzles + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"puzzles_{run_id}.csv"
    puzzles_path = outdir / f"puzzles_{run_id}.json"
    manifest_path = outdir / f"puzzles_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    write_puzzles(results, str(puzzles_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "num_puzzles": len(results),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {puzzles_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
