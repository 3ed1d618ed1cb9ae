"""
Turn a raw word file into a clean spellbee dictionary.

Features:
- Same normalization the game applies on load (lowercase, a-z only, >= 3 letters).
- Removes duplicates, preserving original order by default (stable dedupe).
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.build_wordlist --in /usr/share/dict/words \
        --out spellbee/datasets/data/words.txt --sort
"""

import argparse
from pathlib import Path

from spellbee.datasets.io import read_text, unique_preserve_order, write_lines
from spellbee.engine import find_pangram_candidates, normalize_word_list


def main():
    ap = argparse.ArgumentParser(description="Normalize and dedupe a word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    raw = read_text(inp)
    words = normalize_word_list(raw)
    out = unique_preserve_order(words)
    if args.sort:
        out = sorted(out)

    write_lines(out, outp)
    pangrams = len(find_pangram_candidates(out))
    print(f"Input: {inp} ({len(raw.splitlines())} lines) -> Output: {outp} ({len(out)} words, {pangrams} pangrams)")


if __name__ == "__main__":
    main()
