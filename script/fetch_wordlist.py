"""
Download a plain-text word list and write it as a clean spellbee dictionary.

What it does:
- Downloads the file (one word per line).
- Normalizes it exactly like the game does on load (lowercase, a-z only, >= 3 letters).
- De-duplicates while preserving order, optionally sorts, and writes to file.

Usage:
    python -m script.fetch_wordlist --out spellbee/datasets/data/words.txt
    # or alphabetically sorted:
    python -m script.fetch_wordlist --sort --url https://example.org/words.txt
"""

import argparse

import requests

from spellbee.datasets.io import DEFAULT_DICTIONARY, unique_preserve_order, write_lines
from spellbee.engine import normalize_word_list

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def fetch_words(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return unique_preserve_order(normalize_word_list(r.text))


def main():
    ap = argparse.ArgumentParser(description="Fetch a word list for spellbee")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default=str(DEFAULT_DICTIONARY))
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = fetch_words(args.url)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} words -> {args.out}")

if __name__ == "__main__":
    main()
