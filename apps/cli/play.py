# apps/cli/play.py
"""
Play spellbee in the terminal.

Type a word and press Enter to submit it. Commands start with ':'

  :new [seed] [center]  new puzzle (random, or from a 7-unique-letter seed word)
  :shuffle              reorder the outer letters
  :found                list the words found so far
  :stats [dimension]    remaining-word hints (default: length_first)
  :undo                 undo the last action
  :help                 this text
  :quit                 leave (the session is saved if --session is set)

Usage:
    python -m apps.cli.play --session ~/.spellbee.json
    python -m apps.cli.play --seed-word complex --center x
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from spellbee.datasets import DEFAULT_DICTIONARY, load_dictionary
from spellbee.engine import OUTCOME_MESSAGES, StatsSummary
from spellbee.engine.stats import DIMENSIONS
from spellbee.session import Session, load_session, save_session

NO_PANGRAM_MSG = "No pangram found (7-unique-letter word)"
BAD_SEED_MSG = "Seed must have exactly 7 unique letters"
HELP = __doc__.split("Usage:")[0].strip()


def render_letters(session: Session) -> str:
    """Center letter in brackets, then the others in display order."""
    p = session.puzzle
    if p is None:
        return "No puzzle yet. Type :new to start."
    return " ".join(f"[{ch.upper()}]" if ch == p.center else ch.upper() for ch in p.letters)


def render_status(session: Session) -> str:
    p = session.puzzle
    total = len(p.allowed_words) if p is not None else 0
    return (f"Score: {session.score()} / {session.max_score()} "
            f"| Words: {len(session.state.found_words)} / Total: {total}")


def render_stats(stats: StatsSummary, dimension: str = "length_first") -> str:
    """
    Length-based dimensions render as a (length x prefix) matrix of remaining
    counts ('.' = all found, blank = no words); the others as 'key: remaining/total'.
    """
    cells = stats.dimension(dimension)
    if not cells:
        return "(no words)"

    if any(k.length is None for k in cells):
        return "  ".join(f"{k.serialize()}: {c.remaining}/{c.total}" for k, c in sorted(cells.items()))

    lengths, prefixes, grid = stats.table(dimension)
    width = max(3, max(len(px) for px in prefixes) + 1)
    lines: List[str] = ["len".rjust(4) + "".join(px.rjust(width) for px in prefixes)]
    for n in lengths:
        row = str(n).rjust(4)
        for px in prefixes:
            c = grid.get((n, px))
            if c is None:
                cell = ""
            elif c.remaining == 0:
                cell = "."
            else:
                cell = str(c.remaining)
            row += cell.rjust(width)
        lines.append(row)
    return "\n".join(lines)


def handle_line(session: Session, line: str) -> str:
    """
    Apply one line of player input to the session; return the message to show.
    Raises SystemExit on :quit.
    """
    text = line.strip()
    if not text:
        return ""

    if not text.startswith(":"):
        if session.puzzle is None:
            return "No puzzle yet. Type :new to start."
        if not text.isalpha() or not text.isascii():
            session.clear()
            return OUTCOME_MESSAGES["invalid"]
        return OUTCOME_MESSAGES[session.submit_word(text)]

    parts = text[1:].split()
    if not parts:
        return "Unknown command (try :help)"
    cmd, args = parts[0].lower(), parts[1:]

    if cmd == "new":
        if args:
            seed = args[0].strip().lower()
            center = args[1].lower() if len(args) > 1 else None
            p = session.new_puzzle(seed, center)
            return f"Custom puzzle from: {seed}" if p is not None else BAD_SEED_MSG
        p = session.new_random_puzzle()
        return f"Puzzle from: {p.pangram}" if p is not None else NO_PANGRAM_MSG
    if cmd == "shuffle":
        session.shuffle()
        return ""
    if cmd == "found":
        words = session.state.found_words
        return f"Found words ({len(words)}): " + ", ".join(words) if words else "No words found yet"
    if cmd == "stats":
        stats = session.stats()
        if stats is None:
            return "No puzzle yet. Type :new to start."
        dimension = args[0] if args else "length_first"
        if dimension not in DIMENSIONS:
            return f"Unknown dimension. Choose one of: {', '.join(DIMENSIONS)}"
        return render_stats(stats, dimension)
    if cmd == "undo":
        return "Undone" if session.undo() else "Nothing to undo"
    if cmd == "help":
        return HELP
    if cmd in ("quit", "exit", "q"):
        raise SystemExit(0)
    return f"Unknown command :{cmd} (try :help)"


def main():
    ap = argparse.ArgumentParser(description="spellbee: play in the terminal")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY),
                    help="path to word list (one word per line)")
    ap.add_argument("--seed-word", help="start from this 7-unique-letter word")
    ap.add_argument("--center", help="mandatory letter (must be in the seed word)")
    ap.add_argument("--seed", type=int, help="RNG seed for puzzle choice and shuffles")
    ap.add_argument("--session", help="JSON file to resume from and save to")
    ap.add_argument("--new", action="store_true", help="ignore a saved session")
    args = ap.parse_args()

    try:
        dictionary = load_dictionary(args.dictionary)
    except FileNotFoundError:
        print(f"Dictionary not found: {args.dictionary}", file=sys.stderr)
        return 2
    print(f"Loaded {len(dictionary)} words ({args.dictionary})")

    session = Session(dictionary, seed=args.seed)
    if args.session and Path(args.session).exists() and not args.new:
        try:
            session.puzzle, session.state = load_session(args.session)
            print(f"Resumed session from {args.session}")
        except ValueError as e:
            print(f"Ignoring saved session: {e}", file=sys.stderr)

    if args.seed_word:
        print(handle_line(session, f":new {args.seed_word} {args.center or ''}"))
    elif session.puzzle is None:
        print(handle_line(session, ":new"))

    while True:
        print()
        print(render_letters(session))
        print(render_status(session))
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        try:
            msg = handle_line(session, line)
        except SystemExit:
            break
        finally:
            if args.session:
                save_session(args.session, session.puzzle, session.state)
        if msg:
            print(msg)
    return 0


if __name__ == "__main__":
    sys.exit(main())
