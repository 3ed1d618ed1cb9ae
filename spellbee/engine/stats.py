"""
Spoiler-free progress statistics.

Given the full list of allowed words and the words found so far, count how
many words fall into each group along several dimensions, and how many of
those have been found. The player sees "remaining" counts (never the words):

  dimension            grouped by                          serialized key
  -------------------  ----------------------------------  --------------
  length_first         word length + first letter          "5-p"
  first_two            first two letters                   "pl"
  length_first_two     word length + first two letters     "5-pl"
  length_first_three   word length + first three letters   "5-pla"
  first_second         first letter, second letter         "p-l"
  last_two             second-to-last letter, last letter  "i-n"

Prefixes shorter than needed are right-padded with "_" (dictionary words are
a-z only, so the pad can never clash with a real letter).

Keys are GroupKey values tagged with their dimension, and each dimension has
its own mapping; strings only appear at the boundary (GroupKey.serialize,
StatsSummary.as_dict). Two differently shaped keys that happen to format the
same way therefore never share a counter.

compute_stats is a pure function: no caching, no hidden state, same input ->
same output. Found words that are not in `allowed_words` are ignored, so
found <= total holds for every key.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Literal, Optional, Tuple

PAD = "_"
SEPARATOR = "-"

Dimension = Literal[
    "length_first",
    "first_two",
    "length_first_two",
    "length_first_three",
    "first_second",
    "last_two",
]

DIMENSIONS: Tuple[Dimension, ...] = (
    "length_first",
    "first_two",
    "length_first_two",
    "length_first_three",
    "first_second",
    "last_two",
)


@dataclass(frozen=True, order=True)
class GroupKey:
    """One cell of one grouping dimension."""
    dimension: Dimension
    length: Optional[int]   # None for length-independent dimensions
    chars: str              # prefix/suffix letters, padded with PAD

    def serialize(self) -> str:
        if self.dimension in ("first_second", "last_two"):
            return SEPARATOR.join(self.chars)
        if self.length is None:
            return self.chars
        return f"{self.length}{SEPARATOR}{self.chars}"


@dataclass
class GroupCount:
    total: int = 0
    found: int = 0

    @property
    def remaining(self) -> int:
        return max(0, self.total - self.found)


def _head(word: str, n: int) -> str:
    """First `n` characters, right-padded with PAD."""
    return word[:n].ljust(n, PAD)


def _tail(word: str, n: int) -> str:
    """Last `n` characters, left-padded with PAD."""
    return word[-n:].rjust(n, PAD) if word else PAD * n


# How each dimension derives its key from a word.
_KEY_FNS: Dict[str, Callable[[str], GroupKey]] = {
    "length_first": lambda w: GroupKey("length_first", len(w), _head(w, 1)),
    "first_two": lambda w: GroupKey("first_two", None, _head(w, 2)),
    "length_first_two": lambda w: GroupKey("length_first_two", len(w), _head(w, 2)),
    "length_first_three": lambda w: GroupKey("length_first_three", len(w), _head(w, 3)),
    "first_second": lambda w: GroupKey("first_second", None, _head(w, 2)),
    "last_two": lambda w: GroupKey("last_two", None, _tail(w, 2)),
}


def group_keys(word: str) -> List[GroupKey]:
    """Every key `word` contributes to, one per dimension."""
    return [_KEY_FNS[d](word) for d in DIMENSIONS]


@dataclass
class StatsSummary:
    groups: Dict[str, Dict[GroupKey, GroupCount]] = field(
        default_factory=lambda: {d: {} for d in DIMENSIONS})
    overall: GroupCount = field(default_factory=GroupCount)

    def dimension(self, name: str) -> Dict[GroupKey, GroupCount]:
        if name not in self.groups:
            raise ValueError(f"Unknown stats dimension: {name}. Available: {list(DIMENSIONS)}")
        return self.groups[name]

    def as_dict(self) -> Dict[str, Dict[str, Dict[str, int]]]:
        """
        Plain, JSON-ready view: {dimension: {serialized_key: {"total", "found"}}}.
        Keys within a dimension are sorted for stable output.
        """
        out: Dict[str, Dict[str, Dict[str, int]]] = {}
        for d in DIMENSIONS:
            cells = self.groups[d]
            out[d] = {
                k.serialize(): {"total": c.total, "found": c.found}
                for k, c in sorted(cells.items())
            }
        return out

    def table(self, name: str) -> Tuple[List[int], List[str], Dict[Tuple[int, str], GroupCount]]:
        """
        Matrix view of a length-based dimension for rendering:
        (sorted lengths, sorted prefixes, {(length, prefix): count}).
        Missing cells mean total == 0.
        """
        cells = self.dimension(name)
        if any(k.length is None for k in cells):
            raise ValueError(f"{name} is not a length-based dimension")
        lengths = sorted({k.length for k in cells})
        prefixes = sorted({k.chars for k in cells})
        grid = {(k.length, k.chars): c for k, c in cells.items()}
        return lengths, prefixes, grid


def compute_stats(allowed_words: Iterable[str], found_words: Iterable[str]) -> StatsSummary:
    """
    Count totals (every allowed word) and founds (allowed words the player has
    found) in every grouping.

    Summing `total` over any single dimension gives the number of allowed words.
    """
    found = set(found_words)
    summary = StatsSummary()

    for w in allowed_words:
        is_found = w in found
        summary.overall.total += 1
        if is_found:
            summary.overall.found += 1

        for key in group_keys(w):
            cell = summary.groups[key.dimension].setdefault(key, GroupCount())
            cell.total += 1
            if is_found:
                cell.found += 1

    return summary
