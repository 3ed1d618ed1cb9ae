import pytest
from spellbee.engine import GroupCount, GroupKey, compute_stats
from spellbee.engine.stats import DIMENSIONS

WORDS = ["alphine", "alpine", "hail", "lane", "nail", "panel", "plain"]
FOUND = ["plain", "hail", "zzzz"]  # 'zzzz' is not an allowed word and is ignored


def test_compute_stats_golden():
    d = compute_stats(WORDS, FOUND).as_dict()
    assert d["length_first"] == {
        "4-h": {"total": 1, "found": 1},
        "4-l": {"total": 1, "found": 0},
        "4-n": {"total": 1, "found": 0},
        "5-p": {"total": 2, "found": 1},
        "6-a": {"total": 1, "found": 0},
        "7-a": {"total": 1, "found": 0},
    }
    assert d["first_two"]["al"] == {"total": 2, "found": 0}
    assert d["length_first_two"]["5-pl"] == {"total": 1, "found": 1}
    assert d["length_first_three"]["7-alp"] == {"total": 1, "found": 0}
    assert d["first_second"]["p-a"] == {"total": 1, "found": 0}
    assert d["last_two"] == {
        "e-l": {"total": 1, "found": 0},
        "i-l": {"total": 2, "found": 1},
        "i-n": {"total": 1, "found": 1},
        "n-e": {"total": 3, "found": 0},
    }


def test_overall_counts():
    s = compute_stats(WORDS, FOUND)
    assert (s.overall.total, s.overall.found, s.overall.remaining) == (7, 2, 5)


@pytest.mark.parametrize("dimension", DIMENSIONS)
def test_each_dimension_partitions_the_word_list(dimension):
    s = compute_stats(WORDS, FOUND)
    cells = s.dimension(dimension)
    assert sum(c.total for c in cells.values()) == len(WORDS)
    assert sum(c.found for c in cells.values()) == 2
    assert all(0 <= c.found <= c.total for c in cells.values())


def test_short_words_are_padded():
    d = compute_stats(["a", "ab"], []).as_dict()
    assert set(d["first_two"]) == {"a_", "ab"}
    assert set(d["length_first_three"]) == {"1-a__", "2-ab_"}
    assert set(d["last_two"]) == {"_-a", "a-b"}


def test_dimensions_never_share_counters():
    s = compute_stats(["plain"], [])
    assert GroupKey("first_two", None, "pl") in s.dimension("first_two")
    assert GroupKey("first_two", None, "pl") not in s.dimension("first_second")
    assert GroupKey("first_two", None, "pl") != GroupKey("first_second", None, "pl")


def test_compute_stats_is_idempotent():
    a = compute_stats(WORDS, FOUND)
    compute_stats(WORDS, WORDS)  # unrelated call in between
    b = compute_stats(WORDS, FOUND)
    assert a == b
    assert a.as_dict() == b.as_dict()


def test_empty_inputs():
    s = compute_stats([], [])
    assert s.overall.total == 0
    assert all(v == {} for v in s.as_dict().values())


def test_remaining_never_negative():
    assert GroupCount(total=1, found=3).remaining == 0
    assert GroupCount(total=3, found=1).remaining == 2


def test_table_view():
    lengths, prefixes, grid = compute_stats(WORDS, FOUND).table("length_first")
    assert lengths == [4, 5, 6, 7]
    assert prefixes == ["a", "h", "l", "n", "p"]
    assert grid[(5, "p")].remaining == 1
    assert (4, "a") not in grid


def test_table_and_dimension_errors():
    s = compute_stats(WORDS, FOUND)
    with pytest.raises(ValueError):
        s.table("first_two")
    with pytest.raises(ValueError):
        s.dimension("bogus")
