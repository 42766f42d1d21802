"""Tests for result ranking."""

from services.competitor_detection.models import BrandMatch, MatchSource
from services.competitor_detection.ranking import rank


def match(name, count, ratio):
    return BrandMatch(name=name, mention_count=count, first_position_ratio=ratio, source=MatchSource.GLOBAL)


def names(matches):
    return [m.name for m in matches]


def test_orders_by_mention_count_then_position():
    matches = [match("Asana", 1, 0.1), match("Trello", 3, 0.5), match("Notion", 1, 0.05)]

    assert names(rank(matches, 20)) == ["Trello", "Notion", "Asana"]


def test_full_ties_keep_input_order():
    matches = [match("B", 2, 0.3), match("A", 2, 0.3), match("C", 2, 0.3)]

    assert names(rank(matches, 20)) == ["B", "A", "C"]


def test_truncates_to_max_results():
    matches = [match(f"Brand{i}", 10 - i, 0.0) for i in range(5)]

    assert names(rank(matches, 2)) == ["Brand0", "Brand1"]


def test_non_positive_limit_returns_empty():
    matches = [match("Asana", 1, 0.1)]

    assert rank(matches, 0) == []
    assert rank(matches, -3) == []


def test_does_not_mutate_input():
    matches = [match("Asana", 1, 0.1), match("Trello", 3, 0.5)]

    rank(matches, 20)

    assert names(matches) == ["Asana", "Trello"]
