# tests/pattern_engine/test_scorer.py
import pytest

from services.pattern_engine.loader import DEFAULT_TAXONOMY
from services.pattern_engine.scorer import (
    any_present,
    count_present,
    matched_keywords,
    pick_primary,
    rank_categories,
    ratio,
    score_category,
    score_dimension,
    word_count,
)


# --- score_category ---

def test_score_category_empty_text():
    assert score_category("", ["people", "team"], 3) == 0


def test_score_category_is_case_insensitive():
    assert score_category("PEOPLE and People and people", ["people"], 3) == 3


def test_score_category_caps_each_keyword():
    """Ten mentions of one energy keyword score no higher than three."""
    ten = " ".join(["people"] * 10)
    three = " ".join(["people"] * 3)
    assert score_category(ten, ["people"], 3) == score_category(three, ["people"], 3) == 3


def test_score_category_sums_across_keywords():
    text = "people people people people team team"
    # people capped at 3, team counted twice
    assert score_category(text, ["people", "team"], 3) == 5


def test_score_category_presence_cap():
    assert score_category("try try try test", ["try", "test", "trial"], 1) == 2


def test_score_category_counts_substrings_literally():
    # "problems" contains "problem"; regex metacharacters are not special
    assert score_category("problems", ["problem"], 3) == 1
    assert score_category("a.b", ["a.b"], 3) == 1
    assert score_category("axb", ["a.b"], 3) == 0
    assert score_category("self-directed (mostly)", ["(mostly)"], 2) == 1


def test_score_dimension_keeps_declared_order():
    energy = DEFAULT_TAXONOMY.dimension("energy")
    scores = score_dimension("I love to solve a complex problem", energy, 3)
    assert list(scores) == ["people", "problems", "creativity", "learning"]
    assert scores["problems"] == 3
    assert all(isinstance(score, int) and score >= 0 for score in scores.values())


# --- vocabulary helpers ---

def test_count_present_counts_distinct_words_once():
    assert count_present("love love love enjoy", ["love", "enjoy", "thrive"]) == 2


def test_any_present():
    assert any_present("We DISCUSS it", ["discuss"])
    assert not any_present("", ["discuss"])


def test_matched_keywords_in_list_order():
    assert matched_keywords("in the zone, totally absorbed", ["flow", "absorbed", "zone"]) == ("absorbed", "zone")


@pytest.mark.parametrize("positive, negative, expected", [
    (0, 0, 0.5),
    (3, 0, 1.0),
    (0, 2, 0.0),
    (1, 3, 0.25),
])
def test_ratio(positive, negative, expected):
    assert ratio(positive, negative) == expected


def test_word_count_handles_empty_and_whitespace():
    assert word_count("") == 0
    assert word_count("   ") == 0
    assert word_count("one  two\nthree") == 3


# --- tie-breaking ---

def test_pick_primary_prefers_first_declared_on_tie():
    order = ["people", "problems", "creativity", "learning"]
    scores = {"people": 0, "problems": 2, "creativity": 2, "learning": 1}
    for _ in range(5):
        assert pick_primary(scores, order) == "problems"


def test_pick_primary_all_zero_returns_first():
    order = ["analytical", "experimental", "collaborative", "intuitive"]
    assert pick_primary({name: 0 for name in order}, order) == "analytical"


def test_pick_primary_follows_order_not_mapping():
    order = ["b", "a"]
    assert pick_primary({"a": 1, "b": 1}, order) == "b"


def test_rank_categories_descending_with_stable_ties():
    order = ["impact", "freedom", "growth", "security", "connection"]
    scores = {"impact": 1, "freedom": 3, "growth": 1, "security": 3, "connection": 0}
    ranked = rank_categories(scores, order, 3)
    assert [(r.category, r.score) for r in ranked] == [("freedom", 3), ("security", 3), ("impact", 1)]
