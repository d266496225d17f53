# services/pattern_engine/scorer.py
# Keyword scoring primitives shared by the dimension analyzers.

from typing import Dict, Iterable, List, Sequence, Tuple

from .models import DimensionKeywords, RankedCategory


def score_category(text: str, keywords: Iterable[str], cap: int) -> int:
    """
    Sums literal keyword occurrences in text, clamping each keyword's
    contribution to `cap` so one repeated word cannot dominate a category.
    """
    if not text:
        return 0
    lower_text = text.lower()
    return sum(min(lower_text.count(keyword), cap) for keyword in keywords)


def score_dimension(text: str, dimension: DimensionKeywords, cap: int) -> Dict[str, int]:
    """Scores every category of a dimension, keeping the declared category order."""
    return {
        category.name: score_category(text, category.keywords, cap)
        for category in dimension.categories
    }


def count_present(text: str, words: Iterable[str]) -> int:
    """Number of distinct words from the list present anywhere in text."""
    lower_text = text.lower()
    return sum(1 for word in words if word in lower_text)


def any_present(text: str, words: Iterable[str]) -> bool:
    lower_text = text.lower()
    return any(word in lower_text for word in words)


def matched_keywords(text: str, keywords: Iterable[str]) -> Tuple[str, ...]:
    lower_text = text.lower()
    return tuple(keyword for keyword in keywords if keyword.lower() in lower_text)


def ratio(positive: int, negative: int, default: float = 0.5) -> float:
    total = positive + negative
    if total == 0:
        return default
    return positive / total


def pick_primary(scores: Dict[str, int], order: Sequence[str]) -> str:
    """
    Returns the highest scoring category. Ties go to the category declared
    first: only a strict improvement replaces the current best.
    """
    best = order[0]
    for category in order[1:]:
        if scores.get(category, 0) > scores.get(best, 0):
            best = category
    return best


def rank_categories(scores: Dict[str, int], order: Sequence[str], count: int) -> Tuple[RankedCategory, ...]:
    """Top `count` categories by score, descending; ties keep declared order."""
    ranked: List[str] = sorted(order, key=lambda category: -scores.get(category, 0))
    return tuple(
        RankedCategory(category=category, score=scores.get(category, 0))
        for category in ranked[:count]
    )


def word_count(text: str) -> int:
    return len(text.split())
