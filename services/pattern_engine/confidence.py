# services/pattern_engine/confidence.py
# Diagnostic confidence estimates. These annotate an analysis and never change it.

from typing import Sequence

from .models import ConfidenceMap, Patterns, ResponseSet
from .scorer import any_present, count_present, word_count
from .taxonomy import (
    AUTHENTICITY_LANGUAGE,
    EXAMPLE_INDICATORS,
    GROWTH_LANGUAGE,
    STRENGTH_LANGUAGE,
    VALUE_LANGUAGE,
)


def has_specific_examples(text: str) -> bool:
    return any_present(text, EXAMPLE_INDICATORS)


def energy_confidence(text: str) -> float:
    specificity_score = 1.0 if has_specific_examples(text) else 0.5
    length_score = min(word_count(text) / 50, 1.0)
    return (specificity_score + length_score) / 2


def values_confidence(text: str) -> float:
    length_score = min(word_count(text) / 80, 1.0)
    if any_present(text, VALUE_LANGUAGE):
        return max(length_score, 0.7)
    return length_score


def strengths_confidence(text: str) -> float:
    return 0.8 if any_present(text, STRENGTH_LANGUAGE) else 0.5


def problem_solving_confidence(text: str) -> float:
    length_score = min(word_count(text) / 30, 1.0)
    if has_specific_examples(text):
        return max(length_score, 0.7)
    return length_score


def authenticity_confidence(full_text: str) -> float:
    return 0.8 if any_present(full_text, AUTHENTICITY_LANGUAGE) else 0.6


def growth_confidence(full_text: str) -> float:
    return min(count_present(full_text, GROWTH_LANGUAGE) / 5, 1.0)


def average_word_count(texts: Sequence[str]) -> float:
    if not texts:
        return 0.0
    return sum(word_count(text) for text in texts) / len(texts)


def overall_confidence(responses: ResponseSet) -> float:
    """Average words per response over 20, capped at 1."""
    return min(average_word_count(list(responses.responses.values())) / 20, 1.0)


def build_confidence_map(patterns: Patterns, responses: ResponseSet) -> ConfidenceMap:
    return ConfidenceMap(
        overall=overall_confidence(responses),
        energy=patterns.energy.confidence,
        values=patterns.values.confidence,
        strengths=patterns.strengths.confidence,
        problem_solving=patterns.problem_solving.confidence,
        authenticity=patterns.authenticity.confidence,
        growth=patterns.growth.confidence,
    )
