# services/pattern_engine/analyzers.py
# The six dimension analyzers: energy, values, strengths, problem-solving,
# authenticity and growth readiness.

import logging
from typing import Dict, List

from . import confidence
from .models import (
    AuthenticityResult,
    EnergyIndicators,
    EnergyResult,
    Finding,
    GrowthResult,
    KeywordTaxonomy,
    ProblemSolvingResult,
    ResponseSet,
    StrengthsResult,
    ValuesResult,
)
from .scorer import (
    any_present,
    count_present,
    matched_keywords,
    pick_primary,
    rank_categories,
    ratio,
    score_dimension,
)
from .taxonomy import (
    ACTION_WORDS,
    ALIGNED_WORDS,
    APPROACH_RULES,
    BARRIER_RULES,
    CHANGE_WORDS,
    DEFAULT_APPROACH,
    DEPLETING_WORDS,
    DISSATISFACTION_WORDS,
    ENERGY,
    ENERGY_SLOT,
    ENERGY_SLOTS,
    ENGAGEMENT,
    FUTURE_WORDS,
    KEYWORD_CAPS,
    LEARNING_WORDS,
    MEANING,
    MISALIGNED_ENERGY_WORDS,
    MISALIGNED_WORDS,
    POSITIVE_WORDS,
    PROBLEM_SOLVING,
    PROBLEM_SOLVING_SLOT,
    SHOULD_PHRASES,
    SITUATION,
    STRENGTHS,
    STRENGTHS_SLOTS,
    SUSTAINING_WORDS,
    TENSION_RULES,
    UNDERUTILIZATION_WORDS,
    URGENCY_WORDS,
    UTILIZATION_WORDS,
    VALUES,
    VALUES_SLOTS,
)

logger = logging.getLogger(__name__)

TOP_COUNT = 3
CONFLICT_THRESHOLD = 1


# --- Energy ---

def calculate_energy_sustainability(responses: ResponseSet) -> float:
    """Share of sustaining vs depleting vocabulary across all responses; 0.5 with no evidence."""
    all_text = responses.full_text
    return ratio(
        count_present(all_text, SUSTAINING_WORDS),
        count_present(all_text, DEPLETING_WORDS),
    )


def extract_energy_indicators(text: str, taxonomy: KeywordTaxonomy) -> EnergyIndicators:
    return EnergyIndicators(
        energizing=matched_keywords(text, taxonomy.indicator("energizing")),
        draining=matched_keywords(text, taxonomy.indicator("draining")),
        flow=matched_keywords(text, taxonomy.indicator("flow")),
        stress=matched_keywords(text, taxonomy.indicator("stress")),
    )


def analyze_energy_patterns(responses: ResponseSet, taxonomy: KeywordTaxonomy) -> EnergyResult:
    logger.debug("Analyzing energy patterns...")
    dimension = taxonomy.dimension(ENERGY)
    text = responses.join(ENERGY_SLOTS)

    categories = score_dimension(text, dimension, KEYWORD_CAPS[ENERGY])
    return EnergyResult(
        categories=categories,
        primary_energizer=pick_primary(categories, dimension.category_names),
        sustainability=calculate_energy_sustainability(responses),
        indicators=extract_energy_indicators(text, taxonomy),
        confidence=confidence.energy_confidence(text),
    )


# --- Values ---

def calculate_values_alignment(responses: ResponseSet) -> float:
    combined_text = responses.join((MEANING, SITUATION))
    return ratio(
        count_present(combined_text, ALIGNED_WORDS),
        count_present(combined_text, MISALIGNED_WORDS),
    )


def identify_value_conflicts(categories: Dict[str, int], responses: ResponseSet) -> List[Finding]:
    conflicts = []

    if categories.get("security", 0) > CONFLICT_THRESHOLD and categories.get("freedom", 0) > CONFLICT_THRESHOLD:
        conflicts.append(Finding(
            type="security-freedom",
            description="Tension between desire for security and freedom",
        ))

    if categories.get("growth", 0) > CONFLICT_THRESHOLD and "comfortable" in responses.full_text.lower():
        conflicts.append(Finding(
            type="growth-comfort",
            description="Tension between growth aspirations and comfort zone",
        ))

    return conflicts


def analyze_values_patterns(responses: ResponseSet, taxonomy: KeywordTaxonomy) -> ValuesResult:
    logger.debug("Analyzing values patterns...")
    dimension = taxonomy.dimension(VALUES)
    text = responses.join(VALUES_SLOTS)

    categories = score_dimension(text, dimension, KEYWORD_CAPS[VALUES])
    return ValuesResult(
        categories=categories,
        top_values=rank_categories(categories, dimension.category_names, TOP_COUNT),
        alignment=calculate_values_alignment(responses),
        conflicts=tuple(identify_value_conflicts(categories, responses)),
        confidence=confidence.values_confidence(text),
    )


# --- Strengths ---

def calculate_strength_utilization(responses: ResponseSet) -> float:
    combined_text = responses.join((SITUATION, ENGAGEMENT))
    return ratio(
        count_present(combined_text, UTILIZATION_WORDS),
        count_present(combined_text, UNDERUTILIZATION_WORDS),
    )


def analyze_strengths_patterns(responses: ResponseSet, taxonomy: KeywordTaxonomy) -> StrengthsResult:
    logger.debug("Analyzing strengths patterns...")
    dimension = taxonomy.dimension(STRENGTHS)
    text = responses.join(STRENGTHS_SLOTS)

    categories = score_dimension(text, dimension, KEYWORD_CAPS[STRENGTHS])
    return StrengthsResult(
        categories=categories,
        top_strengths=rank_categories(categories, dimension.category_names, TOP_COUNT),
        utilization=calculate_strength_utilization(responses),
        confidence=confidence.strengths_confidence(text),
    )


# --- Problem solving ---

def determine_problem_solving_approach(text: str) -> str:
    for approach, triggers in APPROACH_RULES:
        if any_present(text, triggers):
            return approach
    return DEFAULT_APPROACH


def analyze_problem_solving_style(responses: ResponseSet, taxonomy: KeywordTaxonomy) -> ProblemSolvingResult:
    logger.debug("Analyzing problem-solving style...")
    dimension = taxonomy.dimension(PROBLEM_SOLVING)
    text = responses.get(PROBLEM_SOLVING_SLOT)

    styles = score_dimension(text, dimension, KEYWORD_CAPS[PROBLEM_SOLVING])
    return ProblemSolvingResult(
        styles=styles,
        primary_style=pick_primary(styles, dimension.category_names),
        approach=determine_problem_solving_approach(text),
        confidence=confidence.problem_solving_confidence(text),
    )


# --- Authenticity ---

def indicates_disalignment(work_meaning: str, current_situation: str) -> bool:
    """Positive language about what work means, none about the current situation."""
    return any_present(work_meaning, POSITIVE_WORDS) and not any_present(current_situation, POSITIVE_WORDS)


def indicates_energy_misalignment(energy_response: str, situation_response: str) -> bool:
    return any_present(f"{energy_response} {situation_response}", MISALIGNED_ENERGY_WORDS)


def calculate_authenticity_gaps(responses: ResponseSet) -> float:
    all_text = responses.full_text.lower()
    gap_score = 0.0

    should_count = sum(all_text.count(phrase) for phrase in SHOULD_PHRASES)
    gap_score += min(should_count * 0.1, 0.4)

    situation = responses.get(SITUATION)
    if indicates_disalignment(responses.get(MEANING), situation):
        gap_score += 0.3
    if indicates_energy_misalignment(responses.get(ENERGY_SLOT), situation):
        gap_score += 0.3

    return min(gap_score, 1.0)


def identify_internal_tensions(responses: ResponseSet) -> List[Finding]:
    all_text = responses.full_text
    return [
        Finding(type=rule["type"], description=rule["description"])
        for rule in TENSION_RULES
        if any_present(all_text, rule["left"]) and any_present(all_text, rule["right"])
    ]


def analyze_authenticity_patterns(responses: ResponseSet) -> AuthenticityResult:
    logger.debug("Analyzing authenticity patterns...")
    gaps = calculate_authenticity_gaps(responses)
    return AuthenticityResult(
        gaps=gaps,
        alignment=1.0 - gaps,
        tensions=tuple(identify_internal_tensions(responses)),
        confidence=confidence.authenticity_confidence(responses.full_text),
    )


# --- Growth ---

def assess_growth_readiness(responses: ResponseSet) -> float:
    all_text = responses.full_text
    readiness_score = (
        count_present(all_text, CHANGE_WORDS) * 0.2
        + count_present(all_text, LEARNING_WORDS) * 0.15
        + count_present(all_text, DISSATISFACTION_WORDS) * 0.25
    )
    return min(readiness_score, 1.0)


def assess_motivation_level(responses: ResponseSet) -> float:
    all_text = responses.full_text
    motivation_score = (
        count_present(all_text, ACTION_WORDS) * 0.2
        + count_present(all_text, URGENCY_WORDS) * 0.15
        + count_present(all_text, FUTURE_WORDS) * 0.1
    )
    return min(motivation_score, 1.0)


def identify_growth_barriers(responses: ResponseSet) -> List[Finding]:
    all_text = responses.full_text
    return [
        Finding(type=barrier_type, description=description)
        for barrier_type, description, triggers in BARRIER_RULES
        if any_present(all_text, triggers)
    ]


def analyze_growth_readiness(responses: ResponseSet) -> GrowthResult:
    logger.debug("Analyzing growth readiness...")
    return GrowthResult(
        readiness=assess_growth_readiness(responses),
        motivation=assess_motivation_level(responses),
        barriers=tuple(identify_growth_barriers(responses)),
        confidence=confidence.growth_confidence(responses.full_text),
    )
