# services/pattern_engine/classifier.py
# Hand-weighted archetype classifier over keyword and threshold indicators.

import logging
from typing import Dict, Iterable, Tuple

from .models import FrozenModel, Patterns, ResponseSet, UserType
from .scorer import any_present
from .taxonomy import MEANING, OPENING, SITUATION, THIRD_SLOT

logger = logging.getLogger(__name__)

# Declaration order doubles as the tie-break order.
USER_TYPE_ORDER = (
    UserType.UNMOTIVATED_ACHIEVER,
    UserType.ALTERNATIVE_LEARNER,
    UserType.SUCCESSFUL_DRIFTER,
)

MODERATE_GAP_THRESHOLD = 0.4
HIGH_GAP_THRESHOLD = 0.6
ALTERNATIVE_STYLES = ("experimental", "intuitive")


class UserTypeProfile(FrozenModel):
    display_name: str
    characteristics: Tuple[str, ...]
    common_challenges: Tuple[str, ...]
    strengths: Tuple[str, ...]


USER_TYPE_PROFILES: Dict[UserType, UserTypeProfile] = {
    UserType.UNMOTIVATED_ACHIEVER: UserTypeProfile(
        display_name="Unmotivated Achiever",
        characteristics=["capable but directionless", "externally motivated", "seeks purpose"],
        common_challenges=["lack of internal drive", "following others' expectations", "imposter syndrome"],
        strengths=["proven capability", "strong work ethic", "adaptability"],
    ),
    UserType.ALTERNATIVE_LEARNER: UserTypeProfile(
        display_name="Alternative Learner",
        characteristics=["non-traditional approach", "innovative thinking", "questions systems"],
        common_challenges=["traditional environments", "conventional expectations", "fitting in"],
        strengths=["creative problem-solving", "independent thinking", "resilience"],
    ),
    UserType.SUCCESSFUL_DRIFTER: UserTypeProfile(
        display_name="Successful Drifter",
        characteristics=["externally successful", "feels misaligned", "questioning path"],
        common_challenges=["golden handcuffs", "fear of change", "identity confusion"],
        strengths=["proven success", "high competence", "strong network"],
    ),
}


def has_type_indicators(text: str, keywords: Iterable[str]) -> bool:
    if not text:
        return False
    return any_present(text, keywords)


def score_user_types(responses: ResponseSet, patterns: Patterns) -> Dict[UserType, int]:
    """Returns the indicator accumulator for every archetype, in declaration order."""
    type_scores = {user_type: 0 for user_type in USER_TYPE_ORDER}
    gaps = patterns.authenticity.gaps

    # Unmotivated Achiever indicators
    if has_type_indicators(responses.get(OPENING), ["capable", "direction", "unclear"]):
        type_scores[UserType.UNMOTIVATED_ACHIEVER] += 2
    if has_type_indicators(responses.get(MEANING), ["necessity", "bills", "have to"]):
        type_scores[UserType.UNMOTIVATED_ACHIEVER] += 3
    if gaps > MODERATE_GAP_THRESHOLD:
        type_scores[UserType.UNMOTIVATED_ACHIEVER] += 1

    # Alternative Learner indicators
    if has_type_indicators(responses.full_text, ["different", "traditional", "unconventional"]):
        type_scores[UserType.ALTERNATIVE_LEARNER] += 3
    if patterns.problem_solving.primary_style in ALTERNATIVE_STYLES:
        type_scores[UserType.ALTERNATIVE_LEARNER] += 2
    if has_type_indicators(responses.get(THIRD_SLOT), ["process", "time", "space"]):
        type_scores[UserType.ALTERNATIVE_LEARNER] += 1

    # Successful Drifter indicators
    if has_type_indicators(responses.get(OPENING), ["successful", "good at", "missing"]):
        type_scores[UserType.SUCCESSFUL_DRIFTER] += 3
    if has_type_indicators(responses.get(SITUATION), ["doing well", "but", "however", "something"]):
        type_scores[UserType.SUCCESSFUL_DRIFTER] += 2
    if gaps > HIGH_GAP_THRESHOLD:
        type_scores[UserType.SUCCESSFUL_DRIFTER] += 2

    return type_scores


def identify_user_type(responses: ResponseSet, patterns: Patterns) -> UserType:
    type_scores = score_user_types(responses, patterns)

    best = USER_TYPE_ORDER[0]
    for user_type in USER_TYPE_ORDER[1:]:
        if type_scores[user_type] > type_scores[best]:
            best = user_type

    readable_scores = {user_type.value: score for user_type, score in type_scores.items()}
    logger.debug(f"User type scores: {readable_scores} -> {best.value}")
    return best
