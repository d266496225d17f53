# services/pattern_engine/insights.py
# Turns an AnalysisReport into user-facing insight copy and quick actions.

import logging
from typing import List

from pydantic import BaseModel

from .classifier import USER_TYPE_PROFILES
from .models import AnalysisReport, UserType

logger = logging.getLogger(__name__)

# --- Display Data ---

ENERGY_ICONS = {
    "people": "👥",
    "problems": "🧩",
    "creativity": "🎨",
    "learning": "📚",
}

STRENGTH_ICONS = {
    "communication": "💬",
    "analytical": "📊",
    "creative": "🎨",
    "leadership": "👑",
    "problemSolving": "🔧",
    "execution": "⚡",
}

VALUE_ICONS = {
    "impact": "🎯",
    "freedom": "🕊️",
    "growth": "🌱",
    "security": "🛡️",
    "connection": "🤝",
}

DEFAULT_TOP_STRENGTH = "analytical"
DEFAULT_TOP_VALUE = "growth"


class InsightCard(BaseModel):
    icon: str
    title: str
    description: str
    score: int
    score_label: str


class QuickAction(BaseModel):
    icon: str
    action: str
    reason: str


class QuickActions(BaseModel):
    start: QuickAction
    stop: QuickAction
    explore: QuickAction


class Insights(BaseModel):
    headline: str
    subtitle: str
    top_insights: List[InsightCard]
    quick_actions: QuickActions
    confidence: float
    readiness_score: float


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def _percent(value: float) -> int:
    # Half-up rounding; values are always non-negative.
    return int(value * 100 + 0.5)


def build_headline(user_type: UserType) -> str:
    name = USER_TYPE_PROFILES[user_type].display_name
    article = "an" if name[0].lower() in "aeiou" else "a"
    return f"You're {article} {name}"


def top_strength_of(report: AnalysisReport) -> str:
    ranked = report.patterns.strengths.top_strengths
    return ranked[0].category if ranked else DEFAULT_TOP_STRENGTH


def top_value_of(report: AnalysisReport) -> str:
    ranked = report.patterns.values.top_values
    return ranked[0].category if ranked else DEFAULT_TOP_VALUE


def generate_quick_actions(report: AnalysisReport) -> QuickActions:
    """Start/stop/explore recommendations."""
    patterns = report.patterns

    top_strength = top_strength_of(report)
    if top_strength == "analytical":
        start = QuickAction(icon="🚀", action="Seek out data analysis projects",
                            reason="Your analytical strength is underutilized")
    elif top_strength == "communication":
        start = QuickAction(icon="🚀", action="Volunteer to present or teach",
                            reason="Your communication skills need more expression")
    else:
        start = QuickAction(icon="🚀", action=f"Focus more on {top_strength} work",
                            reason="This aligns with your natural strengths")

    if patterns.authenticity.gaps > 0.5:
        stop = QuickAction(icon="🛑", action="Following others' expectations without question",
                           reason="High authenticity gap detected")
    elif patterns.energy.sustainability < 0.4:
        stop = QuickAction(icon="🛑", action="Accepting energy-draining responsibilities",
                           reason="Your current situation is unsustainable")
    else:
        stop = QuickAction(icon="🛑", action="Postponing growth opportunities",
                           reason="You're ready for more challenge")

    if report.user_type == UserType.ALTERNATIVE_LEARNER:
        explore = QuickAction(icon="🔍", action="Non-traditional career paths",
                              reason="Your innovative thinking needs expression")
    elif patterns.growth.readiness > 0.6:
        explore = QuickAction(icon="🔍", action="Leadership or mentoring opportunities",
                              reason="High growth readiness detected")
    else:
        explore = QuickAction(icon="🔍", action="Skills development in your strength areas",
                              reason="Build on what you do best")

    return QuickActions(start=start, stop=stop, explore=explore)


def generate_insights(report: AnalysisReport) -> Insights:
    patterns = report.patterns
    primary_energizer = patterns.energy.primary_energizer
    top_strength = top_strength_of(report)
    top_value = top_value_of(report)

    top_insights = [
        InsightCard(
            icon=ENERGY_ICONS.get(primary_energizer, "⚡"),
            title=f"Energy Source: {_capitalize(primary_energizer)}",
            description=f"You're most energized by {primary_energizer}-focused work",
            score=_percent(patterns.energy.sustainability),
            score_label="Sustainable",
        ),
        InsightCard(
            icon=STRENGTH_ICONS.get(top_strength, "💪"),
            title=f"Top Strength: {_capitalize(top_strength)}",
            description=f"Your standout strength is {top_strength} work",
            score=_percent(patterns.strengths.utilization),
            score_label="Utilized",
        ),
        InsightCard(
            icon=VALUE_ICONS.get(top_value, "🧭"),
            title=f"Core Value: {_capitalize(top_value)}",
            description=f"Your driving value is {top_value}",
            score=_percent(patterns.values.alignment),
            score_label="Aligned",
        ),
    ]

    insights = Insights(
        headline=build_headline(report.user_type),
        subtitle=f"{_percent(report.authenticity_score)}% authenticity alignment",
        top_insights=top_insights,
        quick_actions=generate_quick_actions(report),
        confidence=report.confidence.overall,
        readiness_score=patterns.growth.readiness,
    )
    logger.debug(f"Generated insights: {insights.headline}")
    return insights
