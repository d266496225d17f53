import pytest

from services.pattern_engine.insights import (
    DEFAULT_TOP_STRENGTH,
    DEFAULT_TOP_VALUE,
    build_headline,
    generate_insights,
    generate_quick_actions,
    top_strength_of,
    top_value_of,
)
from services.pattern_engine.models import UserType


@pytest.mark.parametrize("user_type, headline", [
    (UserType.UNMOTIVATED_ACHIEVER, "You're an Unmotivated Achiever"),
    (UserType.ALTERNATIVE_LEARNER, "You're an Alternative Learner"),
    (UserType.SUCCESSFUL_DRIFTER, "You're a Successful Drifter"),
])
def test_headline_article(user_type, headline):
    assert build_headline(user_type) == headline


def test_insights_for_empty_session(engine, empty_responses):
    report = engine.analyze_responses(empty_responses)
    insights = generate_insights(report)

    assert insights.headline == "You're an Unmotivated Achiever"
    assert insights.subtitle == "63% authenticity alignment"
    assert [card.title for card in insights.top_insights] == [
        "Energy Source: People",
        "Top Strength: Communication",
        "Core Value: Impact",
    ]
    assert [card.score for card in insights.top_insights] == [50, 50, 50]
    assert [card.score_label for card in insights.top_insights] == ["Sustainable", "Utilized", "Aligned"]
    assert insights.confidence == 0.0
    assert insights.readiness_score == 0.0


def test_insights_pass_through_report_values(engine, rich_responses):
    report = engine.analyze_responses(rich_responses)
    insights = generate_insights(report)
    assert insights.confidence == report.confidence.overall
    assert insights.readiness_score == report.patterns.growth.readiness


# --- Quick actions ---

def test_default_quick_actions(engine, empty_responses):
    actions = generate_quick_actions(engine.analyze_responses(empty_responses))
    assert actions.start.action == "Volunteer to present or teach"
    assert actions.stop.action == "Postponing growth opportunities"
    assert actions.explore.action == "Skills development in your strength areas"


def test_start_with_analytical_strength(engine):
    actions = generate_quick_actions(engine.analyze_responses({"response8": "I analyze data"}))
    assert actions.start.action == "Seek out data analysis projects"


def test_start_with_other_strength(engine):
    actions = generate_quick_actions(engine.analyze_responses({"response8": "I lead and manage"}))
    assert actions.start.action == "Focus more on leadership work"
    assert actions.start.reason == "This aligns with your natural strengths"


def test_stop_on_high_authenticity_gap(engine):
    report = engine.analyze_responses({"response2": "I should, I should, I should, I should", "response9": "drained"})
    assert report.patterns.authenticity.gaps > 0.5
    assert generate_quick_actions(report).stop.reason == "High authenticity gap detected"


def test_stop_on_unsustainable_energy(engine):
    report = engine.analyze_responses({"response2": "I'm exhausted"})
    assert report.patterns.authenticity.gaps == 0.0
    assert generate_quick_actions(report).stop.action == "Accepting energy-draining responsibilities"


def test_explore_for_alternative_learner(engine):
    report = engine.analyze_responses({
        "response2": "I think in a different way",
        "response10": "I go with my gut",
    })
    assert report.user_type == UserType.ALTERNATIVE_LEARNER
    assert generate_quick_actions(report).explore.action == "Non-traditional career paths"


def test_explore_on_high_growth_readiness(engine):
    report = engine.analyze_responses({"response7": "I feel stuck and frustrated, I want to learn something new"})
    assert report.patterns.growth.readiness > 0.6
    assert generate_quick_actions(report).explore.action == "Leadership or mentoring opportunities"


def test_defaults_when_rankings_are_empty(engine, empty_responses):
    report = engine.analyze_responses(empty_responses)
    patterns = report.patterns.model_copy(update={
        "strengths": report.patterns.strengths.model_copy(update={"top_strengths": ()}),
        "values": report.patterns.values.model_copy(update={"top_values": ()}),
    })
    bare = report.model_copy(update={"patterns": patterns})

    assert top_strength_of(bare) == DEFAULT_TOP_STRENGTH
    assert top_value_of(bare) == DEFAULT_TOP_VALUE
    assert generate_insights(bare).top_insights[2].title == "Core Value: Growth"
