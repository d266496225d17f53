import pytest

from services.pattern_engine.engine import PatternRecognitionEngine
from services.pattern_engine.taxonomy import RESPONSE_SLOTS


@pytest.fixture(scope="session")
def engine():
    """A single engine over the built-in taxonomy, shared across tests."""
    return PatternRecognitionEngine()


@pytest.fixture
def empty_responses():
    return {slot: "" for slot in RESPONSE_SLOTS}


@pytest.fixture
def rich_responses():
    """A fully answered session touching most vocabularies."""
    return {
        "response1": "I've been successful in my career and I'm good at what I do, but something is missing.",
        "response2": "I want to find work that feels authentic and true to myself.",
        "response3": "I need time and space to process things before I decide.",
        "response4": "Work should be meaningful. I love helping people and I believe purpose matters.",
        "response5": "My family expects me to stay on a stable path, and I'm afraid of change.",
        "response6": "I'm doing well on paper, but I feel drained and stuck. I'm not using my creative side.",
        "response7": "I hope to transition into something new within a year.",
        "response8": "I lose track of time when I design new ideas and brainstorm with my team.",
        "response9": "I feel energized when I create, and exhausted by tedious reporting.",
        "response10": "When something breaks I jump in, try a quick prototype and test it, then discuss it with the team.",
        "response11": "I value freedom and independence, but I also want a secure and reliable income.",
    }
