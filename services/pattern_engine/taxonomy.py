# services/pattern_engine/taxonomy.py
# Static keyword library and vocabularies for the pattern recognition engine.

# --- Dimension identifiers ---
ENERGY = "energy"
VALUES = "values"
STRENGTHS = "strengths"
PROBLEM_SOLVING = "problemSolving"

SCORED_DIMENSIONS = (ENERGY, VALUES, STRENGTHS, PROBLEM_SOLVING)

# Per-keyword contribution cap when scoring a category.
KEYWORD_CAPS = {
    ENERGY: 3,
    VALUES: 2,
    STRENGTHS: 2,
    PROBLEM_SOLVING: 1,  # presence only
}

# Categories the analyzers and classifier refer to by name.
REQUIRED_CATEGORIES = {
    ENERGY: ("people", "problems", "creativity", "learning"),
    VALUES: ("impact", "freedom", "growth", "security", "connection"),
    STRENGTHS: ("communication", "analytical", "creative", "leadership", "problemSolving", "execution"),
    PROBLEM_SOLVING: ("analytical", "experimental", "collaborative", "intuitive"),
}

REQUIRED_INDICATORS = ("energizing", "draining", "flow", "stress")

# --- Keyword library (category order matters) ---
KEYWORD_LIBRARY = {
    "energy": {
        "people": ["people", "team", "collaborate", "help", "others", "relationships", "community", "social", "mentor", "teach"],
        "problems": ["solve", "challenge", "analyze", "figure out", "complex", "problem", "troubleshoot", "fix", "systematic"],
        "creativity": ["create", "design", "innovative", "ideas", "artistic", "build", "imagine", "brainstorm", "original"],
        "learning": ["learn", "discover", "understand", "research", "study", "knowledge", "explore", "curious", "absorb"],
    },
    "values": {
        "impact": ["difference", "meaning", "purpose", "help", "contribute", "matter", "change", "meaningful", "significant"],
        "freedom": ["freedom", "autonomous", "flexible", "independent", "choice", "control", "own pace", "self-directed"],
        "growth": ["learn", "grow", "develop", "improve", "challenge", "evolve", "progress", "advance", "expand"],
        "security": ["stable", "secure", "predictable", "safe", "reliable", "steady", "consistent", "guaranteed"],
        "connection": ["relationships", "team", "community", "together", "support", "collaborate", "bond", "social"],
    },
    "strengths": {
        "communication": ["communicate", "explain", "present", "teach", "speak", "write", "articulate", "express"],
        "analytical": ["analyze", "data", "research", "logical", "systematic", "detail", "examine", "investigate"],
        "creative": ["creative", "innovative", "design", "artistic", "ideas", "imaginative", "original", "inventive"],
        "leadership": ["lead", "manage", "guide", "influence", "motivate", "direct", "inspire", "coordinate"],
        "problemSolving": ["solve", "fix", "troubleshoot", "resolve", "solution", "figure out", "address", "tackle"],
        "execution": ["implement", "deliver", "complete", "organize", "efficient", "results", "accomplish", "finish"],
    },
    "problemSolving": {
        "analytical": ["research", "study", "investigate", "analyze", "data", "systematic", "methodical"],
        "experimental": ["try", "experiment", "test", "hands-on", "trial", "iterate", "prototype"],
        "collaborative": ["discuss", "team", "brainstorm", "input", "feedback", "together", "group"],
        "intuitive": ["feel", "instinct", "gut", "intuition", "sense", "naturally", "instinctive"],
    },
    # Energy indicator vocabularies, reported but not scored.
    "indicators": {
        "energizing": ["energized", "excited", "passionate", "love", "enjoy", "thrive", "flow", "natural"],
        "draining": ["drained", "exhausted", "frustrated", "bored", "tedious", "struggle", "difficult", "hate"],
        "flow": ["flow", "lost track of time", "absorbed", "effortless", "natural", "zone", "immersed"],
        "stress": ["stressed", "overwhelmed", "anxious", "pressure", "burnt out", "tired"],
    },
}

# --- Response slots ---
OPENING = "response1"          # what brings you here
THIRD_SLOT = "response3"       # how you like to work through things
MEANING = "response4"          # what work means to you
SITUATION = "response6"        # current situation
ENGAGEMENT = "response8"       # engagement moments
ENERGY_SLOT = "response9"      # energy patterns
PROBLEM_SOLVING_SLOT = "response10"
VALUES_IN_ACTION = "response11"

RESPONSE_SLOTS = tuple(f"response{n}" for n in range(1, 12))

ENERGY_SLOTS = (ENGAGEMENT, ENERGY_SLOT, SITUATION, OPENING)
VALUES_SLOTS = (MEANING, VALUES_IN_ACTION, SITUATION, OPENING)
STRENGTHS_SLOTS = (ENGAGEMENT, ENERGY_SLOT, PROBLEM_SOLVING_SLOT, SITUATION)

# --- Ratio vocabularies ---
SUSTAINING_WORDS = ["energized", "excited", "passionate", "love", "enjoy", "thrive", "flow"]
DEPLETING_WORDS = ["drained", "exhausted", "frustrated", "bored", "tedious", "struggle"]

ALIGNED_WORDS = ["fulfilling", "meaningful", "aligned", "right", "love", "enjoy"]
MISALIGNED_WORDS = ["frustrated", "stuck", "wrong", "misaligned", "unfulfilled"]

UTILIZATION_WORDS = ["using", "good at", "strong", "excel", "leveraging"]
UNDERUTILIZATION_WORDS = ["not using", "wasted", "underutilized", "could do more"]

# --- Problem-solving approach, checked in order ---
APPROACH_RULES = [
    ("action-oriented", ["jump in", "try"]),
    ("reflection-oriented", ["think", "plan"]),
    ("collaboration-oriented", ["discuss", "team"]),
]
DEFAULT_APPROACH = "balanced"

# --- Authenticity ---
SHOULD_PHRASES = ["should", "supposed to", "expected to", "ought to"]
POSITIVE_WORDS = ["love", "enjoy", "fulfilling", "meaningful", "excited", "passionate"]
MISALIGNED_ENERGY_WORDS = ["drained", "tired", "exhausted", "frustrated"]

TENSION_RULES = [
    {
        "type": "security-growth",
        "description": "Wants both security and growth opportunities",
        "left": ["security", "stable"],
        "right": ["growth", "challenge"],
    },
    {
        "type": "independence-connection",
        "description": "Values both independence and collaboration",
        "left": ["independent", "autonomous"],
        "right": ["team", "collaborate"],
    },
]

# --- Growth ---
CHANGE_WORDS = ["change", "different", "new", "transition", "next step"]
LEARNING_WORDS = ["learn", "grow", "develop", "improve", "skill"]
DISSATISFACTION_WORDS = ["frustrated", "stuck", "unfulfilled", "bored"]

ACTION_WORDS = ["will", "going to", "plan to", "want to", "ready to"]
URGENCY_WORDS = ["need to", "have to", "must", "important"]
FUTURE_WORDS = ["future", "goal", "dream", "vision", "hope"]

BARRIER_RULES = [
    ("fear-based", "Fear or anxiety about change", ["afraid", "scared", "fear", "worried"]),
    ("resource-constraint", "Limited time, money, or resources", ["time", "money", "resources", "afford"]),
    ("external-pressure", "External expectations creating pressure", ["others expect", "family", "pressure"]),
]

# --- Confidence vocabularies ---
EXAMPLE_INDICATORS = ["when", "example", "like when", "such as", "for instance", "time i"]
VALUE_LANGUAGE = ["important", "matters", "priority", "value", "believe"]
STRENGTH_LANGUAGE = ["good at", "strong", "excel", "naturally", "easy"]
AUTHENTICITY_LANGUAGE = ["authentic", "true to myself", "genuine", "real me"]
GROWTH_LANGUAGE = ["grow", "develop", "improve", "learn", "change"]
