import logging
from typing import Any, Mapping, Optional

from .analyzers import (
    analyze_authenticity_patterns,
    analyze_energy_patterns,
    analyze_growth_readiness,
    analyze_problem_solving_style,
    analyze_strengths_patterns,
    analyze_values_patterns,
)
from .classifier import identify_user_type
from .confidence import average_word_count, build_confidence_map
from .loader import DEFAULT_TAXONOMY, load_taxonomy_from_file
from .models import (
    AnalysisMetadata,
    AnalysisReport,
    KeywordTaxonomy,
    Patterns,
    ResponseSet,
)

logger = logging.getLogger(__name__)


def calculate_authenticity_score(patterns: Patterns) -> float:
    """Mean of values alignment, energy sustainability, strengths utilization and authenticity alignment."""
    factors = [
        patterns.values.alignment,
        patterns.energy.sustainability,
        patterns.strengths.utilization,
        patterns.authenticity.alignment,
    ]
    return sum(factors) / len(factors)


def assess_response_quality(responses: ResponseSet) -> str:
    avg_length = average_word_count(list(responses.responses.values()))

    if avg_length >= 25:
        return 'High'
    if avg_length >= 15:
        return 'Good'
    if avg_length >= 10:
        return 'Moderate'
    return 'Basic'


class PatternRecognitionEngine:
    """
    Analyzes free-text survey responses to identify energy, values, strengths,
    problem-solving, authenticity and growth patterns, and the respondent's
    user type.

    The engine holds nothing but a frozen keyword taxonomy, so a single
    instance can serve concurrent callers.
    """
    def __init__(self, taxonomy: Optional[KeywordTaxonomy] = None, taxonomy_path: Optional[str] = None):
        """
        Args:
            taxonomy: A pre-built taxonomy. Takes precedence over taxonomy_path.
            taxonomy_path: Path to a YAML keyword library. The built-in library
                is used when neither argument is given.
        """
        if taxonomy is not None:
            self.taxonomy = taxonomy
        elif taxonomy_path:
            self.taxonomy = load_taxonomy_from_file(taxonomy_path)
        else:
            self.taxonomy = DEFAULT_TAXONOMY

    def analyze_patterns(self, responses: ResponseSet) -> Patterns:
        return Patterns(
            energy=analyze_energy_patterns(responses, self.taxonomy),
            values=analyze_values_patterns(responses, self.taxonomy),
            strengths=analyze_strengths_patterns(responses, self.taxonomy),
            problem_solving=analyze_problem_solving_style(responses, self.taxonomy),
            authenticity=analyze_authenticity_patterns(responses),
            growth=analyze_growth_readiness(responses),
        )

    def analyze_responses(self, responses: Mapping[str, Any]) -> AnalysisReport:
        """
        Runs the full analysis over a set of survey responses.

        Args:
            responses: Mapping of slot ids ('response1' ... 'response11') to text.
                Missing slots are treated as empty answers.

        Returns:
            A frozen AnalysisReport.

        Raises:
            InvalidInputError: If responses is missing or is not a mapping of text.
        """
        response_set = ResponseSet.from_mapping(responses)
        logger.info(f"Starting pattern recognition analysis over {len(response_set)} responses")

        patterns = self.analyze_patterns(response_set)
        report = AnalysisReport(
            raw_responses=response_set.responses,
            patterns=patterns,
            user_type=identify_user_type(response_set, patterns),
            authenticity_score=calculate_authenticity_score(patterns),
            confidence=build_confidence_map(patterns, response_set),
            metadata=AnalysisMetadata(
                response_count=len(response_set),
                response_quality=assess_response_quality(response_set),
            ),
        )

        logger.info(
            f"Pattern analysis complete: user_type={report.user_type.value}, "
            f"authenticity={round(report.authenticity_score * 100)}%, "
            f"confidence={report.confidence.overall:.2f}"
        )
        return report
