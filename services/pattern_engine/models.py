from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, Dict, List, Sequence, Tuple

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, NonNegativeInt, PlainSerializer


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


def _read_only(value: Dict[str, Any]) -> Mapping:
    return MappingProxyType(value)


def _as_dict(value: Mapping) -> Dict[str, Any]:
    return dict(value)


# frozen=True only guards attribute assignment; mappings inside a record are
# wrapped read-only and dumped back as plain dicts.
ScoreMap = Annotated[
    Dict[str, NonNegativeInt],
    AfterValidator(_read_only),
    PlainSerializer(_as_dict, return_type=Dict[str, int]),
]
TextMap = Annotated[
    Dict[str, str],
    AfterValidator(_read_only),
    PlainSerializer(_as_dict, return_type=Dict[str, str]),
]


class UserType(str, Enum):
    """Respondent archetypes, in tie-break order."""
    UNMOTIVATED_ACHIEVER = "unmotivatedAchiever"
    ALTERNATIVE_LEARNER = "alternativeLearner"
    SUCCESSFUL_DRIFTER = "successfulDrifter"


class TaxonomyConfig(BaseModel):
    """Raw keyword library as read from a dict or YAML document."""
    energy: Dict[str, List[str]]
    values: Dict[str, List[str]]
    strengths: Dict[str, List[str]]
    problem_solving: Dict[str, List[str]] = Field(..., alias='problemSolving')
    indicators: Dict[str, List[str]] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True)


class CategoryKeywords(FrozenModel):
    name: str
    keywords: Tuple[str, ...]


class DimensionKeywords(FrozenModel):
    name: str
    categories: Tuple[CategoryKeywords, ...]

    @property
    def category_names(self) -> Tuple[str, ...]:
        return tuple(category.name for category in self.categories)

    def keywords_for(self, category: str) -> Tuple[str, ...]:
        for entry in self.categories:
            if entry.name == category:
                return entry.keywords
        return ()


class KeywordTaxonomy(FrozenModel):
    """
    Validated, immutable keyword taxonomy.

    Categories are held as ordered tuples rather than mappings: their declared
    order decides every arg-max tie.
    """
    dimensions: Tuple[DimensionKeywords, ...]
    indicators: Tuple[CategoryKeywords, ...] = ()

    def dimension(self, name: str) -> DimensionKeywords:
        for entry in self.dimensions:
            if entry.name == name:
                return entry
        raise KeyError(f"Unknown taxonomy dimension: {name}")

    def indicator(self, name: str) -> Tuple[str, ...]:
        for entry in self.indicators:
            if entry.name == name:
                return entry.keywords
        return ()


class ResponseSet(FrozenModel):
    """Survey answers keyed by slot id. Absent slots read as empty text."""
    responses: TextMap = Field(default_factory=dict, validate_default=True)

    @classmethod
    def from_mapping(cls, data: Any) -> 'ResponseSet':
        if data is None:
            raise InvalidInputError("No responses provided")
        if not isinstance(data, Mapping):
            raise InvalidInputError(
                f"Responses must be a mapping of slot ids to text, got {type(data).__name__}"
            )
        responses: Dict[str, str] = {}
        for slot, value in data.items():
            if not isinstance(slot, str):
                raise InvalidInputError(
                    f"Response slot ids must be text, got {type(slot).__name__} {slot!r}"
                )
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise InvalidInputError(
                    f"Response '{slot}' must be text, got {type(value).__name__}"
                )
            responses[slot] = value
        return cls(responses=responses)

    def get(self, slot: str) -> str:
        return self.responses.get(slot, "")

    def join(self, slots: Sequence[str]) -> str:
        return " ".join(self.get(slot) for slot in slots)

    @property
    def full_text(self) -> str:
        return " ".join(self.responses.values())

    def __len__(self) -> int:
        return len(self.responses)


class RankedCategory(FrozenModel):
    category: str
    score: int = Field(ge=0)


class Finding(FrozenModel):
    """A tagged observation (value conflict, internal tension, growth barrier)."""
    type: str
    description: str


class EnergyIndicators(FrozenModel):
    energizing: Tuple[str, ...] = ()
    draining: Tuple[str, ...] = ()
    flow: Tuple[str, ...] = ()
    stress: Tuple[str, ...] = ()


class EnergyResult(FrozenModel):
    categories: ScoreMap
    primary_energizer: str
    sustainability: float = Field(ge=0.0, le=1.0)
    indicators: EnergyIndicators
    confidence: float = Field(ge=0.0, le=1.0)


class ValuesResult(FrozenModel):
    categories: ScoreMap
    top_values: Tuple[RankedCategory, ...]
    alignment: float = Field(ge=0.0, le=1.0)
    conflicts: Tuple[Finding, ...] = ()
    confidence: float = Field(ge=0.0, le=1.0)


class StrengthsResult(FrozenModel):
    categories: ScoreMap
    top_strengths: Tuple[RankedCategory, ...]
    utilization: float = Field(ge=0.0, le=1.0)
    confidence: float = Field(ge=0.0, le=1.0)


class ProblemSolvingResult(FrozenModel):
    styles: ScoreMap
    primary_style: str
    approach: str
    confidence: float = Field(ge=0.0, le=1.0)


class AuthenticityResult(FrozenModel):
    gaps: float = Field(ge=0.0, le=1.0)
    alignment: float = Field(ge=0.0, le=1.0)
    tensions: Tuple[Finding, ...] = ()
    confidence: float = Field(ge=0.0, le=1.0)


class GrowthResult(FrozenModel):
    readiness: float = Field(ge=0.0, le=1.0)
    motivation: float = Field(ge=0.0, le=1.0)
    barriers: Tuple[Finding, ...] = ()
    confidence: float = Field(ge=0.0, le=1.0)


class Patterns(FrozenModel):
    energy: EnergyResult
    values: ValuesResult
    strengths: StrengthsResult
    problem_solving: ProblemSolvingResult
    authenticity: AuthenticityResult
    growth: GrowthResult


class ConfidenceMap(FrozenModel):
    overall: float = Field(ge=0.0, le=1.0)
    energy: float = Field(ge=0.0, le=1.0)
    values: float = Field(ge=0.0, le=1.0)
    strengths: float = Field(ge=0.0, le=1.0)
    problem_solving: float = Field(ge=0.0, le=1.0)
    authenticity: float = Field(ge=0.0, le=1.0)
    growth: float = Field(ge=0.0, le=1.0)


class AnalysisMetadata(FrozenModel):
    response_count: int = Field(ge=0)
    response_quality: str


class AnalysisReport(FrozenModel):
    raw_responses: TextMap
    patterns: Patterns
    user_type: UserType
    authenticity_score: float = Field(ge=0.0, le=1.0)
    confidence: ConfidenceMap
    metadata: AnalysisMetadata


# Custom Error Classes
class InvalidInputError(ValueError):
    """Raised when the response set is missing or is not a key-value structure."""
    pass


class TaxonomyValidationError(ValueError):
    """Raised for keyword taxonomy data that fails validation."""
    pass
