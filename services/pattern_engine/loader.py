import logging
from typing import Any, Dict, List

import yaml
from pydantic import ValidationError

from .models import (
    CategoryKeywords,
    DimensionKeywords,
    KeywordTaxonomy,
    TaxonomyConfig,
    TaxonomyValidationError,
)
from .taxonomy import (
    KEYWORD_LIBRARY,
    REQUIRED_CATEGORIES,
    REQUIRED_INDICATORS,
    SCORED_DIMENSIONS,
)

logger = logging.getLogger(__name__)


def _check_keywords(location: str, keywords: List[str]) -> None:
    if not keywords:
        raise TaxonomyValidationError(f"No keywords declared for {location}")
    seen = set()
    for keyword in keywords:
        if not keyword or not keyword.strip():
            raise TaxonomyValidationError(f"Blank keyword in {location}")
        if keyword != keyword.lower():
            raise TaxonomyValidationError(f"Keyword '{keyword}' in {location} must be lower-case")
        if keyword in seen:
            raise TaxonomyValidationError(f"Duplicate keyword '{keyword}' in {location}")
        seen.add(keyword)


def _freeze(mapping: Dict[str, List[str]]) -> tuple:
    return tuple(
        CategoryKeywords(name=name, keywords=tuple(keywords))
        for name, keywords in mapping.items()
    )


def load_taxonomy_data(data: Dict[str, Any]) -> KeywordTaxonomy:
    """
    Validates raw keyword library data and returns a frozen KeywordTaxonomy.

    Category order is taken from the mapping's insertion order, which is the
    order the categories were declared in (Python dicts and YAML mappings
    both keep it).
    """
    try:
        config = TaxonomyConfig.model_validate(data)
    except ValidationError as e:
        raise TaxonomyValidationError(f"Invalid taxonomy structure: {e}") from e

    by_dimension = {
        "energy": config.energy,
        "values": config.values,
        "strengths": config.strengths,
        "problemSolving": config.problem_solving,
    }

    for dimension in SCORED_DIMENSIONS:
        categories = by_dimension[dimension]
        missing = [name for name in REQUIRED_CATEGORIES[dimension] if name not in categories]
        if missing:
            raise TaxonomyValidationError(
                f"Dimension '{dimension}' is missing required categories: {missing}"
            )
        for category, keywords in categories.items():
            _check_keywords(f"'{dimension}.{category}'", keywords)

    missing_indicators = [name for name in REQUIRED_INDICATORS if name not in config.indicators]
    if missing_indicators:
        raise TaxonomyValidationError(f"Missing energy indicator vocabularies: {missing_indicators}")
    for name, keywords in config.indicators.items():
        _check_keywords(f"'indicators.{name}'", keywords)

    return KeywordTaxonomy(
        dimensions=tuple(
            DimensionKeywords(name=dimension, categories=_freeze(by_dimension[dimension]))
            for dimension in SCORED_DIMENSIONS
        ),
        indicators=_freeze(config.indicators),
    )


def load_taxonomy_from_file(file_path: str) -> KeywordTaxonomy:
    """
    Loads a keyword taxonomy from a YAML file, validates it,
    and returns a KeywordTaxonomy object.
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise TaxonomyValidationError(f"File not found: {file_path}")
    except yaml.YAMLError as e:
        raise TaxonomyValidationError(f"Error parsing YAML file {file_path}: {e}")

    if data is None:
        raise TaxonomyValidationError(f"YAML file is empty or invalid: {file_path}")
    if not isinstance(data, dict):
        raise TaxonomyValidationError(f"Taxonomy file must contain a mapping: {file_path}")

    taxonomy = load_taxonomy_data(data)
    logger.info(f"Loaded keyword taxonomy from {file_path}")
    return taxonomy


DEFAULT_TAXONOMY: KeywordTaxonomy = load_taxonomy_data(KEYWORD_LIBRARY)
