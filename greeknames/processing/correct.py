"""
Spelling repair and confidence scoring.

`NameNormalizer` maps known truncated or declined spellings back to the
nominative before analysis, `ErrorCorrector` applies a narrow post-pass
fix, and `ConfidenceScorer` rates the result.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from greeknames.core.constants import BASE_CONFIDENCE, DICTIONARY_BONUS, GENDER_BONUS, MAX_CONFIDENCE
from greeknames.core.models import Gender, parse_gender
from greeknames.core.tables import KnowledgeTables, default_tables

logger = logging.getLogger(__name__)


class NameNormalizer:
    """Replaces known misspellings with their canonical nominative form."""

    def __init__(self, tables: Optional[KnowledgeTables] = None) -> None:
        self.tables = tables or default_tables()

    def normalize(self, name: str) -> str:
        """Return the canonical form for a known misspelling, else `name`."""
        canonical = self.tables.name_corrections.get(name.lower())
        if canonical is None:
            return name
        logger.debug("Corrected %r to %r", name, canonical)
        return canonical


class ErrorCorrector:
    """Fixes a final ι that should be η on feminine names."""

    def fix_common_errors(self, name: str, gender: Union[Gender, str]) -> str:
        if parse_gender(gender) == Gender.FEMININE and name.endswith("ι"):
            fixed = name[:-1] + "η"
            logger.debug("Fixed feminine ending of %r to %r", name, fixed)
            return fixed
        return name


class ConfidenceScorer:
    """
    Scores how much to trust a correction.

    The score is an ordinal signal in [0, 1], not a calibrated probability.
    """

    def __init__(self, tables: Optional[KnowledgeTables] = None) -> None:
        self.tables = tables or default_tables()

    def calculate_confidence(self, name: str, gender: Union[Gender, str]) -> float:
        confidence = BASE_CONFIDENCE
        if self.tables.lookup_name(name) is not None:
            confidence += DICTIONARY_BONUS
        if parse_gender(gender) != Gender.UNKNOWN:
            confidence += GENDER_BONUS
        return min(confidence, MAX_CONFIDENCE)
