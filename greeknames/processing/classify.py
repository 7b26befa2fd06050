"""
Gender and case classification from name endings.

Both classifiers evaluate an ordered list of (endings, result) rules and
return the result of the first rule whose endings match. Short endings
such as "α" and "η" belong to several rules, so the rule order decides
ambiguous names.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence, Tuple, TypeVar, Union

from greeknames.core.models import CASE_ORDER, GENDER_ORDER, Case, Gender, parse_gender
from greeknames.core.tables import KnowledgeTables, default_tables
from greeknames.core.text import is_greek_script

logger = logging.getLogger(__name__)

T = TypeVar("T")
Rule = Tuple[Tuple[str, ...], T]


def match_first_rule(name: str, rules: Sequence[Rule], default: T) -> T:
    """Return the result of the first rule with an ending that `name` ends with."""
    for endings, result in rules:
        if endings and name.endswith(endings):
            return result
    return default


class GenderClassifier:
    """Infers grammatical gender from the common-name dictionary or endings."""

    def __init__(self, tables: Optional[KnowledgeTables] = None) -> None:
        self.tables = tables or default_tables()
        patterns = self.tables.gender_patterns
        self._greek_rules = tuple((patterns[gender].greek_endings, gender) for gender in GENDER_ORDER)
        self._latin_rules = tuple((patterns[gender].latin_endings, gender) for gender in GENDER_ORDER)

    def detect_gender(self, name: str) -> Gender:
        """
        Detect the gender of a name.

        Dictionary names return their recorded gender. Other names are
        matched against the Greek endings (or the Latin endings for Latin
        script) in masculine, feminine, neuter order.
        """
        entry = self.tables.lookup_name(name)
        if entry is not None:
            return entry.gender

        rules = self._greek_rules if is_greek_script(name) else self._latin_rules
        gender = match_first_rule(name, rules, Gender.UNKNOWN)
        logger.debug("Gender of %r inferred from endings: %s", name, gender.value)
        return gender


class CaseIdentifier:
    """Infers the grammatical case of a name from gender-specific endings."""

    def __init__(self, tables: Optional[KnowledgeTables] = None) -> None:
        self.tables = tables or default_tables()
        self._rules: Dict[Gender, Tuple[Rule, ...]] = {
            gender: tuple((self.tables.case_patterns[case][gender], case) for case in CASE_ORDER)
            for gender in GENDER_ORDER
        }

    def identify_case(self, name: str, gender: Union[Gender, str]) -> Case:
        """
        Identify the case of a name.

        Returns UNKNOWN for an unknown gender and NOMINATIVE when no ending
        matches, since unmatched names are assumed to be in base form.
        """
        gender = parse_gender(gender)
        if gender == Gender.UNKNOWN:
            return Case.UNKNOWN
        return match_first_rule(name, self._rules[gender], Case.NOMINATIVE)
