"""
Declension of names into a requested grammatical case.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from greeknames.core.models import Case, Gender, parse_case, parse_gender
from greeknames.core.tables import KnowledgeTables, default_tables

logger = logging.getLogger(__name__)


class DeclensionTransformer:
    """Rewrites a name from one case to another."""

    def __init__(self, tables: Optional[KnowledgeTables] = None) -> None:
        self.tables = tables or default_tables()

    def transform_to_case(
        self,
        name: str,
        gender: Union[Gender, str],
        from_case: Union[Case, str],
        to_case: Union[Case, str],
    ) -> str:
        """
        Decline `name` from `from_case` to `to_case`.

        Dictionary names use their stored forms. Other names lose their
        longest matching `from_case` ending and gain the first `to_case`
        ending registered for the gender.

        :param name: Name in Greek script
        :param gender: Gender of the name
        :param from_case: Case the name is currently in
        :param to_case: Requested case
        :return: The declined name, or `name` unchanged when the cases
            match or the gender is unknown
        """
        gender = parse_gender(gender)
        from_case = parse_case(from_case)
        to_case = parse_case(to_case)

        if from_case == to_case or gender == Gender.UNKNOWN:
            return name
        if to_case == Case.UNKNOWN:
            raise ValueError("Cannot decline a name into an unknown case")

        entry = self.tables.lookup_name(name)
        if entry is not None:
            logger.debug("Declining %r to %s from dictionary", name, to_case.value)
            if to_case == Case.NOMINATIVE:
                return name
            return entry.variant_for(to_case)

        logger.debug("Declining %r to %s by rule", name, to_case.value)
        stem = self.strip_ending(name, gender, from_case)
        return stem + self.first_ending(gender, to_case)

    def strip_ending(self, name: str, gender: Gender, case: Case) -> str:
        """
        Remove the longest `case` ending for `gender` from `name`.

        A name with no matching ending is returned whole, so appending a new
        ending to a malformed input can double up its final letters.
        """
        endings = self.tables.case_patterns.get(case, {}).get(gender, ())
        matches = [ending for ending in endings if name.endswith(ending)]
        if not matches:
            return name
        return name[: -len(max(matches, key=len))]

    def first_ending(self, gender: Gender, case: Case) -> str:
        """Return the ending appended when declining into `case`."""
        endings = self.tables.case_patterns[case][gender]
        return endings[0] if endings else ""
