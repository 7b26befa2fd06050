"""
Transliteration between Greek script and Latin letters.

Latin to Greek is lossy: letters that share a Latin image (η and ι both
give "i") come back as the first-registered Greek letter. Characters with
no mapping (digits, punctuation, other scripts) pass through unchanged.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from typing import Optional

from greeknames.core.tables import KnowledgeTables, default_tables
from greeknames.core.text import is_greek_script

logger = logging.getLogger(__name__)

SUPPORTED_TARGETS = ("greek", "latin")


class Transliterator:
    """Converts names between Greek script and Latin transliteration."""

    def __init__(self, tables: Optional[KnowledgeTables] = None) -> None:
        self.tables = tables or default_tables()
        self._digraph_pattern = re.compile(
            "|".join(re.escape(digraph) for digraph in self.tables.digraphs),
            flags=re.IGNORECASE,
        )

    def _replace_digraph(self, match: re.Match) -> str:
        latin = match.group(0)
        greek = self.tables.digraphs[latin.lower()]
        return greek if latin == latin.lower() else greek.upper()

    def to_greek(self, text: str) -> str:
        """
        Transliterate Latin text to Greek.

        Whole-name matches win; otherwise digraphs (th, ch, ps) are replaced
        first and the remaining letters one at a time.
        """
        exact = self.tables.name_transliterations.get(text)
        if exact is not None:
            return exact

        text = self._digraph_pattern.sub(self._replace_digraph, text)
        return "".join(self.tables.latin_to_greek.get(char, char) for char in text)

    def _latin_letter(self, char: str) -> str:
        latin = self.tables.greek_to_latin.get(char)
        if latin is not None:
            return latin
        if not is_greek_script(char):
            return char
        # Polytonic letters: drop breathings, accents and iota subscript
        base = "".join(mark for mark in unicodedata.normalize("NFD", char) if not unicodedata.combining(mark))
        return "".join(self.tables.greek_to_latin.get(letter, letter) for letter in base)

    def to_latin(self, text: str) -> str:
        """
        Transliterate Greek text to Latin letter by letter.

        Polytonic letters are reduced to their base letter before lookup.
        """
        return "".join(self._latin_letter(char) for char in text)

    def transliterate(self, text: str, target: Optional[str] = None) -> str:
        """
        Transliterate towards `target` ('greek' or 'latin').

        Without a target, Greek-script text goes to Latin and anything
        else to Greek.
        """
        if target is None:
            target = "latin" if is_greek_script(text) else "greek"
        if target not in SUPPORTED_TARGETS:
            raise ValueError(f"Unsupported transliteration target: {target}")

        logger.debug("Transliterating %r to %s", text, target)
        if target == "greek":
            return self.to_greek(text)
        return self.to_latin(text)
