"""
Knowledge tables for Greek personal names.

Raw data (ending patterns, transliteration letters, common names and known
misspellings) lives in plain module-level literals. `KnowledgeTables.build`
turns them into a frozen, read-only view that the processing stages share.
Nothing mutates the tables after they are built.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from greeknames.core.constants import VARIANT_COUNT
from greeknames.core.models import CASE_ORDER, GENDER_ORDER, VARIANT_INDEX, Case, Gender

# Ending patterns used to guess gender, checked in GENDER_ORDER.
GENDER_ENDINGS = {
    "masculine": {
        "greek": ["ος", "ης", "ας", "ούς", "ής", "άς", "ων", "ών"],
        "latin": ["os", "is", "as", "ous", "on"],
    },
    "feminine": {
        "greek": ["α", "η", "ω", "ού", "ής", "ά"],
        "latin": ["a", "i", "o", "ou", "is"],
    },
    "neuter": {
        "greek": ["ο", "ι", "υ", "άκι", "ούδι"],
        "latin": ["o", "i", "y", "aki", "oudi"],
    },
}

# Case endings per gender, checked in CASE_ORDER. The first ending of each
# list is the one appended when declining by rule.
CASE_ENDINGS = {
    "nominative": {
        "masculine": ["ος", "ης", "ας"],
        "feminine": ["α", "η", "ω"],
        "neuter": ["ο", "ι", "υ"],
    },
    "genitive": {
        "masculine": ["ου", "η", "α"],
        "feminine": ["ας", "ης", "ως"],
        "neuter": ["ου", "ιού", "υ"],
    },
    "accusative": {
        "masculine": ["ο", "η", "α"],
        "feminine": ["α", "η", "ω"],
        "neuter": ["ο", "ι", "υ"],
    },
    "vocative": {
        "masculine": ["ε", "η", "α"],
        "feminine": ["α", "η", "ω"],
        "neuter": ["ο", "ι", "υ"],
    },
}

# Greek letter -> Latin image, in registration order. Accented vowels come
# after the plain letters so reverse lookups prefer the plain forms.
GREEK_LETTERS = [
    ("Α", "A"), ("α", "a"),
    ("Β", "B"), ("β", "b"),
    ("Γ", "G"), ("γ", "g"),
    ("Δ", "D"), ("δ", "d"),
    ("Ε", "E"), ("ε", "e"),
    ("Ζ", "Z"), ("ζ", "z"),
    ("Η", "I"), ("η", "i"),
    ("Θ", "Th"), ("θ", "th"),
    ("Ι", "I"), ("ι", "i"),
    ("Κ", "K"), ("κ", "k"),
    ("Λ", "L"), ("λ", "l"),
    ("Μ", "M"), ("μ", "m"),
    ("Ν", "N"), ("ν", "n"),
    ("Ξ", "X"), ("ξ", "x"),
    ("Ο", "O"), ("ο", "o"),
    ("Π", "P"), ("π", "p"),
    ("Ρ", "R"), ("ρ", "r"),
    ("Σ", "S"), ("σ", "s"), ("ς", "s"),
    ("Τ", "T"), ("τ", "t"),
    ("Υ", "Y"), ("υ", "y"),
    ("Φ", "F"), ("φ", "f"),
    ("Χ", "Ch"), ("χ", "ch"),
    ("Ψ", "Ps"), ("ψ", "ps"),
    ("Ω", "O"), ("ω", "o"),
]

GREEK_ACCENTED_LETTERS = [
    ("Ά", "A"), ("ά", "a"),
    ("Έ", "E"), ("έ", "e"),
    ("Ή", "I"), ("ή", "i"),
    ("Ί", "I"), ("ί", "i"),
    ("Ϊ", "I"), ("ϊ", "i"), ("ΐ", "i"),
    ("Ό", "O"), ("ό", "o"),
    ("Ύ", "Y"), ("ύ", "y"),
    ("Ϋ", "Y"), ("ϋ", "y"), ("ΰ", "y"),
    ("Ώ", "O"), ("ώ", "o"),
]

# Latin digraphs replaced before the single-letter pass (lowercase forms)
DIGRAPHS = {
    "th": "θ",
    "ch": "χ",
    "ps": "ψ",
}

# Whole-name transliterations where letter-by-letter output is wrong or
# unidiomatic.
NAME_TRANSLITERATIONS = {
    "Giannis": "Γιάννης",
    "Yiannis": "Γιάννης",
    "Ioannis": "Ιωάννης",
    "Maria": "Μαρία",
    "Nikos": "Νίκος",
    "Eleni": "Ελένη",
    "Kostas": "Κώστας",
    "Sofia": "Σοφία",
    "Michalis": "Μιχάλης",
    "Anastasia": "Αναστασία",
    "Katerina": "Κατερίνα",
    "Evangelia": "Ευαγγελία",
    "Dimitris": "Δημήτρης",
    "Alexandros": "Αλέξανδρος",
    "Georgios": "Γεώργιος",
    "Georgio": "Γεώργιος",
}

# Nominative -> (gender, [genitive, accusative, vocative])
COMMON_NAMES = {
    # Masculine names
    "Γιάννης": ("masculine", ["Γιάννη", "Γιάννη", "Γιάννε"]),
    "Ιωάννης": ("masculine", ["Ιωάννη", "Ιωάννη", "Ιωάννη"]),
    "Νίκος": ("masculine", ["Νίκου", "Νίκο", "Νίκο"]),
    "Κώστας": ("masculine", ["Κώστα", "Κώστα", "Κώστα"]),
    "Μιχάλης": ("masculine", ["Μιχάλη", "Μιχάλη", "Μιχάλη"]),
    "Δημήτρης": ("masculine", ["Δημήτρη", "Δημήτρη", "Δημήτρη"]),
    "Αλέξανδρος": ("masculine", ["Αλέξανδρου", "Αλέξανδρο", "Αλέξανδρε"]),
    "Γεώργιος": ("masculine", ["Γεώργιου", "Γεώργιο", "Γεώργιε"]),
    # Feminine names
    "Μαρία": ("feminine", ["Μαρίας", "Μαρία", "Μαρία"]),
    "Ελένη": ("feminine", ["Ελένης", "Ελένη", "Ελένη"]),
    "Σοφία": ("feminine", ["Σοφίας", "Σοφία", "Σοφία"]),
    "Αναστασία": ("feminine", ["Αναστασίας", "Αναστασία", "Αναστασία"]),
    "Κατερίνα": ("feminine", ["Κατερίνας", "Κατερίνα", "Κατερίνα"]),
    "Ευαγγελία": ("feminine", ["Ευαγγελίας", "Ευαγγελία", "Ευαγγελία"]),
}

# Truncated or already-declined spellings -> nominative. Keys are lowercase.
NAME_CORRECTIONS = {
    "γεώργιο": "Γεώργιος",
    "γεώργιου": "Γεώργιος",
    "γεώργιε": "Γεώργιος",
    "γιάννη": "Γιάννης",
    "γιάννου": "Γιάννης",
    "γιάννε": "Γιάννης",
    "ιωάννη": "Ιωάννης",
    "νίκο": "Νίκος",
    "νίκου": "Νίκος",
    "νίκε": "Νίκος",
    "κώστα": "Κώστας",
    "κώστας": "Κώστας",
    "μιχάλη": "Μιχάλης",
    "δημήτρη": "Δημήτρης",
    "αλέξανδρο": "Αλέξανδρος",
    "αλέξανδρου": "Αλέξανδρος",
    "αλέξανδρε": "Αλέξανδρος",
    "μαρί": "Μαρία",
    "μαρίας": "Μαρία",
    "ελένη": "Ελένη",
    "ελένης": "Ελένη",
    "σοφία": "Σοφία",
    "σοφίας": "Σοφία",
}


@dataclass(frozen=True)
class GenderPattern:
    """Endings that suggest a gender, in Greek and Latin script."""

    greek_endings: Tuple[str, ...]
    latin_endings: Tuple[str, ...]


@dataclass(frozen=True)
class NameEntry:
    """A dictionary name: its gender and declined forms."""

    gender: Gender
    variants: Tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.variants) != VARIANT_COUNT:
            raise ValueError(f"Expected {VARIANT_COUNT} variants, got {len(self.variants)}")

    def variant_for(self, case: Case) -> str:
        """Return the stored form for an oblique case."""
        return self.variants[VARIANT_INDEX[case]]


def _dedupe(items: Iterable[str]) -> Tuple[str, ...]:
    """Drop repeated entries while keeping the first occurrence's position."""
    return tuple(dict.fromkeys(items))


def _first_registered(pairs: Iterable[Tuple[str, str]]) -> Dict[str, str]:
    """
    Invert (greek, latin) pairs keeping the first Greek letter per Latin key.

    Only single-character Latin images are kept; multi-letter images are
    covered by the digraph layer.
    """
    reverse: Dict[str, str] = {}
    for greek, latin in pairs:
        if len(latin) == 1 and latin not in reverse:
            reverse[latin] = greek
    return reverse


@dataclass(frozen=True)
class KnowledgeTables:
    """Read-only view over all static name data."""

    gender_patterns: Mapping[Gender, GenderPattern]
    case_patterns: Mapping[Case, Mapping[Gender, Tuple[str, ...]]]
    greek_to_latin: Mapping[str, str]
    latin_to_greek: Mapping[str, str]
    digraphs: Mapping[str, str]
    name_transliterations: Mapping[str, str]
    common_names: Mapping[str, NameEntry]
    name_corrections: Mapping[str, str]

    @classmethod
    def build(cls) -> "KnowledgeTables":
        """Build the tables from the module-level data."""
        gender_patterns = {
            gender: GenderPattern(
                greek_endings=_dedupe(GENDER_ENDINGS[gender.value]["greek"]),
                latin_endings=_dedupe(GENDER_ENDINGS[gender.value]["latin"]),
            )
            for gender in GENDER_ORDER
        }
        case_patterns = {
            case: MappingProxyType(
                {gender: tuple(CASE_ENDINGS[case.value][gender.value]) for gender in GENDER_ORDER}
            )
            for case in CASE_ORDER
        }
        letters = GREEK_LETTERS + GREEK_ACCENTED_LETTERS
        common_names = {
            name: NameEntry(gender=Gender(gender), variants=tuple(variants))
            for name, (gender, variants) in COMMON_NAMES.items()
        }
        return cls(
            gender_patterns=MappingProxyType(gender_patterns),
            case_patterns=MappingProxyType(case_patterns),
            greek_to_latin=MappingProxyType(dict(letters)),
            latin_to_greek=MappingProxyType(_first_registered(letters)),
            digraphs=MappingProxyType(dict(DIGRAPHS)),
            name_transliterations=MappingProxyType(dict(NAME_TRANSLITERATIONS)),
            common_names=MappingProxyType(common_names),
            name_corrections=MappingProxyType(dict(NAME_CORRECTIONS)),
        )

    def lookup_name(self, name: str) -> Optional[NameEntry]:
        """Return the dictionary entry for a nominative name, or None."""
        return self.common_names.get(name)


@lru_cache(maxsize=1)
def default_tables() -> KnowledgeTables:
    """Return the process-wide default tables, building them on first use."""
    return KnowledgeTables.build()
