"""
greeknames: correction, classification and transliteration of Greek personal names.

Given a raw name in Greek script or Latin transliteration, the package
detects the script, transliterates between the two, infers gender and
grammatical case from the name's ending, optionally declines it into a
requested case and reports a confidence score.
"""

from greeknames.core.models import Case, CorrectionError, CorrectionOptions, CorrectionResult, Gender
from greeknames.corrector import GreekNameCorrector, correct_name, correct_names

__version__ = "0.1.0"

__all__ = [
    "GreekNameCorrector",
    "correct_name",
    "correct_names",
    "CorrectionOptions",
    "CorrectionResult",
    "CorrectionError",
    "Gender",
    "Case",
]
