"""
Processing Package.

The stages of the name correction pipeline: transliteration, gender and
case classification, declension and spelling repair.
"""

from greeknames.processing.classify import CaseIdentifier, GenderClassifier
from greeknames.processing.correct import ConfidenceScorer, ErrorCorrector, NameNormalizer
from greeknames.processing.decline import DeclensionTransformer
from greeknames.processing.transliterate import Transliterator

__all__ = [
    "Transliterator",
    "GenderClassifier",
    "CaseIdentifier",
    "DeclensionTransformer",
    "NameNormalizer",
    "ErrorCorrector",
    "ConfidenceScorer",
]
