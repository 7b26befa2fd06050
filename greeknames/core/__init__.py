"""
Core Package.

This package provides the data model, knowledge tables and text helpers
for the greeknames package.
"""

from greeknames.core.models import (
    CASE_ORDER,
    GENDER_ORDER,
    Case,
    CorrectionError,
    CorrectionOptions,
    CorrectionResult,
    Gender,
    parse_case,
    parse_gender,
)
from greeknames.core.tables import GenderPattern, KnowledgeTables, NameEntry, default_tables
from greeknames.core.text import capitalize_first_letter, clean_name, is_greek_script

__all__ = [
    # Models
    "Gender",
    "Case",
    "GENDER_ORDER",
    "CASE_ORDER",
    "CorrectionOptions",
    "CorrectionResult",
    "CorrectionError",
    "parse_gender",
    "parse_case",
    # Tables
    "KnowledgeTables",
    "GenderPattern",
    "NameEntry",
    "default_tables",
    # Text processing
    "is_greek_script",
    "clean_name",
    "capitalize_first_letter",
]
