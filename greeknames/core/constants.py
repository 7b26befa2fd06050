"""
Core Constants Module.

This module defines constants used across the name correction engine.
"""

# Unicode ranges treated as Greek script
GREEK_BASIC = "\u0370-\u03ff"  # Greek and Coptic
GREEK_EXTENDED = "\u1f00-\u1fff"  # Extended Greek (polytonic)

# Confidence scoring
BASE_CONFIDENCE = 0.5
DICTIONARY_BONUS = 0.3
GENDER_BONUS = 0.2
MAX_CONFIDENCE = 1.0

# Number of declined forms stored per dictionary name (genitive, accusative, vocative)
VARIANT_COUNT = 3

# Error messages
ERROR_INVALID_NAME = "Invalid name provided"
ERROR_INVALID_CASE = "Invalid case specified. Supported cases are nominative, genitive, accusative and vocative."
ERROR_INVALID_GENDER = "Invalid gender specified. Supported genders are masculine, feminine, neuter and unknown."
