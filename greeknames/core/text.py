"""
Core Text Processing Module.

Script detection and small string helpers shared by the processing stages.
"""

import re
import unicodedata
from typing import Any, Optional

from greeknames.core.constants import GREEK_BASIC, GREEK_EXTENDED

GREEK_PATTERN = re.compile(f"[{GREEK_BASIC}{GREEK_EXTENDED}]")


def is_greek_script(text: str) -> bool:
    """
    Return True if the text contains at least one Greek code point.

    Args:
        text: Input text

    Returns:
        True for Greek script, False for Latin (or any other) script
    """
    if not text:
        return False
    return GREEK_PATTERN.search(text) is not None


def clean_name(name: Any) -> Optional[str]:
    """
    Trim and NFC-normalize a raw name.

    Args:
        name: Raw value supplied by the caller

    Returns:
        The cleaned name, or None if the value is not a non-blank string
    """
    if not isinstance(name, str):
        return None
    trimmed = name.strip()
    if not trimmed:
        return None
    return unicodedata.normalize("NFC", trimmed)


def capitalize_first_letter(text: str) -> str:
    """Upper-case the first character and leave the rest untouched."""
    if not text:
        return text
    return text[0].upper() + text[1:]
