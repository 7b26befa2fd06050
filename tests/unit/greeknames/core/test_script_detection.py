"""
Tests for the core text module.

This module tests script detection and the name string helpers.
"""

import pytest

from greeknames.core.text import capitalize_first_letter, clean_name, is_greek_script


def test_is_greek_script_monotonic():
    """Test detecting modern Greek names."""
    assert is_greek_script("Γιάννης")
    assert is_greek_script("ΜΑΡΙΑ")


def test_is_greek_script_polytonic():
    """Test detecting Greek Extended characters."""
    assert is_greek_script("ἄνθρωπος")


def test_is_greek_script_latin():
    """Test Latin transliterations are not Greek."""
    assert not is_greek_script("Giannis")
    assert not is_greek_script("O'Brien-2")


def test_is_greek_script_mixed():
    """A single Greek letter is enough."""
    assert is_greek_script("Kostaς")


def test_is_greek_script_empty():
    """Test empty text."""
    assert not is_greek_script("")


@pytest.mark.parametrize("value", [None, 123, {}, [], "", "   ", "\t\n"])
def test_clean_name_rejects_non_names(value):
    """Non-strings and blank strings are rejected."""
    assert clean_name(value) is None


def test_clean_name_trims_whitespace():
    """Test surrounding whitespace is removed."""
    assert clean_name("  Νίκος \n") == "Νίκος"


def test_clean_name_composes_accents():
    """Decomposed accents are recomposed (NFC)."""
    decomposed = "Για\u0301ννης"
    assert clean_name(decomposed) == "Γιάννης"


def test_capitalize_first_letter():
    """Test only the first character changes."""
    assert capitalize_first_letter("γιάννη") == "Γιάννη"
    assert capitalize_first_letter("giANNIS") == "GiANNIS"
    assert capitalize_first_letter("") == ""
