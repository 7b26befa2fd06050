"""
Tests for spelling repair, the error post-pass and confidence scoring.
"""

import random

import pytest

from greeknames.core.models import Gender
from greeknames.processing.correct import ConfidenceScorer, ErrorCorrector, NameNormalizer


class TestNameNormalizer:
    @pytest.fixture
    def normalizer(self, tables):
        return NameNormalizer(tables)

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("γιάννη", "Γιάννης"),
            ("Γιάννη", "Γιάννης"),
            ("ΓΙΆΝΝΗ", "Γιάννης"),
            ("Γεώργιου", "Γεώργιος"),
            ("μαρί", "Μαρία"),
            ("Νίκε", "Νίκος"),
        ],
    )
    def test_known_misspellings(self, normalizer, raw, expected):
        assert normalizer.normalize(raw) == expected

    def test_unknown_name_unchanged(self, normalizer):
        assert normalizer.normalize("Πέτρος") == "Πέτρος"
        assert normalizer.normalize("giannis") == "giannis"


class TestErrorCorrector:
    def test_feminine_final_iota(self):
        assert ErrorCorrector().fix_common_errors("Ελένι", Gender.FEMININE) == "Ελένη"

    def test_only_final_letter(self):
        assert ErrorCorrector().fix_common_errors("Ιφιγένεια", "feminine") == "Ιφιγένεια"

    @pytest.mark.parametrize("gender", [Gender.MASCULINE, Gender.NEUTER, Gender.UNKNOWN])
    def test_other_genders_untouched(self, gender):
        assert ErrorCorrector().fix_common_errors("Γιωργάκι", gender) == "Γιωργάκι"


class TestConfidenceScorer:
    @pytest.fixture
    def scorer(self, tables):
        return ConfidenceScorer(tables)

    def test_dictionary_name_with_gender(self, scorer):
        assert scorer.calculate_confidence("Γιάννης", Gender.MASCULINE) == pytest.approx(1.0)

    def test_gender_only(self, scorer):
        assert scorer.calculate_confidence("Πέτρος", Gender.MASCULINE) == pytest.approx(0.7)

    def test_dictionary_only(self, scorer):
        assert scorer.calculate_confidence("Μαρία", Gender.UNKNOWN) == pytest.approx(0.8)

    def test_base(self, scorer):
        assert scorer.calculate_confidence("Xyz", "unknown") == pytest.approx(0.5)

    def test_bounded(self, scorer):
        rng = random.Random(7)
        names = ["Γιάννης", "Πέτρος", "Μαρία", "Xyz", ""]
        for _ in range(200):
            gender = rng.choice(list(Gender))
            score = scorer.calculate_confidence(rng.choice(names), gender)
            assert 0.0 <= score <= 1.0
