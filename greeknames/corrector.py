"""
Greek name correction: the public entry point.

`GreekNameCorrector` runs the processing stages in order: spelling repair,
script detection, transliteration, gender and case classification,
optional declension and error fixing, then confidence scoring. The
knowledge tables are built once and only read afterwards, so one
corrector can be shared between threads.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Iterable, List, Mapping, Optional, Union

from greeknames.core.constants import ERROR_INVALID_NAME
from greeknames.core.models import CorrectionError, CorrectionOptions, CorrectionResult, Gender
from greeknames.core.tables import KnowledgeTables, default_tables
from greeknames.core.text import capitalize_first_letter, clean_name, is_greek_script
from greeknames.processing.classify import CaseIdentifier, GenderClassifier
from greeknames.processing.correct import ConfidenceScorer, ErrorCorrector, NameNormalizer
from greeknames.processing.decline import DeclensionTransformer
from greeknames.processing.transliterate import Transliterator

logger = logging.getLogger(__name__)

Outcome = Union[CorrectionResult, CorrectionError]
OptionsLike = Union[CorrectionOptions, Mapping[str, Any], None]


def coerce_options(options: OptionsLike) -> CorrectionOptions:
    """Accept options as a model, a plain mapping (either key style) or None."""
    if options is None:
        return CorrectionOptions()
    if isinstance(options, CorrectionOptions):
        return options
    if isinstance(options, Mapping):
        return CorrectionOptions.model_validate(dict(options))
    raise TypeError(f"Unsupported options type: {type(options).__name__}")


class GreekNameCorrector:
    """Corrects, classifies and transliterates Greek personal names."""

    def __init__(self, tables: Optional[KnowledgeTables] = None) -> None:
        self.tables = tables or default_tables()
        self.normalizer = NameNormalizer(self.tables)
        self.transliterator = Transliterator(self.tables)
        self.gender_classifier = GenderClassifier(self.tables)
        self.case_identifier = CaseIdentifier(self.tables)
        self.declension = DeclensionTransformer(self.tables)
        self.error_corrector = ErrorCorrector()
        self.scorer = ConfidenceScorer(self.tables)

    def correct_name(self, name: Any, options: OptionsLike = None) -> Outcome:
        """
        Correct a single name.

        :param name: Raw name in Greek script or Latin transliteration
        :param options: `CorrectionOptions` or a mapping with `targetCase`
            and `fixCommonErrors` (snake_case keys also accepted)
        :return: A `CorrectionResult`, or a `CorrectionError` when `name`
            is not a non-blank string
        """
        cleaned = clean_name(name)
        if cleaned is None:
            logger.debug("Rejected invalid name: %r", name)
            return CorrectionError(error=ERROR_INVALID_NAME)

        options = coerce_options(options)

        working = self.normalizer.normalize(cleaned)
        greek_input = is_greek_script(working)
        greek = working if greek_input else self.transliterator.to_greek(working)

        gender = self.gender_classifier.detect_gender(greek)
        current_case = self.case_identifier.identify_case(greek, gender)
        logger.debug("Analyzed %r: gender=%s case=%s", greek, gender.value, current_case.value)

        final = greek
        target_case = options.target_case
        if target_case is not None and target_case != current_case and gender != Gender.UNKNOWN:
            final = self.declension.transform_to_case(greek, gender, current_case, target_case)

        if options.fix_common_errors:
            final = self.error_corrector.fix_common_errors(final, gender)

        greek_form = capitalize_first_letter(final)
        latin_form = capitalize_first_letter(self.transliterator.to_latin(final))

        return CorrectionResult(
            original=name,
            corrected=greek_form if greek_input else latin_form,
            greek_script=greek_form,
            latin_transliteration=latin_form,
            gender=gender,
            current_case=current_case,
            is_greek_script=greek_input,
            confidence=self.scorer.calculate_confidence(greek, gender),
        )

    def correct_names(self, names: Iterable[Any], options: OptionsLike = None) -> List[Outcome]:
        """Correct each name in order; invalid entries yield a `CorrectionError`."""
        options = coerce_options(options)
        return [self.correct_name(name, options) for name in names]


@lru_cache(maxsize=1)
def get_default_corrector() -> GreekNameCorrector:
    """Return the shared corrector built over the default tables."""
    return GreekNameCorrector()


def correct_name(name: Any, options: OptionsLike = None) -> Outcome:
    """Correct a single name with the shared corrector."""
    return get_default_corrector().correct_name(name, options)


def correct_names(names: Iterable[Any], options: OptionsLike = None) -> List[Outcome]:
    """Correct several names with the shared corrector."""
    return get_default_corrector().correct_names(names, options)
