"""
Core domain models for the name correction engine.

Defines the gender and case tags, the per-call options and the immutable
result values returned by the corrector.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from greeknames.core.constants import ERROR_INVALID_CASE, ERROR_INVALID_GENDER


class Gender(str, Enum):
    """Grammatical gender inferred for a name."""

    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"
    UNKNOWN = "unknown"


class Case(str, Enum):
    """Grammatical case of a name.

    Greek personal names decline across four cases; UNKNOWN is reported
    when no gender could be inferred.
    """

    NOMINATIVE = "nominative"
    GENITIVE = "genitive"
    ACCUSATIVE = "accusative"
    VOCATIVE = "vocative"
    UNKNOWN = "unknown"


# Rule evaluation order. The first matching entry wins, so reordering
# changes the outcome for endings shared between genders or cases.
GENDER_ORDER = (Gender.MASCULINE, Gender.FEMININE, Gender.NEUTER)
CASE_ORDER = (Case.NOMINATIVE, Case.GENITIVE, Case.ACCUSATIVE, Case.VOCATIVE)

# Position of each oblique case in a dictionary entry's variants
VARIANT_INDEX = {
    Case.GENITIVE: 0,
    Case.ACCUSATIVE: 1,
    Case.VOCATIVE: 2,
}


def parse_gender(value: Any) -> Gender:
    """Coerce a tag or `Gender` into a `Gender`, raising ValueError otherwise."""
    try:
        return Gender(value)
    except ValueError:
        raise ValueError(f"{ERROR_INVALID_GENDER} Got: {value!r}") from None


def parse_case(value: Any) -> Case:
    """Coerce a tag or `Case` into a `Case`, raising ValueError otherwise."""
    try:
        return Case(value)
    except ValueError:
        raise ValueError(f"{ERROR_INVALID_CASE} Got: {value!r}") from None


class CorrectionOptions(BaseModel):
    """Options for a single correction call.

    Accepts both the snake_case field names and the camelCase names used
    in JSON request bodies (``targetCase``, ``fixCommonErrors``).
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    target_case: Optional[Case] = Field(default=None, alias="targetCase")
    fix_common_errors: bool = Field(default=False, alias="fixCommonErrors")

    @field_validator("target_case", mode="before")
    @classmethod
    def _blank_case_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("target_case")
    @classmethod
    def _reject_unknown_case(cls, value: Optional[Case]) -> Optional[Case]:
        if value == Case.UNKNOWN:
            raise ValueError(ERROR_INVALID_CASE)
        return value


class CorrectionResult(BaseModel):
    """Outcome of correcting one name.

    `corrected` is the Greek form when the input was Greek script and the
    Latin transliteration otherwise.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, use_enum_values=True)

    original: str
    corrected: str
    greek_script: str = Field(alias="greekScript")
    latin_transliteration: str = Field(alias="latinTransliteration")
    gender: Gender
    current_case: Case = Field(alias="currentCase")
    is_greek_script: bool = Field(alias="isGreekScript")
    confidence: float = Field(ge=0.0, le=1.0)


class CorrectionError(BaseModel):
    """Returned in place of a result when the input is not a usable name."""

    model_config = ConfigDict(frozen=True)

    error: str
