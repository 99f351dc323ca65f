"""
GMN Format Validation

Implements the format checks that precede the check character calculation:
- Length bounds for partial (6-23) and complete (8-25) GMNs
- GS1 Company Prefix start (first five characters numeric)
- Data characters drawn from CSET82
- Check characters drawn from CSET32
- GS1 Company Prefix / model reference rules for the split-argument API

Validation is fail fast: the first problem found, scanning left to right,
is the one reported.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..charsets import CSET32_VALUES, CSET82_VALUES, NUMERIC


PREFIX_DIGITS = 5
CHECK_PAIR_LENGTH = 2
PART_MIN_LENGTH = 6
PART_MAX_LENGTH = 23
GCP_MIN_LENGTH = 5
GCP_MAX_LENGTH = 12


class ErrorCode(str, Enum):
    """Format error codes."""
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    NON_DIGIT_PREFIX = "NON_DIGIT_PREFIX"
    INVALID_DATA_CHARACTER = "INVALID_DATA_CHARACTER"
    INVALID_CHECK_CHARACTER = "INVALID_CHECK_CHARACTER"
    GCP_TOO_SHORT = "GCP_TOO_SHORT"
    GCP_TOO_LONG = "GCP_TOO_LONG"
    GCP_NOT_NUMERIC = "GCP_NOT_NUMERIC"
    MODEL_REFERENCE_EMPTY = "MODEL_REFERENCE_EMPTY"
    INVALID_CHECK_LENGTH = "INVALID_CHECK_LENGTH"


class FormatError(ValueError):
    """
    Raised when a GMN (or one of its components) is malformed.

    Attributes:
        code: ErrorCode identifying the kind of problem
        message: Human-readable description
        position: 1-based position of the offending character, if any
        character: The offending character, if any
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        position: Optional[int] = None,
        character: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.position = position
        self.character = character

    def to_dict(self) -> Dict[str, Any]:
        return {
            'code': self.code.value,
            'message': self.message,
            'position': self.position,
            'character': self.character,
        }


@dataclass
class ValidationResult:
    """Result of a format validation."""
    valid: bool
    errors: List[FormatError] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def error(self) -> Optional[FormatError]:
        return self.errors[0] if self.errors else None


def length_bounds(complete: bool) -> Tuple[int, int]:
    """Return (min, max) length for a partial or complete GMN."""
    extra = CHECK_PAIR_LENGTH if complete else 0
    return PART_MIN_LENGTH + extra, PART_MAX_LENGTH + extra


def _is_check_position(index: int, length: int, complete: bool) -> bool:
    return complete and index >= length - CHECK_PAIR_LENGTH


def good_character_positions(value: str, complete: bool = False) -> List[bool]:
    """
    Flag each character of a GMN as acceptable in its position.

    Positions 0-4 must be digits, data positions must be in CSET82 and,
    for a complete GMN, the final two positions must be in CSET32.
    Length is not checked here so partial input can still be highlighted.

    Args:
        value: GMN text (partial or complete)
        complete: True if the final two characters are the check pair

    Returns:
        One bool per character
    """
    length = len(value)
    flags = []
    for i, char in enumerate(value):
        if i < PREFIX_DIGITS:
            flags.append(char in NUMERIC)
        elif _is_check_position(i, length, complete):
            flags.append(char in CSET32_VALUES)
        else:
            flags.append(char in CSET82_VALUES)
    return flags


def _pair_wording(complete: bool) -> str:
    return "including" if complete else "excluding"


def validate_format(value: str, complete: bool = False) -> ValidationResult:
    """
    Validate the format of a partial or complete GMN without raising.

    Args:
        value: GMN text
        complete: True to validate a complete GMN (with check pair)

    Returns:
        ValidationResult; errors holds at most one FormatError and
        meta['good_positions'] holds the per-position flags
    """
    result = ValidationResult(valid=True)
    min_length, max_length = length_bounds(complete)
    good = good_character_positions(value, complete)
    result.meta['good_positions'] = good

    if len(value) < min_length:
        result.errors.append(FormatError(
            ErrorCode.TOO_SHORT,
            f"The input is too short. It should be at least {min_length} characters "
            f"long {_pair_wording(complete)} the check character pair.",
        ))
    elif len(value) > max_length:
        result.errors.append(FormatError(
            ErrorCode.TOO_LONG,
            f"The input is too long. It should be {max_length} characters maximum "
            f"{_pair_wording(complete)} the check character pair.",
        ))
    elif not all(good[:PREFIX_DIGITS]):
        result.errors.append(FormatError(
            ErrorCode.NON_DIGIT_PREFIX,
            "GMN starts with the GS1 Company Prefix. "
            "At least the first five characters must be digits.",
        ))
    else:
        for i in range(PREFIX_DIGITS, len(value)):
            if good[i]:
                continue
            char = value[i]
            if _is_check_position(i, len(value), complete):
                result.errors.append(FormatError(
                    ErrorCode.INVALID_CHECK_CHARACTER,
                    f"Invalid check character at position {i + 1}: {char}",
                    position=i + 1,
                    character=char,
                ))
            else:
                result.errors.append(FormatError(
                    ErrorCode.INVALID_DATA_CHARACTER,
                    f"Invalid character at position {i + 1}: {char}",
                    position=i + 1,
                    character=char,
                ))
            break

    result.valid = not result.errors
    return result


def check_format(value: str, complete: bool = False) -> None:
    """Raise FormatError if value is not a well-formed partial/complete GMN."""
    result = validate_format(value, complete)
    if not result.valid:
        raise result.error


def check_gcp_model(gcp: str, model: str) -> None:
    """
    Validate a GS1 Company Prefix and model reference given separately.

    The concatenation is validated afterwards by check_format, which
    enforces the overall length and character set rules.
    """
    if len(gcp) < GCP_MIN_LENGTH:
        raise FormatError(
            ErrorCode.GCP_TOO_SHORT,
            f"The GS1 Company Prefix is too short. "
            f"It should be at least {GCP_MIN_LENGTH} digits long.",
        )
    if len(gcp) > GCP_MAX_LENGTH:
        raise FormatError(
            ErrorCode.GCP_TOO_LONG,
            f"The GS1 Company Prefix is too long. "
            f"It should be {GCP_MAX_LENGTH} digits maximum.",
        )
    for i, char in enumerate(gcp):
        if char not in NUMERIC:
            raise FormatError(
                ErrorCode.GCP_NOT_NUMERIC,
                "The GS1 Company Prefix must only contain digits.",
                position=i + 1,
                character=char,
            )
    if not model:
        raise FormatError(
            ErrorCode.MODEL_REFERENCE_EMPTY,
            "The model reference must contain at least one character.",
        )


def check_pair_length(checks: str) -> None:
    """Raise FormatError unless checks is exactly two characters."""
    if len(checks) != CHECK_PAIR_LENGTH:
        raise FormatError(
            ErrorCode.INVALID_CHECK_LENGTH,
            f"The check must be {CHECK_PAIR_LENGTH} characters long.",
        )
