"""
Validation modules for GS1 healthcare GMNs.
"""

from .validators import (
    good_character_positions,
    validate_format,
    check_format,
    check_gcp_model,
    check_pair_length,
    length_bounds,
    ErrorCode,
    FormatError,
    ValidationResult,
)

__all__ = [
    "good_character_positions",
    "validate_format",
    "check_format",
    "check_gcp_model",
    "check_pair_length",
    "length_bounds",
    "ErrorCode",
    "FormatError",
    "ValidationResult",
]
