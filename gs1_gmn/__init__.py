"""
GS1 Healthcare GMN Check Characters

Calculates and verifies the check character pair of a GS1 Global Model
Number (GMN) used to identify regulated healthcare medical devices
(EU MDR 2017/745 and EU IVDR 2017/746).

Based on the GS1 General Specifications.
"""

from .core.gmn import (
    check_characters,
    add_check_characters,
    verify_check_characters,
    check_characters_gcp_model,
    add_check_characters_gcp_model,
    verify_check_characters_gcp_model,
)
from .validators.validators import (
    good_character_positions,
    validate_format,
    ErrorCode,
    FormatError,
    ValidationResult,
)
from .batch import (
    process_file,
    process_lines,
    BatchMode,
    BatchOptions,
    LineOutcome,
)

__version__ = "1.0.0"
__all__ = [
    "check_characters",
    "add_check_characters",
    "verify_check_characters",
    "check_characters_gcp_model",
    "add_check_characters_gcp_model",
    "verify_check_characters_gcp_model",
    "good_character_positions",
    "validate_format",
    "ErrorCode",
    "FormatError",
    "ValidationResult",
    "process_file",
    "process_lines",
    "BatchMode",
    "BatchOptions",
    "LineOutcome",
]
