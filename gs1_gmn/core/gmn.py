"""
Public API for healthcare GMN check characters.

A healthcare GMN is a GS1 Global Model Number used for regulated medical
devices under EU MDR 2017/745 and EU IVDR 2017/746. It consists of a
partial GMN (GS1 Company Prefix followed by a model reference, 6-23
characters) and a trailing pair of check characters.

Two entry styles are offered:
- Single string: check_characters, add_check_characters,
  verify_check_characters
- Split arguments: the *_gcp_model variants take the GS1 Company Prefix,
  model reference and (for verification) the check pair separately

Both raise FormatError for malformed input. Verification returns False,
not an error, when the input is well formed but the pair does not match.
"""

from __future__ import annotations

from .checksum import compute_check_characters
from ..validators.validators import (
    CHECK_PAIR_LENGTH,
    check_format,
    check_gcp_model,
    check_pair_length,
)


def check_characters(part: str) -> str:
    """
    Calculate the check character pair for a partial GMN.

    Example:
        >>> check_characters("1987654Ad4X4bL5ttr2310c")
        '2K'
    """
    return compute_check_characters(part)


def add_check_characters(part: str) -> str:
    """
    Complete a partial GMN by appending its check character pair.

    Example:
        >>> add_check_characters("1987654Ad4X4bL5ttr2310c")
        '1987654Ad4X4bL5ttr2310c2K'
    """
    return part + check_characters(part)


def verify_check_characters(gmn: str) -> bool:
    """
    Verify that a complete GMN carries the correct check character pair.

    Args:
        gmn: Complete GMN including the check pair

    Returns:
        True if the supplied pair matches the calculated one

    Raises:
        FormatError: If the GMN is malformed
    """
    check_format(gmn, complete=True)

    part = gmn[:-CHECK_PAIR_LENGTH]
    supplied_checks = gmn[-CHECK_PAIR_LENGTH:]
    return check_characters(part) == supplied_checks


def check_characters_gcp_model(gcp: str, model: str) -> str:
    """Check character pair for a GS1 Company Prefix and model reference."""
    check_gcp_model(gcp, model)
    return check_characters(gcp + model)


def add_check_characters_gcp_model(gcp: str, model: str) -> str:
    """Complete GMN built from a GS1 Company Prefix and model reference."""
    check_gcp_model(gcp, model)
    return add_check_characters(gcp + model)


def verify_check_characters_gcp_model(gcp: str, model: str, checks: str) -> bool:
    """
    Verify a check pair supplied separately from its GS1 Company Prefix
    and model reference.

    The prefix must be 5-12 digits, the model reference non-empty and the
    check pair exactly two characters; the concatenation must then satisfy
    the same rules as verify_check_characters.
    """
    check_gcp_model(gcp, model)
    check_pair_length(checks)
    return verify_check_characters(gcp + model + checks)
