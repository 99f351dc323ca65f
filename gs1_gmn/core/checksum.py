"""
GMN check character pair calculation.

Algorithm (GS1 General Specifications, healthcare GMN):
1. Right-align the part against the 23 descending prime weights, so the
   last character is always multiplied by 2
2. Sum the products of the CSET82 character values and their weights
3. Reduce the sum modulo 1021
4. Split the 10-bit residue into two 5-bit halves and map each to CSET32
"""

from __future__ import annotations

from ..charsets import CSET32, CSET82_VALUES, WEIGHTS
from ..validators.validators import check_format


MODULUS = 1021


def weighted_sum(part: str) -> int:
    """
    Sum of CSET82 values times right-aligned weights.

    The part must already have passed format validation.
    """
    offset = len(WEIGHTS) - len(part)
    return sum(
        CSET82_VALUES[char] * WEIGHTS[offset + i]
        for i, char in enumerate(part)
    )


def encode_check_pair(residue: int) -> str:
    """Map a residue in [0, 1020] to its two CSET32 check characters."""
    if not 0 <= residue < MODULUS:
        raise ValueError(f"Residue out of range: {residue}")
    return CSET32[residue >> 5] + CSET32[residue & 31]


def compute_check_characters(part: str) -> str:
    """
    Calculate the check character pair for a partial GMN.

    Args:
        part: Partial GMN (GS1 Company Prefix + model reference)

    Returns:
        Two CSET32 check characters

    Raises:
        FormatError: If the part is malformed
    """
    check_format(part, complete=False)
    return encode_check_pair(weighted_sum(part) % MODULUS)
