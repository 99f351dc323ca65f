"""
Core check character modules for healthcare GMNs.
"""

from .checksum import compute_check_characters, encode_check_pair, weighted_sum, MODULUS
from .gmn import (
    check_characters,
    add_check_characters,
    verify_check_characters,
    check_characters_gcp_model,
    add_check_characters_gcp_model,
    verify_check_characters_gcp_model,
)

__all__ = [
    "compute_check_characters",
    "encode_check_pair",
    "weighted_sum",
    "MODULUS",
    "check_characters",
    "add_check_characters",
    "verify_check_characters",
    "check_characters_gcp_model",
    "add_check_characters_gcp_model",
    "verify_check_characters_gcp_model",
]
