"""
GS1 character sets used by the healthcare GMN check character pair.

- CSET82: characters encodable in the data portion; position is the value
- CSET32: subset of CSET82 used for the two check characters
- WEIGHTS: descending primes applied to the data characters

Based on GS1 General Specifications (GMN check character pair).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional


# Place in the string is the character value (0-81)
CSET82 = (
    '!"%&\'()*+,-./0123456789:;<=>?'
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ_'
    'abcdefghijklmnopqrstuvwxyz'
)

CSET32 = '23456789ABCDEFGHJKLMNPQRSTUVWXYZ'

NUMERIC = frozenset('0123456789')

WEIGHTS = (
    83, 79, 73, 71, 67, 61, 59, 53, 47, 43, 41, 37,
    31, 29, 23, 19, 17, 13, 11, 7, 5, 3, 2,
)


def _value_map(charset: str) -> Mapping[str, int]:
    return MappingProxyType({char: value for value, char in enumerate(charset)})


CSET82_VALUES = _value_map(CSET82)
CSET32_VALUES = _value_map(CSET32)


def value_in_82(char: str) -> Optional[int]:
    """Return the CSET82 value of a character, or None if not encodable."""
    return CSET82_VALUES.get(char)


def value_in_32(char: str) -> Optional[int]:
    """Return the CSET32 index of a character, or None if not a check character."""
    return CSET32_VALUES.get(char)
