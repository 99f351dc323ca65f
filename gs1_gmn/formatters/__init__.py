"""
Output formatters for GMN check character results.
"""

from .json_formatter import (
    outcome_to_dict,
    format_outcome_json,
    format_batch_json,
    mark_bad_positions,
)

__all__ = [
    "outcome_to_dict",
    "format_outcome_json",
    "format_batch_json",
    "mark_bad_positions",
]
