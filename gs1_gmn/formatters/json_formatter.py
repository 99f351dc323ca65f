"""
Output formatting for GMN check character results.

Provides:
- JSON output for single and batch outcomes
- A marker line highlighting characters that are bad in their position
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable

from ..batch import LineOutcome, summarize
from ..validators.validators import good_character_positions


BAD_MARKER = "^"


def outcome_to_dict(outcome: LineOutcome) -> Dict[str, Any]:
    """Convert an outcome to a plain dictionary (line number omitted for single input)."""
    data = outcome.to_dict()
    if not outcome.line_number:
        data.pop('line')
    return data


def format_outcome_json(outcome: LineOutcome) -> str:
    """Format a single outcome as JSON."""
    return json.dumps(outcome_to_dict(outcome), ensure_ascii=False, indent=2)


def format_batch_json(outcomes: Iterable[LineOutcome]) -> str:
    """
    Format batch outcomes as JSON.

    Output:
        {"summary": {"total": .., "ok": .., "failed": ..}, "results": [...]}
    """
    outcomes = list(outcomes)
    output = {
        'summary': summarize(outcomes),
        'results': [outcome_to_dict(o) for o in outcomes],
    }
    return json.dumps(output, ensure_ascii=False, indent=2)


def mark_bad_positions(value: str, complete: bool = False) -> str:
    """
    Build a marker line with '^' under each bad character.

    Example:
        >>> mark_bad_positions("1987X54Ad4", complete=False)
        '    ^'
    """
    flags = good_character_positions(value, complete)
    return "".join(" " if good else BAD_MARKER for good in flags).rstrip()
