"""
Line-by-line batch processing of GMNs.

Each line is checked, completed or verified independently. A malformed
line does not abort the batch: its error message replaces the output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from .core.gmn import add_check_characters, check_characters, verify_check_characters
from .validators.validators import FormatError

logger = logging.getLogger(__name__)


VALID_TEXT = "Valid"
NOT_VALID_TEXT = "Not valid"


class BatchMode(str, Enum):
    """Operation applied to each line."""
    CHECK = "check"
    COMPLETE = "complete"
    VERIFY = "verify"


@dataclass
class BatchOptions:
    """
    Configuration options for batch processing.

    Attributes:
        mode: Operation applied to each line
        strip_whitespace: Strip leading/trailing whitespace from lines
        skip_blank_lines: Ignore lines that are empty after stripping
        encoding: Text encoding of input files
        encoding_errors: Decoding error handler; "replace" turns undecodable
            bytes into U+FFFD so only the affected line is rejected
    """
    mode: BatchMode = BatchMode.VERIFY
    strip_whitespace: bool = True
    skip_blank_lines: bool = True
    encoding: str = "utf-8"
    encoding_errors: str = "replace"


@dataclass
class LineOutcome:
    """Outcome of processing one line."""
    line_number: int
    value: str
    output: Optional[str] = None
    valid: Optional[bool] = None
    error: Optional[FormatError] = None

    @property
    def ok(self) -> bool:
        """True if the line was well formed and, when verifying, valid."""
        return self.error is None and self.valid is not False

    def display(self) -> str:
        text = self.error.message if self.error is not None else self.output
        return f"{self.value} : {text}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'line': self.line_number,
            'input': self.value,
            'output': self.output,
            'valid': self.valid,
            'error': self.error.to_dict() if self.error is not None else None,
        }


def process_line(value: str, mode: BatchMode, line_number: int = 0) -> LineOutcome:
    """Apply one operation to a single GMN, capturing format errors."""
    outcome = LineOutcome(line_number=line_number, value=value)
    try:
        if mode == BatchMode.CHECK:
            outcome.output = check_characters(value)
        elif mode == BatchMode.COMPLETE:
            outcome.output = add_check_characters(value)
        else:
            outcome.valid = verify_check_characters(value)
            outcome.output = VALID_TEXT if outcome.valid else NOT_VALID_TEXT
    except FormatError as e:
        logger.debug("Line %d rejected (%s): %s", line_number, e.code.value, e.message)
        outcome.error = e
    return outcome


def process_lines(
    lines: Iterable[str],
    options: Optional[BatchOptions] = None
) -> Iterator[LineOutcome]:
    """
    Process an iterable of lines.

    Line numbers are 1-based and count skipped blank lines, so they
    match the position in the source.
    """
    if options is None:
        options = BatchOptions()

    for line_number, line in enumerate(lines, 1):
        value = line.rstrip("\r\n")
        if options.strip_whitespace:
            value = value.strip()
        if options.skip_blank_lines and not value:
            continue
        yield process_line(value, options.mode, line_number)


def process_file(
    path: Union[str, Path],
    options: Optional[BatchOptions] = None
) -> List[LineOutcome]:
    """
    Process every line of a text file.

    Raises:
        OSError: If the file cannot be read
    """
    if options is None:
        options = BatchOptions()

    path = Path(path)
    with path.open(encoding=options.encoding, errors=options.encoding_errors) as handle:
        outcomes = list(process_lines(handle, options))

    summary = summarize(outcomes)
    logger.info(
        "Processed %s (%s): %d lines, %d ok, %d failed",
        path, options.mode.value, summary['total'], summary['ok'], summary['failed'],
    )
    return outcomes


def summarize(outcomes: Iterable[LineOutcome]) -> Dict[str, int]:
    """Count total, ok and failed outcomes."""
    total = ok = 0
    for outcome in outcomes:
        total += 1
        if outcome.ok:
            ok += 1
    return {'total': total, 'ok': ok, 'failed': total - ok}
