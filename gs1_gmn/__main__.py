"""
CLI interface for healthcare GMN check characters.

Usage:
    python -m gs1_gmn check "<partial GMN>"
    python -m gs1_gmn complete "<partial GMN>"
    python -m gs1_gmn verify "<complete GMN>"
    python -m gs1_gmn verify --file gmns.txt

Options:
    --file PATH     Process each line of a file instead of a single GMN
    --json          Output as JSON
    --verbose       Enable debug logging

Exit code is 0 on success, 1 if any input is invalid or malformed.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .batch import BatchMode, BatchOptions, LineOutcome, process_file, process_line, summarize
from .formatters.json_formatter import format_batch_json, format_outcome_json, mark_bad_positions

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "GS1_GMN_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING


def resolve_log_level(verbose: bool = False) -> int:
    """
    Log level from --verbose or the GS1_GMN_LOG_LEVEL environment variable.

    Unknown level names fall back to WARNING.
    """
    if verbose:
        return logging.DEBUG
    name = os.getenv(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging from --verbose or GS1_GMN_LOG_LEVEL."""
    level = resolve_log_level(verbose)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def format_single(outcome: LineOutcome, mode: BatchMode) -> str:
    """Format a single-input outcome for display."""
    if outcome.error is not None:
        lines = [f"Error: {outcome.error.message}"]
        if outcome.error.position is not None:
            lines.append(f"  {outcome.value}")
            lines.append(f"  {mark_bad_positions(outcome.value, mode == BatchMode.VERIFY)}")
        return '\n'.join(lines)

    if mode == BatchMode.VERIFY:
        return "The check characters are " + ("valid" if outcome.valid else "NOT valid")
    return outcome.output or ""


def format_batch(outcomes: List[LineOutcome]) -> str:
    """Format batch outcomes for display, one line per input line."""
    lines = [outcome.display() for outcome in outcomes]
    summary = summarize(outcomes)
    lines.append("-" * 40)
    lines.append(f"Total: {summary['total']}  OK: {summary['ok']}  Failed: {summary['failed']}")
    return '\n'.join(lines)


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='gs1_gmn',
        description='Calculate and verify check characters of healthcare GMNs'
    )

    parser.add_argument(
        'command',
        choices=[mode.value for mode in BatchMode],
        help='check: print check pair, complete: append check pair, verify: verify check pair'
    )

    parser.add_argument(
        'gmn',
        nargs='?',
        help='Partial GMN (check/complete) or complete GMN (verify)'
    )

    parser.add_argument(
        '--file',
        default=None,
        help='Process each line of this file instead of a single GMN'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output result as JSON'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    if (args.gmn is None) == (args.file is None):
        parser.error("supply either a GMN or --file, but not both")

    configure_logging(args.verbose)
    mode = BatchMode(args.command)

    if args.file:
        try:
            outcomes = process_file(args.file, BatchOptions(mode=mode))
        except OSError as e:
            logger.error("Cannot read %s: %s", args.file, e)
            print(f"Error: cannot read {args.file}: {e.strerror or e}", file=sys.stderr)
            return 1

        if args.json:
            print(format_batch_json(outcomes))
        else:
            print(format_batch(outcomes))
        return 0 if all(o.ok for o in outcomes) else 1

    outcome = process_line(args.gmn, mode)
    if args.json:
        print(format_outcome_json(outcome))
    else:
        print(format_single(outcome, mode))
    return 0 if outcome.ok else 1


if __name__ == '__main__':
    sys.exit(main())
