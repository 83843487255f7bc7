"""Structural validation of a resolved payload.

WHY: A payload can be wrong in several independent ways at once: it can end
in a separator, mix the declared delimiter with a foreign character, and
contain negative numbers. Users fix input faster when they see all of the
problems in one report instead of one per attempt.

HOW: collect_errors() runs each check over the same ParsedInput and gathers
ValidationError records in detection order. Negative numbers are found with
a regex over the raw payload, independent of tokenization, and are moved to
the front. validate() raises one InputError holding everything found.

The delimiter consistency check is an explicit left-to-right scan rather
than a regex so the reported position is exact:

    cursor at delimiter       -> skip len(delimiter)
    cursor at digit, "-", \\n  -> skip 1
    anything else             -> mismatch at cursor

RULES:
- The consistency scan only runs for declared delimiters.
- Positions are zero-based indexes into the payload, not the raw input.
- Only the first mismatch is reported.
- A doubled delimiter is reported as a trailing separator.
- NegativeNumbers is always first; the rest keep detection order.
"""

from __future__ import annotations

import logging
import re
import string
from typing import List, Optional

from .constants import COMMA, DEFAULT_SEPARATORS, MINUS, NEWLINE
from .errors import InputError
from .models import ParsedInput, ValidationError

logger = logging.getLogger(__name__)

NEGATIVE_RE = re.compile(re.escape(MINUS) + "[0-9]+")


def find_delimiter_mismatch(payload: str, delimiter: str) -> Optional[ValidationError]:
    """Scan payload left to right for the first character that does not belong.

    Args:
        payload: The numeric portion of the input.
        delimiter: The declared custom delimiter.

    Returns:
        A DelimiterMismatch error for the first offending character, or None
        if every character is a digit, a minus sign, a newline, or part of a
        delimiter occurrence.
    """
    i = 0
    while i < len(payload):
        if payload.startswith(delimiter, i):
            i += len(delimiter)
            continue

        ch = payload[i]
        if ch in string.digits or ch == MINUS or ch == NEWLINE:
            i += 1
            continue

        return ValidationError.delimiter_mismatch(delimiter, ch, i)
    return None


def find_negatives(payload: str) -> List[int]:
    """Every "-<digits>" run in the payload, left to right."""
    return [int(m.group()) for m in NEGATIVE_RE.finditer(payload)]


def _check_trailing_separator(parsed: ParsedInput, errors: List[ValidationError]) -> None:
    if parsed.is_default:
        separators = DEFAULT_SEPARATORS
    else:
        separators = (parsed.delimiter, NEWLINE)
    if parsed.payload.endswith(separators):
        errors.append(ValidationError.trailing_separator())


def _check_mixed_separators(parsed: ParsedInput, errors: List[ValidationError]) -> None:
    if parsed.is_default and COMMA + NEWLINE in parsed.payload:
        errors.append(ValidationError.trailing_separator())


def _check_delimiter_consistency(parsed: ParsedInput, errors: List[ValidationError]) -> None:
    if parsed.is_default:
        return

    if parsed.delimiter * 2 in parsed.payload:
        errors.append(ValidationError.trailing_separator())

    mismatch = find_delimiter_mismatch(parsed.payload, parsed.delimiter)
    if mismatch is not None:
        errors.append(mismatch)


def collect_errors(parsed: ParsedInput) -> List[ValidationError]:
    """Run every structural check and return the ordered list of problems."""
    errors = []  # type: List[ValidationError]

    _check_trailing_separator(parsed, errors)
    _check_mixed_separators(parsed, errors)
    _check_delimiter_consistency(parsed, errors)

    negatives = find_negatives(parsed.payload)
    if negatives:
        errors.insert(0, ValidationError.negative_numbers(negatives))

    return errors


def validate(parsed: ParsedInput) -> None:
    """Raise InputError if the payload has any structural problem.

    Raises:
        InputError: Carrying every problem collect_errors() found.
    """
    errors = collect_errors(parsed)
    if errors:
        logger.debug("Validation found %d problem(s) in %r", len(errors), parsed.payload)
        raise InputError(errors)
