"""String calculator: sum delimited non-negative integers embedded in text.

WHY: Callers hand over strings like "1,2\\n3" or "//;\\n1;2" and want back a
single integer, or a clear, complete report of everything wrong with the
input. This package provides that behind one function so callers never
touch the individual pipeline stages.

HOW: compute() runs each input through four stages:
  resolve_delimiter() -> validate() -> tokenize() -> sum_tokens()
With several inputs, their sums are added in order and the first failure
stops the whole call.

RULES:
- compute() and add() are the public API for producing sums.
- None, "" and whitespace-only input sum to 0.
- Failures raise InputError; its message lists negatives first.
- No global state: every call is a pure function of its arguments.
"""

from __future__ import annotations

import logging
from typing import Optional

from .constants import CEILING, DEFAULT_DELIMITER
from .delimiters import resolve_delimiter, tokenize
from .errors import InputError, StringCalculatorError
from .models import ErrorKind, ParsedInput, ValidationError
from .summation import sum_tokens
from .validation import validate

__version__ = "0.1.0"

__all__ = [
    "add",
    "compute",
    "StringCalculator",
    "InputError",
    "StringCalculatorError",
    "ErrorKind",
    "ValidationError",
    "ParsedInput",
    "CEILING",
    "DEFAULT_DELIMITER",
]

logger = logging.getLogger(__name__)


def _compute_one(text: Optional[str], ceiling: int) -> int:
    if text is None or not text.strip():
        return 0

    parsed = resolve_delimiter(text)
    validate(parsed)
    total = sum_tokens(tokenize(parsed), ceiling=ceiling)
    logger.debug("Computed %d from %r", total, text)
    return total


def compute(*inputs: Optional[str], ceiling: int = CEILING) -> int:
    """Sum the integers in one or more input strings.

    WHY: This is the single entry point for the calculator. The CLI, the
    StringCalculator facade, and tests all call it instead of wiring the
    stages themselves.

    HOW: Each input is computed independently and the results are added.
    Inputs are processed left to right; the first InputError propagates
    immediately and nothing is returned for earlier inputs.

    RULES:
    - compute() with no inputs returns 0.
    - ceiling is inclusive; larger values are dropped without error.

    Args:
        *inputs: Input strings. None entries count as empty.
        ceiling: Upper bound on summed values (default: 1000).

    Returns:
        The combined sum.

    Raises:
        InputError: If any input is malformed or contains negatives.
    """
    total = 0
    for text in inputs:
        total += _compute_one(text, ceiling)
    return total


add = compute


class StringCalculator:
    """Object facade over compute() for callers that prefer an instance.

    Holds only the ceiling; calls share no other state.
    """

    def __init__(self, ceiling: int = CEILING) -> None:
        self.ceiling = ceiling

    def add(self, *inputs: Optional[str]) -> int:
        return compute(*inputs, ceiling=self.ceiling)

    def compute(self, *inputs: Optional[str]) -> int:
        return compute(*inputs, ceiling=self.ceiling)
