"""Token parsing and ceiling-filtered summation."""

from __future__ import annotations

import logging
import re
from typing import Iterable, List

from .constants import CEILING
from .errors import InputError
from .models import ErrorKind, ValidationError

logger = logging.getLogger(__name__)

INTEGER_RE = re.compile(r"-?[0-9]+")


def parse_tokens(tokens: Iterable[str]) -> List[int]:
    """Trim and parse tokens into integers.

    Args:
        tokens: Raw tokens from tokenize().

    Returns:
        One int per token, in order.

    Raises:
        InputError: TrailingSeparator for a blank token, InvalidNumber for
            anything that is not an optionally signed run of ASCII digits,
            NegativeNumbers listing every negative value.
    """
    numbers = []  # type: List[int]
    for token in tokens:
        trimmed = token.strip()
        if not trimmed:
            raise InputError([ValidationError.trailing_separator()])
        if not INTEGER_RE.fullmatch(trimmed):
            raise InputError.single(ErrorKind.INVALID_NUMBER, token=trimmed)
        numbers.append(int(trimmed))

    # Normally already rejected by validate().
    negatives = [n for n in numbers if n < 0]
    if negatives:
        raise InputError([ValidationError.negative_numbers(negatives)])

    return numbers


def sum_tokens(tokens: Iterable[str], ceiling: int = CEILING) -> int:
    """Sum the tokens, dropping any value above the ceiling.

    Values equal to the ceiling are kept. Returns 0 for no tokens.
    """
    numbers = parse_tokens(tokens)
    kept = [n for n in numbers if n <= ceiling]
    if len(kept) != len(numbers):
        logger.debug("Ignored %d value(s) above %d", len(numbers) - len(kept), ceiling)
    return sum(kept)
