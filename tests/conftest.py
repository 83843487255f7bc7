"""Shared test fixtures for the string_calculator test suite.

WHY: Several test modules exercise the same canonical inputs — the
default form, a declared delimiter, and the aggregated-error case.
Centralizing them keeps the expected sums and messages in one place.

HOW: Plain module-level tables plus pytest fixtures that return copies.

RULES:
- Expected messages use the canonical wording from constants.py.
"""

from typing import List, Tuple

import pytest

VALID_SUMS: List[Tuple[str, int]] = [
    ("34", 34),
    ("1,2", 3),
    ("11,22,33", 66),
    ("10,20,30,40,50", 150),
    ("1\n2,3", 6),
    ("1\n2\n3", 6),
    (" 1 ,\t2 ", 3),
    ("//;\n1;3", 4),
    ("//|\n1|2|3", 6),
    ("//#\n2#2#5", 9),
    ("//sep\n2sep5", 7),
    ("//*\n1*2*3", 6),
    ("// \n1 2 3", 6),
    ("//9\n19293", 6),
    ("//,\n1,2,3", 6),
]

AGGREGATED_INPUT = "//|\n1|2,-3"
AGGREGATED_MESSAGE = (
    "Negative number(s) not allowed: -3\n"
    "'|' expected but ',' found at position 3."
)


@pytest.fixture
def valid_sums():
    """(input, expected sum) pairs that must compute without error."""
    return list(VALID_SUMS)


@pytest.fixture
def aggregated_case():
    """Input that trips both the negative and the mismatch checks."""
    return AGGREGATED_INPUT, AGGREGATED_MESSAGE
