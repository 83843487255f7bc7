"""Delimiter grammar constants, the summation ceiling, and canonical messages.

WHY: The resolver, tokenizer, validator, and summation stages all need to
agree on what the declaration prefix is, which separators the default mode
accepts, and how errors are worded. Defining these once and importing them
by reference keeps the stages from drifting apart.

HOW: Plain module-level strings and ints. Messages that carry data are
format templates filled in by ValidationError.message.

RULES:
- Constants are frozen — never reassign them at runtime.
- DEFAULT_DELIMITER is a sentinel for "comma or newline"; it is compared by
  equality, never split on literally.
- The ceiling is inclusive: CEILING itself is summed, CEILING + 1 is not.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Delimiter grammar
# ---------------------------------------------------------------------------

DELIMITER_PREFIX = "//"
"""Two-character prefix that opens a custom delimiter declaration line."""

NEWLINE = "\n"
COMMA = ","

DEFAULT_DELIMITER = ",|\n"
"""Union of comma and newline, used when no custom delimiter is declared."""

DEFAULT_SEPARATORS: tuple[str, ...] = (COMMA, NEWLINE)

MINUS = "-"

# ---------------------------------------------------------------------------
# Summation
# ---------------------------------------------------------------------------

CEILING = 1000
"""Inclusive upper bound; larger values are dropped from the sum silently."""

# ---------------------------------------------------------------------------
# Canonical error messages
# ---------------------------------------------------------------------------

MSG_MALFORMED_DECLARATION = "Missing newline after delimiter declaration"
MSG_EMPTY_DELIMITER = "Delimiter cannot be empty"
MSG_TRAILING_SEPARATOR = "Separator at end not allowed"
MSG_DELIMITER_MISMATCH = "'{delimiter}' expected but '{found}' found at position {position}."
MSG_NEGATIVE_NUMBERS_PREFIX = "Negative number(s) not allowed: "
MSG_INVALID_NUMBER = "Invalid number: '{token}'"
