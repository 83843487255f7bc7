"""Delimiter resolution and tokenization.

WHY: Input either uses the default separators (comma or newline) or opens
with a "//<delimiter>\\n" declaration line. Every later stage needs to know
which delimiter governs the payload, and the summation stage needs the
payload cut into tokens.

HOW: resolve_delimiter() peels off an optional declaration line and returns
a ParsedInput. tokenize() splits that payload with a regex built from the
escaped delimiter, so declared delimiters are always matched literally.

RULES:
- A declared delimiter never disables newline splitting.
- Empty tokens are preserved; emptiness is a validation concern.
- Neither function has side effects; tokenize() is idempotent.
"""

from __future__ import annotations

import re
from typing import List

from .constants import DEFAULT_DELIMITER, DEFAULT_SEPARATORS, DELIMITER_PREFIX, NEWLINE
from .errors import InputError
from .models import ErrorKind, ParsedInput

DEFAULT_SPLIT_RE = re.compile("|".join(re.escape(s) for s in DEFAULT_SEPARATORS))


def resolve_delimiter(text: str) -> ParsedInput:
    """Split raw input into its governing delimiter and numeric payload.

    Args:
        text: Non-blank input string.

    Returns:
        ParsedInput with the declared delimiter, or DEFAULT_DELIMITER when
        the input has no declaration line.

    Raises:
        InputError: MalformedDelimiterDeclaration if the prefix is not
            followed by a newline, EmptyDelimiterDeclaration if nothing sits
            between the prefix and the newline.
    """
    if not text.startswith(DELIMITER_PREFIX):
        return ParsedInput(payload=text, delimiter=DEFAULT_DELIMITER)

    newline_index = text.find(NEWLINE, len(DELIMITER_PREFIX))
    if newline_index == -1:
        raise InputError.single(ErrorKind.MALFORMED_DELIMITER_DECLARATION)

    delimiter = text[len(DELIMITER_PREFIX):newline_index]
    if not delimiter:
        raise InputError.single(ErrorKind.EMPTY_DELIMITER_DECLARATION)

    return ParsedInput(payload=text[newline_index + len(NEWLINE):], delimiter=delimiter)


def split_pattern(parsed: ParsedInput) -> re.Pattern:
    """Compiled pattern matching every separator valid for this input."""
    if parsed.is_default:
        return DEFAULT_SPLIT_RE
    return re.compile(re.escape(parsed.delimiter) + "|" + re.escape(NEWLINE))


def tokenize(parsed: ParsedInput) -> List[str]:
    """Split the payload into raw tokens, preserving order and empties.

    An empty payload (e.g. "//;\\n") has no tokens at all.
    """
    if not parsed.payload:
        return []
    return split_pattern(parsed).split(parsed.payload)
