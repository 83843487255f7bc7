"""Data models flowing through the calculation pipeline.

WHY: Every stage of the pipeline hands something to the next one — the
resolver produces a payload/delimiter pair, the validator produces a list of
problems. Giving those a structured shape lets callers inspect what went
wrong (kind, position, offending values) instead of parsing message text.

HOW: Two frozen dataclasses and one enum:
  ParsedInput     — payload plus the delimiter that governs it
  ErrorKind       — closed set of failure kinds
  ValidationError — one detected problem, renders its own message

RULES:
- ParsedInput.delimiter is never empty.
- ValidationError.message is the only place error text is assembled.
- Instances are created and discarded within a single compute() call.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .constants import (
    DEFAULT_DELIMITER,
    MSG_DELIMITER_MISMATCH,
    MSG_EMPTY_DELIMITER,
    MSG_INVALID_NUMBER,
    MSG_MALFORMED_DECLARATION,
    MSG_NEGATIVE_NUMBERS_PREFIX,
    MSG_TRAILING_SEPARATOR,
)


@dataclass(frozen=True)
class ParsedInput:
    """Input split into its numeric payload and governing delimiter.

    Attributes:
        payload: Everything after the declaration line (or the whole input).
        delimiter: The declared custom delimiter, or DEFAULT_DELIMITER.
    """

    payload: str
    delimiter: str = DEFAULT_DELIMITER

    def __post_init__(self) -> None:
        if not self.delimiter:
            raise ValueError("ParsedInput.delimiter must not be empty")

    @property
    def is_default(self) -> bool:
        """True when no custom delimiter was declared."""
        return self.delimiter == DEFAULT_DELIMITER


class ErrorKind(str, enum.Enum):
    """Closed set of failure kinds a computation can report."""

    MALFORMED_DELIMITER_DECLARATION = "MalformedDelimiterDeclaration"
    EMPTY_DELIMITER_DECLARATION = "EmptyDelimiterDeclaration"
    TRAILING_SEPARATOR = "TrailingSeparator"
    DELIMITER_MISMATCH = "DelimiterMismatch"
    NEGATIVE_NUMBERS = "NegativeNumbers"
    INVALID_NUMBER = "InvalidNumber"


@dataclass(frozen=True)
class ValidationError:
    """A single detected problem with an input string.

    WHY: Several problems can hold at once (a negative number and a
    delimiter mismatch), and callers need each one's data, not just the
    combined text.

    HOW: Kind-specific data lives in optional fields; the message property
    picks the template for the kind and fills it in.

    RULES:
    - DELIMITER_MISMATCH carries delimiter, found, and position.
    - NEGATIVE_NUMBERS carries negatives in input order.
    - INVALID_NUMBER carries the trimmed token.
    - The other kinds carry nothing.
    """

    kind: ErrorKind
    delimiter: str | None = None
    found: str | None = None
    position: int | None = None
    negatives: tuple[int, ...] = field(default_factory=tuple)
    token: str | None = None

    @classmethod
    def trailing_separator(cls) -> ValidationError:
        return cls(ErrorKind.TRAILING_SEPARATOR)

    @classmethod
    def delimiter_mismatch(cls, delimiter: str, found: str, position: int) -> ValidationError:
        return cls(
            ErrorKind.DELIMITER_MISMATCH,
            delimiter=delimiter,
            found=found,
            position=position,
        )

    @classmethod
    def negative_numbers(cls, negatives) -> ValidationError:
        return cls(ErrorKind.NEGATIVE_NUMBERS, negatives=tuple(negatives))

    @property
    def message(self) -> str:
        if self.kind is ErrorKind.MALFORMED_DELIMITER_DECLARATION:
            return MSG_MALFORMED_DECLARATION
        if self.kind is ErrorKind.EMPTY_DELIMITER_DECLARATION:
            return MSG_EMPTY_DELIMITER
        if self.kind is ErrorKind.TRAILING_SEPARATOR:
            return MSG_TRAILING_SEPARATOR
        if self.kind is ErrorKind.DELIMITER_MISMATCH:
            return MSG_DELIMITER_MISMATCH.format(
                delimiter=self.delimiter,
                found=self.found,
                position=self.position,
            )
        if self.kind is ErrorKind.NEGATIVE_NUMBERS:
            return MSG_NEGATIVE_NUMBERS_PREFIX + ", ".join(str(n) for n in self.negatives)
        return MSG_INVALID_NUMBER.format(token=self.token)
