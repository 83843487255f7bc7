"""Exception hierarchy for the string calculator.

WHY: Callers need one exception type to catch for every bad input, while
still being able to see each individual problem that was detected.

HOW: InputError wraps one or more ValidationError records. Its string form
is the records' messages joined by newlines, negatives first when the
validator put them there.

RULES:
- Library code raises, never prints or exits. Only the CLI catches.
- InputError is also a ValueError, so generic "bad argument" handlers work.
"""

from __future__ import annotations

from typing import Iterable, List

from .models import ErrorKind, ValidationError


class StringCalculatorError(Exception):
    """Base exception for all string calculator errors."""


class InputError(StringCalculatorError, ValueError):
    """The input string could not be summed."""

    def __init__(self, errors: Iterable[ValidationError]) -> None:
        self.errors = tuple(errors)
        if not self.errors:
            raise ValueError("InputError requires at least one ValidationError")
        super().__init__("\n".join(e.message for e in self.errors))

    @classmethod
    def single(cls, kind: ErrorKind, **data) -> InputError:
        return cls([ValidationError(kind, **data)])

    @property
    def kinds(self) -> List[ErrorKind]:
        return [e.kind for e in self.errors]
