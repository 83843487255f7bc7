"""Command-line interface for the string calculator.

WHY: Quick checks of an input string ("does this sum or fail, and why?")
should not require opening a Python shell.

HOW: Uses argparse to accept zero or more input strings. Each positional
argument is one input; with none (or "-"), stdin is read as a single
input. Literal backslash escapes such as "\\n" are decoded so declarations
can be typed on one line. The sum is printed to stdout.

RULES:
- Usage:
    python -m string_calculator "1,2"                  -> 3
    python -m string_calculator "//;\\n1;2" "3,4"       -> 10
    printf '1\\n2' | python -m string_calculator        -> 3
- Exit codes: 0 = success, 1 = invalid input.
- Error messages go to stderr, prefixed with "Error: ".
- --raw disables escape decoding.
- One trailing line ending is dropped from stdin input.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from string_calculator import InputError, compute
from string_calculator.config import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVELS

logger = logging.getLogger(__name__)

ESCAPES = {"\\n": "\n", "\\t": "\t", "\\\\": "\\"}


def decode_escapes(text: str) -> str:
    """Turn literal "\\n", "\\t" and "\\\\" sequences into their characters."""
    out = []  # type: List[str]
    i = 0
    while i < len(text):
        pair = text[i:i + 2]
        if pair in ESCAPES:
            out.append(ESCAPES[pair])
            i += 2
        else:
            out.append(text[i])
            i += 1
    return "".join(out)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="string_calculator",
        description="Sum delimited non-negative integers. Accepts the default "
                    "comma/newline form or a '//<delimiter>\\n' declaration.",
    )

    parser.add_argument(
        "inputs",
        nargs="*",
        help="Input strings to sum. Reads stdin when omitted or '-'.",
    )

    parser.add_argument(
        "--raw",
        action="store_true",
        help="Do not decode \\n, \\t and \\\\ escape sequences in arguments.",
    )

    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging verbosity (default: %(default)s).",
    )

    return parser


def _read_stdin() -> str:
    """Read stdin, dropping the single line ending that echo appends."""
    text = sys.stdin.read()
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def _read_inputs(args: argparse.Namespace) -> List[str]:
    if not args.inputs:
        return [_read_stdin()]

    inputs = []  # type: List[str]
    for value in args.inputs:
        if value == "-":
            inputs.append(_read_stdin())
        elif args.raw:
            inputs.append(value)
        else:
            inputs.append(decode_escapes(value))
    return inputs


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``python -m string_calculator`` and ``string-calculator``.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    inputs = _read_inputs(args)
    logger.info("Summing %d input(s)", len(inputs))

    try:
        total = compute(*inputs)
    except InputError as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    print(total)


if __name__ == "__main__":
    main()
