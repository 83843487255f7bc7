"""Runtime configuration and .env loading for the command-line tool.

WHY: Operators want to turn on debug output without editing code or
passing flags on every call. Keeping the overridable values here means
there is one place to look for them.

HOW: python-dotenv loads a .env file on import; values are then read with
os.getenv and exposed as module-level constants.

RULES:
- Only ambient settings live here. The delimiter grammar and the ceiling
  are fixed and live in constants.py.
- STRING_CALCULATOR_LOG_LEVEL accepts standard logging level names.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_LOG_LEVEL = os.getenv("STRING_CALCULATOR_LOG_LEVEL", "WARNING").upper()
if DEFAULT_LOG_LEVEL not in LOG_LEVELS:
    DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
