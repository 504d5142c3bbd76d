"""Text helpers for user input."""

from __future__ import annotations

import string
import sys
from typing import Callable

_WHITESPACE = " \t\n\v\f\r"
_LOWER_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def trim(text: str) -> str:
    """Remove leading and trailing ASCII whitespace."""
    return text.strip(_WHITESPACE)


def to_lower(text: str) -> str:
    """Lower-case the ASCII letters of ``text``, leaving other characters alone."""
    return text.translate(_LOWER_TABLE)


def _read_stdin_line() -> str:
    return sys.stdin.readline().rstrip("\n")


def get_validated_input(
    prompt: str,
    read: Callable[[], str] | None = None,
    write: Callable[[str], object] | None = None,
) -> str:
    """Prompt for a line and return it trimmed; a blank answer cancels and gives ""."""
    read = read or _read_stdin_line
    write = write or sys.stdout.write
    write(prompt)
    answer = trim(read())
    if not answer:
        write("Cancelled.\n")
        return ""
    return answer