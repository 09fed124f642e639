"""Read a number from a line of text."""
from __future__ import annotations

import re
from typing import Optional, TextIO

_INTEGER = re.compile(r"[+-]?[0-9]+")
_LINE_END = re.compile(r"\r\n|\r|\n")

INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


def _parse_int(value: str) -> Optional[int]:
    # int() alone would also take surrounding spaces and "1_000"
    if not _INTEGER.fullmatch(value):
        return None
    number = int(value, 10)
    if not INT_MIN <= number <= INT_MAX:
        return None
    return number


def _first_line(text: str) -> str:
    # "\r" on its own also ends a line
    return _LINE_END.split(text, maxsplit=1)[0]


def read_number(reader: TextIO) -> Optional[int]:
    """Read one line from *reader* and parse it as a signed 32-bit integer.

    Returns ``None`` when the line is not a number or does not fit in 32
    bits (this includes an empty line and end of input). *reader* is closed
    before returning, whatever happens; errors raised by the reader itself
    still propagate.
    """
    with reader:
        line = reader.readline()
    return _parse_int(_first_line(line))


__all__ = ["INT_MAX", "INT_MIN", "read_number"]
