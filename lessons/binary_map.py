"""Binary representations of the letters 'A' to 'F'."""
from __future__ import annotations

import sys
from typing import Dict, Iterator, List, Mapping, Optional

from .config import AppConfig, load_config


def to_binary(code: int) -> str:
    if code < 0:
        raise ValueError(f"expected a non-negative code point, got {code}")
    return format(code, "b")


def char_range(start: str, end: str) -> Iterator[str]:
    """Yield every character from *start* to *end*, both ends included.

    Reversed bounds yield nothing.
    """
    if len(start) != 1 or len(end) != 1:
        raise ValueError(f"bounds must be single characters, got {start!r} and {end!r}")
    for code in range(ord(start), ord(end) + 1):
        yield chr(code)


def build_binary_table(start: str = "A", end: str = "F") -> Dict[str, str]:
    table: Dict[str, str] = {}
    for char in char_range(start, end):
        table[char] = to_binary(ord(char))
    return table


def format_table(table: Mapping[str, str]) -> List[str]:
    return [f"{letter} = {table[letter]}" for letter in sorted(table)]


def main(config: Optional[AppConfig] = None) -> None:
    if config is None:
        config = load_config()
    table = build_binary_table()
    if config.debug_log:
        print(f"[BinaryMap] {len(table)} entries", file=sys.stderr)
    for line in format_table(table):
        print(line)


__all__ = ["build_binary_table", "char_range", "format_table", "main", "to_binary"]


if __name__ == "__main__":
    main()
