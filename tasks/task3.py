"""Набор тестов для проверки реализации ``read_number``."""

import io
from typing import Callable, Optional, TextIO


def run_tests(read_number: Callable[[TextIO], Optional[int]]) -> None:
    """Проверяет корректность пользовательской реализации ``read_number``."""

    for text, expected in [("42\n", 42), ("42", 42), ("-7\n", -7), ("abc\n", None), ("\n", None), ("", None)]:
        reader = io.StringIO(text)
        assert read_number(reader) == expected
        assert reader.closed
    print("Task3 OK")


__all__ = ["run_tests"]
