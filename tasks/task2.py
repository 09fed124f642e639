"""Набор тестов для проверки реализации ``build_binary_table``."""

from typing import Callable, Dict

EXPECTED: Dict[str, str] = {
    "A": "1000001",
    "B": "1000010",
    "C": "1000011",
    "D": "1000100",
    "E": "1000101",
    "F": "1000110",
}


def run_tests(build_binary_table: Callable[[], Dict[str, str]]) -> None:
    """Проверяет корректность пользовательской реализации ``build_binary_table``."""

    table = build_binary_table()
    assert table == EXPECTED
    assert list(table) == ["A", "B", "C", "D", "E", "F"]
    assert len(table) == 6
    for letter, binary in table.items():
        assert int(binary, 2) == ord(letter)
        assert not binary.startswith("0")
    print("Task2 OK")


__all__ = ["run_tests", "EXPECTED"]
