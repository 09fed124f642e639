"""Набор тестов для проверки реализации ``find_oldest``."""

from typing import Callable, Sequence

from lessons.people import Person


def run_tests(find_oldest: Callable[[Sequence[Person]], Person]) -> None:
    """Проверяет корректность пользовательской реализации ``find_oldest``."""

    alice = Person("Alice")
    bob = Person("Bob", age=29)
    assert find_oldest([alice, bob]) == Person("Bob", 29)
    assert find_oldest([bob, alice]) is bob
    # при равном возрасте побеждает первый
    carol = Person("Carol")
    assert find_oldest([alice, carol]) is alice
    assert find_oldest([Person("Dan", 40), Person("Eve", 40)]).name == "Dan"
    assert find_oldest([Person("Zed", 0), alice]).name == "Zed"
    print("Task1 OK")


__all__ = ["run_tests"]
