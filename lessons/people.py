"""Find the oldest person in a small fixed list."""
from __future__ import annotations

from dataclasses import dataclass
import sys
from typing import Iterable, List, Optional

from .config import AppConfig, load_config


class EmptySequenceError(ValueError):
    """Raised when there is nobody to choose from."""


@dataclass(frozen=True, slots=True)
class Person:
    name: str
    age: Optional[int] = None


def effective_age(person: Person) -> int:
    return person.age if person.age is not None else 0


def find_oldest(persons: Iterable[Person]) -> Person:
    """Return the person with the greatest effective age.

    Ties go to the first such person in *persons*.
    """
    people = list(persons)
    if not people:
        raise EmptySequenceError("cannot pick the oldest of an empty sequence")
    return max(people, key=effective_age)


PERSONS: List[Person] = [Person("Alice"), Person("Bob", age=29)]


def main(config: Optional[AppConfig] = None) -> None:
    if config is None:
        config = load_config()
    oldest = find_oldest(PERSONS)
    if config.debug_log:
        print(f"[Oldest] {len(PERSONS)} candidates, picked {oldest.name}", file=sys.stderr)
    print(f"The oldest is: {oldest!r}")


__all__ = ["EmptySequenceError", "Person", "PERSONS", "effective_age", "find_oldest", "main"]


if __name__ == "__main__":
    main()
