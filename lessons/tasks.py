"""Built-in lessons."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from . import binary_map, people
from .config import AppConfig


@dataclass(frozen=True, slots=True)
class Lesson:
    name: str
    description: str
    main: Callable[[Optional[AppConfig]], None]


LESSONS: Dict[str, Lesson] = {
    "oldest": Lesson(
        name="oldest",
        description="Print the oldest person of a fixed list, a missing age counts as 0.",
        main=people.main,
    ),
    "binary-map": Lesson(
        name="binary-map",
        description="Print the binary code of each letter from A to F, in order.",
        main=binary_map.main,
    ),
}


__all__ = ["LESSONS", "Lesson"]
