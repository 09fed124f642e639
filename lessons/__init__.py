"""Small tutorial lessons: the oldest person and a binary letter table."""
from __future__ import annotations

from .binary_map import build_binary_table, format_table
from .config import AppConfig, load_config
from .numbers import read_number
from .people import EmptySequenceError, Person, find_oldest
from .tasks import LESSONS, Lesson

__all__ = [
    "AppConfig",
    "EmptySequenceError",
    "LESSONS",
    "Lesson",
    "Person",
    "build_binary_table",
    "find_oldest",
    "format_table",
    "load_config",
    "read_number",
]
