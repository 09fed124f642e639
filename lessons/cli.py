"""Command line runner for the lessons."""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import load_config
from .tasks import LESSONS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lessons", description="Run the tutorial lessons.")
    parser.add_argument("lessons", nargs="*", metavar="LESSON",
                        help=f"lessons to run (default: all). Known: {', '.join(LESSONS)}")
    parser.add_argument("--list", action="store_true", help="list the lessons and exit")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        for lesson in LESSONS.values():
            print(f"{lesson.name}: {lesson.description}")
        return 0

    unknown = [name for name in args.lessons if name not in LESSONS]
    if unknown:
        parser.error(f"unknown lesson(s): {', '.join(unknown)}")

    config = load_config()
    names = args.lessons or list(LESSONS)
    for name in names:
        if config.debug_log:
            print(f"[Lessons] running {name}", file=sys.stderr)
        LESSONS[name].main(config)
    return 0


__all__ = ["build_parser", "main"]
