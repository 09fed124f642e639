"""Application configuration models and helpers."""
from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv


def _flag(value: str | None) -> bool:
    return (value or "").strip() == "1"


@dataclass(slots=True)
class AppConfig:
    debug_log: bool

    @classmethod
    def from_env(cls) -> "AppConfig":
        return cls(debug_log=_flag(os.getenv("DEBUG_LOG", "0")))


def load_config() -> AppConfig:
    """Load ``.env`` (if any) and build the config from the environment."""
    load_dotenv()
    return AppConfig.from_env()


__all__ = ["AppConfig", "load_config"]
