"""Runtime settings for a tierchess session."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace

from tierchess.engine.strategies import Difficulty

ENV_PREFIX = "TIERCHESS_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_int(key: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{key}: expected an integer, got {raw!r}") from None


@dataclass(frozen=True, slots=True)
class Settings:
    """All user-configurable settings."""

    ai_level: int = 5
    log_level: str = "WARNING"
    seed: int | None = None
    max_plies: int = 200

    def __post_init__(self) -> None:
        if not Difficulty.RANDOM <= self.ai_level <= Difficulty.HARDEST:
            raise ValueError(f"ai_level must be within 1..10, got {self.ai_level}")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"Unknown log_level: {self.log_level!r}")
        if self.max_plies < 1:
            raise ValueError(f"max_plies must be positive, got {self.max_plies}")

    @property
    def logging_level(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level.upper()]

    @classmethod
    def from_mapping(cls, values: Mapping[str, str], prefix: str = "") -> Settings:
        """Build settings from string values such as environment variables.

        Keys are field names, upper-cased and prefixed with *prefix*
        (``TIERCHESS_AI_LEVEL`` with the default environment prefix). Missing
        keys keep their defaults; malformed values raise :class:`ValueError`.
        """
        changes: dict[str, object] = {}
        for item in fields(cls):
            key = f"{prefix}{item.name.upper()}"
            raw = values.get(key)
            if raw is None:
                continue
            if item.name in ("ai_level", "max_plies"):
                changes[item.name] = _parse_int(key, raw)
            elif item.name == "seed":
                changes[item.name] = None if not raw.strip() else _parse_int(key, raw)
            else:
                changes[item.name] = raw.strip()
        return replace(cls(), **changes)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Settings from ``TIERCHESS_*`` environment variables."""
        return cls.from_mapping(os.environ if environ is None else environ, ENV_PREFIX)
