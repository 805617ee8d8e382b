# SPDX-FileCopyrightText: 2025 polysecret contributors
# SPDX-License-Identifier: MIT

"""Runtime settings.

Values come from environment variables so that the command line tool can be
tuned in scripts and CI without extra flags. Invalid values fall back to the
defaults.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _load_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    return default


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_level(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


@dataclass(frozen=True)
class Settings:
    """Holds runtime tunables for logging and verification."""

    log_level: str = "INFO"
    verify: bool = True
    preview_points: int = 5


def load_settings() -> Settings:
    """Load settings considering environment overrides."""

    return Settings(
        log_level=_load_level("POLYSECRET_LOG_LEVEL", "INFO"),
        verify=_load_bool("POLYSECRET_VERIFY", True),
        preview_points=max(0, _load_int("POLYSECRET_PREVIEW_POINTS", 5)),
    )


settings = load_settings()


__all__ = ["Settings", "settings", "load_settings"]
