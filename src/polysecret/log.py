# SPDX-FileCopyrightText: 2025 polysecret contributors
# SPDX-License-Identifier: MIT

"""Logging setup for the command line layer."""
from __future__ import annotations

import logging

import click

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_ROOT = "polysecret"


class ClickEchoHandler(logging.Handler):
    """Write records to click's current stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:  # pragma: no cover - mirrors logging.StreamHandler
            self.handleError(record)


def configure(level: str | int = "INFO") -> logging.Logger:
    """Attach a single stderr handler to the package logger and set its level."""
    logger = logging.getLogger(_ROOT)
    if not any(isinstance(h, ClickEchoHandler) for h in logger.handlers):
        handler = ClickEchoHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    if name == _ROOT or name.startswith(_ROOT + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT}.{name}")


__all__ = ["ClickEchoHandler", "LOG_FORMAT", "configure", "get_logger"]
