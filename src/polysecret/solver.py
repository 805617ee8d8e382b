# SPDX-FileCopyrightText: 2025 polysecret contributors
# SPDX-License-Identifier: MIT

"""One-dataset pipeline: decode, recover the secret, cross-check the rest."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from .lagrange import recover
from .loader import load_dataset, parse_dataset
from .log import get_logger
from .points import Config, Point, format_points, sort_points
from .settings import settings
from .verification import VerificationResult, verify_extra_points

_logger = get_logger(__name__)


@dataclass(frozen=True)
class SolveReport:
    config: Config
    points: tuple[Point, ...]
    secret: int
    checks: tuple[VerificationResult, ...] = field(default_factory=tuple)

    @property
    def used_points(self) -> tuple[Point, ...]:
        return self.points[: self.config.k]

    @property
    def extra_points(self) -> tuple[Point, ...]:
        return self.points[self.config.k :]

    @property
    def consistent(self) -> bool:
        return all(check.ok for check in self.checks)


class SecretSolver:
    """Recover the constant term of one dataset and report on it."""

    def __init__(self, config: Config, points: Sequence[Point], *, verify: bool | None = None) -> None:
        self.config = config
        self.points = tuple(sort_points(points))
        self.verify = settings.verify if verify is None else verify

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, verify: bool | None = None) -> "SecretSolver":
        config, points = parse_dataset(data)
        return cls(config, points, verify=verify)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str], *, verify: bool | None = None) -> "SecretSolver":
        config, points = load_dataset(path)
        return cls(config, points, verify=verify)

    def solve(self) -> SolveReport:
        config = self.config
        _logger.info("Input parameters: n=%d k=%d degree=%d", config.n, config.k, config.degree)
        _logger.info("Extracted %d points", len(self.points))
        _logger.info("Points: %s", format_points(self.points, settings.preview_points))
        if config.n != len(self.points):
            _logger.warning(
                "Dataset declares n=%d but supplies %d points", config.n, len(self.points)
            )

        secret = recover(self.points, config.k)
        _logger.info("Using first %d points for interpolation", config.k)
        _logger.info("Secret (constant term): %d", secret)

        checks: tuple[VerificationResult, ...] = ()
        if self.verify:
            checks = self._verify()
        return SolveReport(config=config, points=self.points, secret=secret, checks=checks)

    def _verify(self) -> tuple[VerificationResult, ...]:
        extra = len(self.points) - self.config.k
        if extra <= 0:
            _logger.info("No extra points available for verification")
            return ()
        _logger.info("Using %d extra points for verification", extra)
        checks = verify_extra_points(self.points, self.config.k)
        for check in checks:
            if not check.ok:
                _logger.warning(
                    "Point x=%d does not lie on the polynomial: expected %d, interpolated %s",
                    check.x,
                    check.expected,
                    check.actual,
                )
        passed = sum(1 for check in checks if check.ok)
        _logger.info("Verification: %d/%d extra points consistent", passed, len(checks))
        return checks


def solve_file(path: str | os.PathLike[str]) -> str:
    """Solve the dataset stored at ``path`` and return the secret in decimal."""
    return str(SecretSolver.from_file(path).solve().secret)


__all__ = ["SecretSolver", "SolveReport", "solve_file"]
