# SPDX-FileCopyrightText: 2025 polysecret contributors
# SPDX-License-Identifier: MIT

"""Cross-check surplus points against the interpolating polynomial."""
from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Iterable

from .lagrange import interpolate_at, select_points
from .points import PointLike, sort_points


@dataclass(frozen=True)
class VerificationResult:
    x: int
    expected: int
    actual: Fraction

    @property
    def ok(self) -> bool:
        return self.actual == self.expected


def verify_extra_points(points: Iterable[PointLike], k: int) -> tuple[VerificationResult, ...]:
    """Evaluate the polynomial defined by the first ``k`` points at every
    remaining x and compare with the recorded y.

    The check is diagnostic: mismatches are reported, never raised.
    """
    ordered = sort_points(points)
    defining = select_points(ordered, k)
    return tuple(
        VerificationResult(x=p.x, expected=p.y, actual=interpolate_at(defining, p.x))
        for p in ordered[k:]
    )


__all__ = ["VerificationResult", "verify_extra_points"]
