# SPDX-FileCopyrightText: 2025 polysecret contributors
# SPDX-License-Identifier: MIT

"""Exact Lagrange interpolation over the rationals.

This module provides two helper functions:

``interpolate_at``
    Evaluate the unique lowest-degree polynomial through the given points at
    an arbitrary ``x``, returning an exact :class:`~fractions.Fraction`.

``recover``
    Select the first ``k`` points by ascending x and return the polynomial's
    constant term as an integer.

Individual Lagrange terms are generally not integral even when the final sum
is, so every term is accumulated as a ``Fraction`` and the integrality check
happens once, at the end.
"""
from __future__ import annotations

from fractions import Fraction
from typing import Iterable, Sequence

from .errors import DegenerateInput, InsufficientPoints, NonIntegerResult
from .points import Point, PointLike, sort_points


def _lagrange_interpolate(x: int, points: Sequence[Point]) -> Fraction:
    """Perform Lagrange interpolation at ``x`` over the given points."""
    total = Fraction(0)
    for i, (xi, yi) in enumerate(points):
        num = 1
        den = 1
        for j, (xj, _) in enumerate(points):
            if i == j:
                continue
            num *= x - xj
            den *= xi - xj
        if den == 0:
            raise DegenerateInput(f"Duplicate x-coordinate {xi} among selected points")
        total += Fraction(yi * num, den)
    return total


def select_points(points: Iterable[PointLike], k: int) -> list[Point]:
    """Sort ``points`` by x and return the first ``k`` of them."""
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    ordered = sort_points(points)
    if len(ordered) < k:
        raise InsufficientPoints(f"Need {k} points, only {len(ordered)} available")
    return ordered[:k]


def interpolate_at(points: Iterable[PointLike], x: int) -> Fraction:
    """Evaluate the interpolating polynomial through ``points`` at ``x``."""
    ordered = sort_points(points)
    if not ordered:
        raise InsufficientPoints("Cannot interpolate through zero points")
    return _lagrange_interpolate(x, ordered)


def recover(points: Iterable[PointLike], k: int) -> int:
    """
    Recover the constant term of the degree ``k - 1`` polynomial through the
    first ``k`` points (by ascending x).
    """
    selected = select_points(points, k)
    value = _lagrange_interpolate(0, selected)
    if value.denominator != 1:
        raise NonIntegerResult(value)
    return value.numerator


__all__ = ["interpolate_at", "recover", "select_points"]
