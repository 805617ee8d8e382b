# SPDX-FileCopyrightText: 2025 polysecret contributors
# SPDX-License-Identifier: MIT

"""Value objects passed between the decoder and the recoverer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

from .errors import InputFormatError


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __post_init__(self) -> None:
        for name in ("x", "y"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Point.{name} must be an int, got {value!r}")

    def __iter__(self):
        yield self.x
        yield self.y


PointLike = Union[Point, Tuple[int, int]]


@dataclass(frozen=True)
class Config:
    """Dataset parameters: ``n`` available points, ``k`` required points."""

    n: int
    k: int

    def __post_init__(self) -> None:
        if self.k < 1:
            raise InputFormatError(f"k must be at least 1, got {self.k}")
        if self.n < 0:
            raise InputFormatError(f"n must not be negative, got {self.n}")

    @property
    def degree(self) -> int:
        return self.k - 1


def as_point(item: PointLike) -> Point:
    if isinstance(item, Point):
        return item
    x, y = item
    return Point(x, y)


def sort_points(points: Iterable[PointLike]) -> list[Point]:
    """Return a new list of points ordered by ascending x (stable)."""
    return sorted((as_point(p) for p in points), key=lambda p: p.x)


def format_points(points: Sequence[Point], limit: int | None = None) -> str:
    shown = points if limit is None else points[:limit]
    text = ", ".join(f"({p.x}, {p.y})" for p in shown)
    if limit is not None and len(points) > limit:
        text += ", ..."
    return text


__all__ = ["Point", "PointLike", "Config", "as_point", "sort_points", "format_points"]
