# SPDX-FileCopyrightText: 2025 polysecret contributors
# SPDX-License-Identifier: MIT

"""Positional base-N decoding into unbounded Python integers.

``decode`` accepts digit strings in any base from 2 to 36. Digits past 9 use
the letters ``a``-``z`` (case-insensitive), so ``decode("ff", 16) == 255``.
"""
from __future__ import annotations

import string

from .errors import InvalidBase, InvalidDigit

MIN_BASE = 2
MAX_BASE = 36

_DIGIT_VALUES = {ch: value for value, ch in enumerate(string.digits + string.ascii_lowercase)}


def _coerce_base(base: int | str) -> int:
    if isinstance(base, bool):
        raise InvalidBase(f"Base must be an integer, got {base!r}")
    if isinstance(base, str):
        text = base.strip()
        if not (text.isascii() and text.isdigit()):
            raise InvalidBase(f"Base must be a decimal integer, got {base!r}")
        base = int(text, 10)
    if not isinstance(base, int):
        raise InvalidBase(f"Base must be an integer, got {base!r}")
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(f"Base {base} is outside [{MIN_BASE}, {MAX_BASE}]")
    return base


def digit_value(char: str) -> int:
    """Map one digit character to its value, ignoring letter case."""
    value = _DIGIT_VALUES.get(char.lower()) if char.isascii() else None
    if value is None:
        raise InvalidDigit(f"{char!r} is not a digit character")
    return value


def decode(digits: str, base: int | str) -> int:
    """Decode ``digits`` written in ``base`` into an exact integer."""
    radix = _coerce_base(base)
    if not digits:
        raise InvalidDigit("Cannot decode an empty digit string")

    result = 0
    for position, char in enumerate(digits):
        value = digit_value(char)
        if value >= radix:
            raise InvalidDigit(
                f"Digit {char!r} at position {position} is out of range for base {radix}"
            )
        result = result * radix + value
    return result


__all__ = ["MIN_BASE", "MAX_BASE", "decode", "digit_value"]
