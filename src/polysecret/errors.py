# SPDX-FileCopyrightText: 2025 polysecret contributors
# SPDX-License-Identifier: MIT

"""Exception taxonomy shared by the decoder, the recoverer and the loader."""
from __future__ import annotations

from fractions import Fraction


class SecretRecoveryError(ValueError):
    """Base class for every failure raised while recovering a secret."""


class InvalidBase(SecretRecoveryError):
    """Raised when a base lies outside ``[2, 36]`` or is not a number."""


class InvalidDigit(SecretRecoveryError):
    """Raised when a character is not a valid digit for the stated base."""


class InsufficientPoints(SecretRecoveryError):
    """Raised when fewer than ``k`` points are available."""


class DegenerateInput(SecretRecoveryError):
    """Raised when duplicate x-coordinates make a denominator vanish."""


class NonIntegerResult(SecretRecoveryError):
    """Raised when the interpolated constant term is not an integer."""

    def __init__(self, value: Fraction) -> None:
        super().__init__(f"Interpolated constant term {value} is not an integer")
        self.value = value


class InputFormatError(SecretRecoveryError):
    """Raised when the dataset mapping is structurally malformed."""


__all__ = [
    "SecretRecoveryError",
    "InvalidBase",
    "InvalidDigit",
    "InsufficientPoints",
    "DegenerateInput",
    "NonIntegerResult",
    "InputFormatError",
]
