# SPDX-FileCopyrightText: 2025 polysecret contributors
# SPDX-License-Identifier: MIT

"""Recover the constant term of a polynomial from base-encoded points."""

from __future__ import annotations

from .decoder import decode
from .errors import (
    DegenerateInput,
    InputFormatError,
    InsufficientPoints,
    InvalidBase,
    InvalidDigit,
    NonIntegerResult,
    SecretRecoveryError,
)
from .lagrange import interpolate_at, recover
from .points import Config, Point
from .solver import SecretSolver, SolveReport, solve_file

__version__ = "0.1.0"

__all__ = [
    "Config",
    "DegenerateInput",
    "InputFormatError",
    "InsufficientPoints",
    "InvalidBase",
    "InvalidDigit",
    "NonIntegerResult",
    "Point",
    "SecretRecoveryError",
    "SecretSolver",
    "SolveReport",
    "decode",
    "interpolate_at",
    "recover",
    "solve_file",
]
