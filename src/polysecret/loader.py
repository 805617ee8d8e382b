# SPDX-FileCopyrightText: 2025 polysecret contributors
# SPDX-License-Identifier: MIT

"""Turn the ``keys``/entries dataset format into a config and decoded points.

A dataset looks like::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"}
    }

Every key other than ``keys`` is the decimal x-coordinate of a point whose
y-coordinate is ``value`` written in ``base``. JSON and YAML text are both
accepted.
"""
from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping

import yaml

from .decoder import decode
from .errors import InputFormatError, InvalidBase, InvalidDigit
from .points import Config, Point

KEYS_ENTRY = "keys"

_DECIMAL = re.compile(r"[+-]?[0-9]+")


@dataclass
class ValidationIssue:
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _DECIMAL.fullmatch(value.strip()):
        return int(value.strip(), 10)
    return None


def validate_keys(data: Mapping[str, Any]) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    keys = data.get(KEYS_ENTRY)
    if keys is None:
        issues.append(ValidationIssue(KEYS_ENTRY, "missing 'keys' entry"))
        return issues
    if not isinstance(keys, Mapping):
        issues.append(ValidationIssue(KEYS_ENTRY, "'keys' must be a mapping"))
        return issues
    for name in ("n", "k"):
        if name not in keys:
            issues.append(ValidationIssue(f"{KEYS_ENTRY}.{name}", "missing"))
        elif _as_int(keys[name]) is None:
            issues.append(ValidationIssue(f"{KEYS_ENTRY}.{name}", f"not an integer: {keys[name]!r}"))
    return issues


def validate_entry(key: Any, entry: Any) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    field = str(key)
    if _as_int(key) is None:
        issues.append(ValidationIssue(field, "x-coordinate key is not a decimal integer"))
    if not isinstance(entry, Mapping):
        issues.append(ValidationIssue(field, "entry must be a mapping with 'base' and 'value'"))
        return issues
    for name in ("base", "value"):
        if name not in entry:
            issues.append(ValidationIssue(f"{field}.{name}", "missing"))
    value = entry.get("value")
    if "value" in entry and (isinstance(value, bool) or not isinstance(value, (str, int))):
        issues.append(ValidationIssue(f"{field}.value", f"not a digit string: {value!r}"))
    return issues


def collect_issues(*sources: Iterable[ValidationIssue]) -> list[ValidationIssue]:
    aggregated: list[ValidationIssue] = []
    for source in sources:
        aggregated.extend(source)
    return aggregated


def _decode_entry(x: int, entry: Mapping[str, Any]) -> Point:
    try:
        y = decode(str(entry["value"]), entry["base"])
    except (InvalidBase, InvalidDigit) as exc:
        raise type(exc)(f"Entry {x}: {exc}") from exc
    return Point(x, y)


def parse_dataset(data: Mapping[str, Any]) -> tuple[Config, list[Point]]:
    """Validate ``data`` and decode every entry into a :class:`Point`.

    Points are returned in the mapping's order; sorting is the recoverer's
    job.
    """
    if not isinstance(data, Mapping):
        raise InputFormatError("Dataset must be a mapping")

    entries = [(key, entry) for key, entry in data.items() if key != KEYS_ENTRY]
    issues = collect_issues(
        validate_keys(data),
        *(validate_entry(key, entry) for key, entry in entries),
    )
    if issues:
        raise InputFormatError("; ".join(str(issue) for issue in issues))

    keys = data[KEYS_ENTRY]
    config = Config(n=_as_int(keys["n"]), k=_as_int(keys["k"]))
    points = [_decode_entry(_as_int(key), entry) for key, entry in entries]
    return config, points


def loads_dataset(text: str) -> tuple[Config, list[Point]]:
    """Parse JSON or YAML ``text`` and decode it."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise InputFormatError(f"Could not parse dataset: {exc}") from exc
    return parse_dataset(data)


def load_dataset(path: str | os.PathLike[str]) -> tuple[Config, list[Point]]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise InputFormatError(f"Could not read dataset {path}: {exc}") from exc
    return loads_dataset(text)


__all__ = [
    "ValidationIssue",
    "collect_issues",
    "load_dataset",
    "loads_dataset",
    "parse_dataset",
    "validate_entry",
    "validate_keys",
]
