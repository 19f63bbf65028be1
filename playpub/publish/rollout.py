"""Rollout percentage parsing and formatting."""

from __future__ import annotations

import math
import re

__all__ = [
    "FULL_ROLLOUT",
    "format_percentage",
    "is_valid_percentage",
    "parse_rollout_percentage",
]

FULL_ROLLOUT = 100.0

_NUMBER = re.compile(r"[+-]?\d+(?:\.\d+)?")


def parse_rollout_percentage(raw: str | None) -> float:
    """Parse a rollout like ``"50"`` or ``"12.5%"``.

    Only plain decimal numbers are read; anything else (unset, ``nan``,
    ``1e2``, ``1_0``) means a full rollout. Out-of-range numbers are returned
    unchanged so validation can reject them.
    """
    if raw is None:
        return FULL_ROLLOUT
    text = raw.replace("%", "").strip()
    if not _NUMBER.fullmatch(text):
        return FULL_ROLLOUT
    return float(text)


def is_valid_percentage(value: float) -> bool:
    return 0.0 <= value <= 100.0


def format_percentage(value: float) -> str:
    """Format with at most three decimals: 50.0 -> "50", 12.5 -> "12.5"."""
    if math.isinf(value):
        return "-inf" if value < 0 else "inf"
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text
