"""Whole-unit even distribution shared by column and shelf layouts."""

from __future__ import annotations

import math


def split_evenly(total: float, parts: int) -> list[float]:
    """Split ``total`` into ``parts`` values that sum to exactly ``total``.

    Every value gets ``floor(total / parts)``; the whole-unit remainder is
    handed out one unit at a time from the front. A fractional leftover, if
    any, goes to the last value.

    Example:
        >>> split_evenly(163, 4)
        [41, 41, 41, 40]
    """
    if parts < 1:
        raise ValueError("parts must be at least 1")

    base = math.floor(total / parts)
    remainder = total - base * parts
    whole = math.floor(remainder)
    values: list[float] = [base + 1 if i < whole else base for i in range(parts)]

    leftover = remainder - whole
    if leftover:
        values[-1] += leftover
    return values


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))
