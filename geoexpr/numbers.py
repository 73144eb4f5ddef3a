"""Tolerant float comparisons shared by the value model and the normalizer."""

from __future__ import annotations

import math

EPSILON = 0.00001


def close_to(a: float, b: float) -> bool:
    """Return ``True`` when ``a`` and ``b`` differ by less than :data:`EPSILON`.

    The relation is not transitive: ``close_to(a, b)`` and ``close_to(b, c)``
    can both hold while ``close_to(a, c)`` does not.
    """

    return abs(a - b) < EPSILON


def point_close(x1: float, y1: float, x2: float, y2: float) -> bool:
    return close_to(x1, x2) and close_to(y1, y2)


def in_between(value: float, end1: float, end2: float) -> bool:
    """Return ``True`` when ``value`` lies between ``end1`` and ``end2``.

    The ends may come in either order and both are widened by :data:`EPSILON`.
    """

    lo, hi = (end1, end2) if end1 <= end2 else (end2, end1)
    return lo - EPSILON <= value <= hi + EPSILON


def format_number(value: float) -> str:
    """Shortest decimal text that reads back as ``value``; ``2.0`` renders as ``2``."""

    value = float(value)
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"cannot format non-finite number {value!r}")
    if value == 0.0:
        return "0"
    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text
