"""Comparison of dotted API version strings such as ``1.22``."""

from __future__ import annotations

import re
from itertools import zip_longest

_INT_RE = re.compile(r"[+-]?\d+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _component(text: str | None) -> int:
    """Read one version component; anything that is not an integer counts as 0."""
    if text is None or not _INT_RE.fullmatch(text):
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, int(text)))


def compare(v1: str, v2: str) -> int:
    """Return -1 if ``v1 < v2``, 1 if ``v1 > v2`` and 0 otherwise."""
    for left, right in zip_longest(v1.split("."), v2.split(".")):
        a, b = _component(left), _component(right)
        if a > b:
            return 1
        if b > a:
            return -1
    return 0


def less_than(v: str, other: str) -> bool:
    """Whether ``v`` is lower than ``other``."""
    return compare(v, other) == -1


def less_than_or_equal_to(v: str, other: str) -> bool:
    """Whether ``v`` is lower than or equal to ``other``."""
    return compare(v, other) <= 0


def greater_than(v: str, other: str) -> bool:
    """Whether ``v`` is higher than ``other``."""
    return compare(v, other) == 1


def greater_than_or_equal_to(v: str, other: str) -> bool:
    """Whether ``v`` is higher than or equal to ``other``."""
    return compare(v, other) >= 0


def equal(v: str, other: str) -> bool:
    """Whether ``v`` and ``other`` denote the same version."""
    return compare(v, other) == 0