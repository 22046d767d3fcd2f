"""Helpers for comparing JSON documents."""

from __future__ import annotations

import json
from typing import Any


def _same(left: Any, right: Any) -> bool:
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if isinstance(left, dict):
        return (
            isinstance(right, dict)
            and left.keys() == right.keys()
            and all(_same(value, right[key]) for key, value in left.items())
        )
    if isinstance(left, list):
        return (
            isinstance(right, list)
            and len(left) == len(right)
            and all(_same(a, b) for a, b in zip(left, right))
        )
    if isinstance(left, (int, float)):
        return isinstance(right, (int, float)) and left == right
    return type(left) is type(right) and left == right


def json_eq(a: Any, b: Any) -> bool:
    """True if JSON texts ``a`` and ``b`` hold equal values; False if either is invalid."""
    try:
        left = json.loads(a)
        right = json.loads(b)
    except (TypeError, ValueError):
        return False
    return _same(left, right)