"""Dotted-path access to decoded JSON documents.

A path is a sequence of keys separated by dots, for example ``a.b.0.c``.
A segment made of ASCII digits selects an array element; a dot inside a key
is written as ``\\.``.
"""

from __future__ import annotations

import copy
from typing import Any

_MISSING = object()


def _split(path: str) -> list[str]:
    if not path:
        raise ValueError("path must not be empty")
    segments: list[str] = []
    current: list[str] = []
    escaped = False
    for char in path:
        if escaped:
            current.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == ".":
            segments.append("".join(current))
            current = []
        else:
            current.append(char)
    if escaped:
        current.append("\\")
    segments.append("".join(current))
    return segments


def _as_index(segment: str) -> int | None:
    if segment and segment.isascii() and segment.isdigit():
        return int(segment)
    return None


def _child(node: Any, segment: str) -> Any:
    if isinstance(node, dict):
        return node.get(segment, _MISSING)
    if isinstance(node, list):
        index = _as_index(segment)
        if index is not None and index < len(node):
            return node[index]
    return _MISSING


def _find(document: Any, path: str) -> Any:
    node = document
    for segment in _split(path):
        node = _child(node, segment)
        if node is _MISSING:
            break
    return node


def lookup(document: Any, path: str) -> Any:
    """Return the value at ``path``; raise KeyError when it is absent."""
    value = _find(document, path)
    if value is _MISSING:
        raise KeyError(path)
    return value


def contains(document: Any, path: str) -> bool:
    """Tell whether ``path`` exists in ``document`` (a JSON null counts)."""
    return _find(document, path) is not _MISSING


def _set(node: Any, segments: list[str], value: Any) -> Any:
    head, rest = segments[0], segments[1:]
    index = _as_index(head)

    if isinstance(node, list):
        if index is None:
            raise ValueError(f"cannot set key {head!r} on an array")
        result = list(node)
        if index >= len(result):
            result.extend([None] * (index + 1 - len(result)))
        result[index] = _set(result[index], rest, value) if rest else value
        return result

    if isinstance(node, dict):
        result = dict(node)
    elif index is not None:
        return _set([], segments, value)
    else:
        result = {}

    result[head] = _set(result.get(head, _MISSING), rest, value) if rest else value
    return result


def assign(document: Any, path: str, value: Any) -> Any:
    """Return a copy of ``document`` with ``value`` placed at ``path``.

    Missing objects along the way are created; a digit segment creates an
    array, padded with nulls up to the index. The input is left unchanged.
    """
    segments = _split(path)
    return _set(document, segments, copy.deepcopy(value))