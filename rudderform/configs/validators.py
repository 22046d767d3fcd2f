"""Value validators that report problems as diagnostics."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Sequence

Validator = Callable[[Any, Sequence[Any]], list]


@dataclass(frozen=True)
class Diagnostic:
    """A validation problem found at ``path``."""

    summary: str
    path: tuple = ()
    warning: bool = False


def _key(path: tuple) -> str:
    for step in reversed(path):
        if isinstance(step, str):
            return step
    return ""


def _quote(text: str) -> str:
    return json.dumps(text)


def _validator(check: Callable[[Any, str], Optional[str]]) -> Validator:
    def validate(value: Any, path: Sequence[Any]) -> list[Diagnostic]:
        path = tuple(path)
        message = check(value, _key(path))
        return [] if message is None else [Diagnostic(message, path)]

    return validate


def string_matches_regexp(pattern: str) -> Validator:
    """Require a string that matches ``pattern`` somewhere."""
    regexp = re.compile(pattern)

    def check(value: Any, key: str) -> Optional[str]:
        if not isinstance(value, str):
            return f"value for {_quote(key)} is not of type string"
        if not regexp.search(value):
            return f"value for {_quote(key)} does not match regular expression {_quote(pattern)}"
        return None

    return _validator(check)


def string_not_matches_regexp(pattern: str) -> Validator:
    """Require a string that does not match ``pattern`` anywhere."""
    regexp = re.compile(pattern)

    def check(value: Any, key: str) -> Optional[str]:
        if not isinstance(value, str):
            return f"value for {_quote(key)} is not of type string"
        if regexp.search(value):
            return f"value for {_quote(key)} does matches regular expression {_quote(pattern)}"
        return None

    return _validator(check)


def validate_all(*args: Validator) -> Validator:
    """Run every validator and collect all of their diagnostics."""

    def validate(value: Any, path: Sequence[Any]) -> list[Diagnostic]:
        return [diagnostic for validator in args for diagnostic in validator(value, path)]

    return validate


def string_in_slice(values: Iterable[str], ignore_case: bool) -> Validator:
    """Require a string equal to one of ``values``."""
    values = list(values)
    folded = {v.casefold() for v in values}

    def check(value: Any, key: str) -> Optional[str]:
        if not isinstance(value, str):
            return f"expected type of {key} to be string"
        allowed = value.casefold() in folded if ignore_case else value in values
        if not allowed:
            listed = " ".join(_quote(v) for v in values)
            return f"expected {key} to be one of [{listed}], got {value}"
        return None

    return _validator(check)


def string_len_between(minimum: int, maximum: int) -> Validator:
    """Require a string whose UTF-8 length lies within the bounds, inclusive."""

    def check(value: Any, key: str) -> Optional[str]:
        if not isinstance(value, str):
            return f"expected type of {key} to be string"
        if not minimum <= len(value.encode("utf-8")) <= maximum:
            return f"expected length of {key} to be in the range ({minimum} - {maximum}), got {value}"
        return None

    return _validator(check)


def string_does_not_contain_any(chars: str) -> Validator:
    """Require a string that contains none of the characters in ``chars``."""

    def check(value: Any, key: str) -> Optional[str]:
        if not isinstance(value, str):
            return f"expected type of {key} to be string"
        if any(char in value for char in chars):
            return f"expected value of {key} to not contain any of {_quote(chars)}, got {value}"
        return None

    return _validator(check)


def has_error(diagnostics: Iterable[Diagnostic]) -> bool:
    """True if any diagnostic is an error rather than a warning."""
    return any(not diagnostic.warning for diagnostic in diagnostics)