"""Terraform-style schema descriptions for resource config blocks."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Sequence

from rudderform.configs.validators import Diagnostic

Validator = Callable[[Any, tuple], list]


class ValueType(Enum):
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    LIST = "list"
    SET = "set"
    MAP = "map"


class ConfigMode(Enum):
    AUTO = "auto"
    BLOCK = "block"
    ATTR = "attr"


@dataclass
class Resource:
    """A nested object whose fields are described by ``schema``."""

    schema: dict[str, Schema] = field(default_factory=dict)


@dataclass
class Schema:
    """Description of one attribute or nested block."""

    type: ValueType
    required: bool = False
    optional: bool = False
    sensitive: bool = False
    default: Any = None
    description: str = ""
    max_items: int = 0
    config_mode: ConfigMode = ConfigMode.AUTO
    elem: Schema | Resource | None = None
    validator: Validator | None = None
    exactly_one_of: tuple[str, ...] = ()

    def is_nested_block(self) -> bool:
        """True when values are written as nested blocks rather than attributes."""
        return (
            isinstance(self.elem, Resource)
            and self.type is ValueType.LIST
            and self.config_mode is not ConfigMode.ATTR
        )

    def validate(self, value: Any, path: Sequence[Any]) -> list[Diagnostic]:
        """Check ``value`` against this schema and return the diagnostics."""
        path = tuple(path)
        if value is None:
            return []

        diagnostics: list[Diagnostic] = []
        if self.validator is not None:
            diagnostics.extend(self.validator(value, path))

        if self.type in (ValueType.LIST, ValueType.SET) and isinstance(value, list):
            if self.max_items and len(value) > self.max_items:
                diagnostics.append(Diagnostic(
                    f"Attribute supports {self.max_items} item maximum, "
                    f"but config has {len(value)} declared",
                    path,
                ))
            for index, item in enumerate(value):
                item_path = path + (index,)
                if isinstance(self.elem, Schema):
                    diagnostics.extend(self.elem.validate(item, item_path))
                elif isinstance(self.elem, Resource) and isinstance(item, Mapping):
                    diagnostics.extend(_validate_object(self.elem, item, item_path))
        return diagnostics


def _validate_object(resource: Resource, data: Mapping[str, Any], path: tuple) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for key, schema in resource.schema.items():
        key_path = path + (key,)
        if key not in data or data[key] is None:
            if schema.required:
                diagnostics.append(Diagnostic(f'The argument "{key}" is required, but no definition was found.', key_path))
            continue
        diagnostics.extend(schema.validate(data[key], key_path))
    return diagnostics