"""Generation of terraform HCL and import commands from API resources."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from rudderform.configs.meta import ConfigMeta
from rudderform.configs.registry import DESTINATIONS, SOURCES, Registry
from rudderform.configs.schema import Schema

logger = logging.getLogger(__name__)

_INDENT = "  "
_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")


@dataclass
class Source:
    """A source as returned by the API."""

    id: str
    name: str = ""
    type: str = ""
    config: Any = None


@dataclass
class Destination:
    """A destination as returned by the API."""

    id: str
    name: str = ""
    type: str = ""
    config: Any = None


@dataclass
class Connection:
    """A connection between a source and a destination."""

    id: str
    source_id: str = ""
    destination_id: str = ""


@dataclass
class _Attribute:
    name: str
    expression: str


@dataclass
class _Block:
    type: str
    labels: list[str] = field(default_factory=list)
    items: list[_Attribute | _Block] = field(default_factory=list)

    def set_value(self, name: str, value: Any) -> None:
        self.items.append(_Attribute(name, _render_value(value, 1)))

    def set_raw(self, name: str, expression: str) -> None:
        self.items.append(_Attribute(name, expression))

    def render(self, depth: int = 0) -> str:
        pad = _INDENT * depth
        labels = "".join(f" {_render_string(label)}" for label in self.labels)
        lines = [f"{pad}{self.type}{labels} {{"]
        for item in self.items:
            if isinstance(item, _Block):
                lines.append(item.render(depth + 1))
            else:
                expression = _reindent(item.expression, depth + 1)
                lines.append(f"{pad}{_INDENT}{item.name} = {expression}")
        lines.append(f"{pad}}}")
        return "\n".join(lines)


def _reindent(expression: str, depth: int) -> str:
    # expressions are rendered relative to depth 1; shift continuation lines
    if depth == 1 or "\n" not in expression:
        return expression
    extra = _INDENT * (depth - 1)
    first, *rest = expression.split("\n")
    return "\n".join([first] + [extra + line for line in rest])


def _render_string(text: str) -> str:
    out = []
    for char in text:
        if char == "\\":
            out.append("\\\\")
        elif char == '"':
            out.append('\\"')
        elif char == "\n":
            out.append("\\n")
        elif char == "\r":
            out.append("\\r")
        elif char == "\t":
            out.append("\\t")
        elif ord(char) < 0x20:
            out.append(f"\\u{ord(char):04x}")
        else:
            out.append(char)
    escaped = "".join(out).replace("${", "$${").replace("%{", "%%{")
    return f'"{escaped}"'


def _render_number(value: int | float) -> str:
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)


def _render_key(key: str) -> str:
    return key if _IDENTIFIER.match(key) else _render_string(key)


def _render_value(value: Any, depth: int) -> str:
    """Render a decoded JSON value as an HCL expression at nesting ``depth``."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _render_number(value)
    if isinstance(value, str):
        return _render_string(value)
    if isinstance(value, list):
        return "[" + ", ".join(_render_value(item, depth) for item in value) + "]"
    if isinstance(value, Mapping) and value:
        pad = _INDENT * depth
        lines = ["{"]
        for key in sorted(value):
            rendered = _render_value(value[key], depth + 1)
            lines.append(f"{pad}{_INDENT}{_render_key(key)} = {rendered}")
        lines.append(f"{pad}}}")
        return "\n".join(lines)
    return "{}"


def _source_type(terraform_type: str) -> str:
    return f"rudderstack_source_{terraform_type}"


def _source_name(source: Source) -> str:
    return f"src_{source.id}"


def _destination_type(terraform_type: str) -> str:
    return f"rudderstack_destination_{terraform_type}"


def _destination_name(destination: Destination) -> str:
    return f"dst_{destination.id}"


def _connection_name(connection: Connection) -> str:
    return f"cnxn_{connection.id}"


def _generate_block(name: str, data: Mapping[str, Any], config_schema: Mapping[str, Schema]) -> _Block:
    block = _Block(name)
    for key in sorted(data):
        schema = config_schema.get(key)
        if schema is None:
            continue
        value = data[key]
        if schema.is_nested_block():
            if isinstance(value, list) and value and isinstance(value[0], Mapping):
                block.items.append(_generate_block(key, value[0], schema.elem.schema))
        else:
            block.set_value(key, value)
    return block


def _generate_config_block(config: Any, meta: ConfigMeta) -> _Block:
    try:
        state = meta.api_to_state(config)
    except Exception as exc:
        raise ValueError(f"could not convert API config to terraform state: {exc}") from exc
    if not isinstance(state, Mapping):
        raise ValueError("could not convert API config to terraform state: state is not an object")
    return _generate_block("config", state, meta.config_schema)


def _generate_resource(kind: str, resource: Source | Destination, resource_type: str,
                       resource_name: str, meta: ConfigMeta) -> _Block:
    block = _Block("resource", [resource_type, resource_name])
    block.set_value("name", resource.name)
    if not meta.skip_config:
        try:
            block.items.append(_generate_config_block(resource.config, meta))
        except ValueError as exc:
            raise ValueError(
                f"could not generate config block for {kind} '{resource.id}': {exc}"
            ) from exc
    return block


def generate_import_script(
    sources: Iterable[Source],
    destinations: Iterable[Destination],
    connections: Iterable[Connection],
    *,
    source_registry: Registry = SOURCES,
    destination_registry: Registry = DESTINATIONS,
) -> str:
    """Return ``terraform import`` commands for the resources ``generate_terraform`` writes."""
    lines = []
    found_sources: set[str] = set()
    found_destinations: set[str] = set()

    for source in sources:
        match = source_registry.find_api_type(source.type)
        if match is not None:
            found_sources.add(source.id)
            lines.append(
                f'terraform import "{_source_type(match[0])}.{_source_name(source)}" "{source.id}"'
            )

    for destination in destinations:
        match = destination_registry.find_api_type(destination.type)
        if match is not None:
            found_destinations.add(destination.id)
            lines.append(
                f'terraform import "{_destination_type(match[0])}.{_destination_name(destination)}" '
                f'"{destination.id}"'
            )

    for connection in connections:
        if connection.source_id in found_sources and connection.destination_id in found_destinations:
            lines.append(
                f'terraform import "rudderstack_connection.{_connection_name(connection)}" "{connection.id}"'
            )

    return "\n".join(lines)


def generate_terraform(
    sources: Iterable[Source],
    destinations: Iterable[Destination],
    connections: Iterable[Connection],
    *,
    source_registry: Registry = SOURCES,
    destination_registry: Registry = DESTINATIONS,
) -> str:
    """Return HCL resource blocks for the supported sources, destinations and connections."""
    blocks: list[_Block] = []

    generated_sources: dict[str, tuple[str, Source]] = {}
    for source in sources:
        match = source_registry.find_api_type(source.type)
        if match is None:
            logger.warning(
                "could not generate resource block for source '%s':  type '%s' is not supported",
                source.id, source.type,
            )
            continue
        terraform_type, meta = match
        blocks.append(_generate_resource(
            "source", source, _source_type(terraform_type), _source_name(source), meta,
        ))
        generated_sources[source.id] = (terraform_type, source)

    generated_destinations: dict[str, tuple[str, Destination]] = {}
    for destination in destinations:
        match = destination_registry.find_api_type(destination.type)
        if match is None:
            logger.warning(
                "could not generate resource block for destination '%s':  type '%s' is not supported",
                destination.id, destination.type,
            )
            continue
        terraform_type, meta = match
        blocks.append(_generate_resource(
            "destination", destination, _destination_type(terraform_type),
            _destination_name(destination), meta,
        ))
        generated_destinations[destination.id] = (terraform_type, destination)

    for connection in connections:
        source_entry = generated_sources.get(connection.source_id)
        destination_entry = generated_destinations.get(connection.destination_id)
        if source_entry is None:
            logger.warning(
                "could not generate resource block for connection '%s': connected source '%s' is not supported",
                connection.id, connection.source_id,
            )
        elif destination_entry is None:
            logger.warning(
                "could not generate resource block for connection '%s': "
                "connected destination '%s' is not supported",
                connection.id, connection.destination_id,
            )
        else:
            source_type, source = source_entry
            destination_type, destination = destination_entry
            block = _Block("resource", ["rudderstack_connection", _connection_name(connection)])
            block.set_raw("source_id", f"{_source_type(source_type)}.{_source_name(source)}.id")
            block.set_raw(
                "destination_id",
                f"{_destination_type(destination_type)}.{_destination_name(destination)}.id",
            )
            blocks.append(block)

    return "".join(block.render() + "\n\n" for block in blocks)