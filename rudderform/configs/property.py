"""Mappings between API config objects and terraform state objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping

from rudderform.configs.jsonpath import assign, contains, lookup

# (config, state) -> new config
FromState = Callable[[Any, Any], Any]
# (state, config) -> new state
ToState = Callable[[Any, Any], Any]
ValueFilter = Callable[[Any], bool]
Condition = Callable[[Any], bool]


@dataclass(frozen=True)
class ConfigProperty:
    """How one API config property maps to terraform state and back."""

    to_state: ToState
    from_state: FromState


@dataclass(frozen=True)
class APINestedObject:
    """An API list of objects whose values sit under ``nested_key``."""

    terraform_key: str
    nested_key: str


@dataclass(frozen=True)
class _TerraformNestedObject:
    api_key: str
    nested_key: str


def _get(document: Any, path: str) -> tuple[bool, Any]:
    try:
        return True, lookup(document, path)
    except KeyError:
        return False, None


def skip_zero_value(value: Any) -> bool:
    """True for zero values: empty string, zero, false, null or an empty list."""
    if isinstance(value, list):
        return not value
    if isinstance(value, dict):
        return False
    if value is None or value == "":
        return True
    return isinstance(value, (int, float)) and value == 0


def _copy_from_state(api_key: str, terraform_key: str, filters: Iterable[ValueFilter] = ()) -> FromState:
    filters = tuple(filters)

    def from_state(config: Any, state: Any) -> Any:
        found, value = _get(state, terraform_key)
        if not found or value is None or any(skip(value) for skip in filters):
            return config
        return assign(config, api_key, value)

    return from_state


def _copy_to_state(api_key: str, terraform_key: str) -> ToState:
    def to_state(state: Any, config: Any) -> Any:
        found, value = _get(config, api_key)
        if not found:
            return state
        return assign(state, terraform_key, value)

    return to_state


def simple(api_key: str, terraform_key: str, *args: ValueFilter) -> ConfigProperty:
    """Copy a value between an API key and a terraform key.

    Each extra argument is a filter; a state value for which any filter
    returns True is not written to the API config.
    """
    return ConfigProperty(
        to_state=_copy_to_state(api_key, terraform_key),
        from_state=_copy_from_state(api_key, terraform_key, args),
    )


def conditional(api_key: str, terraform_key: str, condition: Condition) -> ConfigProperty:
    """Like ``simple``, but state is written only when ``condition(config)`` holds."""
    copy_to_state = _copy_to_state(api_key, terraform_key)

    def to_state(state: Any, config: Any) -> Any:
        if not condition(config):
            return state
        return copy_to_state(state, config)

    return ConfigProperty(to_state=to_state, from_state=_copy_from_state(api_key, terraform_key))


def equals(key: str, value: str) -> Condition:
    """A condition that holds when the config has ``key`` set to ``value``."""

    def condition(config: Any) -> bool:
        found, actual = _get(config, key)
        return found and type(actual) is type(value) and actual == value

    return condition


def discriminator(api_key: str, values: Mapping[str, Any]) -> ConfigProperty:
    """Set ``api_key`` from the first terraform key of ``values`` found in state.

    Nothing is written to state; empty state lists are ignored.
    """
    values = dict(values)

    def from_state(config: Any, state: Any) -> Any:
        for terraform_key, api_value in values.items():
            found, value = _get(state, terraform_key)
            if not found:
                continue
            if isinstance(value, list) and not value:
                continue
            return assign(config, api_key, api_value)
        return config

    return ConfigProperty(to_state=lambda state, config: state, from_state=from_state)


def array_with_strings(root_api_key: str, nested_api_field: str, terraform_key: str) -> ConfigProperty:
    """Map a terraform list of strings to an API list of single-field objects."""

    def from_state(config: Any, state: Any) -> Any:
        found, value = _get(state, terraform_key)
        if not found or value is None:
            return config
        if not isinstance(value, list):
            raise TypeError("provided value was not an array")
        if not value:
            return config
        return assign(config, root_api_key, [{nested_api_field: item} for item in value])

    def to_state(state: Any, config: Any) -> Any:
        found, value = _get(config, root_api_key)
        if not found or not isinstance(value, list):
            return state
        contents = [
            item[nested_api_field]
            for item in value
            if isinstance(item, dict) and nested_api_field in item
        ]
        return assign(state, terraform_key, contents)

    return ConfigProperty(to_state=to_state, from_state=from_state)


def get_inverse_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Invert an API-to-terraform field map into a terraform-to-API one."""
    inverse: dict[str, Any] = {}
    for api_key, target in fields.items():
        if isinstance(target, str):
            inverse[target] = api_key
        elif isinstance(target, APINestedObject):
            inverse[target.terraform_key] = _TerraformNestedObject(api_key, target.nested_key)
    return inverse


def get_terraform_value(config_value: Iterable[Any], fields: Mapping[str, Any]) -> list[dict[str, Any]]:
    """Convert API objects to terraform objects using an API-keyed field map."""
    contents = []
    for item in config_value:
        converted: dict[str, Any] = {}
        if isinstance(item, dict):
            for api_key, value in item.items():
                target = fields.get(api_key)
                if isinstance(target, str):
                    converted[target] = value
                elif isinstance(target, APINestedObject):
                    converted[target.terraform_key] = [nested.get(target.nested_key) for nested in value]
        if converted:
            contents.append(converted)
    return contents


def get_config_value(state_value: Iterable[Any], fields: Mapping[str, Any]) -> list[dict[str, Any]]:
    """Convert terraform objects to API objects using an inverted field map."""
    contents = []
    for item in state_value:
        converted: dict[str, Any] = {}
        if isinstance(item, dict):
            for terraform_key, value in item.items():
                target = fields.get(terraform_key)
                if isinstance(target, str):
                    converted[target] = value
                elif isinstance(target, _TerraformNestedObject):
                    converted[target.api_key] = [{target.nested_key: nested} for nested in value]
        if converted:
            contents.append(converted)
    return contents


def array_with_objects(root_api_key: str, terraform_key: str, fields: Mapping[str, Any]) -> ConfigProperty:
    """Map a terraform list of objects to an API list of objects, renaming fields."""
    fields = dict(fields)
    inverse_fields = get_inverse_fields(fields)

    def from_state(config: Any, state: Any) -> Any:
        found, value = _get(state, terraform_key)
        if not found or value is None:
            return config
        if not isinstance(value, list):
            raise TypeError("provided value was not an array")
        contents = get_config_value(value, inverse_fields)
        if not contents:
            return config
        return assign(config, root_api_key, contents)

    def to_state(state: Any, config: Any) -> Any:
        found, value = _get(config, root_api_key)
        if not found or not isinstance(value, list):
            return state
        return assign(state, terraform_key, get_terraform_value(value, fields))

    return ConfigProperty(to_state=to_state, from_state=from_state)