"""Config properties and schema shared by all destinations."""

from __future__ import annotations

from typing import Iterable

from rudderform.configs.property import APINestedObject, ConfigProperty, array_with_objects
from rudderform.configs.schema import ConfigMode, Resource, Schema, ValueType
from rudderform.configs.validators import string_in_slice

CONSENT_MANAGEMENT_KEY = "consent_management"


def camel_to_snake(s: str) -> str:
    """Convert camelCase to snake_case; only ASCII capitals are split."""
    parts = []
    for position, char in enumerate(s):
        if "A" <= char <= "Z":
            if position != 0:
                parts.append("_")
            parts.append(char.lower())
        else:
            parts.append(char)
    return "".join(parts)


def _provider_schema() -> Schema:
    return Schema(
        type=ValueType.LIST,
        optional=True,
        config_mode=ConfigMode.ATTR,
        description="Allows you to specify consent configuration data for multiple providers.",
        elem=Resource({
            "provider": Schema(
                type=ValueType.STRING,
                required=True,
                validator=string_in_slice(["oneTrust", "ketch", "custom"], False),
                description="The provider name.",
            ),
            "resolution_strategy": Schema(
                type=ValueType.STRING,
                optional=True,
                validator=string_in_slice(["and", "or", ""], False),
                description="The resolution strategy for the provider.",
            ),
            "consents": Schema(
                type=ValueType.LIST,
                required=True,
                description="The list of consent IDs for the provider.",
                elem=Schema(type=ValueType.STRING),
            ),
        }),
    )


def config_meta_for_generic_consent_management(
    supported_source_types: Iterable[str] | None,
) -> tuple[list[ConfigProperty], dict[str, Schema]]:
    """Consent management properties and schema for the given source types."""
    properties: list[ConfigProperty] = []
    schema: dict[str, Schema] = {}
    source_types = list(supported_source_types or ())
    if not source_types:
        return properties, schema

    elements: dict[str, Schema] = {}
    for source_type in source_types:
        terraform_type = camel_to_snake(source_type)
        properties.append(array_with_objects(
            f"consentManagement.{source_type}",
            f"{CONSENT_MANAGEMENT_KEY}.0.{terraform_type}",
            {
                "provider": "provider",
                "resolutionStrategy": "resolution_strategy",
                "consents": APINestedObject(terraform_key="consents", nested_key="consent"),
            },
        ))
        elements[terraform_type] = _provider_schema()

    schema[CONSENT_MANAGEMENT_KEY] = Schema(
        type=ValueType.LIST,
        optional=True,
        max_items=1,
        description="Allows you to specify consent configuration data for multiple providers for each source type.",
        elem=Resource(elements),
    )
    return properties, schema


def common_config_meta(
    supported_source_types: Iterable[str] | None,
) -> tuple[list[ConfigProperty], dict[str, Schema]]:
    """All properties and schema entries common to destinations."""
    properties, schema = config_meta_for_generic_consent_management(supported_source_types)
    return list(properties), dict(schema)