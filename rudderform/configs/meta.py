"""Conversion of whole config objects between API and terraform state form."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from rudderform.configs.property import ConfigProperty
from rudderform.configs.schema import Schema


def _as_document(document: Any) -> Any:
    if document is None:
        return {}
    if isinstance(document, (str, bytes, bytearray)):
        if not document.strip():
            return {}
        return json.loads(document)
    return document


@dataclass
class ConfigMeta:
    """Everything known about one source or destination type's config."""

    api_type: str = ""
    skip_config: bool = False
    config_schema: dict[str, Schema] = field(default_factory=dict)
    properties: list[ConfigProperty] = field(default_factory=list)

    def state_to_api(self, state: Any) -> Any:
        """Build an API config from terraform state (a mapping or JSON text)."""
        state = _as_document(state)
        api: Any = {}
        for prop in self.properties:
            api = prop.from_state(api, state)
        return api

    def api_to_state(self, api: Any) -> Any:
        """Build terraform state from an API config (a mapping or JSON text)."""
        api = _as_document(api)
        state: Any = {}
        for prop in self.properties:
            state = prop.to_state(state, api)
        return state