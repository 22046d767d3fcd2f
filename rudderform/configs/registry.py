"""Named registries of config metadata."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from rudderform.configs.meta import ConfigMeta


class Registry:
    """A set of ConfigMeta entries keyed by terraform type name."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._entries: dict[str, ConfigMeta] = {}

    def register(self, name: str, meta: ConfigMeta) -> None:
        """Add an entry; a name may be registered only once."""
        if name in self._entries:
            raise ValueError(f"name '{name}' is already registered with {self.name}")
        self._entries[name] = meta

    def entries(self) -> Mapping[str, ConfigMeta]:
        """A read-only view of the registered entries."""
        return MappingProxyType(self._entries)

    def find_api_type(self, api_type: str) -> tuple[str, ConfigMeta] | None:
        """Return the name and meta registered for ``api_type``, or None."""
        for name, meta in self._entries.items():
            if meta.api_type == api_type:
                return name, meta
        return None

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


SOURCES = Registry("sources")
DESTINATIONS = Registry("destinations")