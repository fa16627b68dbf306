"""Thread-safe storage of named schema definitions."""

from __future__ import annotations

import dataclasses
import logging
import threading
from collections.abc import Hashable

from swgen.schema_model.schema_objects import SchemaObject

_LOGGER = logging.getLogger("swgen.definitions")


class DefinitionRegistry:
    """Named definitions keyed by the identity of the type that produced them.

    Names are reserved per type identity. The first identity to claim a
    display name keeps it; a distinct identity claiming the same display name
    later is re-keyed under its qualified name, so neither overwrites the
    other.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._definitions: dict[str, SchemaObject] = {}
        self._names: dict[Hashable, str] = {}
        self._owners: dict[str, Hashable] = {}

    def reserve_name(self, key: Hashable, display_name: str, qualified_name: str) -> str:
        """Return the definition name owned by ``key``, reserving one if needed."""
        with self._lock:
            name = self._names.get(key)
            if name is not None:
                return name
            name = display_name
            owner = self._owners.get(name)
            if owner is not None and owner != key:
                name = qualified_name
                _LOGGER.debug(
                    "Definition name %s already taken, using %s", display_name, qualified_name
                )
            self._names[key] = name
            self._owners.setdefault(name, key)
            return name

    def register(self, name: str, schema: SchemaObject) -> None:
        with self._lock:
            self._definitions[name] = schema
        _LOGGER.debug("Registered definition %s", name)

    def exists(self, name: str) -> bool:
        with self._lock:
            return name in self._definitions

    def get(self, name: str) -> SchemaObject | None:
        with self._lock:
            return self._definitions.get(name)

    def delete(self, name: str) -> None:
        with self._lock:
            self._definitions.pop(name, None)

    def reset(self) -> None:
        with self._lock:
            self._definitions = {}
            self._names = {}
            self._owners = {}

    def export(self) -> dict[str, SchemaObject]:
        """Return definitions ordered by name; top-level definitions are never references."""
        with self._lock:
            snapshot = dict(self._definitions)
        return {
            name: dataclasses.replace(snapshot[name], ref="") for name in sorted(snapshot)
        }

    def __len__(self) -> int:
        with self._lock:
            return len(self._definitions)
