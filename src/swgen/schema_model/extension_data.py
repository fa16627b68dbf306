"""Vendor extension support shared by document entities."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class ExtensibleMixin:
    """Adds an ``x-`` field side-table to a dataclass entity.

    The host dataclass declares ``extensions: dict[str, Any]``.
    """

    extensions: dict[str, Any]

    def add_extended_field(self, name: str, value: Any) -> None:
        self.extensions[name] = value

    def merge_extensions(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Inline the extension fields into the serialized entity."""
        return merge_extensions(payload, self.extensions)


def merge_extensions(payload: Mapping[str, Any], extensions: Mapping[str, Any]) -> dict[str, Any]:
    """Return one flat mapping holding the declared and the extension fields.

    An empty payload yields just the extensions. Extension keys win over
    declared keys with the same name.
    """
    if not extensions:
        return dict(payload)
    if not payload:
        return dict(extensions)
    merged = dict(payload)
    merged.update(extensions)
    return merged
