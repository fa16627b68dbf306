"""Schema and parameter entities of a Swagger 2.0 document."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .common_types import COMMON_TYPES, CommonName, common_name_value, is_common_name
from .extension_data import ExtensibleMixin

REF_DEFINITION_PREFIX = "#/definitions/"


@dataclass
class SchemaObject:  # pylint: disable=too-many-instance-attributes
    """JSON schema describing a value, see http://swagger.io/specification/#schemaObject."""

    ref: str = ""
    description: str = ""
    default: Any = None
    type: str = ""
    format: str = ""
    title: str = ""
    items: SchemaObject | None = None
    additional_properties: SchemaObject | None = None
    properties: dict[str, SchemaObject] = field(default_factory=dict)
    type_name: str = ""
    py_type: str = ""
    py_property_names: dict[str, str] = field(default_factory=dict)
    py_property_types: dict[str, str] = field(default_factory=dict)

    @classmethod
    def reference(cls, type_name: str) -> SchemaObject:
        """Build a reference schema pointing at a named definition."""
        return cls(ref=REF_DEFINITION_PREFIX + type_name, type_name=type_name)

    def export(self) -> SchemaObject:
        """Return the abridged reference form carrying only ``ref`` and ``type_name``."""
        return SchemaObject(ref=self.ref, type_name=self.type_name)

    def is_empty(self) -> bool:
        """Check whether the schema describes no visible shape.

        Objects without properties, arrays without items and other schemas
        without properties, additional properties or format are empty.
        Common types and references never are.
        """
        if is_common_name(self.type_name) or self.ref:
            return False
        if self.type == "object":
            return not self.properties
        if self.type == "array":
            return self.items is None
        return not self.properties and self.additional_properties is None and not self.format

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.ref:
            payload["$ref"] = self.ref
        if self.description:
            payload["description"] = self.description
        if self.default is not None:
            payload["default"] = self.default
        if self.type:
            payload["type"] = self.type
        if self.format:
            payload["format"] = self.format
        if self.title:
            payload["title"] = self.title
        if self.items is not None:
            payload["items"] = self.items.to_dict()
        if self.additional_properties is not None:
            payload["additionalProperties"] = self.additional_properties.to_dict()
        if self.properties:
            payload["properties"] = {
                name: prop.to_dict() for name, prop in self.properties.items()
            }
        if self.py_type:
            payload["x-py-type"] = self.py_type
        if self.py_property_names:
            payload["x-py-property-names"] = dict(self.py_property_names)
        if self.py_property_types:
            payload["x-py-property-types"] = dict(self.py_property_types)
        return payload


def schema_from_common_name(name: CommonName | str) -> SchemaObject:
    """Build a schema from a common type name.

    Unknown names are used verbatim as the schema type, which allows custom
    types such as ``file``.
    """
    value = common_name_value(name)
    pair = COMMON_TYPES.get(value)
    if pair is None:
        return SchemaObject(type=value)
    json_type, json_format = pair
    return SchemaObject(type=json_type, format=json_format)


@dataclass
class ParamItemObject:
    """Item description of an array parameter, see http://swagger.io/specification/#itemsObject."""

    type: str
    ref: str = ""
    format: str = ""
    items: ParamItemObject | None = None
    collection_format: str = ""

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.ref:
            payload["$ref"] = self.ref
        payload["type"] = self.type
        if self.format:
            payload["format"] = self.format
        if self.items is not None:
            payload["items"] = self.items.to_dict()
        if self.collection_format:
            payload["collectionFormat"] = self.collection_format
        return payload


@dataclass
class ParamObject(ExtensibleMixin):  # pylint: disable=too-many-instance-attributes
    """Single operation parameter, see http://swagger.io/specification/#parameterObject."""

    name: str = ""
    location: str = ""
    ref: str = ""
    type: str = ""
    format: str = ""
    items: ParamItemObject | None = None
    schema: SchemaObject | None = None
    collection_format: str = ""
    description: str = ""
    default: Any = None
    required: bool = False
    enum: list[Any] = field(default_factory=list)
    enum_names: list[str] = field(default_factory=list)
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.ref:
            payload["$ref"] = self.ref
        payload["name"] = self.name
        payload["in"] = self.location
        if self.type:
            payload["type"] = self.type
        if self.format:
            payload["format"] = self.format
        if self.items is not None:
            payload["items"] = self.items.to_dict()
        if self.schema is not None:
            payload["schema"] = self.schema.to_dict()
        if self.collection_format:
            payload["collectionFormat"] = self.collection_format
        if self.description:
            payload["description"] = self.description
        if self.default is not None:
            payload["default"] = self.default
        if self.required:
            payload["required"] = True
        if self.enum:
            payload["enum"] = list(self.enum)
        if self.enum_names:
            payload["x-enum-names"] = list(self.enum_names)
        return self.merge_extensions(payload)
