"""Optional behaviors a type may implement to describe itself."""

from __future__ import annotations

import inspect
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from swgen.schema_model.schema_objects import ParamObject, SchemaObject


@runtime_checkable
class SchemaProvider(Protocol):  # pylint: disable=too-few-public-methods
    """Provides its own definition name and schema.

    An empty name falls back to the type name. Types resolved by annotation
    are asked through a default-constructed instance unless the method is a
    classmethod or staticmethod.
    """

    def swagger_definition(self) -> tuple[str, SchemaObject]: ...


@runtime_checkable
class ParameterProvider(Protocol):  # pylint: disable=too-few-public-methods
    """Provides its own parameter list, bypassing field inspection."""

    def swagger_parameters(self) -> tuple[str, Sequence[ParamObject]]: ...


@runtime_checkable
class Enumerable(Protocol):  # pylint: disable=too-few-public-methods
    """Lists its legal values and their display names."""

    def swagger_enum(self) -> tuple[Sequence[Any], Sequence[str]]: ...


@runtime_checkable
class TextParsable(Protocol):  # pylint: disable=too-few-public-methods
    """Parses itself from text; documented as an opaque string."""

    def from_text(self, text: str) -> Any: ...


@dataclass
class Definition:
    """Ready-made schema provider wrapping an explicit schema and name."""

    schema: SchemaObject = field(default_factory=SchemaObject)
    type_name: str = ""

    def swagger_definition(self) -> tuple[str, SchemaObject]:
        return self.type_name, self.schema


def capability_target(sample: Any, method_name: str) -> Any:
    """Return the object a capability method is called on.

    Instances answer for themselves. A class answers directly when the method
    is a classmethod or staticmethod, otherwise through an instance built
    with no arguments, or through the first member of an enumeration.
    """
    if not isinstance(sample, type):
        return sample
    declared = inspect.getattr_static(sample, method_name, None)
    if isinstance(declared, (classmethod, staticmethod)):
        return sample
    if issubclass(sample, Enum):
        for member in sample:
            return member
    return sample()
