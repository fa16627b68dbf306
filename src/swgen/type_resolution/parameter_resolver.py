"""Derivation of operation parameters from dataclass declarations."""

from __future__ import annotations

import dataclasses
import logging
from enum import Enum
from typing import Any

from swgen.schema_model.schema_objects import (
    ParamItemObject,
    ParamObject,
    SchemaObject,
    schema_from_common_name,
)

from .capabilities import Enumerable, ParameterProvider, capability_target
from .default_values import parse_default
from .field_options import FieldOptions, field_options, is_visible
from .resolution_errors import (
    InvalidParameterShapeError,
    InvalidParameterSourceError,
    ProviderError,
    ResolutionError,
)
from .schema_resolver import SchemaResolver
from .type_kinds import (
    is_enum_class,
    python_type_name,
    resolved_type_hints,
    type_name,
    type_of,
    underlying_type,
    unwrap_optional,
)
from .type_map import TypeMap

_LOGGER = logging.getLogger("swgen.parameters")

PATH_LOCATION = "path"
QUERY_LOCATION = "query"


class ParameterResolver:
    """Turns the public fields of a dataclass into parameter objects."""

    def __init__(self, schema_resolver: SchemaResolver, type_map: TypeMap) -> None:
        self._schema_resolver = schema_resolver
        self._type_map = type_map

    def parse_parameters(self, sample: Any) -> tuple[str, list[ParamObject]]:
        """Return the source type name and its parameter list.

        Raises:
          ProviderError: If the sample's own parameter provider fails.
          InvalidParameterSourceError: If the sample is not a dataclass.
          InvalidParameterShapeError: If a field cannot be expressed as a parameter.
        """
        if isinstance(sample, ParameterProvider):
            return _provided_parameters(sample)

        t = unwrap_optional(type_of(sample))
        found, replacement = self._type_map.lookup(t)
        if found:
            return self.parse_parameters(replacement)

        cls = underlying_type(t)
        if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
            raise InvalidParameterSourceError(
                f"Parameters require a dataclass, got {python_type_name(t)}"
            )

        hints = resolved_type_hints(cls)
        params: list[ParamObject] = []
        for field in dataclasses.fields(cls):
            if not is_visible(field):
                continue
            options = field_options(field)
            if options.embed:
                continue
            binding = options.parameter_name()
            if binding is None:
                continue
            name, via_path = binding
            field_type = hints.get(field.name, field.type)
            params.append(
                self._build_parameter(cls, field.name, field_type, name, via_path, options)
            )

        return type_name(t) or python_type_name(t), params

    def _build_parameter(  # pylint: disable=too-many-arguments
        self,
        owner: type,
        attribute: str,
        field_type: Any,
        name: str,
        via_path: bool,
        options: FieldOptions,
    ) -> ParamObject:
        param = ParamObject(
            name=name,
            location=options.location or (PATH_LOCATION if via_path else QUERY_LOCATION),
            description=options.description,
            required=options.required,
        )

        enum_values = _enum_values(unwrap_optional(field_type))
        if enum_values is not None:
            param.enum, param.enum_names = enum_values

        schema = self._parameter_schema(field_type, options)
        label = f"{python_type_name(owner)}.{attribute}"
        if not schema.type:
            raise InvalidParameterShapeError(f"Parameter {label} has no primitive type")
        param.type = schema.type
        param.format = schema.format

        if schema.items is not None:
            if schema.items.ref or schema.items.type == "array":
                raise InvalidParameterShapeError(
                    f"Array parameter {label} must have primitive items"
                )
            param.items = ParamItemObject(type=schema.items.type, format=schema.items.format)
            param.collection_format = "multi"

        if options.default is not None:
            try:
                param.default = parse_default(field_type, options.default)
            except ValueError as exc:
                _LOGGER.debug("Ignoring default of parameter %s: %s", label, exc)

        if self._schema_resolver.reflect_types:
            param.add_extended_field("x-py-name", attribute)
            param.add_extended_field("x-py-type", python_type_name(field_type))
        return param

    def _parameter_schema(self, field_type: Any, options: FieldOptions) -> SchemaObject:
        if options.swagger_type:
            return schema_from_common_name(options.swagger_type)
        return self._schema_resolver.infer_schema(field_type)


def _provided_parameters(provider: Any) -> tuple[str, list[ParamObject]]:
    try:
        target = capability_target(provider, "swagger_parameters")
        name, params = target.swagger_parameters()
    except ResolutionError:
        raise
    except Exception as exc:  # pylint: disable=broad-exception-caught
        raise ProviderError(
            f"Parameter provider {python_type_name(type_of(provider))} failed: {exc}"
        ) from exc
    return name, list(params)


def _enum_values(t: Any) -> tuple[list[Any], list[str]] | None:
    if isinstance(t, Enumerable):
        try:
            values, names = capability_target(t, "swagger_enum").swagger_enum()
        except ResolutionError:
            raise
        except Exception as exc:  # pylint: disable=broad-exception-caught
            raise ProviderError(f"Enum provider {python_type_name(t)} failed: {exc}") from exc
        return list(values), list(names)
    if is_enum_class(t):
        members: list[Enum] = list(t)
        return [member.value for member in members], [member.name for member in members]
    return None
