"""Reflective synthesis of Swagger schemas from Python type declarations."""

from __future__ import annotations

import dataclasses
import datetime
import logging
import threading
import typing
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Any

from swgen.definition_registry import DefinitionRegistry, ResolutionQueue
from swgen.schema_model.common_types import CommonName
from swgen.schema_model.schema_objects import SchemaObject, schema_from_common_name

from .capabilities import SchemaProvider, capability_target
from .default_values import parse_default
from .field_options import FieldOptions, field_options, is_visible
from .resolution_errors import ProviderError, ResolutionError, UnsupportedTypeError
from .type_kinds import (
    Kind,
    element_type,
    interface_methods,
    is_text_parsable,
    kind_of,
    map_value_type,
    python_type_name,
    qualified_type_name,
    resolved_type_hints,
    type_name,
    type_of,
    underlying_type,
    unwrap_optional,
)
from .type_map import TypeMap

_LOGGER = logging.getLogger("swgen.resolver")

_INTEGER_KINDS = frozenset(
    {Kind.INT, Kind.INT8, Kind.INT16, Kind.INT32, Kind.UINT, Kind.UINT8, Kind.UINT16}
)
# unsigned 32-bit values do not fit the signed int32 range
_LONG_KINDS = frozenset({Kind.INT64, Kind.UINT32, Kind.UINT64})
_COMMON_KINDS = {
    Kind.BOOL: CommonName.BOOLEAN,
    Kind.FLOAT32: CommonName.FLOAT,
    Kind.FLOAT64: CommonName.DOUBLE,
    Kind.STRING: CommonName.STRING,
}


class SchemaResolver:
    """Walks type declarations and registers named definitions.

    Struct types met inside other declarations are not expanded inline: a
    forward reference is emitted and the type is queued. ``drain`` resolves
    the queue to a fixed point, which keeps self-referential and mutually
    referential types from recursing without bound.
    """

    def __init__(
        self,
        registry: DefinitionRegistry,
        queue: ResolutionQueue,
        type_map: TypeMap,
        *,
        reflect_types: bool = False,
        max_drain_workers: int | None = None,
    ) -> None:
        self._registry = registry
        self._queue = queue
        self._type_map = type_map
        self.reflect_types = reflect_types
        self.max_drain_workers = max_drain_workers
        self._drain_lock = threading.Lock()

    def parse_definition(self, sample: Any) -> SchemaObject:
        """Resolve a sample value or type and every type it transitively references.

        Returns an inline schema for anonymous and primitive types, or a
        reference to a registered definition for named types.
        """
        schema = self.resolve(sample)
        self.drain()
        return schema

    def resolve(self, sample: Any) -> SchemaObject:
        """Resolve one sample without draining the queue."""
        t = type_of(sample)
        if isinstance(sample, SchemaProvider):
            return self._resolve_provided(sample, t)

        found, replacement = self._type_map.lookup(t)
        if found:
            return self.resolve(replacement)

        t = unwrap_optional(t)
        if isinstance(t, SchemaProvider):
            return self._resolve_provided(t, t)

        display_name = type_name(t)
        if display_name is None:
            return self.infer_schema(t)

        kind = kind_of(t)
        if kind is Kind.STRUCT and dataclasses.is_dataclass(underlying_type(t)):
            return self._resolve_named(t, display_name, self._build_struct)
        if kind is Kind.SLICE:
            return self._resolve_named(t, display_name, self._build_array)
        if kind is Kind.MAP:
            return self._resolve_named(t, display_name, self._build_map)

        schema = self.infer_schema(t)
        if not schema.ref:
            schema.type_name = schema.type
        return schema

    def infer_schema(self, t: Any) -> SchemaObject:
        """Structural inference for a bare type without registering it.

        Struct types yield a forward reference and are queued for ``drain``.
        """
        t = unwrap_optional(t)
        found, replacement = self._type_map.lookup(t)
        if found:
            if isinstance(replacement, SchemaProvider):
                return self._resolve_provided(replacement, type_of(replacement))
            return self.infer_schema(type_of(replacement))

        schema = self._infer_kind(t, kind_of(t))
        if self.reflect_types and not schema.ref:
            schema.py_type = python_type_name(t)
        return schema

    def drain(self) -> None:
        """Resolve queued definitions until the queue is empty."""
        with self._drain_lock:
            round_number = 0
            while True:
                pending = self._queue.snapshot()
                if not pending:
                    return
                round_number += 1
                _LOGGER.debug(
                    "Resolving %d queued definitions, round %d", len(pending), round_number
                )
                # names are claimed in queue order before the concurrent builds
                for sample in pending.values():
                    self._reserve_field_names(sample)
                max_workers = len(pending)
                if self.max_drain_workers is not None:
                    max_workers = max(1, min(max_workers, self.max_drain_workers))
                futures = {}
                with ThreadPoolExecutor(max_workers=max_workers) as executor:
                    for name, sample in pending.items():
                        futures[executor.submit(self.resolve, sample)] = name
                    wait(futures.keys())
                for future, name in futures.items():
                    future.result()
                    self._queue.discard(name)

    def is_schema_empty(self, schema: SchemaObject) -> bool:
        """Emptiness check that follows references into the registry."""
        if schema.ref:
            definition = self._registry.get(schema.type_name)
            if definition is None:
                return not self._queue.contains(schema.type_name)
            if definition.ref:
                return False
            return definition.is_empty()
        return schema.is_empty()

    def _resolve_provided(self, provider: Any, t: Any) -> SchemaObject:
        try:
            target = capability_target(provider, "swagger_definition")
            provided_name, definition = target.swagger_definition()
        except ResolutionError:
            raise
        except Exception as exc:  # pylint: disable=broad-exception-caught
            raise ProviderError(
                f"Definition provider {python_type_name(t)} failed: {exc}"
            ) from exc

        display_name = provided_name or type_name(t) or python_type_name(t)
        module = getattr(t, "__module__", "")
        qualified_name = f"{module}.{display_name}" if module else display_name
        name = self._registry.reserve_name((t, display_name), display_name, qualified_name)
        if self._registry.exists(name):
            return SchemaObject.reference(name)

        schema = dataclasses.replace(definition, type_name=name)
        if self.reflect_types:
            schema.py_type = python_type_name(t)
        self._registry.register(name, schema)
        return SchemaObject.reference(name)

    def _resolve_named(
        self,
        t: Any,
        display_name: str,
        build: typing.Callable[[Any], SchemaObject],
    ) -> SchemaObject:
        name = self._registry.reserve_name(t, display_name, qualified_type_name(t))
        if self._registry.exists(name):
            return SchemaObject.reference(name)

        schema = build(t)
        schema.type_name = name
        if self.reflect_types:
            schema.py_type = python_type_name(t)
        self._registry.register(name, schema)
        return SchemaObject.reference(name)

    def _build_struct(self, t: Any) -> SchemaObject:
        schema = SchemaObject(type="object")
        schema.properties = self._struct_properties(underlying_type(t), schema)
        return schema

    def _build_array(self, t: Any) -> SchemaObject:
        return SchemaObject(type="array", items=self.infer_schema(element_type(t)))

    def _build_map(self, t: Any) -> SchemaObject:
        return SchemaObject(
            type="object", additional_properties=self.infer_schema(map_value_type(t))
        )

    def _reserve_field_names(self, sample: Any) -> None:
        """Claim the definition names that building ``sample`` claims for its fields."""
        cls = underlying_type(sample)
        if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
            return
        for _, _, field_type, options in _documented_fields(cls):
            if not options.swagger_type:
                self.infer_schema(field_type)

    def _struct_properties(self, cls: Any, parent: SchemaObject) -> dict[str, SchemaObject]:
        properties: dict[str, SchemaObject] = {}
        for owner, field, field_type, options in _documented_fields(cls):
            property_name = options.property_name(field.name)
            if options.swagger_type:
                schema = schema_from_common_name(options.swagger_type)
            else:
                schema = self.infer_schema(field_type)

            if options.default is not None:
                try:
                    schema.default = parse_default(field_type, options.default)
                except ValueError as exc:
                    _LOGGER.debug(
                        "Ignoring default of %s.%s: %s", python_type_name(owner), field.name, exc
                    )

            if self.reflect_types:
                if not schema.ref:
                    schema.py_type = python_type_name(field_type)
                parent.py_property_names[property_name] = field.name
                parent.py_property_types[property_name] = python_type_name(field_type)

            properties[property_name] = schema
        return properties

    # pylint: disable-next=too-many-return-statements
    def _infer_kind(self, t: Any, kind: Kind) -> SchemaObject:
        if kind in _INTEGER_KINDS:
            return schema_from_common_name(CommonName.INTEGER)
        if kind in _LONG_KINDS:
            return schema_from_common_name(CommonName.LONG)
        common = _COMMON_KINDS.get(kind)
        if common is not None:
            return schema_from_common_name(common)
        if kind is Kind.BYTES:
            # raw bytes carry no declared shape
            return SchemaObject()
        if kind is Kind.SLICE:
            return SchemaObject(type="array", items=self.infer_schema(element_type(t)))
        if kind is Kind.MAP:
            return SchemaObject(
                type="object", additional_properties=self.infer_schema(map_value_type(t))
            )
        if kind is Kind.STRUCT:
            return self._infer_struct(t)
        if kind is Kind.INTERFACE:
            methods = interface_methods(underlying_type(t))
            if methods:
                raise UnsupportedTypeError(
                    f"Non-empty interface is not supported: {python_type_name(t)} "
                    f"declares {', '.join(methods)}"
                )
            return SchemaObject()
        raise UnsupportedTypeError(f"type {kind.value} is not supported: {python_type_name(t)}")

    def _infer_struct(self, t: Any) -> SchemaObject:
        base = underlying_type(t)
        if not isinstance(base, type):
            raise UnsupportedTypeError(
                f"Parameterized record types are not supported: {python_type_name(t)}"
            )
        if issubclass(base, datetime.datetime):
            return schema_from_common_name(CommonName.DATE_TIME)
        if issubclass(base, datetime.date):
            return schema_from_common_name(CommonName.DATE)
        if is_text_parsable(base):
            return SchemaObject(type="string")
        if isinstance(base, SchemaProvider):
            return self._resolve_provided(base, base)

        display_name = type_name(t) or python_type_name(t)
        name = self._registry.reserve_name(t, display_name, qualified_type_name(t))
        if not self._registry.exists(name):
            self._queue.add(name, t)
        return SchemaObject.reference(name)



def _documented_fields(
    cls: Any,
) -> typing.Iterator[tuple[Any, dataclasses.Field, Any, FieldOptions]]:
    """Yield the documented fields of a dataclass, flattening embedded ones in place.

    Each item is the declaring class, the field, its resolved type and its options.
    """
    hints = resolved_type_hints(cls)
    for field in dataclasses.fields(cls):
        if not is_visible(field):
            continue
        options = field_options(field)
        field_type = hints.get(field.name, field.type)

        if options.embed:
            embedded = underlying_type(unwrap_optional(field_type))
            if not dataclasses.is_dataclass(embedded):
                raise UnsupportedTypeError(
                    f"Embedded field {field.name} of {python_type_name(cls)} is not a dataclass"
                )
            yield from _documented_fields(embedded)
            continue
        if options.omitted:
            continue
        yield cls, field, field_type, options
