"""Classification of Python type declarations into schema-relevant kinds."""

from __future__ import annotations

import collections.abc
import dataclasses
import datetime
import enum
import inspect
import types
import typing
import uuid
from enum import Enum
from typing import Annotated, Any, NewType, get_args, get_origin

from .capabilities import SchemaProvider, TextParsable
from .resolution_errors import UnsupportedTypeError


class Kind(Enum):
    """Kind of a type as seen by the schema walker."""

    BOOL = "bool"
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STRING = "string"
    BYTES = "bytes"
    SLICE = "slice"
    MAP = "map"
    STRUCT = "struct"
    INTERFACE = "interface"
    UNSUPPORTED = "unsupported"


SIGNED_INT_KINDS = frozenset({Kind.INT, Kind.INT8, Kind.INT16, Kind.INT32, Kind.INT64})
UNSIGNED_INT_KINDS = frozenset({Kind.UINT, Kind.UINT8, Kind.UINT16, Kind.UINT32, Kind.UINT64})
FLOAT_KINDS = frozenset({Kind.FLOAT32, Kind.FLOAT64})

Int8 = NewType("Int8", int)
Int16 = NewType("Int16", int)
Int32 = NewType("Int32", int)
Int64 = NewType("Int64", int)
UInt = NewType("UInt", int)
UInt8 = NewType("UInt8", int)
UInt16 = NewType("UInt16", int)
UInt32 = NewType("UInt32", int)
UInt64 = NewType("UInt64", int)
Float32 = NewType("Float32", float)
Float64 = NewType("Float64", float)

_WIDTH_MARKERS: dict[Any, Kind] = {
    Int8: Kind.INT8,
    Int16: Kind.INT16,
    Int32: Kind.INT32,
    Int64: Kind.INT64,
    UInt: Kind.UINT,
    UInt8: Kind.UINT8,
    UInt16: Kind.UINT16,
    UInt32: Kind.UINT32,
    UInt64: Kind.UINT64,
    Float32: Kind.FLOAT32,
    Float64: Kind.FLOAT64,
}

_SEQUENCE_ORIGINS = (
    list,
    tuple,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
    collections.abc.Collection,
    collections.abc.Iterable,
)
_MAPPING_ORIGINS = (dict, collections.abc.Mapping, collections.abc.MutableMapping)
_ANONYMOUS_CONTAINERS = frozenset({list, tuple, set, frozenset, dict})
_UNION_ORIGINS = (typing.Union, types.UnionType)
_NONE_TYPE = type(None)


def type_of(sample: Any) -> Any:
    """Return the type declaration a sample stands for.

    Classes and typing constructs are used as given; any other value stands
    for its runtime type.
    """
    if is_type_like(sample):
        return sample
    return type(sample)


def is_type_like(sample: Any) -> bool:
    return (
        isinstance(sample, (type, NewType))
        or get_origin(sample) is not None
        or sample is Any
    )


def strip_annotated(t: Any) -> Any:
    while get_origin(t) is Annotated:
        t = get_args(t)[0]
    return t


def is_optional(t: Any) -> bool:
    t = strip_annotated(t)
    return get_origin(t) in _UNION_ORIGINS and _NONE_TYPE in get_args(t)


def unwrap_optional(t: Any) -> Any:
    """Strip ``Annotated`` and ``X | None`` wrappers down to the pointed-to type."""
    t = strip_annotated(t)
    while is_optional(t):
        remaining = [arg for arg in get_args(t) if arg is not _NONE_TYPE]
        if len(remaining) != 1:
            return typing.Union[tuple(remaining)]
        t = strip_annotated(remaining[0])
    return t


def underlying_type(t: Any) -> Any:
    """Follow user ``NewType`` declarations down to their supertype."""
    while isinstance(t, NewType) and t not in _WIDTH_MARKERS:
        t = t.__supertype__
    return t


def kind_of(t: Any) -> Kind:  # pylint: disable=too-many-return-statements,too-many-branches
    """Classify a type declaration."""
    t = underlying_type(strip_annotated(t))
    marker = _WIDTH_MARKERS.get(t) if isinstance(t, NewType) else None
    if marker is not None:
        return marker
    if t is Any or t is object:
        return Kind.INTERFACE

    origin = get_origin(t)
    if origin in _UNION_ORIGINS:
        inner = unwrap_optional(t)
        if get_origin(inner) in _UNION_ORIGINS:
            return Kind.INTERFACE
        return kind_of(inner)
    if origin is typing.Literal:
        literals = get_args(t)
        return kind_of(type(literals[0])) if literals else Kind.INTERFACE
    if origin is not None:
        if _is_sequence_class(origin):
            return Kind.SLICE
        if _is_mapping_class(origin):
            return Kind.MAP
        return kind_of(origin)

    if not isinstance(t, type):
        return Kind.UNSUPPORTED
    if issubclass(t, bool):
        return Kind.BOOL
    if issubclass(t, Enum) and not issubclass(t, (int, str)):
        return _enum_kind(t)
    if issubclass(t, int):
        return Kind.INT
    if issubclass(t, float):
        return Kind.FLOAT64
    if issubclass(t, str):
        return Kind.STRING
    if issubclass(t, (bytes, bytearray, memoryview)):
        return Kind.BYTES
    if is_struct(t):
        return Kind.STRUCT
    if _is_mapping_class(t):
        return Kind.MAP
    if _is_sequence_class(t):
        return Kind.SLICE
    if is_interface(t):
        return Kind.INTERFACE
    return Kind.UNSUPPORTED


def _enum_kind(t: type[Enum]) -> Kind:
    members = list(t)
    if not members:
        return Kind.STRING
    return kind_of(type(members[0].value))


def _is_sequence_class(t: Any) -> bool:
    return isinstance(t, type) and issubclass(t, _SEQUENCE_ORIGINS) and not issubclass(
        t, (str, bytes, bytearray, memoryview)
    )


def _is_mapping_class(t: Any) -> bool:
    return isinstance(t, type) and issubclass(t, _MAPPING_ORIGINS)


def is_struct(t: Any) -> bool:
    """Return True for types walked or special-cased as records."""
    if not isinstance(t, type):
        return False
    return (
        dataclasses.is_dataclass(t)
        or issubclass(t, datetime.date)
        or isinstance(t, SchemaProvider)
        or is_text_parsable(t)
    )


def is_text_parsable(t: Any) -> bool:
    """Return True for types documented as opaque strings."""
    return isinstance(t, type) and (issubclass(t, uuid.UUID) or isinstance(t, TextParsable))


def is_interface(t: Any) -> bool:
    if not isinstance(t, type) or dataclasses.is_dataclass(t):
        return False
    return bool(getattr(t, "_is_protocol", False)) or inspect.isabstract(t)


def interface_methods(t: Any) -> list[str]:
    """Return the public methods a protocol or abstract class requires."""
    if not isinstance(t, type):
        return []
    abstract = sorted(getattr(t, "__abstractmethods__", ()))
    if abstract:
        return abstract
    if not getattr(t, "_is_protocol", False):
        return []
    declared: list[str] = []
    for klass in t.__mro__:
        if klass in (object, typing.Protocol, typing.Generic):
            continue
        for name, value in vars(klass).items():
            if not name.startswith("_") and callable(value) and name not in declared:
                declared.append(name)
    return declared


def element_type(t: Any) -> Any:
    """Return the element type of a sequence declaration, ``Any`` when undeclared."""
    t = underlying_type(strip_annotated(t))
    origin = get_origin(t)
    args = get_args(t)
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return args[0]
        if args and all(arg == args[0] for arg in args):
            return args[0]
        return Any
    if origin is not None:
        return args[0] if args else Any
    for base in getattr(t, "__orig_bases__", ()):
        if _is_sequence_class(get_origin(base)):
            return element_type(base)
    return Any


def map_value_type(t: Any) -> Any:
    """Return the value type of a mapping declaration, ``Any`` when undeclared."""
    t = underlying_type(strip_annotated(t))
    if get_origin(t) is not None:
        args = get_args(t)
        return args[1] if len(args) == 2 else Any
    for base in getattr(t, "__orig_bases__", ()):
        if _is_mapping_class(get_origin(base)):
            return map_value_type(base)
    return Any


def type_name(t: Any) -> str | None:
    """Return the display name of a named type, or None for anonymous constructs."""
    t = strip_annotated(t)
    if isinstance(t, NewType):
        return t.__name__
    if get_origin(t) is not None or t is Any:
        return None
    if not isinstance(t, type) or t in _ANONYMOUS_CONTAINERS:
        return None
    return t.__name__


def qualified_type_name(t: Any) -> str:
    """Return ``module.qualname`` used to disambiguate colliding display names."""
    t = strip_annotated(t)
    module = getattr(t, "__module__", "")
    name = getattr(t, "__qualname__", None) or getattr(t, "__name__", None) or repr(t)
    if not module or module == "builtins":
        return name
    return f"{module}.{name}"


def python_type_name(t: Any) -> str:
    """Return a readable label of a Python type declaration for reflection output."""
    t = strip_annotated(t)
    if t is Any:
        return "typing.Any"
    if t is _NONE_TYPE:
        return "None"
    if isinstance(t, NewType):
        return qualified_type_name(t)
    origin = get_origin(t)
    if origin in _UNION_ORIGINS:
        return " | ".join(python_type_name(arg) for arg in get_args(t))
    if origin is not None:
        args = ", ".join(
            "..." if arg is Ellipsis else python_type_name(arg) for arg in get_args(t)
        )
        return f"{python_type_name(origin)}[{args}]"
    if isinstance(t, type):
        return qualified_type_name(t)
    return repr(t)


def is_enum_class(t: Any) -> bool:
    return isinstance(t, enum.EnumMeta)


def resolved_type_hints(cls: Any) -> dict[str, Any]:
    """Return the evaluated field annotations of a class."""
    try:
        # the class itself is in scope for self-references of locally declared types
        localns = {cls.__name__: cls} if isinstance(cls, type) else None
        return typing.get_type_hints(cls, localns=localns, include_extras=True)
    except (NameError, TypeError) as exc:
        raise UnsupportedTypeError(
            f"Cannot resolve annotations of {python_type_name(cls)}: {exc}"
        ) from exc
