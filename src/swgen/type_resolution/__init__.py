"""Type resolution exports."""

from .capabilities import Definition, Enumerable, ParameterProvider, SchemaProvider, TextParsable
from .field_options import FieldOptions, api_field
from .parameter_resolver import ParameterResolver
from .resolution_errors import (
    InvalidParameterShapeError,
    InvalidParameterSourceError,
    ProviderError,
    ResolutionError,
    UnsupportedTypeError,
)
from .schema_resolver import SchemaResolver
from .type_kinds import (
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    Kind,
    UInt,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)
from .type_map import TypeMap

__all__ = [
    "Definition",
    "Enumerable",
    "ParameterProvider",
    "SchemaProvider",
    "TextParsable",
    "FieldOptions",
    "api_field",
    "ParameterResolver",
    "SchemaResolver",
    "TypeMap",
    "ResolutionError",
    "UnsupportedTypeError",
    "InvalidParameterSourceError",
    "InvalidParameterShapeError",
    "ProviderError",
    "Kind",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "UInt",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "Float32",
    "Float64",
]
