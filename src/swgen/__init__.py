"""Swagger 2.0 document generation from Python type declarations."""

import logging

from .schema_model import (
    APIKeyLocation,
    CommonName,
    Document,
    OAuth2Flow,
    ParamObject,
    PathItemInfo,
    SchemaObject,
    SecurityDefinition,
    SecurityType,
    ServiceType,
)
from .definition_registry import DefinitionRegistry, ResolutionQueue
from .type_resolution import (
    Definition,
    Enumerable,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    InvalidParameterShapeError,
    InvalidParameterSourceError,
    ParameterProvider,
    ProviderError,
    ResolutionError,
    SchemaProvider,
    TextParsable,
    UInt,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    UnsupportedTypeError,
    api_field,
)
from .document_assembly import Generator, PathRegistrationError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "APIKeyLocation",
    "CommonName",
    "Definition",
    "DefinitionRegistry",
    "Document",
    "Enumerable",
    "Float32",
    "Float64",
    "Generator",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "InvalidParameterShapeError",
    "InvalidParameterSourceError",
    "OAuth2Flow",
    "ParamObject",
    "ParameterProvider",
    "PathItemInfo",
    "PathRegistrationError",
    "ProviderError",
    "ResolutionError",
    "ResolutionQueue",
    "SchemaObject",
    "SchemaProvider",
    "SecurityDefinition",
    "SecurityType",
    "ServiceType",
    "TextParsable",
    "UInt",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "UnsupportedTypeError",
    "api_field",
]
