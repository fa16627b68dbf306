"""Swagger 2.0 object model exports."""

from .common_types import COMMON_TYPES, CommonName, is_common_name
from .document_objects import (
    HTTP_METHODS,
    APIKeyLocation,
    ContactObject,
    Document,
    InfoObject,
    LicenseObject,
    OAuth2Flow,
    OperationObject,
    PathItem,
    PathItemInfo,
    ResponseObject,
    SecurityDefinition,
    SecurityType,
    ServiceType,
)
from .extension_data import ExtensibleMixin, merge_extensions
from .schema_objects import (
    REF_DEFINITION_PREFIX,
    ParamItemObject,
    ParamObject,
    SchemaObject,
    schema_from_common_name,
)

__all__ = [
    "APIKeyLocation",
    "COMMON_TYPES",
    "CommonName",
    "ContactObject",
    "Document",
    "ExtensibleMixin",
    "HTTP_METHODS",
    "InfoObject",
    "LicenseObject",
    "OAuth2Flow",
    "OperationObject",
    "ParamItemObject",
    "ParamObject",
    "PathItem",
    "PathItemInfo",
    "REF_DEFINITION_PREFIX",
    "ResponseObject",
    "SchemaObject",
    "SecurityDefinition",
    "SecurityType",
    "ServiceType",
    "is_common_name",
    "merge_extensions",
    "schema_from_common_name",
]
