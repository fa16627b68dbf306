"""Document-level entities of a Swagger 2.0 specification, see http://swagger.io/specification/."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .extension_data import ExtensibleMixin
from .schema_objects import ParamObject, SchemaObject

SWAGGER_VERSION = "2.0"
HTTP_METHODS = ("GET", "PUT", "POST", "DELETE", "OPTIONS", "HEAD", "PATCH")


class ServiceType(str, Enum):
    """Kind of service described by the document."""

    REST = "rest"
    JSON_RPC = "json-rpc"


class SecurityType(str, Enum):
    BASIC_AUTH = "basic"
    API_KEY = "apiKey"
    OAUTH2 = "oauth2"


class APIKeyLocation(str, Enum):
    HEADER = "header"
    QUERY = "query"


class OAuth2Flow(str, Enum):
    ACCESS_CODE = "accessCode"
    APPLICATION = "application"
    IMPLICIT = "implicit"
    PASSWORD = "password"


@dataclass(frozen=True)
class ContactObject:
    """Contact information for the exposed API."""

    name: str = ""
    url: str = ""
    email: str = ""

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name}
        if self.url:
            payload["url"] = self.url
        payload["email"] = self.email
        return payload


@dataclass(frozen=True)
class LicenseObject:
    """License information for the exposed API."""

    name: str = ""
    url: str = ""

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name}
        if self.url:
            payload["url"] = self.url
        return payload


@dataclass(frozen=True)
class InfoObject:
    """Metadata about the API."""

    title: str = ""
    description: str = ""
    terms_of_service: str = ""
    contact: ContactObject = field(default_factory=ContactObject)
    license: LicenseObject = field(default_factory=LicenseObject)
    version: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "termsOfService": self.terms_of_service,
            "contact": self.contact.to_dict(),
            "license": self.license.to_dict(),
            "version": self.version,
        }


@dataclass(frozen=True)
class SecurityDefinition:  # pylint: disable=too-many-instance-attributes
    """Security scheme usable by operations."""

    type: SecurityType
    location: APIKeyLocation | None = None
    name: str = ""
    flow: OAuth2Flow | None = None
    authorization_url: str = ""
    token_url: str = ""
    scopes: Mapping[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"type": self.type.value}
        if self.location is not None:
            payload["in"] = self.location.value
        if self.name:
            payload["name"] = self.name
        if self.flow is not None:
            payload["flow"] = self.flow.value
        if self.authorization_url:
            payload["authorizationUrl"] = self.authorization_url
        if self.token_url:
            payload["tokenUrl"] = self.token_url
        if self.scopes:
            payload["scopes"] = dict(self.scopes)
        return payload


@dataclass
class ResponseObject:
    """Single response of an API operation."""

    description: str = ""
    schema: SchemaObject | None = None
    ref: str = ""
    headers: Any = None
    examples: Any = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.ref:
            payload["$ref"] = self.ref
        if self.description:
            payload["description"] = self.description
        if self.schema is not None:
            payload["schema"] = self.schema.to_dict()
        if self.headers is not None:
            payload["headers"] = self.headers
        if self.examples is not None:
            payload["examples"] = self.examples
        return payload


@dataclass
class OperationObject(ExtensibleMixin):  # pylint: disable=too-many-instance-attributes
    """Single API operation on a path, see http://swagger.io/specification/#operationObject."""

    summary: str = ""
    description: str = ""
    tags: list[str] = field(default_factory=list)
    parameters: list[ParamObject] = field(default_factory=list)
    responses: dict[str, ResponseObject] = field(default_factory=dict)
    security: list[dict[str, list[str]]] = field(default_factory=list)
    deprecated: bool = False
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.tags:
            payload["tags"] = list(self.tags)
        payload["summary"] = self.summary
        payload["description"] = self.description
        if self.parameters:
            payload["parameters"] = [param.to_dict() for param in self.parameters]
        payload["responses"] = {
            status: response.to_dict() for status, response in self.responses.items()
        }
        if self.security:
            payload["security"] = [dict(requirement) for requirement in self.security]
        if self.deprecated:
            payload["deprecated"] = True
        return self.merge_extensions(payload)


@dataclass
class PathItem:  # pylint: disable=too-many-instance-attributes
    """Operations available on a single path.

    See http://swagger.io/specification/#pathItemObject.
    """

    ref: str = ""
    get: OperationObject | None = None
    put: OperationObject | None = None
    post: OperationObject | None = None
    delete: OperationObject | None = None
    options: OperationObject | None = None
    head: OperationObject | None = None
    patch: OperationObject | None = None
    parameters: list[ParamObject] = field(default_factory=list)

    def has_method(self, method: str) -> bool:
        """Return True when an operation is already set for the HTTP method."""
        upper = method.upper()
        if upper not in HTTP_METHODS:
            return False
        return getattr(self, upper.lower()) is not None

    def set_operation(self, method: str, operation: OperationObject | None) -> None:
        upper = method.upper()
        if upper not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")
        setattr(self, upper.lower(), operation)

    def operations(self) -> Iterator[tuple[str, OperationObject]]:
        for method in HTTP_METHODS:
            operation = getattr(self, method.lower())
            if operation is not None:
                yield method, operation

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.ref:
            payload["$ref"] = self.ref
        for method in ("get", "put", "post", "delete", "options", "head", "patch"):
            operation = getattr(self, method)
            if operation is not None:
                payload[method] = operation.to_dict()
        if self.parameters:
            payload["parameters"] = [param.to_dict() for param in self.parameters]
        return payload


@dataclass
class PathItemInfo(ExtensibleMixin):  # pylint: disable=too-many-instance-attributes
    """Registration input describing a path item and its operation."""

    path: str
    method: str
    title: str = ""
    description: str = ""
    tag: str = ""
    deprecated: bool = False
    security: list[str] = field(default_factory=list)
    security_oauth2: dict[str, list[str]] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)


@dataclass
class Document(ExtensibleMixin):  # pylint: disable=too-many-instance-attributes
    """Root aggregate of a Swagger 2.0 specification."""

    info: InfoObject = field(default_factory=InfoObject)
    host: str = ""
    base_path: str = "/"
    schemes: list[str] = field(default_factory=lambda: ["http", "https"])
    paths: dict[str, PathItem] = field(default_factory=dict)
    definitions: dict[str, SchemaObject] = field(default_factory=dict)
    security_definitions: dict[str, SecurityDefinition] = field(default_factory=dict)
    version: str = SWAGGER_VERSION
    extensions: dict[str, Any] = field(default_factory=dict)

    @property
    def service_type(self) -> ServiceType:
        value = self.extensions.get("x-service-type")
        if value == ServiceType.JSON_RPC:
            return ServiceType.JSON_RPC
        return ServiceType.REST

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "swagger": self.version,
            "info": self.info.to_dict(),
        }
        if self.host:
            payload["host"] = self.host
        payload["basePath"] = self.base_path
        payload["schemes"] = list(self.schemes)
        payload["paths"] = {path: item.to_dict() for path, item in self.paths.items()}
        payload["definitions"] = {
            name: definition.to_dict() for name, definition in self.definitions.items()
        }
        if self.security_definitions:
            payload["securityDefinitions"] = {
                name: definition.to_dict()
                for name, definition in self.security_definitions.items()
            }
        return self.merge_extensions(payload)
