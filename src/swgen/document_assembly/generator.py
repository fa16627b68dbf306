"""Registration API assembling a Swagger 2.0 document."""

from __future__ import annotations

import dataclasses
import json
import logging
import re
import threading
from typing import TYPE_CHECKING, Any

from swgen.definition_registry import DefinitionRegistry, ResolutionQueue
from swgen.schema_model import (
    HTTP_METHODS,
    ContactObject,
    Document,
    LicenseObject,
    OperationObject,
    ParamObject,
    PathItem,
    PathItemInfo,
    ResponseObject,
    SchemaObject,
    SecurityDefinition,
)
from swgen.type_resolution import ParameterResolver, SchemaResolver, TypeMap
from swgen.type_resolution.type_kinds import python_type_name, type_of

from .document_composer import compose_document

if TYPE_CHECKING:
    from swgen.configuration import Settings

_LOGGER = logging.getLogger("swgen.generator")

DEFAULT_CORS_ALLOW_HEADERS = ("Content-Type", "api_key", "Authorization")
CORS_ALLOW_METHODS = ("GET", "POST", "DELETE", "PUT", "PATCH", "OPTIONS")
SUCCESS_DESCRIPTION = "request success"

# `{id:[0-9]+}` router patterns are reduced to `{id}`
_PATH_PARAMETER = re.compile(r"\{([^}:]+)(:[^/]+)?\}")


class PathRegistrationError(Exception):
    """Raised when a path item cannot be registered."""


class Generator:  # pylint: disable=too-many-instance-attributes,too-many-public-methods
    """Collects document metadata, definitions and path items.

    Setters return the generator so calls can be chained. Definitions and
    path items may be registered from several threads.
    """

    def __init__(self, *, max_drain_workers: int | None = None) -> None:
        self._document = Document()
        self._host = ""
        self._indent_json = False
        self._cors_enabled = False
        self._cors_allow_headers = list(DEFAULT_CORS_ALLOW_HEADERS)

        self._registry = DefinitionRegistry()
        self._queue = ResolutionQueue()
        self._type_map = TypeMap()
        self._schema_resolver = SchemaResolver(
            self._registry,
            self._queue,
            self._type_map,
            max_drain_workers=max_drain_workers,
        )
        self._parameter_resolver = ParameterResolver(self._schema_resolver, self._type_map)

        self._paths_lock = threading.Lock()
        self._paths: dict[str, PathItem] = {}

    @classmethod
    def from_settings(cls, settings: Settings) -> Generator:
        """Create a generator configured from loaded settings."""
        generator = cls(max_drain_workers=settings.resolution.drain_workers)
        info = settings.info
        generator.set_host(settings.document.host)
        generator.set_base_path(settings.document.base_path)
        generator.set_schemes(*settings.document.schemes)
        generator.set_info(info.title, info.description, info.terms_of_service, info.version)
        generator.set_contact(info.contact.name, info.contact.url, info.contact.email)
        generator.set_license(info.license.name, info.license.url)
        generator.add_extended_field("x-service-type", settings.document.service_type.value)
        for name, value in settings.extensions.items():
            generator.add_extended_field(name, value)
        for name, definition in settings.security_definitions.items():
            generator.add_security_definition(name, definition)
        generator.indent_json(settings.output.indent_json)
        generator.reflect_python_types(settings.output.reflect_python_types)
        generator.enable_cors(settings.cors.enabled, *settings.cors.allow_headers)
        return generator

    @property
    def host(self) -> str:
        return self._host

    @property
    def cors_enabled(self) -> bool:
        return self._cors_enabled

    @property
    def cors_allow_headers(self) -> tuple[str, ...]:
        return tuple(self._cors_allow_headers)

    def indent_json(self, enabled: bool) -> Generator:
        self._indent_json = enabled
        return self

    def reflect_python_types(self, enabled: bool) -> Generator:
        """Annotate schemas and parameters with the Python types they came from."""
        self._schema_resolver.reflect_types = enabled
        return self

    def enable_cors(self, enabled: bool, *allow_headers: str) -> Generator:
        """Toggle CORS headers; extra allowed headers extend the default list."""
        self._cors_enabled = enabled
        for header in allow_headers:
            if header not in self._cors_allow_headers:
                self._cors_allow_headers.append(header)
        return self

    def set_host(self, host: str) -> Generator:
        self._host = host
        return self

    def set_base_path(self, base_path: str) -> Generator:
        self._document.base_path = "/" + base_path.strip("/")
        return self

    def set_schemes(self, *schemes: str) -> Generator:
        if schemes:
            self._document.schemes = list(schemes)
        return self

    def set_info(self, title: str, description: str, term: str, version: str) -> Generator:
        self._document.info = dataclasses.replace(
            self._document.info,
            title=title,
            description=description,
            terms_of_service=term,
            version=version,
        )
        return self

    def set_contact(self, name: str, url: str, email: str) -> Generator:
        contact = ContactObject(name=name, url=url, email=email)
        self._document.info = dataclasses.replace(self._document.info, contact=contact)
        return self

    def set_license(self, name: str, url: str) -> Generator:
        license_object = LicenseObject(name=name, url=url)
        self._document.info = dataclasses.replace(self._document.info, license=license_object)
        return self

    def add_extended_field(self, name: str, value: Any) -> Generator:
        self._document.add_extended_field(name, value)
        return self

    def add_security_definition(self, name: str, definition: SecurityDefinition) -> Generator:
        self._document.security_definitions[name] = definition
        return self

    def add_type_map(self, source: Any, replacement: Any) -> Generator:
        """Resolve the exact type of ``source`` as if it were ``replacement``."""
        self._type_map.add(source, replacement)
        return self

    def parse_definition(self, sample: Any) -> SchemaObject:
        return self._schema_resolver.parse_definition(sample)

    def parse_parameters(self, sample: Any) -> tuple[str, list[ParamObject]]:
        return self._parameter_resolver.parse_parameters(sample)

    def reset_definitions(self) -> None:
        """Forget every registered and queued definition."""
        self._registry.reset()
        self._queue.reset()

    def reset_paths(self) -> None:
        with self._paths_lock:
            self._paths = {}

    def set_path_item(
        self,
        info: PathItemInfo,
        params: Any = None,
        body: Any = None,
        response: Any = None,
    ) -> None:
        """Register the operation described by ``info``.

        Registering a (path, method) pair a second time is a no-op.

        Raises:
          PathRegistrationError: If the HTTP method is unknown.
          ResolutionError: If the parameters, body or response cannot be resolved.
        """
        method = info.method.upper()
        if method not in HTTP_METHODS:
            raise PathRegistrationError(f"Unsupported HTTP method {info.method} for {info.path}")
        path = _PATH_PARAMETER.sub(lambda match: "{" + match.group(1) + "}", info.path)

        if self._is_registered(path, method):
            _LOGGER.debug("Path item %s %s already registered", method, path)
            return

        operation = OperationObject(
            summary=info.title,
            description=info.description,
            deprecated=info.deprecated,
            security=_security_requirements(info),
            extensions=dict(info.extensions),
        )
        if info.tag:
            operation.tags = [info.tag]

        if params is not None:
            if self._schema_resolver.reflect_types:
                operation.add_extended_field("x-request-py-type", python_type_name(type_of(params)))
            _, operation.parameters = self.parse_parameters(params)

        operation.responses = {"200": self._success_response(response)}

        if body is not None:
            if self._schema_resolver.reflect_types:
                operation.add_extended_field("x-request-py-type", python_type_name(type_of(body)))
            schema = self.parse_definition(body)
            if self._schema_resolver.is_schema_empty(schema):
                self._registry.delete(schema.type_name)
            else:
                operation.parameters.append(
                    ParamObject(name="body", location="body", required=True, schema=schema)
                )

        with self._paths_lock:
            item = self._paths.setdefault(path, PathItem())
            if item.has_method(method):
                _LOGGER.debug("Path item %s %s already registered", method, path)
                return
            item.set_operation(method, operation)
        _LOGGER.debug("Registered path item %s %s", method, path)

    def build_document(self, host: str | None = None) -> Document:
        """Resolve pending definitions and compose the document to emit."""
        self._schema_resolver.drain()
        with self._paths_lock:
            paths = dict(self._paths)
        return compose_document(
            self._document,
            paths,
            self._registry.export(),
            host if host else self._host,
        )

    def generate_document(self, host: str | None = None) -> bytes:
        """Return the JSON encoded document."""
        payload = self.build_document(host).to_dict()
        if self._indent_json:
            text = json.dumps(payload, indent=2, allow_nan=False)
        else:
            text = json.dumps(payload, separators=(",", ":"), allow_nan=False)
        return text.encode("utf-8")

    def _is_registered(self, path: str, method: str) -> bool:
        with self._paths_lock:
            item = self._paths.get(path)
            return item is not None and item.has_method(method)

    def _success_response(self, response: Any) -> ResponseObject:
        if response is None:
            return ResponseObject(description=SUCCESS_DESCRIPTION, schema=SchemaObject(type="null"))
        schema = self.parse_definition(response)
        return ResponseObject(description=SUCCESS_DESCRIPTION, schema=schema)


def _security_requirements(info: PathItemInfo) -> list[dict[str, list[str]]]:
    requirements: list[dict[str, list[str]]] = [{name: []} for name in info.security]
    for name, scopes in info.security_oauth2.items():
        requirements.append({name: list(scopes)})
    return requirements
