"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from swgen.schema_model import (
    APIKeyLocation,
    ContactObject,
    InfoObject,
    LicenseObject,
    OAuth2Flow,
    SecurityDefinition,
    SecurityType,
    ServiceType,
)

from .runtime_settings import (
    CorsSettings,
    DocumentSettings,
    OutputSettings,
    ResolutionSettings,
    Settings,
)

REQUIRED_PLACEHOLDER = "<REQUIRED>"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Settings:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return Settings(
        path=path,
        document=_parse_document_section(parsed.get("document")),
        info=_parse_info_section(parsed.get("info")),
        output=_parse_output_section(parsed.get("output")),
        cors=_parse_cors_section(parsed.get("cors")),
        resolution=_parse_resolution_section(parsed.get("resolution")),
        extensions=_parse_extensions_section(parsed.get("extensions")),
        security_definitions=_parse_security_section(parsed.get("security_definitions")),
    )


def _parse_document_section(value: Any) -> DocumentSettings:
    section = _optional_mapping(value, "document")
    host = _optional_string(section.get("host"), "document.host") or ""
    base_path = _optional_string(section.get("base_path"), "document.base_path") or "/"
    schemes = _normalize_string_sequence(section.get("schemes"), "document.schemes")
    service_type_raw = _optional_string(section.get("service_type"), "document.service_type")
    try:
        service_type = ServiceType(service_type_raw or ServiceType.REST.value)
    except ValueError as exc:
        allowed = ", ".join(item.value for item in ServiceType)
        raise ConfigurationError(f"document.service_type must be one of: {allowed}.") from exc
    return DocumentSettings(
        host=host,
        base_path=base_path,
        schemes=schemes or ("http", "https"),
        service_type=service_type,
    )


def _parse_info_section(value: Any) -> InfoObject:
    section = _require_mapping(value, "info")
    contact = _optional_mapping(section.get("contact"), "info.contact")
    license_section = _optional_mapping(section.get("license"), "info.license")
    return InfoObject(
        title=_require_non_empty_string(section.get("title"), "info.title"),
        version=_require_non_empty_string(section.get("version"), "info.version"),
        description=_optional_string(section.get("description"), "info.description") or "",
        terms_of_service=_optional_string(
            section.get("terms_of_service"), "info.terms_of_service"
        )
        or "",
        contact=ContactObject(
            name=_optional_string(contact.get("name"), "info.contact.name") or "",
            url=_optional_string(contact.get("url"), "info.contact.url") or "",
            email=_optional_string(contact.get("email"), "info.contact.email") or "",
        ),
        license=LicenseObject(
            name=_optional_string(license_section.get("name"), "info.license.name") or "",
            url=_optional_string(license_section.get("url"), "info.license.url") or "",
        ),
    )


def _parse_output_section(value: Any) -> OutputSettings:
    section = _optional_mapping(value, "output")
    return OutputSettings(
        indent_json=_optional_bool(section.get("indent_json"), "output.indent_json"),
        reflect_python_types=_optional_bool(
            section.get("reflect_python_types"), "output.reflect_python_types"
        ),
    )


def _parse_cors_section(value: Any) -> CorsSettings:
    section = _optional_mapping(value, "cors")
    return CorsSettings(
        enabled=_optional_bool(section.get("enabled"), "cors.enabled"),
        allow_headers=_normalize_string_sequence(
            section.get("allow_headers"), "cors.allow_headers"
        ),
    )


def _parse_resolution_section(value: Any) -> ResolutionSettings:
    section = _optional_mapping(value, "resolution")
    drain_workers = section.get("drain_workers")
    if drain_workers is None:
        return ResolutionSettings()
    return ResolutionSettings(
        drain_workers=_require_positive_int(drain_workers, "resolution.drain_workers")
    )


def _parse_extensions_section(value: Any) -> dict[str, Any]:
    section = _optional_mapping(value, "extensions")
    extensions: dict[str, Any] = {}
    for key, item in section.items():
        if not isinstance(key, str) or not key.startswith("x-"):
            raise ConfigurationError(f"extensions.{key} must start with 'x-'.")
        if item == REQUIRED_PLACEHOLDER:
            raise ConfigurationError(f"extensions.{key} must not be a placeholder.")
        extensions[key] = item
    return extensions


def _parse_security_section(value: Any) -> dict[str, SecurityDefinition]:
    section = _optional_mapping(value, "security_definitions")
    definitions: dict[str, SecurityDefinition] = {}
    for name, raw in section.items():
        label = f"security_definitions.{name}"
        definition = _require_mapping(raw, label)
        security_type = _parse_choice(definition.get("type"), SecurityType, f"{label}.type")
        location_raw = definition.get("in")
        flow_raw = definition.get("flow")
        scopes = _optional_mapping(definition.get("scopes"), f"{label}.scopes")
        definitions[str(name)] = SecurityDefinition(
            type=security_type,
            location=None
            if location_raw is None
            else _parse_choice(location_raw, APIKeyLocation, f"{label}.in"),
            name=_optional_string(definition.get("name"), f"{label}.name") or "",
            flow=None if flow_raw is None else _parse_choice(flow_raw, OAuth2Flow, f"{label}.flow"),
            authorization_url=_optional_string(
                definition.get("authorization_url"), f"{label}.authorization_url"
            )
            or "",
            token_url=_optional_string(definition.get("token_url"), f"{label}.token_url") or "",
            scopes={str(scope): str(description) for scope, description in scopes.items()},
        )
    return definitions


def _parse_choice(value: Any, choices: Any, field_name: str) -> Any:
    raw = _require_non_empty_string(value, field_name)
    try:
        return choices(raw)
    except ValueError as exc:
        allowed = ", ".join(item.value for item in choices)
        raise ConfigurationError(f"{field_name} must be one of: {allowed}.") from exc


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(item.strip() for item in value.split(",") if item.strip())
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    if stripped == REQUIRED_PLACEHOLDER:
        raise ConfigurationError(f"{field_name} must be set.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if stripped == REQUIRED_PLACEHOLDER:
        raise ConfigurationError(f"{field_name} must be set.")
    return stripped or None


def _optional_bool(value: Any, field_name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
