"""Process-wide generator for applications that register paths at import time."""

from __future__ import annotations

from typing import Any

from swgen.schema_model import ParamObject, PathItemInfo, SchemaObject

from .generator import Generator

_DEFAULT_GENERATOR = Generator()


def default_generator() -> Generator:
    return _DEFAULT_GENERATOR


def enable_cors(enabled: bool, *allow_headers: str) -> Generator:
    return _DEFAULT_GENERATOR.enable_cors(enabled, *allow_headers)


def set_host(host: str) -> Generator:
    return _DEFAULT_GENERATOR.set_host(host)


def set_base_path(base_path: str) -> Generator:
    return _DEFAULT_GENERATOR.set_base_path(base_path)


def set_contact(name: str, url: str, email: str) -> Generator:
    return _DEFAULT_GENERATOR.set_contact(name, url, email)


def set_info(title: str, description: str, term: str, version: str) -> Generator:
    return _DEFAULT_GENERATOR.set_info(title, description, term, version)


def set_license(name: str, url: str) -> Generator:
    return _DEFAULT_GENERATOR.set_license(name, url)


def add_extended_field(name: str, value: Any) -> Generator:
    return _DEFAULT_GENERATOR.add_extended_field(name, value)


def add_type_map(source: Any, replacement: Any) -> Generator:
    return _DEFAULT_GENERATOR.add_type_map(source, replacement)


def parse_definition(sample: Any) -> SchemaObject:
    return _DEFAULT_GENERATOR.parse_definition(sample)


def parse_parameters(sample: Any) -> tuple[str, list[ParamObject]]:
    return _DEFAULT_GENERATOR.parse_parameters(sample)


def set_path_item(
    info: PathItemInfo, params: Any = None, body: Any = None, response: Any = None
) -> None:
    _DEFAULT_GENERATOR.set_path_item(info, params, body, response)


def reset_definitions() -> None:
    _DEFAULT_GENERATOR.reset_definitions()


def reset_paths() -> None:
    _DEFAULT_GENERATOR.reset_paths()


def generate_document(host: str | None = None) -> bytes:
    return _DEFAULT_GENERATOR.generate_document(host)
