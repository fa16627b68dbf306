"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from swgen.schema_model import InfoObject, SecurityDefinition, ServiceType


@dataclass(frozen=True)
class DocumentSettings:
    """Where the API is served and how it is called."""

    host: str = ""
    base_path: str = "/"
    schemes: tuple[str, ...] = ("http", "https")
    service_type: ServiceType = ServiceType.REST


@dataclass(frozen=True)
class OutputSettings:
    """Rendering options of the emitted document."""

    indent_json: bool = False
    reflect_python_types: bool = False


@dataclass(frozen=True)
class CorsSettings:
    """Cross-origin headers added when the document is served."""

    enabled: bool = False
    allow_headers: tuple[str, ...] = ()


@dataclass(frozen=True)
class ResolutionSettings:
    """Definition resolution tuning."""

    drain_workers: int | None = None


@dataclass(frozen=True)
class Settings:  # pylint: disable=too-many-instance-attributes
    """Top-level configuration aggregate."""

    path: Path | None = None
    document: DocumentSettings = field(default_factory=DocumentSettings)
    info: InfoObject = field(default_factory=InfoObject)
    output: OutputSettings = field(default_factory=OutputSettings)
    cors: CorsSettings = field(default_factory=CorsSettings)
    resolution: ResolutionSettings = field(default_factory=ResolutionSettings)
    extensions: Mapping[str, object] = field(default_factory=dict)
    security_definitions: Mapping[str, SecurityDefinition] = field(default_factory=dict)
