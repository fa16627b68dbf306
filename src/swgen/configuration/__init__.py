"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import REQUIRED_PLACEHOLDER, ConfigurationError, load_configuration
from .runtime_settings import (
    CorsSettings,
    DocumentSettings,
    OutputSettings,
    ResolutionSettings,
    Settings,
)

__all__ = [
    "CorsSettings",
    "DocumentSettings",
    "OutputSettings",
    "ResolutionSettings",
    "Settings",
    "ConfigurationError",
    "REQUIRED_PLACEHOLDER",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
