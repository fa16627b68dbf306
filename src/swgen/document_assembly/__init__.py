"""Document assembly exports."""

from .document_composer import compose_document
from .generator import (
    CORS_ALLOW_METHODS,
    DEFAULT_CORS_ALLOW_HEADERS,
    Generator,
    PathRegistrationError,
)

__all__ = [
    "CORS_ALLOW_METHODS",
    "DEFAULT_CORS_ALLOW_HEADERS",
    "Generator",
    "PathRegistrationError",
    "compose_document",
]
