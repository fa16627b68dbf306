"""Errors raised while turning Python types into schemas."""

from __future__ import annotations


class ResolutionError(Exception):
    """Base class for schema and parameter resolution failures."""


class UnsupportedTypeError(ResolutionError):
    """Raised for types without a schema representation; a defect in the type model."""


class InvalidParameterSourceError(ResolutionError):
    """Raised when parameters are requested from something that is not a dataclass."""


class InvalidParameterShapeError(ResolutionError):
    """Raised when a parameter field resolves to a shape parameters cannot express."""


class ProviderError(ResolutionError):
    """Raised when a type's own definition or parameter provider fails."""
