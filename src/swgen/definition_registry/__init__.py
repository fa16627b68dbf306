"""Definition registry exports."""

from .registry import DefinitionRegistry
from .resolution_queue import ResolutionQueue

__all__ = ["DefinitionRegistry", "ResolutionQueue"]
