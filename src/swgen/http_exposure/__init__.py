"""HTTP exposure exports."""

from .document_app import create_document_app

__all__ = ["create_document_app"]
