"""ASGI application serving the generated document."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from swgen.document_assembly import CORS_ALLOW_METHODS, Generator
from swgen.type_resolution import ResolutionError

_LOGGER = logging.getLogger("swgen.http")


def create_document_app(generator: Generator) -> FastAPI:
    """Build an application serving the document of ``generator`` on every GET path.

    The document host is the generator's host, or the ``Host`` header of the
    request when none is configured. CORS headers are added when the
    generator has CORS enabled.
    """
    app = FastAPI(title="swgen", docs_url=None, redoc_url=None, openapi_url=None)

    if generator.cors_enabled:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=list(CORS_ALLOW_METHODS),
            allow_headers=list(generator.cors_allow_headers),
        )

    @app.get("/{path:path}")
    def swagger_document(path: str, request: Request) -> Response:
        host = generator.host or request.headers.get("host", "")
        try:
            body = generator.generate_document(host)
        except ResolutionError as exc:
            _LOGGER.error("Document generation failed for /%s: %s", path, exc)
            return PlainTextResponse(str(exc), status_code=500)
        return Response(content=body, media_type="application/json")

    return app
