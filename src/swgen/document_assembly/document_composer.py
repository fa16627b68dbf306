"""Composition of the root document from registered paths and definitions."""

from __future__ import annotations

import copy
import dataclasses
from collections.abc import Mapping

from swgen.schema_model import Document, PathItem, SchemaObject, ServiceType


def compose_document(
    template: Document,
    paths: Mapping[str, PathItem],
    definitions: Mapping[str, SchemaObject],
    host: str,
) -> Document:
    """Build the document to emit without mutating the registered path items.

    JSON-RPC services only expose POST operations: paths without one are
    dropped and the other method slots of the remaining paths are cleared.
    """
    json_rpc = template.service_type is ServiceType.JSON_RPC
    composed_paths: dict[str, PathItem] = {}
    for path in sorted(paths):
        item = paths[path]
        if json_rpc:
            if not item.has_method("POST"):
                continue
            item = PathItem(ref=item.ref, post=item.post, parameters=list(item.parameters))
        else:
            item = copy.copy(item)
        composed_paths[path] = item

    return dataclasses.replace(
        template,
        host=host,
        schemes=list(template.schemes),
        paths=composed_paths,
        definitions={name: definitions[name] for name in sorted(definitions)},
        security_definitions=dict(template.security_definitions),
        extensions=dict(template.extensions),
    )
