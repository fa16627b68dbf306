"""Generator registration tests."""

from __future__ import annotations

import json
from dataclasses import dataclass

import pytest
from swgen.configuration import (
    CorsSettings,
    DocumentSettings,
    OutputSettings,
    ResolutionSettings,
    Settings,
)
from swgen.document_assembly import Generator, PathRegistrationError
from swgen.schema_model import (
    APIKeyLocation,
    InfoObject,
    PathItemInfo,
    SecurityDefinition,
    SecurityType,
    ServiceType,
)
from swgen.type_resolution import Int64, api_field


@dataclass
class Pet:
    id: Int64
    name: str


@dataclass
class PetPath:
    pet_id: Int64 = api_field(path="id", value=0)


@dataclass
class EmptyBody:
    _secret: str = ""


def _document(generator: Generator) -> dict:
    return json.loads(generator.generate_document())


def test_base_path_is_normalized() -> None:
    generator = Generator()

    assert _document(generator.set_base_path("api/v1/"))["basePath"] == "/api/v1"
    assert _document(generator.set_base_path("/"))["basePath"] == "/"


def test_router_patterns_are_stripped_from_path_parameters() -> None:
    generator = Generator()

    generator.set_path_item(
        PathItemInfo(path="/pets/{id:[0-9]+}/toys/{toy}", method="GET"), params=PetPath
    )

    assert list(_document(generator)["paths"]) == ["/pets/{id}/toys/{toy}"]


def test_re_registering_path_and_method_is_a_no_op() -> None:
    generator = Generator()

    generator.set_path_item(PathItemInfo(path="/pets", method="GET", title="first"))
    generator.set_path_item(PathItemInfo(path="/pets", method="get", title="second"))
    generator.set_path_item(PathItemInfo(path="/pets", method="POST", title="create"))

    path_item = _document(generator)["paths"]["/pets"]
    assert path_item["get"]["summary"] == "first"
    assert path_item["post"]["summary"] == "create"


def test_unknown_method_is_rejected() -> None:
    generator = Generator()

    with pytest.raises(PathRegistrationError, match="TRACE"):
        generator.set_path_item(PathItemInfo(path="/pets", method="TRACE"))


def test_operation_carries_info_tag_security_and_extensions() -> None:
    generator = Generator()
    info = PathItemInfo(
        path="/pets",
        method="GET",
        title="listPets",
        description="Lists pets",
        tag="pets",
        deprecated=True,
        security=["api_key"],
        security_oauth2={"petstore_auth": ["read:pets"]},
    )
    info.add_extended_field("x-rate-limit", 10)

    generator.set_path_item(info)

    operation = _document(generator)["paths"]["/pets"]["get"]
    assert operation == {
        "tags": ["pets"],
        "summary": "listPets",
        "description": "Lists pets",
        "responses": {"200": {"description": "request success", "schema": {"type": "null"}}},
        "security": [{"api_key": []}, {"petstore_auth": ["read:pets"]}],
        "deprecated": True,
        "x-rate-limit": 10,
    }


def test_body_becomes_required_body_parameter() -> None:
    generator = Generator()

    generator.set_path_item(PathItemInfo(path="/pets", method="POST"), body=Pet, response=Pet)

    document = _document(generator)
    operation = document["paths"]["/pets"]["post"]
    assert operation["parameters"] == [
        {"name": "body", "in": "body", "schema": {"$ref": "#/definitions/Pet"}, "required": True}
    ]
    assert operation["responses"]["200"]["schema"] == {"$ref": "#/definitions/Pet"}
    assert "Pet" in document["definitions"]


def test_primitive_body_is_kept() -> None:
    generator = Generator()

    generator.set_path_item(PathItemInfo(path="/notes", method="PUT"), body="")

    parameters = _document(generator)["paths"]["/notes"]["put"]["parameters"]
    assert parameters == [
        {"name": "body", "in": "body", "schema": {"type": "string"}, "required": True}
    ]


def test_empty_body_is_dropped_with_its_definition() -> None:
    generator = Generator()

    generator.set_path_item(PathItemInfo(path="/ping", method="POST"), body=EmptyBody)

    document = _document(generator)
    assert "parameters" not in document["paths"]["/ping"]["post"]
    assert "EmptyBody" not in document["definitions"]


def test_path_and_body_parameters_are_combined() -> None:
    generator = Generator()

    generator.set_path_item(
        PathItemInfo(path="/pets/{id}", method="PUT"), params=PetPath, body=Pet
    )

    parameters = _document(generator)["paths"]["/pets/{id}"]["put"]["parameters"]
    assert [(param["name"], param["in"]) for param in parameters] == [
        ("id", "path"),
        ("body", "body"),
    ]


def test_json_rpc_documents_only_expose_post_operations() -> None:
    generator = Generator().add_extended_field("x-service-type", ServiceType.JSON_RPC.value)
    generator.set_path_item(PathItemInfo(path="/status", method="GET"))
    generator.set_path_item(PathItemInfo(path="/rpc", method="GET"))
    generator.set_path_item(PathItemInfo(path="/rpc", method="POST", title="call"))

    paths = _document(generator)["paths"]

    assert list(paths) == ["/rpc"]
    assert list(paths["/rpc"]) == ["post"]
    assert paths["/rpc"]["post"]["summary"] == "call"


def test_json_rpc_filter_leaves_registered_paths_untouched() -> None:
    generator = Generator()
    generator.set_path_item(PathItemInfo(path="/rpc", method="GET"))
    generator.set_path_item(PathItemInfo(path="/rpc", method="POST"))
    generator.add_extended_field("x-service-type", "json-rpc")

    _document(generator)
    generator.add_extended_field("x-service-type", "rest")

    assert sorted(_document(generator)["paths"]["/rpc"]) == ["get", "post"]


def test_reflection_marks_request_type() -> None:
    generator = Generator().reflect_python_types(True)

    generator.set_path_item(PathItemInfo(path="/pets", method="POST"), body=Pet)

    operation = _document(generator)["paths"]["/pets"]["post"]
    assert operation["x-request-py-type"].endswith(".Pet")
    assert operation["parameters"][0]["schema"] == {"$ref": "#/definitions/Pet"}


def test_type_map_is_applied_to_registered_operations() -> None:
    generator = Generator().add_type_map(Pet, "")

    generator.set_path_item(PathItemInfo(path="/pets", method="GET"), response=Pet)

    document = _document(generator)
    assert document["paths"]["/pets"]["get"]["responses"]["200"]["schema"] == {"type": "string"}
    assert document["definitions"] == {}


def test_document_encoding_is_compact_unless_indented() -> None:
    generator = Generator()

    compact = generator.generate_document()
    indented = generator.indent_json(True).generate_document()

    assert compact.startswith(b'{"swagger":"2.0","info":')
    assert b'\n  "swagger": "2.0",' in indented


def test_host_argument_overrides_configured_host() -> None:
    generator = Generator().set_host("api.example.com")

    assert _document(generator)["host"] == "api.example.com"
    assert generator.build_document("localhost:8080").host == "localhost:8080"
    assert "host" not in json.loads(Generator().generate_document())


def test_cors_allow_headers_extend_default_list() -> None:
    generator = Generator()
    assert not generator.cors_enabled
    assert generator.cors_allow_headers == ("Content-Type", "api_key", "Authorization")

    generator.enable_cors(True, "X-Trace-Id", "api_key")

    assert generator.cors_enabled
    assert generator.cors_allow_headers == (
        "Content-Type",
        "api_key",
        "Authorization",
        "X-Trace-Id",
    )


def test_reset_clears_paths_and_definitions() -> None:
    generator = Generator()
    generator.set_path_item(PathItemInfo(path="/pets", method="GET"), response=Pet)

    generator.reset_paths()
    generator.reset_definitions()

    document = _document(generator)
    assert document["paths"] == {}
    assert document["definitions"] == {}


def test_from_settings_applies_configuration() -> None:
    settings = Settings(
        document=DocumentSettings(
            host="api.example.com",
            base_path="v2",
            schemes=("https",),
            service_type=ServiceType.JSON_RPC,
        ),
        info=InfoObject(title="Petstore", version="2.0"),
        output=OutputSettings(indent_json=True),
        cors=CorsSettings(enabled=True, allow_headers=("X-Trace-Id",)),
        resolution=ResolutionSettings(drain_workers=2),
        extensions={"x-logo": "logo.png"},
        security_definitions={
            "api_key": SecurityDefinition(
                type=SecurityType.API_KEY, location=APIKeyLocation.HEADER, name="X-API-Key"
            )
        },
    )

    generator = Generator.from_settings(settings)
    document = _document(generator)

    assert document["host"] == "api.example.com"
    assert document["basePath"] == "/v2"
    assert document["schemes"] == ["https"]
    assert document["info"]["title"] == "Petstore"
    assert document["x-service-type"] == "json-rpc"
    assert document["x-logo"] == "logo.png"
    assert document["securityDefinitions"]["api_key"]["in"] == "header"
    assert generator.cors_enabled
    assert generator.generate_document().startswith(b"{\n")


@dataclass
class Measurement:
    ratio: float = api_field(default="1e400", value=0.0)
    limit: float = api_field(default=float("nan"), value=0.0)
    scale: float = api_field(default="2.5", value=0.0)


def test_non_finite_defaults_are_dropped_from_strict_json() -> None:
    generator = Generator()
    generator.set_path_item(PathItemInfo(path="/measurements", method="GET"), response=Measurement)

    document = json.loads(
        generator.generate_document(),
        parse_constant=lambda name: pytest.fail(f"unexpected constant {name}"),
    )

    properties = document["definitions"]["Measurement"]["properties"]
    assert "default" not in properties["ratio"]
    assert "default" not in properties["limit"]
    assert properties["scale"]["default"] == 2.5
