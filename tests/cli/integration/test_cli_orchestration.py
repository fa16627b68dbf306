"""CLI orchestration integration tests."""

from __future__ import annotations

import json
import uuid
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from fastapi.testclient import TestClient
from swgen.cli import cli, main

_APP_SOURCE = '''
from __future__ import annotations

from dataclasses import dataclass

from swgen import Int64, PathItemInfo, api_field


@dataclass
class Pet:
    id: Int64
    name: str


@dataclass
class PetPath:
    pet_id: Int64 = api_field(path="id", value=0)


def register(generator):
    generator.set_path_item(
        PathItemInfo(path="/pets/{id:[0-9]+}", method="GET", title="getPet", tag="pets"),
        params=PetPath,
        response=Pet,
    )
    generator.set_path_item(PathItemInfo(path="/pets", method="POST", title="addPet"), body=Pet)


def broken(generator):
    generator.set_path_item(PathItemInfo(path="/pets", method="GET"), response=complex)
'''


def _write_config(tmp_path: Path, title: str = "Petstore") -> Path:
    path = tmp_path / "swgen.yaml"
    path.write_text(
        f"""
document:
  host: "petstore.example.com"
  base_path: "/api"
info:
  title: "{title}"
  version: "1.0"
output:
  indent_json: true
extensions:
  x-team: "pets"
""",
        encoding="utf-8",
    )
    return path


def _write_app(tmp_path: Path) -> str:
    module_name = f"petstore_app_{uuid.uuid4().hex}"
    (tmp_path / f"{module_name}.py").write_text(_APP_SOURCE, encoding="utf-8")
    return module_name


def test_generate_command_writes_document(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)
    module_name = _write_app(tmp_path)
    output_path = tmp_path / "swagger.json"

    result = runner.invoke(
        cli,
        [
            "generate",
            "--config",
            str(config_path),
            "--app",
            f"{module_name}:register",
            "--app-dir",
            str(tmp_path),
            "--output",
            str(output_path),
        ],
    )

    assert result.exit_code == 0, result.output
    assert str(output_path.resolve()) in result.output
    document = json.loads(output_path.read_text(encoding="utf-8"))
    assert document["host"] == "petstore.example.com"
    assert document["basePath"] == "/api"
    assert document["info"]["title"] == "Petstore"
    assert document["x-team"] == "pets"
    assert document["x-service-type"] == "rest"
    assert sorted(document["paths"]) == ["/pets", "/pets/{id}"]
    assert document["paths"]["/pets/{id}"]["get"]["parameters"] == [
        {"name": "id", "in": "path", "type": "integer", "format": "int64", "required": True}
    ]
    assert document["definitions"]["Pet"]["properties"] == {
        "id": {"type": "integer", "format": "int64"},
        "name": {"type": "string"},
    }


def test_generate_command_prints_document_to_stdout(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)
    module_name = _write_app(tmp_path)

    result = runner.invoke(
        cli,
        [
            "generate",
            "--config",
            str(config_path),
            "--app",
            f"{module_name}:register",
            "--app-dir",
            str(tmp_path),
        ],
    )

    assert result.exit_code == 0, result.output
    assert result.output.startswith("{\n")
    assert json.loads(result.output)["paths"]["/pets"]["post"]["summary"] == "addPet"


def test_generate_config_command_writes_scaffold(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "swgen.yaml"

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0
    assert str(output_path.resolve()) in result.output
    assert "<REQUIRED>" in output_path.read_text(encoding="utf-8")


def test_generate_config_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "swgen.yaml"
    output_path.write_text("existing", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(output_path)])

    assert exit_code == 1
    assert "already exists" in capsys.readouterr().err
    assert output_path.read_text(encoding="utf-8") == "existing"


def test_placeholder_configuration_is_rejected(tmp_path: Path, capsys) -> None:
    config_path = _write_config(tmp_path, title="<REQUIRED>")
    module_name = _write_app(tmp_path)

    exit_code = main(
        [
            "generate",
            "--config",
            str(config_path),
            "--app",
            f"{module_name}:register",
            "--app-dir",
            str(tmp_path),
        ]
    )

    assert exit_code == 1
    assert "info.title must be set." in capsys.readouterr().err


def test_unsupported_type_in_registration_is_reported(tmp_path: Path, capsys) -> None:
    config_path = _write_config(tmp_path)
    module_name = _write_app(tmp_path)

    exit_code = main(
        [
            "generate",
            "--config",
            str(config_path),
            "--app",
            f"{module_name}:broken",
            "--app-dir",
            str(tmp_path),
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "not supported" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_app_module_is_reported(tmp_path: Path, capsys) -> None:
    config_path = _write_config(tmp_path)

    exit_code = main(
        [
            "generate",
            "--config",
            str(config_path),
            "--app",
            "no_such_petstore_module:register",
            "--app-dir",
            str(tmp_path),
        ]
    )

    assert exit_code == 1
    assert "Cannot import module" in capsys.readouterr().err


def test_serve_command_runs_document_app_with_uvicorn(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    calls: list[dict[str, Any]] = []

    def _run(app: Any, **kwargs: Any) -> None:
        calls.append({"app": app, **kwargs})

    monkeypatch.setattr("swgen.cli.uvicorn.run", _run)
    runner = CliRunner()
    config_path = _write_config(tmp_path)
    module_name = _write_app(tmp_path)

    result = runner.invoke(
        cli,
        [
            "serve",
            "--config",
            str(config_path),
            "--app",
            f"{module_name}:register",
            "--app-dir",
            str(tmp_path),
            "--bind-host",
            "0.0.0.0",
            "--port",
            "9090",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "serving swagger document on http://0.0.0.0:9090/" in result.output
    assert len(calls) == 1
    assert calls[0]["host"] == "0.0.0.0"
    assert calls[0]["port"] == 9090
    assert calls[0]["log_config"] is None

    response = TestClient(calls[0]["app"]).get("/swagger.json")
    assert response.status_code == 200
    assert response.json()["host"] == "petstore.example.com"
    assert sorted(response.json()["definitions"]) == ["Pet"]
