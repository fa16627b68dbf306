"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "swgen.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Document configuration for swgen.
# Replace every <REQUIRED> placeholder before running generate or serve.
# Uncomment optional settings only when your API needs them.

document:
  # host: "api.example.com"
  base_path: "/"
  schemes:
    - "http"
    - "https"
  # Either rest or json-rpc; json-rpc documents only expose POST operations.
  service_type: "rest"

info:
  title: "<REQUIRED>"
  version: "<REQUIRED>"
  # description: ""
  # terms_of_service: ""
  # contact:
  #   name: ""
  #   url: ""
  #   email: ""
  # license:
  #   name: ""
  #   url: ""

output:
  indent_json: false
  # Adds x-py-* extensions naming the Python types behind schemas and parameters.
  reflect_python_types: false

cors:
  enabled: false
  # Extra headers appended to Content-Type, api_key and Authorization.
  # allow_headers:
  #   - "X-Request-Id"

# resolution:
#   drain_workers: 4

# Vendor extensions merged into the document root; keys must start with x-.
# extensions:
#   x-logo: "https://example.com/logo.png"

# security_definitions:
#   api_key:
#     type: "apiKey"
#     in: "header"
#     name: "X-API-Key"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML document configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder document configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
