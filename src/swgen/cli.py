"""Command line interface entry point."""

from __future__ import annotations

import importlib
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
import uvicorn

from swgen.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from swgen.document_assembly import Generator, PathRegistrationError
from swgen.http_exposure import create_document_app
from swgen.type_resolution import ResolutionError

_LOGGER = logging.getLogger("swgen.cli")


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="swgen")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Swagger 2.0 document generator for Python type declarations."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


_config_option = click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON document configuration file",
)
_app_option = click.option(
    "--app",
    "app_reference",
    required=True,
    help="Registration callable as module:function, called with the generator",
)
_app_dir_option = click.option(
    "--app-dir",
    "app_dir",
    required=False,
    default=".",
    show_default=True,
    type=click.Path(path_type=str),
    help="Directory prepended to the module search path before importing --app",
)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML document configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML document configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@_config_option
@_app_option
@_app_dir_option
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the JSON document to write; printed to stdout when omitted",
)
def generate(config_path: str, app_reference: str, app_dir: str, output_path: str | None) -> None:
    """Generate the Swagger document of the registered API."""
    generator = build_generator(config_path, app_reference, app_dir)
    try:
        document = generator.generate_document()
    except ResolutionError as exc:
        raise CliError(str(exc)) from exc

    if output_path is None:
        click.echo(document.decode("utf-8"))
        return
    destination = Path(output_path)
    try:
        destination.write_bytes(document)
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(destination.resolve()))


@cli.command(name="serve")
@_config_option
@_app_option
@_app_dir_option
@click.option("--bind-host", default="127.0.0.1", show_default=True, help="Interface to bind")
@click.option("--port", default=8080, show_default=True, type=int, help="Port to listen on")
def serve(config_path: str, app_reference: str, app_dir: str, bind_host: str, port: int) -> None:
    """Serve the Swagger document over HTTP."""
    generator = build_generator(config_path, app_reference, app_dir)
    application = create_document_app(generator)
    click.echo(f"serving swagger document on http://{bind_host}:{port}/")
    _LOGGER.debug("Starting uvicorn on %s:%d", bind_host, port)
    # logging stays configured by the cli group
    uvicorn.run(application, host=bind_host, port=port, log_config=None)


def build_generator(config_path: str, app_reference: str, app_dir: str = ".") -> Generator:
    """Create a configured generator and run the registration callable against it."""
    try:
        settings = load_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc

    generator = Generator.from_settings(settings)
    register = load_registration_callable(app_reference, app_dir)
    try:
        register(generator)
    except (ResolutionError, PathRegistrationError) as exc:
        raise CliError(str(exc)) from exc
    return generator


def load_registration_callable(reference: str, app_dir: str = ".") -> Callable[[Generator], Any]:
    """Import ``module:function`` and return the callable."""
    module_name, separator, attribute = reference.partition(":")
    if not separator or not module_name or not attribute:
        raise CliError(f"--app must be given as module:function, got '{reference}'")

    search_path = str(Path(app_dir).resolve())
    if search_path not in sys.path:
        sys.path.insert(0, search_path)
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise CliError(f"Cannot import module '{module_name}': {exc}") from exc

    target: Any = module
    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise CliError(f"Module '{module_name}' has no attribute '{attribute}'") from exc
    if not callable(target):
        raise CliError(f"'{reference}' is not callable")
    return target


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
