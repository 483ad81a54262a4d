"""CLI entry point for apidoc-openapi."""

import logging
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from apidoc_openapi.doc.loader import detect_format, load_doc
from apidoc_openapi.errors import ApidocError
from apidoc_openapi.output.options import TYPES, Options
from apidoc_openapi.output.render import render


def _load_options(config_path: Path | None) -> dict:
    """Read the ``output`` section of a YAML config file."""
    if config_path is None:
        return {}
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise click.ClickException(f"{config_path}: {e}") from e
    if not isinstance(data, dict):
        raise click.ClickException(f"{config_path}: top level must be a mapping")

    output = data.get("output") or {}
    if not isinstance(output, dict):
        raise click.ClickException(f"{config_path}: output must be a mapping")
    return output


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """apidoc-openapi — render apidoc documents as apidoc or OpenAPI JSON/YAML."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file or directory.")
@click.option("--type", "type_", default=None, type=click.Choice(TYPES), help="Output format.")
@click.option("--group", "groups", multiple=True, help="Only render apis of this group (repeatable).")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="YAML file with an 'output' section.")
def convert(doc_path: Path, output: Path | None, type_: str | None, groups: tuple[str, ...], config_path: Path | None):
    """Convert an apidoc document to the selected output format."""
    settings = _load_options(config_path)
    if output is not None:
        settings["path"] = str(output)
    if type_ is not None:
        settings["type"] = type_
    if groups:
        settings["groups"] = list(groups)

    try:
        options = Options(**settings)
        click.echo(f"Loading {doc_path}...")
        doc = load_doc(doc_path)
        click.echo(f"Found {len(doc.apis)} apis (format: {detect_format(doc_path)}).")
        written = render(doc, options)
    except (ApidocError, ValidationError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Saved {options.type} to {written}")
