"""CLI entry point for apidoc2openapi."""

import logging
from pathlib import Path

import click

from apidoc2openapi import __version__
from apidoc2openapi.config import DocumentInfo, load_info_file
from apidoc2openapi.converter.document import convert_to_json
from apidoc2openapi.parser.apidoc import ConfigurationError, load_description

logger = logging.getLogger(__name__)


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("destination", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.option("--info", "info_file", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML/JSON file with overrides for the document's info object.")
@click.option("--title", default=None, help="Override info.title.")
@click.option("--description", default=None, help="Override info.description.")
@click.option("--api-version", default=None, help="Override info.version (default: highest entry version).")
@click.option("-v", "--verbose", is_flag=True, help="Log conversion details to stderr.")
@click.version_option(__version__, prog_name="apidoc2openapi")
def main(
    source: Path,
    destination: Path | None,
    info_file: Path | None,
    title: str | None,
    description: str | None,
    api_version: str | None,
    verbose: bool,
):
    """Convert apiDoc output (api_data.js or api_data.json) to an OpenAPI 3.0 document.

    Writes to DESTINATION when given, otherwise to stdout.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s: %(message)s")

    try:
        info = load_info_file(info_file) if info_file else DocumentInfo()
        info = info.merged(DocumentInfo(title=title, description=description, version=api_version))

        logger.info("Loading apiDoc description from %s", source)
        output = convert_to_json(load_description(source), info)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    if destination:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(output + "\n", encoding="utf-8")
        click.echo(f"OpenAPI spec written to {destination}", err=True)
    else:
        click.echo(output)
