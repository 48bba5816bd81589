"""CLI entry point for cosmos-swagger-gen."""

import logging
from pathlib import Path

import click

from cosmos_swagger_gen.errors import GeneratorError
from cosmos_swagger_gen.generator.emitter import emit
from cosmos_swagger_gen.generator.operations import build_catalogue, chain_names
from cosmos_swagger_gen.generator.options import GeneratorOptions
from cosmos_swagger_gen.parser.swagger import fetch_document, load_chain_documents

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

verbose_option = click.option("-v", "--verbose", is_flag=True, help="Log skipped paths and other warnings in detail.")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@click.group()
@verbose_option
def main(verbose: bool):
    """Cosmos Swagger Gen: generate TypeScript REST API types from chain Swagger files."""
    _configure_logging(verbose)


@main.command()
@click.argument("input_dir", envvar="INPUT_FOLDER_PATH", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("-o", "--output", envvar="OUT_FILE_PATH", required=True, type=click.Path(path_type=Path), help="Output file path for the generated TypeScript.")
@click.option("--body-params", default="query", type=click.Choice(["query", "body"]), help="Which parameter type body parameters are emitted into.")
@click.option("--resolve-refs", is_flag=True, help="Translate referenced definitions instead of emitting `{}` for them.")
@click.option("--pagination", is_flag=True, help="Add PaginationResponse to the success type of paginated operations.")
@verbose_option
def generate(input_dir: Path, output: Path, body_params: str, resolve_refs: bool, pagination: bool, verbose: bool):
    """Generate the REST API type file from one Swagger file per chain."""
    if verbose:
        _configure_logging(verbose)

    options = GeneratorOptions(body_params=body_params, resolve_refs=resolve_refs, pagination=pagination)

    click.echo(f"Reading Swagger files from {input_dir}...")
    try:
        chains = load_chain_documents(input_dir)
        click.echo(f"Found {len(chains)} chains: {', '.join(name for name, _ in chains)}")
        catalogue = build_catalogue(chains, options)
    except GeneratorError as e:
        raise click.ClickException(str(e)) from e

    content = emit(catalogue, include_pagination=options.pagination)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    click.echo(f"Generated {len(catalogue)} operations for {len(chain_names(catalogue))} chains in {output}")


@main.command()
@click.argument("url")
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Where to save the document; the file stem becomes the chain name.")
def fetch(url: str, output: Path):
    """Download a chain's Swagger file."""
    click.echo(f"Downloading {url}...")
    try:
        text = fetch_document(url)
    except GeneratorError as e:
        raise click.ClickException(str(e)) from e

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"Saved to {output}")
