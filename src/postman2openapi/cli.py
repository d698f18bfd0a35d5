"""CLI entry point for postman2openapi."""

import logging
from pathlib import Path

import click

from postman2openapi.openapi.render import OUTPUT_FORMATS, render
from postman2openapi.parser.detect import detect_format
from postman2openapi.parser.postman import CollectionError, load_collection
from postman2openapi.transpiler.engine import Transpiler


@click.command()
@click.argument("collection_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(dir_okay=False, path_type=Path), help="Output file path. Prints to stdout when omitted.")
@click.option("--format", "fmt", default="yaml", type=click.Choice(OUTPUT_FORMATS), help="Output format.")
@click.option("-v", "--verbose", is_flag=True, help="Log traversal details to stderr.")
def main(collection_path: Path, output: Path | None, fmt: str, verbose: bool):
    """Convert a Postman Collection v2.1 into an OpenAPI 3.0.3 document."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    detected = detect_format(collection_path)
    if detected != "postman":
        raise click.ClickException(f"{collection_path} is not a Postman collection (detected: {detected})")

    try:
        collection = load_collection(collection_path)
    except CollectionError as e:
        raise click.ClickException(str(e)) from e

    spec = Transpiler.transpile(collection)
    text = render(spec, fmt)

    if output is None:
        click.echo(text, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"Found {len(spec.paths)} paths. OpenAPI document saved to {output}", err=True)
