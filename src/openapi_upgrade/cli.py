"""CLI entry point for openapi-upgrade."""

import logging
from pathlib import Path

import click

from openapi_upgrade.converter.document import SpecConverter
from openapi_upgrade.converter.validator import validate_input
from openapi_upgrade.errors import UpgradeError
from openapi_upgrade.parser.base import ConversionResult
from openapi_upgrade.parser.detect import detect_version
from openapi_upgrade.parser.loader import load_document, output_format, write_document


def _load(doc_path: Path) -> dict:
    try:
        return load_document(doc_path)
    except UpgradeError as e:
        raise click.ClickException(str(e)) from e


def _report(result: ConversionResult) -> None:
    """Print the run summary; issues go to stderr."""
    click.echo(result.summary(), err=not result.ok)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def main(verbose: bool):
    """openapi-upgrade: convert Swagger 2.0 / OpenAPI 3.0 documents to OpenAPI 3.1."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("input_path", type=click.Path(path_type=Path))
@click.argument("output_path", type=click.Path(path_type=Path))
@click.option("--validate/--no-validate", default=True, help="Run structural validation before and after conversion.")
@click.option("--indent", default=2, show_default=True, type=click.IntRange(min=0), help="Indentation of the written document.")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "json", "yaml"]), help="Output format (auto: by file suffix).")
@click.option("--strict", is_flag=True, help="Exit non-zero when validation reports any issue.")
def convert(input_path: Path, output_path: Path, validate: bool, indent: int, fmt: str, strict: bool):
    """Convert INPUT_PATH to OpenAPI 3.1 and write it to OUTPUT_PATH."""
    click.echo(f"Reading {input_path}...")
    document = _load(input_path)
    click.echo(f"Detected {detect_version(document)}, converting to OpenAPI 3.1...")

    converter = SpecConverter(validate=validate)
    result = converter.run(document)

    fmt = output_format(output_path, fmt)
    try:
        write_document(result.document, output_path, fmt=fmt, indent=indent)
    except UpgradeError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Wrote {output_path} ({fmt})")

    _report(result)
    if strict and not result.ok:
        raise click.ClickException(f"{len(result.issues)} validation issue(s) in strict mode")


@main.command()
@click.argument("input_path", type=click.Path(path_type=Path))
def detect(input_path: Path):
    """Print the Swagger/OpenAPI version INPUT_PATH declares."""
    click.echo(detect_version(_load(input_path)))


@main.command()
@click.argument("input_path", type=click.Path(path_type=Path))
def validate(input_path: Path):
    """Check INPUT_PATH for structural problems without converting it."""
    issues = validate_input(_load(input_path))
    if not issues:
        click.echo(f"{input_path}: no structural issues found")
        return

    for issue in issues:
        click.echo(str(issue), err=True)
    raise click.ClickException(f"{len(issues)} structural issue(s) found")
