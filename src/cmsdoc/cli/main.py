"""Command-line interface for cmsdoc.

Provides CLI commands for converting and inspecting CMS documents.
"""

import importlib.metadata
import sys
from collections import Counter
from pathlib import Path

import click

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("cmsdoc")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.4.0"  # Fallback for development


@click.group()
@click.version_option(version=__version__, prog_name="cmsdoc")
def cli() -> None:
    """Normalize loosely-typed CMS documents.

    Use 'cmsdoc COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    required=True,
    help="Output JSONL file path",
)
@click.option(
    "--merge-fields",
    is_flag=True,
    help="Put every parsed field in 'data' instead of only the last one",
)
@click.option(
    "--lenient",
    is_flag=True,
    help="Skip documents that fail to parse instead of aborting",
)
@click.option(
    "--validate",
    is_flag=True,
    help="Validate each output record against the bundled JSON Schema",
)
@click.option(
    "--log",
    "log_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write JSONL audit events to this file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def convert(
    input_path: str,
    output: str,
    merge_fields: bool,
    lenient: bool,
    validate: bool,
    log_path: str | None,
    verbose: bool,
) -> None:
    """Convert raw documents in INPUT_PATH to normalized JSONL.

    INPUT_PATH is a JSON file (one document, a list of documents, or a
    search response with a 'results' list) or a JSONL file.

    Examples
    --------
        cmsdoc convert documents.json -o normalized.jsonl
        cmsdoc convert export.jsonl -o out.jsonl --merge-fields --lenient
    """
    from cmsdoc.engine import ConversionConfig, run_conversion
    from cmsdoc.parse import DataMergeMode

    config = ConversionConfig(
        merge_mode=DataMergeMode.MERGE if merge_fields else DataMergeMode.LAST_FIELD,
        strict=not lenient,
        validate_output=validate,
        log_path=Path(log_path) if log_path else None,
    )

    if verbose:
        click.echo(f"Converting: {input_path}", err=True)
        click.echo(f"  merge mode: {config.merge_mode.value}", err=True)
        click.echo(f"  strict: {config.strict}", err=True)

    result = run_conversion(input_path, output, config)

    if not result.success:
        click.secho(f"✗ Conversion failed: {result.error_message}", fg="red", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"  documents read: {result.total_documents}", err=True)
        click.echo(f"  fields dropped: {result.fields_dropped}", err=True)

    if result.documents_failed:
        click.secho(
            f"! Skipped {result.documents_failed} failing document(s)",
            fg="yellow",
            err=True,
        )

    click.secho(
        f"✓ Successfully wrote {result.documents_written} documents to {output}",
        fg="green",
    )


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
def classify(input_path: str) -> None:
    """Show how each field of the documents in INPUT_PATH would be parsed."""
    from cmsdoc import capitalize, classify_fields, load_documents
    from cmsdoc.errors import CmsDocError

    totals: Counter[str] = Counter()

    try:
        for payload in load_documents(input_path):
            fields = classify_fields(payload)
            click.echo(payload["id"])
            for name, kind in fields:
                click.echo(f"  {name}: {kind.value}")
                totals[kind.value] += 1
    except CmsDocError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    click.echo("")
    for kind, count in sorted(totals.items()):
        click.echo(f"{capitalize(kind)}: {count}")


if __name__ == "__main__":
    cli()
