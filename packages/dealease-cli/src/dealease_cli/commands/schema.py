"""dealease-demo schema command - Export the JSON Schema of export files."""

from __future__ import annotations

import json

import click

from dealease_cli.output import success
from dealease_demo.schema_export import export_demo_export_schema


@click.command()
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the schema to a file instead of stdout.",
)
def schema(output: str | None) -> None:
    """Print the JSON Schema (Draft 2020-12) of demo export files."""
    if output is None:
        click.echo(json.dumps(export_demo_export_schema(), indent=2))
        return

    export_demo_export_schema(output)
    success(f"Schema written to {output}")
