"""dealease-demo export command - Write the demo session to a JSON file."""

from __future__ import annotations

from pathlib import Path

import click

from dealease_cli.context import demo_store, storage_dir_option
from dealease_cli.errors import handle_permission_error
from dealease_cli.output import success, warning
from dealease_demo.store import export_filename


@click.command()
@click.option(
    "-o",
    "--output",
    "output",
    type=click.Path(dir_okay=False, allow_dash=True),
    default=None,
    help="Output file, or '-' for stdout [default: dealease-demo-data-<date>.json]",
)
@storage_dir_option
def export(output: str | None, storage_dir: str | None) -> None:
    """Export the demo session (settings, data and stats) as JSON.

    Examples:

        dealease-demo export

        dealease-demo export -o - | jq .stats
    """
    with demo_store(storage_dir) as store:
        payload = store.export_demo_data()
        active = store.is_active

    if output == "-":
        click.echo(payload)
        return

    path = Path(output or export_filename())
    try:
        path.write_text(payload, encoding="utf-8")
    except OSError:
        handle_permission_error(str(path), "write")

    if not active:
        warning("Demo mode is not active; exported an empty session")
    success(f"Demo data exported to {path}")
