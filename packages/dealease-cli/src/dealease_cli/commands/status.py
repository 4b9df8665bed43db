"""dealease-demo status command - Show demo mode state and statistics."""

from __future__ import annotations

import json

import click

from dealease_cli.context import demo_store, storage_dir_option
from dealease_cli.output import info, print_stats


@click.command()
@click.option("--json", "as_json", is_flag=True, default=False, help="Print machine-readable JSON.")
@storage_dir_option
def status(as_json: bool, storage_dir: str | None) -> None:
    """Show whether demo mode is active and what it contains."""
    with demo_store(storage_dir) as store:
        stats = store.stats
        if as_json:
            document = {
                "isActive": store.is_active,
                "settings": store.settings.model_dump(mode="json", by_alias=True),
                "stats": stats.model_dump(by_alias=True) if stats is not None else None,
            }
            click.echo(json.dumps(document, indent=2))
            return

        if stats is None:
            info("Demo mode is not active. Run 'dealease-demo init' to start.")
            return
        info("Demo mode is active")
        print_stats(stats, store.settings)
