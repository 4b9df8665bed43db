"""dealease-demo reset command - Regenerate the demo data."""

from __future__ import annotations

import click

from dealease_cli.context import demo_store, storage_dir_option
from dealease_cli.output import print_stats, success
from dealease_demo.schemas.settings import DensityTier


@click.command()
@click.option(
    "-d",
    "--density",
    type=click.Choice([tier.value for tier in DensityTier], case_sensitive=False),
    default=None,
    help="Switch to another density while regenerating.",
)
@storage_dir_option
def reset(density: str | None, storage_dir: str | None) -> None:
    """Regenerate the demo data, keeping demo mode active.

    Fails if demo mode is not active.

    Examples:

        dealease-demo reset

        dealease-demo reset --density heavy
    """
    with demo_store(storage_dir) as store:
        store.reset(density.lower() if density else None)
        success("Demo data regenerated")
        if store.stats is not None:
            print_stats(store.stats, store.settings)
