"""dealease-demo init command - Start demo mode with generated data."""

from __future__ import annotations

import click

from dealease_cli.context import demo_store, load_config, storage_dir_option
from dealease_cli.output import print_stats, success
from dealease_demo.schemas.settings import DensityTier


@click.command()
@click.option(
    "-d",
    "--density",
    type=click.Choice([tier.value for tier in DensityTier], case_sensitive=False),
    default=None,
    help="Data density [default: $DEALEASE_DEMO_DEFAULT_DENSITY or medium]",
)
@click.option(
    "--auto-activity/--no-auto-activity",
    default=True,
    help="Allow simulated activity (see 'simulate').",
)
@click.option(
    "--real-time/--no-real-time",
    default=True,
    help="Anchor generated timestamps to the current time.",
)
@click.option(
    "--notifications/--no-notifications",
    default=True,
    help="Enable demo notifications.",
)
@storage_dir_option
def init(
    density: str | None,
    auto_activity: bool,
    real_time: bool,
    notifications: bool,
    storage_dir: str | None,
) -> None:
    """Start demo mode with a freshly generated sandbox.

    Replaces the current demo data if demo mode is already active.

    Examples:

        dealease-demo init --density light

        dealease-demo init -d heavy --no-real-time
    """
    tier = density or load_config(storage_dir).default_density.value

    with demo_store(storage_dir) as store:
        store.init(
            tier.lower(),
            auto_generate_activity=auto_activity,
            simulate_real_time=real_time,
            enable_notifications=notifications,
        )
        success(f"Demo mode started ({tier.lower()} density)")
        if store.stats is not None:
            print_stats(store.stats, store.settings)
