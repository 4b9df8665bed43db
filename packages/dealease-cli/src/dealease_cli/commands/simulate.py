"""dealease-demo simulate command - Apply simulated marketplace activity."""

from __future__ import annotations

import click

from dealease_cli.context import demo_store, storage_dir_option
from dealease_cli.errors import CLIError
from dealease_cli.output import info, success, warning
from dealease_demo.activity import ActivitySimulator
from dealease_demo.errors import InvalidStateError


@click.command()
@click.option(
    "-n",
    "--count",
    type=click.IntRange(min=1, max=1000),
    default=1,
    show_default=True,
    help="Number of activity events to apply.",
)
@click.option("--seed", type=int, default=None, help="Seed for reproducible activity.")
@storage_dir_option
def simulate(count: int, seed: int | None, storage_dir: str | None) -> None:
    """Apply simulated activity (messages, notifications, deal progress).

    Requires active demo mode started with --auto-activity.

    Examples:

        dealease-demo simulate -n 5
    """
    with demo_store(storage_dir) as store:
        if store.dataset is None:
            raise InvalidStateError("simulate activity", "inactive")
        if not store.settings.auto_generate_activity:
            raise CLIError("Activity simulation is disabled for this session (--no-auto-activity)")

        simulator = ActivitySimulator(seed=seed, clock=store.clock)
        applied = 0
        while applied < count and store.dataset is not None:
            event = simulator.propose(store.dataset)
            if event is None:
                warning("No further activity is possible for this dataset")
                break
            store.record_activity(event)
            applied += 1
            info(f"  {event.kind}")

        success(f"Applied {applied} activity event(s)")
