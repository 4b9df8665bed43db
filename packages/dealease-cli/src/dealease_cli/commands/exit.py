"""dealease-demo exit command - Leave demo mode."""

from __future__ import annotations

import click

from dealease_cli.context import demo_store, storage_dir_option
from dealease_cli.output import info, success


@click.command(name="exit")
@storage_dir_option
def exit_cmd(storage_dir: str | None) -> None:
    """Leave demo mode and discard the demo data.

    Settings are remembered for the next 'init'.
    """
    with demo_store(storage_dir) as store:
        if not store.is_active:
            info("Demo mode is not active")
            return
        store.exit()
        success("Demo mode exited")
