"""dealease-demo import command - Restore a demo session from a JSON export."""

from __future__ import annotations

from pathlib import Path

import click

from dealease_cli.context import demo_store, storage_dir_option
from dealease_cli.errors import handle_file_not_found, handle_permission_error
from dealease_cli.output import print_stats, success


@click.command(name="import")
@click.argument("file_path", metavar="FILE", type=click.Path(dir_okay=False))
@storage_dir_option
def import_cmd(file_path: str, storage_dir: str | None) -> None:
    """Replace the demo session with one exported earlier.

    The file is validated first; on any problem the current session is
    left unchanged.

    Examples:

        dealease-demo import dealease-demo-data-2024-01-16.json
    """
    path = Path(file_path)
    try:
        payload = path.read_bytes()
    except FileNotFoundError:
        handle_file_not_found(file_path)
    except OSError:
        handle_permission_error(file_path, "read")

    with demo_store(storage_dir) as store:
        session = store.import_demo_data(payload)
        if session.is_active and store.stats is not None:
            success(f"Demo data imported from {file_path}")
            print_stats(store.stats, store.settings)
        else:
            success(f"Imported an inactive session from {file_path}")
