"""CLI entry point for dealease-demo.

This module defines the main CLI group using the LazyGroup pattern so
that --help stays fast: command modules (and the Faker/pydantic stack
behind them) are imported only when a command is invoked.
"""

from __future__ import annotations

import importlib
from typing import Any

import click
import rich_click as rclick

from dealease_cli import __version__
from dealease_cli.output import set_no_color

# Configure rich-click for better help formatting
rclick.rich_click.TEXT_MARKUP = "markdown"
rclick.rich_click.SHOW_ARGUMENTS = True
rclick.rich_click.GROUP_ARGUMENTS_OPTIONS = True


class LazyGroup(rclick.RichGroup):
    """Click group that loads commands lazily.

    Attributes:
        lazy_subcommands: Mapping of command names to module paths.
    """

    def __init__(
        self,
        *args: Any,
        lazy_subcommands: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize LazyGroup.

        Args:
            *args: Positional arguments for parent class.
            lazy_subcommands: Mapping of command name to module path.
                Format: {"init": "dealease_cli.commands.init.init"}
            **kwargs: Keyword arguments for parent class.
        """
        super().__init__(*args, **kwargs)
        self.lazy_subcommands: dict[str, str] = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """Return sorted list of available command names."""
        commands = set(super().list_commands(ctx))
        commands.update(self.lazy_subcommands.keys())
        return sorted(commands)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, loading lazily if needed.

        Args:
            ctx: Click context.
            cmd_name: Name of the command to get.

        Returns:
            Click Command instance, or None if not found.
        """
        cmd = super().get_command(ctx, cmd_name)  # type: ignore[arg-type]
        if cmd is not None:
            return cmd

        if cmd_name not in self.lazy_subcommands:
            return None

        module_path = self.lazy_subcommands[cmd_name]
        module_name, attr_name = module_path.rsplit(".", 1)
        mod = importlib.import_module(module_name)
        return getattr(mod, attr_name)  # type: ignore[no-any-return]


LAZY_COMMANDS = {
    "init": "dealease_cli.commands.init.init",
    "reset": "dealease_cli.commands.reset.reset",
    "exit": "dealease_cli.commands.exit.exit_cmd",
    "status": "dealease_cli.commands.status.status",
    "export": "dealease_cli.commands.export.export",
    "import": "dealease_cli.commands.import_.import_cmd",
    "simulate": "dealease_cli.commands.simulate.simulate",
    "schema": "dealease_cli.commands.schema.schema",
}


@click.command(cls=LazyGroup, lazy_subcommands=LAZY_COMMANDS)
@click.version_option(version=__version__, prog_name="dealease-demo")
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
    is_eager=True,
    expose_value=False,
    callback=lambda ctx, param, value: set_no_color(value) if value else None,
)
def cli() -> None:
    """DealEase demo mode - synthetic marketplace sandbox.

    **Getting Started:**

    - `dealease-demo init --density light` - Start demo mode
    - `dealease-demo status` - Show what the sandbox contains
    - `dealease-demo export` - Save the sandbox to a JSON file
    - `dealease-demo exit` - Leave demo mode

    The session is stored under `$DEALEASE_DEMO_STORAGE_DIR`
    (default `./.dealease-demo`).
    """
    pass


if __name__ == "__main__":
    cli()
