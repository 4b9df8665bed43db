"""Rich console output utilities for dealease-cli.

This module provides formatted console output with Rich, supporting
colored success/error/warning messages and respecting the NO_COLOR
environment variable.
"""

from __future__ import annotations

import os
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dealease_demo.schemas.session import DemoStats
from dealease_demo.schemas.settings import DemoSettings

# Rich respects NO_COLOR on its own; --no-color is handled by set_no_color
_force_no_color = os.environ.get("NO_COLOR") is not None


def create_console(no_color: bool = False) -> Console:
    """Create a Rich Console instance with appropriate color settings.

    Args:
        no_color: If True, disable colored output. Also respects NO_COLOR env var.

    Returns:
        Configured Console instance.
    """
    force_terminal = None
    if no_color or _force_no_color:
        force_terminal = False
    return Console(force_terminal=force_terminal, no_color=no_color or _force_no_color)


console = create_console()


def success(message: str, **kwargs: Any) -> None:
    """Print a success message with green checkmark.

    Example:
        >>> success("Demo mode started")
        ✓ Demo mode started
    """
    console.print(f"[green]✓[/green] {escape(message)}", **kwargs)


def error(message: str, **kwargs: Any) -> None:
    """Print an error message with red X.

    Example:
        >>> error("Demo data import failed")
        ✗ Demo data import failed
    """
    console.print(f"[red]✗[/red] {escape(message)}", **kwargs)


def warning(message: str, **kwargs: Any) -> None:
    """Print a warning message with yellow triangle."""
    console.print(f"[yellow]⚠[/yellow] {escape(message)}", **kwargs)


def info(message: str, **kwargs: Any) -> None:
    """Print an informational message."""
    console.print(escape(message), **kwargs)


_STAT_LABELS: dict[str, str] = {
    "total_buyers": "Buyers",
    "total_sellers": "Sellers",
    "total_matches": "Matches",
    "active_deals": "Active deals",
    "completed_deals": "Completed deals",
    "total_messages": "Messages",
    "total_notifications": "Notifications",
    "total_documents": "Documents",
    "ai_analysis_count": "AI analyses",
}


def print_stats(stats: DemoStats, settings: DemoSettings | None = None) -> None:
    """Print demo statistics as a table.

    Args:
        stats: Stats to display.
        settings: Optional settings shown in the table caption.
    """
    caption = None
    if settings is not None:
        caption = (
            f"density={settings.data_density.value} "
            f"activity={'on' if settings.auto_generate_activity else 'off'} "
            f"real-time={'on' if settings.simulate_real_time else 'off'} "
            f"notifications={'on' if settings.enable_notifications else 'off'}"
        )
    table = Table(title="Demo data", caption=caption)
    table.add_column("Kind")
    table.add_column("Count", justify="right")
    values = stats.model_dump()
    for field, label in _STAT_LABELS.items():
        table.add_row(label, str(values[field]))
    console.print(table)


def set_no_color(no_color: bool) -> None:
    """Update the global console to enable/disable colors.

    Note:
        This updates the module-level console instance.
    """
    global console
    console = create_console(no_color=no_color)
