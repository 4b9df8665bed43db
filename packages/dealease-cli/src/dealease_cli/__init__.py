"""Command-line host for the DealEase demo data engine.

Drives the demo session store from a terminal: start, reset and leave
demo mode, inspect statistics, export and import sandboxes, and apply
simulated activity.
"""

from __future__ import annotations

__version__ = "0.1.0"
