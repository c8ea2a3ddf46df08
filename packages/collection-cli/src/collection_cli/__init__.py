"""collection-cli: Command line interface for collection-core."""

from __future__ import annotations

__version__ = "0.1.0"
