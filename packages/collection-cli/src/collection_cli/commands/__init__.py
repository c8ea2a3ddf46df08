"""CLI command modules.

This package contains the compile commands, one per record variant.
Commands are imported lazily by the main group.
"""

from __future__ import annotations

__all__: list[str] = []
