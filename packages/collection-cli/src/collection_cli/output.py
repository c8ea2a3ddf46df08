"""Rich console output utilities for collection-cli.

Success messages go to stdout; errors go to stderr. The NO_COLOR
environment variable and the --no-color flag both disable colored output.
"""

from __future__ import annotations

import os
from typing import Any

from rich.console import Console
from rich.markup import escape

# Rich automatically respects NO_COLOR, but we also support --no-color flag
_force_no_color = os.environ.get("NO_COLOR") is not None


def create_console(no_color: bool = False, *, stderr: bool = False) -> Console:
    """Create a Rich Console instance with appropriate color settings.

    Args:
        no_color: If True, disable colored output. Also respects NO_COLOR env var.
        stderr: If True, write to stderr instead of stdout.

    Returns:
        Configured Console instance.
    """
    force_terminal = None
    if no_color or _force_no_color:
        force_terminal = False
    return Console(
        force_terminal=force_terminal,
        no_color=no_color or _force_no_color,
        stderr=stderr,
        soft_wrap=True,
    )


# Default console instances
console = create_console()
err_console = create_console(stderr=True)


def success(message: str, **kwargs: Any) -> None:
    """Print a success message with green checkmark to stdout.

    Example:
        >>> success("WROTE: /repo/skills-collection.json")
        ✓ WROTE: /repo/skills-collection.json
    """
    console.print(f"[green]✓[/green] {escape(message)}", **kwargs)


def error(message: str, **kwargs: Any) -> None:
    """Print an error message with red X to stderr.

    Example:
        >>> error("skills/pm-001.json: missing keys: id")
        ✗ skills/pm-001.json: missing keys: id
    """
    err_console.print(f"[red]✗[/red] {escape(message)}", **kwargs)


def set_no_color(no_color: bool) -> None:
    """Update the global consoles to enable/disable colors.

    Note:
        This updates the module-level console instances.
    """
    global console, err_console
    console = create_console(no_color=no_color)
    err_console = create_console(no_color=no_color, stderr=True)
