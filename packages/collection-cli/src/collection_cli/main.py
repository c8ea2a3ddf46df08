"""CLI entry point for collection-cli.

Defines the ``collection`` group. Its subcommands are the same command
objects the ``compile-skills`` and ``compile-competencies`` console
scripts run, so both spellings accept identical options.
"""

from __future__ import annotations

import click
import rich_click as rclick

from collection_cli import __version__
from collection_cli.commands.compile import competencies, skills
from collection_cli.output import set_no_color

rclick.rich_click.TEXT_MARKUP = "markdown"
rclick.rich_click.SHOW_ARGUMENTS = True
rclick.rich_click.GROUP_ARGUMENTS_OPTIONS = True


@click.group(cls=rclick.RichGroup, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="collection")
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
    """Collection compiler - build skill and competency collections.

    Compiles a directory of canonical JSON records into one deterministic
    collection artifact, or checks that an existing artifact is current.

    **Commands:**

    - `collection skills --write` - Compile skills-collection.json
    - `collection competencies --check` - Verify competencies-collection.json
    """


cli.add_command(skills)
cli.add_command(competencies)


if __name__ == "__main__":
    cli()
