"""Compile commands - build or check a collection artifact.

One command per record variant, all produced by build_compile_command()
from the variant descriptor:

- skills (console script: compile-skills)
- competencies (console script: compile-competencies)
"""

from __future__ import annotations

import click

from collection_cli.errors import handle_collection_error
from collection_cli.output import set_no_color, success
from collection_core import CollectionCompiler, CollectionError, CompilerConfig, configure_logging
from collection_core.variants import COMPETENCIES, SKILLS, VariantDescriptor

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _help_text(variant: VariantDescriptor) -> str:
    return (
        f"Compile {variant.default_out} from {variant.default_meta} and the "
        f"{variant.record_label} files under {variant.default_records_dir}/.\n\n"
        f"The {variant.record_label} files are the source of truth; "
        f"{variant.default_out} is a build artifact.\n\n"
        "Examples:\n\n"
        f"    {variant.command_name} --write\n\n"
        f"    {variant.command_name} --check"
    )


def build_compile_command(variant: VariantDescriptor) -> click.Command:
    """Build the compile command for one record variant.

    Args:
        variant: Descriptor of the record family to compile.

    Returns:
        Click command named after the variant.
    """
    sort_choices = click.Choice(list(variant.sort_key_names))

    @click.command(variant.name, context_settings=CONTEXT_SETTINGS, help=_help_text(variant))
    @click.option(
        "--meta",
        "meta",
        type=click.Path(dir_okay=False),
        default=None,
        help=f"Path to {variant.default_meta} [default: <root>/{variant.default_meta}]",
    )
    @click.option(
        variant.records_dir_option,
        "records_dir",
        type=click.Path(file_okay=False),
        default=None,
        help=(
            f"Directory of {variant.record_label} JSON files "
            f"[default: <root>/{variant.default_records_dir}]"
        ),
    )
    @click.option(
        "--out",
        "out",
        type=click.Path(dir_okay=False),
        default=None,
        help=(
            f"Output path for compiled {variant.default_out} "
            f"[default: <root>/{variant.default_out}]"
        ),
    )
    @click.option(
        "--sort-by",
        "sort_by",
        type=sort_choices,
        default=variant.default_sort_key,
        show_default=True,
        help="Record field to order the collection by",
    )
    @click.option("--write", "write", is_flag=True, help=f"Write compiled {variant.default_out}")
    @click.option(
        "--check",
        "check",
        is_flag=True,
        help=f"Exit non-zero if {variant.default_out} is out of date",
    )
    @click.option(
        "--root",
        "root",
        type=click.Path(file_okay=False),
        default=None,
        help="Collection root for default paths [default: $COLLECTION_ROOT or current directory]",
    )
    @click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
    @click.option(
        "--no-color",
        is_flag=True,
        default=False,
        help="Disable colored output.",
        is_eager=True,
        expose_value=False,
        callback=lambda ctx, param, value: set_no_color(value) if value else None,
    )
    def command(
        meta: str | None,
        records_dir: str | None,
        out: str | None,
        sort_by: str,
        write: bool,
        check: bool,
        root: str | None,
        verbose: bool,
    ) -> None:
        if write == check:
            raise click.UsageError("Must specify exactly one of --write or --check")

        configure_logging(log_level="DEBUG" if verbose else "WARNING")

        try:
            config = CompilerConfig.resolve(
                variant,
                root=root,
                meta=meta,
                records_dir=records_dir,
                out=out,
                sort_by=sort_by,
            )
            compiler = CollectionCompiler.from_config(config)
            compiled = compiler.compile(config.meta_path, config.records_dir, config.sort_by)

            if write:
                path = compiler.write(config.out_path, compiled.text)
                success(f"WROTE: {path}")
            else:
                compiler.check(config.out_path, compiled.text)
                success(f"OK: {config.out_path.name} is up to date.")

        except CollectionError as e:
            handle_collection_error(e)

    return command


skills = build_compile_command(SKILLS)
competencies = build_compile_command(COMPETENCIES)
