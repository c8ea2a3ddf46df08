"""Compiler invocation configuration.

Resolves the paths and options of one compile invocation up front, so
the compiler itself never looks at the working directory or the
environment:

- explicit paths are taken relative to the current working directory
- omitted paths default to the variant's file names under the
  collection root
- the collection root comes from the ``root`` argument, then the
  COLLECTION_ROOT environment variable, then the working directory
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from collection_core.variants import VariantDescriptor, get_variant

# Environment variable naming the collection root
COLLECTION_ROOT_ENV_VAR = "COLLECTION_ROOT"


def get_collection_root(root: Path | str | None = None) -> Path:
    """Return the absolute collection root.

    Args:
        root: Explicit root. Takes precedence over COLLECTION_ROOT.
    """
    if root is None:
        root = os.environ.get(COLLECTION_ROOT_ENV_VAR) or Path.cwd()
    return Path(root).absolute()


class CompilerConfig(BaseModel):
    """Fully resolved configuration for one compile invocation.

    Attributes:
        variant: Name of the record variant.
        meta_path: Collection metadata file.
        records_dir: Records root directory.
        out_path: Artifact path.
        sort_by: Whitelisted sort-key name.

    Example:
        >>> config = CompilerConfig.resolve(SKILLS, root="/repo")
        >>> config.out_path
        PosixPath('/repo/skills-collection.json')
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    variant: str = Field(..., min_length=1)
    meta_path: Path
    records_dir: Path
    out_path: Path
    sort_by: str = Field(..., min_length=1)

    @property
    def descriptor(self) -> VariantDescriptor:
        return get_variant(self.variant)

    @classmethod
    def resolve(
        cls,
        variant: VariantDescriptor,
        *,
        root: Path | str | None = None,
        meta: Path | str | None = None,
        records_dir: Path | str | None = None,
        out: Path | str | None = None,
        sort_by: str | None = None,
    ) -> CompilerConfig:
        """Resolve defaults and validate options for ``variant``.

        Raises:
            InvalidArgumentError: If ``sort_by`` is not whitelisted.
        """
        base = get_collection_root(root)
        sort_by = sort_by or variant.default_sort_key
        variant.resolve_sort_key(sort_by)

        def _path(value: Path | str | None, default: str) -> Path:
            if value is None:
                return base / default
            return Path(value).absolute()

        return cls(
            variant=variant.name,
            meta_path=_path(meta, variant.default_meta),
            records_dir=_path(records_dir, variant.default_records_dir),
            out_path=_path(out, variant.default_out),
            sort_by=sort_by,
        )
