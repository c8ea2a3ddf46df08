"""Compiler output models.

- CompiledCollection: the compiled collection and its serialized artifact text
- CheckResult: outcome of comparing an on-disk artifact with a fresh compile
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CompiledCollection(BaseModel):
    """A compiled collection ready to be written or checked.

    The value is transient; only ``text`` is ever persisted.

    Attributes:
        variant: Name of the record variant.
        document: Collection mapping (metadata fields, then the records field).
        text: Canonical artifact text.
        sha256: Hex SHA-256 digest of ``text``. Never persisted.
        record_count: Number of records in the collection.
        source_paths: Record files in scan order.

    Example:
        >>> compiled = compiler.compile(meta_path, records_dir)
        >>> compiled.record_count
        42
        >>> compiled.text.endswith("\\n")
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    variant: str = Field(..., min_length=1)
    document: dict[str, Any]
    text: str
    sha256: str = Field(..., min_length=64, max_length=64)
    record_count: int = Field(..., ge=1)
    source_paths: tuple[Path, ...] = ()

    @property
    def records(self) -> list[dict[str, Any]]:
        """Normalized records in artifact order."""
        records: list[dict[str, Any]] = self.document[self.variant]
        return records


class CheckResult(BaseModel):
    """Result of a successful artifact check.

    Attributes:
        artifact_path: Artifact that was compared.
        sha256: Digest shared by the on-disk and freshly compiled text.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    artifact_path: Path
    sha256: str
