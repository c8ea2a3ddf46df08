"""Collection compiler.

Compiles collection metadata plus a directory of record files into one
artifact, and checks that an existing artifact still matches its sources.

Pipeline (one file at a time, stopping at the first failure):
    load metadata -> validate metadata -> scan -> load record ->
    validate -> normalize -> sort -> assemble -> serialize

The artifact is written only after the whole record set has compiled,
so a failed compile never leaves a partial artifact behind.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from collection_core.compiler.models import CheckResult, CompiledCollection
from collection_core.errors import (
    InvalidMetadataError,
    IOFailureError,
    MalformedRecordError,
    StaleArtifactError,
)
from collection_core.files import read_bytes_or_empty, read_json, write_text
from collection_core.normalizer import NormalizationContext, normalize_record
from collection_core.scanner import scan_records
from collection_core.serializer import content_hash, serialize_collection
from collection_core.validator import validate_metadata, validate_record

if TYPE_CHECKING:
    from collection_core.config import CompilerConfig
    from collection_core.variants import VariantDescriptor

logger = structlog.get_logger(__name__)


def _sort_text(record: dict[str, Any], field_path: tuple[str, ...]) -> str:
    value: Any = record
    for key in field_path:
        if not isinstance(value, dict):
            return ""
        value = value.get(key)
    if value is None:
        return ""
    return (value if isinstance(value, str) else str(value)).lower()


class CollectionCompiler:
    """Compile one record variant into a deterministic collection artifact.

    The compiler is stateless: compiling unchanged inputs twice yields
    byte-identical text, which is what makes check() usable as a CI gate.

    Attributes:
        variant: Descriptor of the record family being compiled.

    Example:
        >>> compiler = CollectionCompiler(SKILLS)
        >>> compiled = compiler.compile(Path("collection.meta.json"), Path("skills"))
        >>> compiler.write(Path("skills-collection.json"), compiled.text)
        >>> compiler.check(Path("skills-collection.json"), compiled.text)
    """

    def __init__(self, variant: VariantDescriptor) -> None:
        """Initialize the compiler.

        Args:
            variant: Descriptor of the record family being compiled.
        """
        self.variant = variant

    @classmethod
    def from_config(cls, config: CompilerConfig) -> CollectionCompiler:
        return cls(config.descriptor)

    def compile(
        self,
        meta_path: Path | str,
        records_root: Path | str,
        sort_key: str | None = None,
    ) -> CompiledCollection:
        """Compile metadata and records into a CompiledCollection.

        Args:
            meta_path: Collection metadata file.
            records_root: Records root directory.
            sort_key: Whitelisted sort-key name. Defaults to the variant's.

        Returns:
            Immutable CompiledCollection holding the artifact text.

        Raises:
            InvalidArgumentError: If ``sort_key`` is not whitelisted.
            InvalidMetadataError: If the metadata is missing or invalid.
            MissingDirectoryError: If ``records_root`` does not exist.
            EmptyCollectionError: If no record files are found.
            MalformedRecordError: If a record is not a JSON object.
            MissingFieldError: If a record lacks a required key.
            TypeMismatchError: If a record carries the wrong type tag.
            MembershipMismatchError: If a record names another collection.
            IOFailureError: If a file cannot be read.
        """
        variant = self.variant
        field_path = variant.resolve_sort_key(sort_key or variant.default_sort_key)
        meta_path = Path(meta_path)

        logger.debug(
            "collection_compile_started",
            variant=variant.name,
            meta_path=str(meta_path),
            records_root=str(records_root),
        )

        meta = self._load_metadata(meta_path)
        context = NormalizationContext(
            collection_id=meta[variant.meta_id_field],
            collection_author=(
                meta.get(variant.meta_author_field) if variant.meta_author_field else None
            ),
        )

        paths = scan_records(records_root, record_label=variant.record_label)
        records = [self._load_record(path, context) for path in paths]

        id_path = (variant.id_field,)
        records.sort(key=lambda r: (_sort_text(r, field_path), _sort_text(r, id_path)))

        document = {**meta, variant.records_field: records}
        text = serialize_collection(document)
        digest = content_hash(text)

        logger.info(
            "collection_compiled",
            variant=variant.name,
            record_count=len(records),
            sha256=digest,
        )

        return CompiledCollection(
            variant=variant.name,
            document=document,
            text=text,
            sha256=digest,
            record_count=len(records),
            source_paths=tuple(paths),
        )

    def write(self, artifact_path: Path | str, text: str) -> Path:
        """Overwrite the artifact with ``text``.

        Returns:
            The path written.

        Raises:
            IOFailureError: If the artifact cannot be written.
        """
        path = write_text(Path(artifact_path), text)
        logger.info("collection_artifact_written", artifact_path=str(path))
        return path

    def check(self, artifact_path: Path | str, text: str) -> CheckResult:
        """Compare the on-disk artifact with freshly compiled ``text``.

        A missing artifact reads as empty content and is therefore stale.

        Raises:
            StaleArtifactError: If the bytes differ.
            IOFailureError: If the artifact exists but cannot be read.
        """
        path = Path(artifact_path)
        current = read_bytes_or_empty(path)
        expected = content_hash(text)

        if current != text.encode("utf-8"):
            actual = content_hash(current)
            raise StaleArtifactError(
                path,
                regenerate_hint=f"{self.variant.command_name} --write",
                internal_details=f"expected sha256={expected} actual sha256={actual}",
            )

        logger.info("collection_artifact_checked", artifact_path=str(path), sha256=expected)
        return CheckResult(artifact_path=path, sha256=expected)

    def _load_metadata(self, meta_path: Path) -> dict[str, Any]:
        try:
            meta = read_json(meta_path)
        except FileNotFoundError:
            raise InvalidMetadataError("Missing file", file_path=meta_path) from None
        except MalformedRecordError as e:
            raise InvalidMetadataError(e.user_message) from e
        return validate_metadata(meta, meta_path, self.variant)

    def _load_record(self, path: Path, context: NormalizationContext) -> dict[str, Any]:
        try:
            data = read_json(path)
        except FileNotFoundError as e:
            raise IOFailureError("Record file disappeared during compile", file_path=path) from e
        record = validate_record(data, path, context.collection_id, self.variant)
        return normalize_record(record, context, self.variant)
