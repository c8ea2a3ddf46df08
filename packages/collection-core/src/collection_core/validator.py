"""Record and metadata validation.

Validation is polymorphic over the variant descriptor. Every check
raises on the first problem; there is no partial acceptance.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from collection_core.errors import (
    InvalidMetadataError,
    MalformedRecordError,
    MembershipMismatchError,
    MissingFieldError,
    TypeMismatchError,
)
from collection_core.variants import VariantDescriptor


def validate_metadata(meta: Any, path: Path | str, variant: VariantDescriptor) -> dict[str, Any]:
    """Check collection metadata against the variant's metadata contract.

    Args:
        meta: Parsed metadata file content.
        path: Metadata file path, for messages.
        variant: Variant descriptor.

    Returns:
        The metadata, unchanged.

    Raises:
        InvalidMetadataError: If the metadata is not an object, lacks
            required keys, or carries the wrong type tag.
    """
    if not isinstance(meta, dict):
        raise InvalidMetadataError("must contain a JSON object", file_path=path)

    missing = [key for key in variant.meta_required if key not in meta]
    if missing:
        raise InvalidMetadataError(f"missing keys: {', '.join(missing)}", file_path=path)

    if meta.get(variant.meta_type_field) != variant.meta_type_sentinel:
        raise InvalidMetadataError(
            f"'{variant.meta_type_field}' must be '{variant.meta_type_sentinel}'",
            file_path=path,
        )
    return meta


def _type_tag(record: dict[str, Any], variant: VariantDescriptor) -> tuple[str, Any] | None:
    # First truthy spelling wins; an empty tag counts as absent.
    for field in variant.type_fields:
        value = record.get(field)
        if value:
            return field, value
    return None


def validate_record(
    record: Any,
    path: Path | str,
    collection_id: Any,
    variant: VariantDescriptor,
) -> dict[str, Any]:
    """Check one record against its variant contract.

    Args:
        record: Parsed record file content.
        path: Record file path, for messages.
        collection_id: Identity of the owning collection.
        variant: Variant descriptor.

    Returns:
        The record, unchanged.

    Raises:
        MalformedRecordError: If the record is not a JSON object.
        MissingFieldError: If the identifier or type tag is absent.
        TypeMismatchError: If the type tag has the wrong value.
        MembershipMismatchError: If the membership backlink names
            another collection.
    """
    if not isinstance(record, dict):
        raise MalformedRecordError(
            f"must contain a JSON object (one {variant.record_label})", file_path=path
        )

    if variant.id_field not in record:
        raise MissingFieldError([variant.id_field], file_path=path)

    tag = _type_tag(record, variant)
    if tag is None:
        raise MissingFieldError(variant.type_fields, file_path=path, separator=" or ")

    field, value = tag
    if value != variant.type_sentinel:
        raise TypeMismatchError(field, value, variant.type_sentinel, file_path=path)

    membership = variant.membership_field
    if membership and membership in record and record[membership] != collection_id:
        raise MembershipMismatchError(
            membership, record[membership], collection_id, file_path=path
        )

    return record
