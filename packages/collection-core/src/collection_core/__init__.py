"""collection-core: Deterministic compiler for skill and competency collections.

This package provides:
- CollectionCompiler: Compile a directory of records into one artifact
- Variant descriptors: SKILLS and COMPETENCIES record contracts
- CompilerConfig: Invocation configuration with defaults resolved up front
- Error hierarchy: one exception type per failure kind
"""

from __future__ import annotations

__version__ = "0.1.0"

from collection_core.compiler import CheckResult, CollectionCompiler, CompiledCollection
from collection_core.config import COLLECTION_ROOT_ENV_VAR, CompilerConfig, get_collection_root
from collection_core.errors import (
    CollectionError,
    EmptyCollectionError,
    InvalidArgumentError,
    InvalidMetadataError,
    IOFailureError,
    MalformedRecordError,
    MembershipMismatchError,
    MissingDirectoryError,
    MissingFieldError,
    StaleArtifactError,
    TypeMismatchError,
)
from collection_core.normalizer import NormalizationContext, normalize_record
from collection_core.observability import configure_logging
from collection_core.scanner import RECORD_FILE_EXTENSION, scan_records
from collection_core.serializer import content_hash, serialize_collection
from collection_core.validator import validate_metadata, validate_record
from collection_core.variants import (
    COMPETENCIES,
    SKILLS,
    VARIANTS,
    DefaultRule,
    DefaultSource,
    VariantDescriptor,
    get_variant,
)

__all__ = [
    "__version__",
    # Compiler
    "CollectionCompiler",
    "CompiledCollection",
    "CheckResult",
    # Configuration
    "CompilerConfig",
    "COLLECTION_ROOT_ENV_VAR",
    "get_collection_root",
    "configure_logging",
    # Variants
    "VariantDescriptor",
    "DefaultRule",
    "DefaultSource",
    "SKILLS",
    "COMPETENCIES",
    "VARIANTS",
    "get_variant",
    # Pipeline stages
    "scan_records",
    "RECORD_FILE_EXTENSION",
    "validate_metadata",
    "validate_record",
    "NormalizationContext",
    "normalize_record",
    "serialize_collection",
    "content_hash",
    # Errors
    "CollectionError",
    "MissingDirectoryError",
    "EmptyCollectionError",
    "InvalidMetadataError",
    "MalformedRecordError",
    "MissingFieldError",
    "TypeMismatchError",
    "MembershipMismatchError",
    "InvalidArgumentError",
    "StaleArtifactError",
    "IOFailureError",
]
