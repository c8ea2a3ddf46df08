"""Custom exception hierarchy for collection-core.

This module defines the exception classes raised while compiling a
record collection:
- CollectionError: Base exception for all collection-related errors
- Scan errors: MissingDirectoryError, EmptyCollectionError
- Validation errors: InvalidMetadataError, MalformedRecordError,
  MissingFieldError, TypeMismatchError, MembershipMismatchError
- Invocation errors: InvalidArgumentError, StaleArtifactError, IOFailureError

Every error is fatal to the current invocation. Messages name the
offending file and the field or value at fault so the source record can
be fixed directly. Technical details are logged via structlog.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog

logger = structlog.get_logger(__name__)


def _show(value: Any) -> str:
    """Render a JSON value the way it appears in the source file."""
    return json.dumps(value, ensure_ascii=False)


class CollectionError(Exception):
    """Base exception for collection-core.

    Args:
        user_message: Message to display to the user.
        file_path: Path of the offending file, if any. Appended to the
            message as context.
        internal_details: Optional technical details for logging only.

    Example:
        >>> raise CollectionError(
        ...     "Record is invalid",
        ...     file_path="skills/pm-001.json",
        ...     internal_details="raw value: 42",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        file_path: str | Path | None = None,
        internal_details: str | None = None,
    ) -> None:
        """Initialize CollectionError with user message and optional context.

        Args:
            user_message: Message to display to the user.
            file_path: Path of the offending file (optional).
            internal_details: Technical details for internal logging only.
        """
        full_message = f"{file_path}: {user_message}" if file_path else user_message
        super().__init__(full_message)
        self.user_message = full_message
        self.file_path = str(file_path) if file_path else None

        if internal_details:
            logger.error(
                "collection_error",
                error_type=self.__class__.__name__,
                user_message=full_message,
                internal_details=internal_details,
            )


class MissingDirectoryError(CollectionError):
    """Raised when the records root directory does not exist."""

    def __init__(self, directory: str | Path, *, record_label: str = "record") -> None:
        super().__init__(f"{record_label} directory does not exist: {directory}")
        self.directory = str(directory)


class EmptyCollectionError(CollectionError):
    """Raised when the records root holds no record files.

    A collection never compiles to an empty record set silently.
    """

    def __init__(self, directory: str | Path, *, record_label: str = "record") -> None:
        super().__init__(f"No {record_label} JSON files found under: {directory}")
        self.directory = str(directory)


class InvalidMetadataError(CollectionError):
    """Raised when the collection metadata file is missing or invalid.

    Use this exception when:
    - The metadata file does not exist or is not valid JSON
    - The metadata is not a JSON object
    - Required metadata keys are missing
    - The metadata type tag has the wrong value
    """

    pass


class MalformedRecordError(CollectionError):
    """Raised when a record file is not valid JSON or not a JSON object."""

    pass


class MissingFieldError(CollectionError):
    """Raised when a record lacks one or more required keys.

    Attributes:
        missing_fields: The exact key names that are absent.

    Example:
        >>> raise MissingFieldError(["id"], file_path="skills/pm-001.json")
        # User sees: "skills/pm-001.json: missing keys: id"
    """

    def __init__(
        self,
        missing_fields: list[str] | tuple[str, ...],
        *,
        file_path: str | Path | None = None,
        separator: str = ", ",
    ) -> None:
        """Initialize MissingFieldError.

        Args:
            missing_fields: Key names that are absent.
            file_path: Path of the offending record.
            separator: Joiner used in the message ("or" for alternative
                spellings of the same key).
        """
        super().__init__(
            f"missing keys: {separator.join(missing_fields)}",
            file_path=file_path,
        )
        self.missing_fields = tuple(missing_fields)


class TypeMismatchError(CollectionError):
    """Raised when a type tag is present but carries the wrong value.

    Attributes:
        field: Name of the type-tag field.
        actual: Value found in the record.
        expected: Sentinel value the variant requires.
    """

    def __init__(
        self,
        field: str,
        actual: Any,
        expected: str,
        *,
        file_path: str | Path | None = None,
    ) -> None:
        super().__init__(
            f"has {field}={_show(actual)}; expected {_show(expected)}",
            file_path=file_path,
        )
        self.field = field
        self.actual = actual
        self.expected = expected


class MembershipMismatchError(CollectionError):
    """Raised when a record's membership backlink names another collection.

    This catches records copy-pasted from a different collection.
    """

    def __init__(
        self,
        field: str,
        actual: Any,
        expected: Any,
        *,
        file_path: str | Path | None = None,
    ) -> None:
        super().__init__(
            f"has {field}={_show(actual)} but expected {_show(expected)}",
            file_path=file_path,
        )
        self.field = field
        self.actual = actual
        self.expected = expected


class InvalidArgumentError(CollectionError):
    """Raised when an invocation argument is not acceptable.

    Example:
        >>> raise InvalidArgumentError('--sort-by must be one of: "id", "skillName"')
    """

    pass


class StaleArtifactError(CollectionError):
    """Raised when an on-disk artifact differs from a fresh compile.

    Attributes:
        artifact_path: Path of the stale artifact.
        regenerate_hint: Command that regenerates the artifact.
    """

    def __init__(
        self,
        artifact_path: str | Path,
        *,
        regenerate_hint: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        name = Path(artifact_path).name
        message = f"{name} is out of date ({artifact_path})."
        if regenerate_hint:
            message = f"{message}\n\nRun:\n  {regenerate_hint}"
        super().__init__(message, internal_details=internal_details)
        self.artifact_path = str(artifact_path)
        self.regenerate_hint = regenerate_hint


class IOFailureError(CollectionError):
    """Raised when a file cannot be read or written for reasons other than absence."""

    pass
