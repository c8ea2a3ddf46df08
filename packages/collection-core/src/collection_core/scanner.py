"""Record store scanner.

Discovers record files under a root directory. The returned order is
deterministic (plain code point ordering of the path strings) so that
validation failures are reported in the same order on every machine. It
is not the final record order; the compiler sorts records afterwards.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from collection_core.errors import EmptyCollectionError, MissingDirectoryError

logger = structlog.get_logger(__name__)

RECORD_FILE_EXTENSION = ".json"


def scan_records(
    root: Path | str,
    *,
    extension: str = RECORD_FILE_EXTENSION,
    record_label: str = "record",
) -> list[Path]:
    """List record files under ``root``, recursively.

    Files match when their name ends in ``extension``, compared
    case-insensitively. Directories are never matched, whatever their name.

    Args:
        root: Records root directory.
        extension: Record file extension, including the dot.
        record_label: Singular noun used in error messages.

    Returns:
        Absolute paths sorted by their string form.

    Raises:
        MissingDirectoryError: If ``root`` does not exist.
        EmptyCollectionError: If no matching files are found.

    Example:
        >>> scan_records(Path("skills"), record_label="skill")
        [PosixPath('/repo/skills/a/pm-001.json'), PosixPath('/repo/skills/pm-002.json')]
    """
    root = Path(root).absolute()
    if not root.is_dir():
        raise MissingDirectoryError(root, record_label=record_label)

    suffix = extension.lower()
    paths = [
        path
        for path in root.rglob("*")
        if path.name.lower().endswith(suffix) and path.is_file()
    ]
    paths.sort(key=str)

    if not paths:
        raise EmptyCollectionError(root, record_label=record_label)

    logger.debug("collection_records_scanned", root=str(root), count=len(paths))
    return paths
