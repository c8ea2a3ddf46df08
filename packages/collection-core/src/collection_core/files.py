"""File access helpers for the collection compiler.

All reads and writes are UTF-8. Writes use ``\\n`` line endings on every
platform so the artifact bytes do not depend on the OS.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

from collection_core.errors import IOFailureError, MalformedRecordError


def _reject_constant(token: str) -> Any:
    # NaN, Infinity and -Infinity are accepted by Python but are not JSON.
    raise ValueError(f"{token} is not a JSON value")


def _finite_float(text: str) -> float:
    number = float(text)
    if not math.isfinite(number):
        raise ValueError(f"number {text} is out of range")
    return number


def read_json(path: Path) -> Any:
    """Load and parse a JSON file.

    Args:
        path: File to read.

    Returns:
        The parsed JSON value (any shape).

    Raises:
        FileNotFoundError: If the file does not exist. Callers decide
            which collection error absence maps to.
        IOFailureError: If the file exists but cannot be read.
        MalformedRecordError: If the content is not valid JSON. This
            includes NaN or Infinity tokens, numbers too large for a
            float, and string escapes that do not form valid Unicode.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise
    except (OSError, UnicodeDecodeError) as e:
        raise IOFailureError(f"Failed reading file: {e}", file_path=path) from e

    try:
        value = json.loads(raw, parse_constant=_reject_constant, parse_float=_finite_float)
    except json.JSONDecodeError as e:
        raise MalformedRecordError(
            f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}",
            file_path=path,
        ) from e
    except ValueError as e:
        raise MalformedRecordError(f"Invalid JSON: {e}", file_path=path) from e

    try:
        json.dumps(value, ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError as e:
        raise MalformedRecordError(
            f"Invalid JSON: string is not valid Unicode ({e.reason})",
            file_path=path,
        ) from e
    return value


def read_bytes_or_empty(path: Path) -> bytes:
    """Read a file's raw bytes, treating a missing file as empty content.

    Raises:
        IOFailureError: If the file exists but cannot be read.
    """
    try:
        return path.read_bytes()
    except FileNotFoundError:
        return b""
    except OSError as e:
        raise IOFailureError(f"Failed reading file: {e}", file_path=path) from e


def write_text(path: Path, text: str) -> Path:
    """Overwrite a text file, creating parent directories as needed.

    Raises:
        IOFailureError: If the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        raise IOFailureError(f"Failed writing file: {e}", file_path=path) from e
    return path
