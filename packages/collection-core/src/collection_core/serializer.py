"""Deterministic artifact serializer.

Output rules:
- two-space indentation
- keys keep insertion order (no global key sorting), so the authored
  metadata field order survives into the artifact
- non-ASCII characters written as-is
- exactly one trailing newline
- NaN and infinite floats are refused (they have no JSON spelling)
"""

from __future__ import annotations

import hashlib
import json
from typing import Any

INDENT = 2


def serialize_collection(document: dict[str, Any]) -> str:
    """Render a collection document to canonical artifact text.

    Raises:
        ValueError: If the document holds a NaN or infinite float.
    """
    return json.dumps(document, indent=INDENT, ensure_ascii=False, allow_nan=False) + "\n"


def content_hash(text: str | bytes) -> str:
    """Hex SHA-256 digest of artifact text."""
    data = text.encode("utf-8") if isinstance(text, str) else text
    return hashlib.sha256(data).hexdigest()
