"""Shared pytest fixtures for collection-core tests.

This module provides sample collection metadata, sample records and
helpers that lay a collection out on disk under tmp_path.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import structlog

SKILLS_COLLECTION_ID = "https://example.org/pm/collection"
COMPETENCIES_COLLECTION_ID = "https://example.org/pm/competencies"


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


def write_json(path: Path, data: Any) -> Path:
    """Write ``data`` as indented JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return path


def skill(skill_id: str, **fields: Any) -> dict[str, Any]:
    """Build a valid skill record."""
    record: dict[str, Any] = {"id": skill_id, "type": "RichSkillDescriptor"}
    record.update(fields)
    return record


def competency(competency_id: str, name: str | None = None, **fields: Any) -> dict[str, Any]:
    """Build a valid competency record."""
    record: dict[str, Any] = {"@id": competency_id, "@type": "ceterms:Competency"}
    if name is not None:
        record["ceterms:name"] = {"en-US": name}
    record.update(fields)
    return record


@pytest.fixture
def skills_meta() -> dict[str, Any]:
    """Return valid skills collection metadata."""
    return {
        "@context": "https://rsd.osmt.dev/context-v1.json",
        "id": SKILLS_COLLECTION_ID,
        "type": "Collection",
        "name": "Project Management",
        "description": "Skills for project management.",
        "author": "Example University",
        "status": "published",
    }


@pytest.fixture
def competencies_meta() -> dict[str, Any]:
    """Return valid competencies collection metadata."""
    return {
        "@context": "https://credreg.net/ctdl/schema/context/json",
        "@id": COMPETENCIES_COLLECTION_ID,
        "@type": "ceterms:Collection",
        "ceterms:name": {"en-US": "Project Management Competencies"},
    }


@pytest.fixture
def make_collection(tmp_path: Path) -> Callable[..., tuple[Path, Path]]:
    """Factory fixture laying a collection out on disk.

    Returns:
        Function taking (meta, records, records_dir_name) where records
        maps relative file names to record content. Returns
        (meta_path, records_dir).
    """

    def _make(
        meta: Any,
        records: dict[str, Any],
        records_dir_name: str = "skills",
        meta_name: str = "collection.meta.json",
    ) -> tuple[Path, Path]:
        meta_path = write_json(tmp_path / meta_name, meta)
        records_dir = tmp_path / records_dir_name
        records_dir.mkdir(parents=True, exist_ok=True)
        for name, content in records.items():
            write_json(records_dir / name, content)
        return meta_path, records_dir

    return _make


@pytest.fixture
def skills_collection(
    make_collection: Callable[..., tuple[Path, Path]],
    skills_meta: dict[str, Any],
) -> tuple[Path, Path]:
    """A valid three-skill collection on disk."""
    return make_collection(
        skills_meta,
        {
            "pm-003.json": skill("pm-003", skillName="Scheduling"),
            "nested/pm-001.json": skill("pm-001", skillName="Budgeting", author="Jane Doe"),
            "pm-002.json": skill("pm-002", skillName="Risk"),
        },
    )


@pytest.fixture
def make_skill() -> Callable[..., dict[str, Any]]:
    """Factory fixture building valid skill records."""
    return skill


@pytest.fixture
def make_competency() -> Callable[..., dict[str, Any]]:
    """Factory fixture building valid competency records."""
    return competency


@pytest.fixture
def competencies_collection(
    make_collection: Callable[..., tuple[Path, Path]],
    competencies_meta: dict[str, Any],
) -> tuple[Path, Path]:
    """A valid three-competency collection on disk."""
    return make_collection(
        competencies_meta,
        {
            "c-b.json": competency("https://example.org/c/B", "Stakeholders"),
            "c-a.json": competency("https://example.org/c/a", "Scope"),
            "deep/er/c-c.json": competency("https://example.org/c/c", "Quality"),
        },
        records_dir_name="competencies",
        meta_name="competencies.meta.json",
    )
