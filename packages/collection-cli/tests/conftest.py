"""Shared test fixtures for collection-cli tests.

Provides CliRunner fixtures and a collection root laid out on disk
with the default file names for both variants.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from collection_core.config import COLLECTION_ROOT_ENV_VAR

SKILLS_COLLECTION_ID = "https://example.org/pm/collection"


def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clear_root_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's COLLECTION_ROOT out of the tests."""
    monkeypatch.delenv(COLLECTION_ROOT_ENV_VAR, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner.

    Returns:
        CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture
def collection_root(tmp_path: Path) -> Path:
    """Return a collection root holding valid skills and competencies.

    Layout:
        collection.meta.json, skills/*.json,
        competencies.meta.json, competencies/*.json
    """
    write_json(
        tmp_path / "collection.meta.json",
        {
            "@context": "https://rsd.osmt.dev/context-v1.json",
            "id": SKILLS_COLLECTION_ID,
            "type": "Collection",
            "name": "Project Management",
            "description": "Skills for project management.",
            "author": "Example University",
        },
    )
    write_json(
        tmp_path / "skills" / "pm-010.json",
        {"id": "pm-010", "type": "RichSkillDescriptor", "skillName": "Risk"},
    )
    write_json(
        tmp_path / "skills" / "pm-002.json",
        {"id": "pm-002", "type": "RichSkillDescriptor", "skillName": "Risk"},
    )
    write_json(
        tmp_path / "skills" / "nested" / "pm-001.json",
        {"id": "pm-001", "@type": "RichSkillDescriptor", "skillName": "Budgeting"},
    )

    write_json(
        tmp_path / "competencies.meta.json",
        {
            "@context": "https://credreg.net/ctdl/schema/context/json",
            "@id": "https://example.org/pm/competencies",
            "@type": "ceterms:Collection",
        },
    )
    write_json(
        tmp_path / "competencies" / "c-1.json",
        {
            "@id": "https://example.org/c/1",
            "@type": "ceterms:Competency",
            "ceterms:name": {"en-US": "Scope"},
        },
    )
    return tmp_path
