"""Compiler module for collection-core.

This module exports the compiler and its output models:
- CollectionCompiler: Compile one record variant into an artifact
- CompiledCollection: Compiled collection with its artifact text
- CheckResult: Outcome of an up-to-date artifact check
"""

from __future__ import annotations

from collection_core.compiler.compiler import CollectionCompiler
from collection_core.compiler.models import CheckResult, CompiledCollection

__all__: list[str] = [
    "CollectionCompiler",
    "CompiledCollection",
    "CheckResult",
]
