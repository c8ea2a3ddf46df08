"""Record normalization.

Applies a variant's default rules to a validated record. The input is
never mutated; a shallow copy is returned with defaults filled in only
where the field is absent.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from collection_core.variants import DefaultSource, VariantDescriptor


class NormalizationContext(BaseModel):
    """Collection-level values that default rules draw from.

    Attributes:
        collection_id: Identity of the owning collection.
        collection_author: Default author declared by the collection, if any.
    """

    model_config = ConfigDict(frozen=True)

    collection_id: Any
    collection_author: Any = None

    def value_for(self, source: DefaultSource) -> Any:
        if source is DefaultSource.COLLECTION_ID:
            return self.collection_id
        return self.collection_author


def normalize_record(
    record: dict[str, Any],
    context: NormalizationContext,
    variant: VariantDescriptor,
) -> dict[str, Any]:
    """Return a copy of ``record`` with the variant's defaults applied.

    Example:
        >>> ctx = NormalizationContext(collection_id="https://x/c", collection_author="WGU")
        >>> normalize_record({"id": "a", "type": "RichSkillDescriptor"}, ctx, SKILLS)
        {'id': 'a', 'type': 'RichSkillDescriptor', 'isMemberOf': 'https://x/c', 'author': 'WGU'}
    """
    normalized = dict(record)
    for rule in variant.defaults:
        if rule.field not in normalized:
            normalized[rule.field] = context.value_for(rule.source)
    return normalized
