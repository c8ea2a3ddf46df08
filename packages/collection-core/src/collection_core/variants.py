"""Record variant descriptors.

A collection is compiled by one engine parameterized by a variant
descriptor. The descriptor captures everything that differs between the
two record families:

- skills: Rich Skill Descriptor records identified by ``id``, tagged with
  ``type`` or ``@type`` equal to ``RichSkillDescriptor``
- competencies: CTDL records identified by ``@id``, tagged with
  ``@type`` equal to ``ceterms:Competency``

The two tag conventions come from different schemas and are kept as
separate descriptors rather than one lenient rule.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

from collection_core.errors import InvalidArgumentError


class DefaultSource(str, Enum):
    """Collection-level value a default rule copies into a record."""

    COLLECTION_ID = "collection_id"
    COLLECTION_AUTHOR = "collection_author"


class DefaultRule(BaseModel):
    """Set ``field`` from ``source`` when the record does not carry it."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    field: str = Field(..., min_length=1)
    source: DefaultSource


class VariantDescriptor(BaseModel):
    """Contract for one record family.

    Attributes:
        name: Variant name, also the records field in the artifact.
        record_label: Singular noun used in messages.
        id_field: Primary identifier field of a record.
        type_fields: Accepted spellings of the record type tag, in lookup order.
        type_sentinel: Required value of the record type tag.
        meta_required: Keys the collection metadata must contain.
        meta_id_field: Metadata field holding the collection identity.
        meta_type_field: Metadata type-tag field.
        meta_type_sentinel: Required value of the metadata type tag.
        meta_author_field: Metadata field holding the default author, if any.
        membership_field: Record backlink that must match the collection identity.
        defaults: Defaults applied by the normalizer, in order.
        sort_keys: Sort-key name to field path within a record.
        default_sort_key: Sort key used when none is given.
        default_meta: Metadata file name relative to the collection root.
        default_records_dir: Records directory relative to the collection root.
        default_out: Artifact file name relative to the collection root.
        records_dir_option: CLI option naming the records directory.
        command_name: Console script that compiles this variant.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1)
    record_label: str = Field(..., min_length=1)
    id_field: str = Field(..., min_length=1)
    type_fields: tuple[str, ...] = Field(..., min_length=1)
    type_sentinel: str = Field(..., min_length=1)
    meta_required: tuple[str, ...]
    meta_id_field: str
    meta_type_field: str
    meta_type_sentinel: str
    meta_author_field: str | None = None
    membership_field: str | None = None
    defaults: tuple[DefaultRule, ...] = ()
    sort_keys: dict[str, tuple[str, ...]]
    default_sort_key: str = "id"
    default_meta: str
    default_records_dir: str
    default_out: str
    records_dir_option: str
    command_name: str

    @property
    def records_field(self) -> str:
        """Field that holds the record array in the compiled artifact."""
        return self.name

    @property
    def sort_key_names(self) -> tuple[str, ...]:
        """Whitelisted sort-key names, in declaration order."""
        return tuple(self.sort_keys)

    def resolve_sort_key(self, key: str) -> tuple[str, ...]:
        """Return the record field path for a sort-key name.

        Raises:
            InvalidArgumentError: If the key is not whitelisted for this variant.
        """
        try:
            return self.sort_keys[key]
        except KeyError:
            allowed = " or ".join(f'"{k}"' for k in self.sort_keys)
            raise InvalidArgumentError(f"--sort-by must be {allowed}") from None


SKILLS = VariantDescriptor(
    name="skills",
    record_label="skill",
    id_field="id",
    type_fields=("type", "@type"),
    type_sentinel="RichSkillDescriptor",
    meta_required=("@context", "id", "type", "name", "description", "author"),
    meta_id_field="id",
    meta_type_field="type",
    meta_type_sentinel="Collection",
    meta_author_field="author",
    membership_field="isMemberOf",
    defaults=(
        DefaultRule(field="isMemberOf", source=DefaultSource.COLLECTION_ID),
        DefaultRule(field="author", source=DefaultSource.COLLECTION_AUTHOR),
    ),
    sort_keys={"id": ("id",), "skillName": ("skillName",)},
    default_meta="collection.meta.json",
    default_records_dir="skills",
    default_out="skills-collection.json",
    records_dir_option="--skills-dir",
    command_name="compile-skills",
)

COMPETENCIES = VariantDescriptor(
    name="competencies",
    record_label="competency",
    id_field="@id",
    type_fields=("@type",),
    type_sentinel="ceterms:Competency",
    meta_required=("@context", "@id", "@type"),
    meta_id_field="@id",
    meta_type_field="@type",
    meta_type_sentinel="ceterms:Collection",
    sort_keys={"id": ("@id",), "name": ("ceterms:name", "en-US")},
    default_meta="competencies.meta.json",
    default_records_dir="competencies",
    default_out="competencies-collection.json",
    records_dir_option="--competencies-dir",
    command_name="compile-competencies",
)

VARIANTS: MappingProxyType[str, VariantDescriptor] = MappingProxyType(
    {SKILLS.name: SKILLS, COMPETENCIES.name: COMPETENCIES}
)


def get_variant(name: str) -> VariantDescriptor:
    """Look up a variant descriptor by name.

    Raises:
        InvalidArgumentError: If no variant has that name.
    """
    try:
        return VARIANTS[name]
    except KeyError:
        available = ", ".join(VARIANTS)
        raise InvalidArgumentError(
            f"Unknown collection variant '{name}'. Available: {available}"
        ) from None
