"""Tag entity: a typed, localized label describing a listing or content facet."""

from datetime import datetime

from pydantic import Field

from realty.domain.model.common import DomainModel
from realty.domain.value import TagId, TagKind, TagSlug, TenantId, normalize_segment


class Tag(DomainModel):
    """Catalog entry for a tenant.

    Tags are authored by the administrative tooling; the engine only reads
    them. Inactive tags are invisible to every engine operation.
    """

    id: TagId
    tenant_id: TenantId
    slug: TagSlug  # Unique per tenant
    kind: TagKind
    # Structured filter semantics, passed through untouched
    value: str | None = None
    query_field: str | None = None
    query_operator: str | None = None
    display_names: dict[str, str] = Field(default_factory=dict)  # language -> name
    aliases: dict[str, str] = Field(default_factory=dict)  # language -> URL alias
    active: bool = True
    sort_order: int = 0
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def alias(self, language: str) -> str | None:
        """Normalized URL alias in a language, if one is defined."""
        alias = self.aliases.get(language)
        return normalize_segment(alias) if alias else None

    def display_name(self, language: str, default_language: str) -> str:
        """Localized name, falling back to the default language, then the slug."""
        return (
            self.display_names.get(language)
            or self.display_names.get(default_language)
            or self.slug.root
        )

    def matches_segment(
        self, segment: str, language: str, default_language: str
    ) -> bool:
        """Check whether a normalized path segment names this tag.

        A segment matches on the slug, the alias in the requested language, or
        the alias in the default language. Matching is exact.
        """
        return segment in {
            self.slug.root,
            self.alias(language),
            self.alias(default_language),
        }


class WeightedTag(Tag):
    """Tag annotated with the weight it carries in a given context.

    For tags attached to an entity the weight is the per-relation weight; for
    tags resolved from a URL it is the weight class of the tag kind.
    """

    weight: float = Field(gt=0)
    order_hint: int = 0

    @classmethod
    def from_tag(cls, tag: Tag, weight: float, order_hint: int = 0) -> "WeightedTag":
        """Annotate a catalog tag with a weight."""
        return cls(
            **tag.model_dump(exclude={"weight", "order_hint"}),
            weight=weight,
            order_hint=order_hint,
        )
