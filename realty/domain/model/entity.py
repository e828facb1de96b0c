"""Entity references and ranking results.

The engine knows entities only as ``(kind, id)`` pairs. Everything else
(titles, prices, images) belongs to the stores and detail fetchers.
"""

from datetime import datetime

from pydantic import Field

from realty.domain.model.common import DomainModel
from realty.domain.value import EntityId, EntityKind, TagId, TagKind, TenantId


class EntityRef(DomainModel):
    """Reference to any taggable entity."""

    kind: EntityKind
    id: EntityId


class EntityRecord(DomainModel):
    """Minimal entity state the engine reads from a store.

    ``available`` is the store's pre-filter verdict (e.g. listing published
    and in the available status); unavailable entities are never candidates.
    """

    tenant_id: TenantId
    kind: EntityKind
    id: EntityId
    created_at: datetime
    available: bool = True

    @property
    def ref(self) -> EntityRef:
        return EntityRef(kind=self.kind, id=self.id)


class TagMatch(DomainModel):
    """One association between a candidate entity and a requested tag."""

    entity: EntityRef
    tag_id: TagId
    tag_kind: TagKind
    weight: float | None = None  # Per-relation weight, None means weight class
    created_at: datetime  # Entity creation time, used as the final tie-break


class ScoredEntity(DomainModel):
    """Candidate entity with its relevance against a tag set."""

    entity: EntityRef
    matching_tags: int = Field(ge=1)
    total_score: float
    created_at: datetime


class ContentSummary(DomainModel):
    """Kind-specific card data for a content entity."""

    title: str
    slug: str
    description: str | None = None
    image: str | None = None


class RankedContent(DomainModel):
    """Hydrated cross-content result."""

    entity: EntityRef
    summary: ContentSummary
    matching_tags: int
    total_score: float
