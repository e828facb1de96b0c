"""Entity-tag association."""

from datetime import datetime

from pydantic import Field

from realty.domain.model.common import DomainModel
from realty.domain.value import EntityId, EntityKind, TagId, TenantId


class TagAssociation(DomainModel):
    """Weighted link between a tag and an entity.

    One association per (tenant, entity kind, entity id, tag id). When
    ``weight`` is unset the weight class of the tag kind applies.
    """

    tenant_id: TenantId
    entity_kind: EntityKind
    entity_id: EntityId
    tag_id: TagId
    weight: float | None = Field(default=None, gt=0)
    order_hint: int = 0  # Display order of one entity's tags, never used for ranking
    created_at: datetime = Field(default_factory=datetime.now)
