"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from realty.domain.model import EntityRecord, Tag, TagAssociation
from realty.domain.repository import AssociationRepository, TagRepository
from realty.domain.value import (
    EntityId,
    EntityKind,
    TagId,
    TagKind,
    TagSlug,
    TenantId,
)

# Fixed reference time so recency tie-breaks are deterministic
BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def new_tenant() -> TenantId:
    return TenantId(uuid4())


async def make_tag(
    tag_repo: TagRepository,
    tenant_id: TenantId,
    slug: str,
    kind: TagKind,
    aliases: dict[str, str] | None = None,
    display_names: dict[str, str] | None = None,
    active: bool = True,
    sort_order: int = 0,
) -> Tag:
    """Helper function to create and store a catalog tag."""
    tag = Tag(
        id=TagId(uuid4()),
        tenant_id=tenant_id,
        slug=TagSlug(slug),
        kind=kind,
        aliases=aliases or {},
        display_names=display_names or {},
        active=active,
        sort_order=sort_order,
    )
    return await tag_repo.save(tag)


async def make_entity(
    association_repo: AssociationRepository,
    tenant_id: TenantId,
    tags: list[Tag | tuple[Tag, float]],
    kind: EntityKind = EntityKind.LISTING,
    age_days: int = 0,
    available: bool = True,
    entity_id: EntityId | None = None,
) -> EntityId:
    """Helper function to register an entity and tag it.

    Args:
        association_repo: In-memory association store
        tenant_id: Owning tenant
        tags: Tags to attach; a (tag, weight) pair sets a per-relation weight
        kind: Entity kind
        age_days: Days before BASE_TIME the entity was created
        available: Whether the entity passes the store's availability filter
        entity_id: Explicit ID (random when omitted)

    Returns:
        Entity ID
    """
    entity_id = entity_id or EntityId(uuid4())
    await association_repo.add_entity(
        EntityRecord(
            tenant_id=tenant_id,
            kind=kind,
            id=entity_id,
            created_at=BASE_TIME - timedelta(days=age_days),
            available=available,
        )
    )
    for order_hint, item in enumerate(tags):
        tag, weight = item if isinstance(item, tuple) else (item, None)
        await association_repo.save(
            TagAssociation(
                tenant_id=tenant_id,
                entity_kind=kind,
                entity_id=entity_id,
                tag_id=tag.id,
                weight=weight,
                order_hint=order_hint,
            )
        )
    return entity_id
