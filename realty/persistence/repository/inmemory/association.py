"""In-memory implementation of the association store for testing."""

from typing import Optional, Sequence

from realty.domain.model.association import TagAssociation
from realty.domain.model.entity import EntityRecord, EntityRef, TagMatch
from realty.domain.model.tag import Tag
from realty.domain.repository.association import AssociationRepository
from realty.domain.repository.tag import TagRepository
from realty.domain.value import EntityId, EntityKind, TagId, TenantId

AssociationKey = tuple[TenantId, EntityKind, EntityId, TagId]


class InMemoryAssociationRepository(AssociationRepository):
    """In-memory implementation of AssociationRepository for testing.

    Tags are read through the given catalog so activation changes apply at
    read time. Entities must be registered with ``add_entity`` to be
    candidates; unregistered or unavailable entities are skipped like rows
    the database pre-filter would drop.
    """

    def __init__(self, tag_repository: TagRepository) -> None:
        self.tag_repository = tag_repository
        self._associations: dict[AssociationKey, TagAssociation] = {}
        self._entities: dict[tuple[TenantId, EntityRef], EntityRecord] = {}

    async def add_entity(self, record: EntityRecord) -> EntityRecord:
        """Register an entity as the entity stores would expose it."""
        self._entities[(record.tenant_id, record.ref)] = record
        return record

    async def save(self, association: TagAssociation) -> TagAssociation:
        """Create or replace an association."""
        key = (
            association.tenant_id,
            association.entity_kind,
            association.entity_id,
            association.tag_id,
        )
        self._associations[key] = association
        return association

    async def delete(
        self,
        tenant_id: TenantId,
        entity_kind: EntityKind,
        entity_id: EntityId,
        tag_id: TagId,
    ) -> None:
        """Remove one association."""
        self._associations.pop((tenant_id, entity_kind, entity_id, tag_id), None)

    async def _active_tag(self, tag_id: TagId) -> Optional[Tag]:
        tag = await self.tag_repository.find_by_id(tag_id)
        return tag if tag and tag.active else None

    async def find_for_entity(
        self, tenant_id: TenantId, entity_kind: EntityKind, entity_id: EntityId
    ) -> list[tuple[Tag, TagAssociation]]:
        """Find the active tags of an entity with their associations."""
        pairs = []
        for association in self._associations.values():
            if (
                association.tenant_id == tenant_id
                and association.entity_kind == entity_kind
                and association.entity_id == entity_id
            ):
                tag = await self._active_tag(association.tag_id)
                if tag:
                    pairs.append((tag, association))
        return pairs

    async def find_matches(
        self,
        tenant_id: TenantId,
        tag_ids: Sequence[TagId],
        entity_kinds: Sequence[EntityKind],
        exclude_entity_id: Optional[EntityId] = None,
    ) -> list[TagMatch]:
        """Find associations of available entities with any of the tags."""
        wanted_tags = set(tag_ids)
        wanted_kinds = set(entity_kinds)

        matches = []
        for association in self._associations.values():
            if (
                association.tenant_id != tenant_id
                or association.tag_id not in wanted_tags
                or association.entity_kind not in wanted_kinds
                or association.entity_id == exclude_entity_id
            ):
                continue

            ref = EntityRef(kind=association.entity_kind, id=association.entity_id)
            record = self._entities.get((tenant_id, ref))
            if record is None or not record.available:
                continue

            tag = await self._active_tag(association.tag_id)
            if tag is None:
                continue

            matches.append(
                TagMatch(
                    entity=ref,
                    tag_id=association.tag_id,
                    tag_kind=tag.kind,
                    weight=association.weight,
                    created_at=record.created_at,
                )
            )
        return matches
