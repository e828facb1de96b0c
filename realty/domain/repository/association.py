"""Entity-tag association repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from realty.domain.model.association import TagAssociation
from realty.domain.model.entity import TagMatch
from realty.domain.model.tag import Tag
from realty.domain.value import EntityId, EntityKind, TagId, TenantId


class AssociationRepository(ABC):
    """Repository for the many-to-many relation between tags and entities.

    Associations pointing to inactive tags are filtered out at read time.
    Implementations raise StoreAccessError when the store cannot be read.
    """

    @abstractmethod
    async def save(self, association: TagAssociation) -> TagAssociation:
        """Create or replace the association of an entity with a tag.

        Args:
            association: Association to save

        Returns:
            Saved association
        """
        pass

    @abstractmethod
    async def delete(
        self,
        tenant_id: TenantId,
        entity_kind: EntityKind,
        entity_id: EntityId,
        tag_id: TagId,
    ) -> None:
        """Remove one association.

        Args:
            tenant_id: Tenant identifier
            entity_kind: Kind of the tagged entity
            entity_id: Tagged entity
            tag_id: Tag identifier
        """
        pass

    @abstractmethod
    async def find_for_entity(
        self, tenant_id: TenantId, entity_kind: EntityKind, entity_id: EntityId
    ) -> list[tuple[Tag, TagAssociation]]:
        """Find the active tags attached to an entity.

        Args:
            tenant_id: Tenant identifier
            entity_kind: Kind of the entity
            entity_id: Entity identifier

        Returns:
            (tag, association) pairs in no particular order, empty when the
            entity is untagged
        """
        pass

    @abstractmethod
    async def find_matches(
        self,
        tenant_id: TenantId,
        tag_ids: Sequence[TagId],
        entity_kinds: Sequence[EntityKind],
        exclude_entity_id: Optional[EntityId] = None,
    ) -> list[TagMatch]:
        """Find associations of candidate entities with any of the tags.

        Only entities of the tenant that the store reports as available are
        returned (for listings: published and in the available status).

        Args:
            tenant_id: Tenant identifier
            tag_ids: Requested tags
            entity_kinds: Kinds of entity eligible as candidates
            exclude_entity_id: Entity removed from candidacy

        Returns:
            One match per (candidate entity, requested tag) association
        """
        pass
