"""Similarity domain service."""

import logfire

from realty.domain.model.entity import ScoredEntity
from realty.domain.value import EntityId, EntityKind, TenantId

from .base import Service
from .scoring_service import ScoringService
from .tag_service import TagService


class SimilarityService(Service):
    """Finds entities similar to a given one through its own tags."""

    def __init__(self, tag_service: TagService, scoring_service: ScoringService):
        self.tag_service = tag_service
        self.scoring_service = scoring_service

    async def similar_to(
        self,
        entity_kind: EntityKind,
        entity_id: EntityId,
        tenant_id: TenantId,
        limit: int = 4,
    ) -> list[ScoredEntity]:
        """Rank entities of the same kind by overlap with the entity's tags.

        An untagged entity yields an empty list. Callers branch on it to show
        a fallback (e.g. most recent listings); it is not an error.

        Args:
            entity_kind: Kind of the reference entity
            entity_id: Reference entity, never part of the result
            tenant_id: Tenant identifier
            limit: Maximum number of results

        Returns:
            Similar entities, best first
        """
        with logfire.span(
            "similarity_service.similar_to",
            entity_kind=entity_kind.value,
            entity_id=str(entity_id),
            limit=limit,
        ):
            tags = await self.tag_service.tags_for_entity(
                entity_kind, entity_id, tenant_id
            )
            if not tags:
                logfire.info(
                    "No tags for similarity, caller should fall back",
                    entity_id=str(entity_id),
                )
                return []

            return await self.scoring_service.rank_by_tags(
                tags,
                tenant_id,
                limit=limit,
                exclude_entity_id=entity_id,
                entity_kinds=(entity_kind,),
            )
