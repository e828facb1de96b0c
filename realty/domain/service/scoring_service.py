"""Tag scoring domain service."""

from typing import Optional, Sequence

import logfire

from realty.domain.model.entity import ScoredEntity
from realty.domain.model.tag import Tag
from realty.domain.repository.association import AssociationRepository
from realty.domain.value import EntityId, EntityKind, TagId, TenantId, WeightTable

from .base import Service
from .scoring import page, rank_matches

LISTINGS_ONLY: tuple[EntityKind, ...] = (EntityKind.LISTING,)


def _tag_ids(tags: Sequence[Tag]) -> list[TagId]:
    return list(dict.fromkeys(tag.id for tag in tags))


class ScoringService(Service):
    """Ranks entities by weighted overlap with a tag set.

    Candidates are entities associated with ANY of the tags (OR semantics).
    See realty.domain.service.scoring for the ranking order.
    """

    def __init__(
        self,
        association_repository: AssociationRepository,
        weight_table: WeightTable,
    ) -> None:
        """Initialize scoring service.

        Args:
            association_repository: Entity-tag associations
            weight_table: Weight class per tag kind
        """
        self.association_repository = association_repository
        self.weight_table = weight_table

    async def rank_all(
        self,
        tags: Sequence[Tag],
        tenant_id: TenantId,
        exclude_entity_id: Optional[EntityId] = None,
        entity_kinds: Sequence[EntityKind] = LISTINGS_ONLY,
    ) -> list[ScoredEntity]:
        """Rank every candidate entity, without paging.

        Args:
            tags: Tag set to match against
            tenant_id: Tenant identifier
            exclude_entity_id: Entity never returned
            entity_kinds: Kinds eligible as candidates

        Returns:
            Ranked candidates; empty when tags is empty
        """
        if not tags or not entity_kinds:
            return []

        matches = await self.association_repository.find_matches(
            tenant_id,
            _tag_ids(tags),
            entity_kinds=list(entity_kinds),
            exclude_entity_id=exclude_entity_id,
        )
        if exclude_entity_id is not None:
            matches = [m for m in matches if m.entity.id != exclude_entity_id]
        kinds = set(entity_kinds)
        matches = [m for m in matches if m.entity.kind in kinds]

        return rank_matches(matches, self.weight_table)

    async def rank_by_tags(
        self,
        tags: Sequence[Tag],
        tenant_id: TenantId,
        limit: int = 20,
        offset: int = 0,
        exclude_entity_id: Optional[EntityId] = None,
        entity_kinds: Sequence[EntityKind] = LISTINGS_ONLY,
    ) -> list[ScoredEntity]:
        """Rank entities by matching tag count, then score, then recency.

        Args:
            tags: Tag set to match against (never "match everything")
            tenant_id: Tenant identifier
            limit: Page size, applied after full ranking
            offset: Page start, applied after full ranking
            exclude_entity_id: Entity removed from candidacy before ranking
            entity_kinds: Kinds eligible as candidates (listings by default)

        Returns:
            One page of ranked entities
        """
        with logfire.span(
            "scoring_service.rank_by_tags",
            tenant_id=str(tenant_id),
            tags=len(tags),
            limit=limit,
            offset=offset,
            entity_kinds=[k.value for k in entity_kinds],
        ):
            ranked = await self.rank_all(
                tags,
                tenant_id,
                exclude_entity_id=exclude_entity_id,
                entity_kinds=entity_kinds,
            )
            results = page(ranked, limit=limit, offset=offset)
            logfire.info(
                "Entities ranked", candidates=len(ranked), returned=len(results)
            )
            return results

    async def count_by_tags(
        self,
        tags: Sequence[Tag],
        tenant_id: TenantId,
        exclude_entity_id: Optional[EntityId] = None,
        entity_kinds: Sequence[EntityKind] = LISTINGS_ONLY,
    ) -> int:
        """Count the candidates rank_by_tags would page through.

        Args:
            tags: Tag set to match against
            tenant_id: Tenant identifier
            exclude_entity_id: Entity not counted
            entity_kinds: Kinds eligible as candidates

        Returns:
            Number of distinct candidate entities
        """
        with logfire.span("scoring_service.count_by_tags", tags=len(tags)):
            ranked = await self.rank_all(
                tags,
                tenant_id,
                exclude_entity_id=exclude_entity_id,
                entity_kinds=entity_kinds,
            )
            return len(ranked)
