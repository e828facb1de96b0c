"""Tag resolution domain service."""

from typing import Optional, Sequence

import logfire

from realty.domain.model.tag import Tag, WeightedTag
from realty.domain.repository.association import AssociationRepository
from realty.domain.repository.tag import TagRepository
from realty.domain.value import (
    EntityId,
    EntityKind,
    TagId,
    TagKind,
    TenantId,
    WeightTable,
    normalize_segment,
)

from .base import Service


def normalize_segments(segments: Sequence[str]) -> list[str]:
    """Lower-case and trim segments, dropping empty ones and duplicates."""
    normalized = (normalize_segment(s) for s in segments if s)
    return list(dict.fromkeys(s for s in normalized if s))


class TagService(Service):
    """Domain service turning URLs and entities into weighted tag sets."""

    def __init__(
        self,
        tag_repository: TagRepository,
        association_repository: AssociationRepository,
        weight_table: WeightTable,
        default_language: str = "es",
    ) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag catalog
            association_repository: Entity-tag associations
            weight_table: Weight class per tag kind
            default_language: Alias language used when a translation is missing
        """
        self.tag_repository = tag_repository
        self.association_repository = association_repository
        self.weight_table = weight_table
        self.default_language = default_language

    def _weighted(self, tag: Tag) -> WeightedTag:
        return WeightedTag.from_tag(tag, weight=self.weight_table.weight_for(tag.kind))

    async def resolve_tags(
        self, segments: Sequence[str], tenant_id: TenantId, language: str
    ) -> list[WeightedTag]:
        """Resolve URL path segments to the tags they name.

        Segments are trimmed and lower-cased before matching, and repeated
        segments are matched once, so a URL naming a tag twice yields that
        tag once. Segment order carries no meaning for the result.
        Unrecognized segments (listing slugs, free text) are dropped silently.
        An empty result means "no filtering criteria", not an error.

        Args:
            segments: Ordered path segments, e.g. ['comprar', 'apartamento']
            tenant_id: Tenant identifier
            language: Display language of the URL

        Returns:
            Recognized tags weighted by their kind, in no particular order
        """
        normalized = normalize_segments(segments)
        if not normalized:
            return []

        with logfire.span(
            "tag_service.resolve_tags",
            tenant_id=str(tenant_id),
            segments=normalized,
            language=language,
        ):
            tags = await self.tag_repository.find_active_by_segments(
                tenant_id,
                normalized,
                language=language,
                default_language=self.default_language,
            )
            # Stores may over-fetch; keep only exact matches of active tags
            resolved = [
                self._weighted(tag)
                for tag in tags
                if tag.active
                and tag.tenant_id == tenant_id
                and any(
                    tag.matches_segment(s, language, self.default_language)
                    for s in normalized
                )
            ]
            logfire.info(
                "URL resolved to tags",
                segments=len(normalized),
                tags=[t.slug.root for t in resolved],
            )
            return resolved

    async def tags_for_entity(
        self, entity_kind: EntityKind, entity_id: EntityId, tenant_id: TenantId
    ) -> list[WeightedTag]:
        """Get the tags of an entity with their per-relation weights.

        Args:
            entity_kind: Kind of the entity
            entity_id: Entity identifier
            tenant_id: Tenant identifier

        Returns:
            Tags ordered by weight DESC, order hint ASC; empty when untagged
        """
        with logfire.span(
            "tag_service.tags_for_entity",
            entity_kind=entity_kind.value,
            entity_id=str(entity_id),
            tenant_id=str(tenant_id),
        ):
            pairs = await self.association_repository.find_for_entity(
                tenant_id, entity_kind, entity_id
            )
            tags = [
                WeightedTag.from_tag(
                    tag,
                    weight=(
                        association.weight
                        if association.weight is not None
                        else self.weight_table.weight_for(tag.kind)
                    ),
                    order_hint=association.order_hint,
                )
                for tag, association in pairs
                if tag.active
            ]
            tags.sort(key=lambda t: (-t.weight, t.order_hint))

            if not tags:
                logfire.info("Entity has no tags", entity_id=str(entity_id))
            return tags

    async def tag_ids_by_slugs(
        self, slugs: Sequence[str], tenant_id: TenantId
    ) -> list[TagId]:
        """Get the IDs of active tags by slug.

        Args:
            slugs: Tag slugs (normalized before lookup)
            tenant_id: Tenant identifier

        Returns:
            IDs of the tags found
        """
        normalized = normalize_segments(slugs)
        if not normalized:
            return []

        with logfire.span("tag_service.tag_ids_by_slugs", slugs=normalized):
            tags = await self.tag_repository.find_active_by_slugs(tenant_id, normalized)
            return [tag.id for tag in tags if tag.active]

    async def tags_by_slugs(
        self, slugs: Sequence[str], tenant_id: TenantId
    ) -> list[WeightedTag]:
        """Get active tags by slug, weighted by their kind."""
        normalized = normalize_segments(slugs)
        if not normalized:
            return []

        with logfire.span("tag_service.tags_by_slugs", slugs=normalized):
            tags = await self.tag_repository.find_active_by_slugs(tenant_id, normalized)
            return [self._weighted(tag) for tag in tags if tag.active]

    async def available_tags(
        self, tenant_id: TenantId, kinds: Optional[Sequence[TagKind]] = None
    ) -> dict[TagKind, list[WeightedTag]]:
        """Get the active catalog grouped by kind, e.g. for filter menus.

        Args:
            tenant_id: Tenant identifier
            kinds: Restrict to these kinds (None or empty for all)

        Returns:
            Kind -> tags, in catalog order
        """
        with logfire.span(
            "tag_service.available_tags",
            tenant_id=str(tenant_id),
            kinds=[k.value for k in kinds] if kinds else None,
        ):
            tags = await self.tag_repository.find_active(
                tenant_id, list(kinds) if kinds else None
            )

            grouped: dict[TagKind, list[WeightedTag]] = {}
            for tag in tags:
                if tag.active:
                    grouped.setdefault(tag.kind, []).append(self._weighted(tag))

            logfire.info("Available tags retrieved", count=len(tags))
            return grouped
