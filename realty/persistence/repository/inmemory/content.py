"""In-memory content detail lookups for testing."""

from typing import Optional

from realty.domain.model.entity import ContentSummary
from realty.domain.repository.content import ContentRepository
from realty.domain.value import EntityId, EntityKind, TenantId


class InMemoryContentRepository(ContentRepository):
    """In-memory implementation of ContentRepository for testing."""

    def __init__(self) -> None:
        self._summaries: dict[
            tuple[TenantId, EntityKind, EntityId], ContentSummary
        ] = {}

    async def save(
        self,
        tenant_id: TenantId,
        kind: EntityKind,
        entity_id: EntityId,
        summary: ContentSummary,
    ) -> ContentSummary:
        """Store the card of a content entity."""
        self._summaries[(tenant_id, kind, entity_id)] = summary
        return summary

    def _get(
        self, kind: EntityKind, entity_id: EntityId, tenant_id: TenantId
    ) -> Optional[ContentSummary]:
        return self._summaries.get((tenant_id, kind, entity_id))

    async def find_article(
        self, entity_id: EntityId, tenant_id: TenantId
    ) -> Optional[ContentSummary]:
        """Find an article card."""
        return self._get(EntityKind.ARTICLE, entity_id, tenant_id)

    async def find_video(
        self, entity_id: EntityId, tenant_id: TenantId
    ) -> Optional[ContentSummary]:
        """Find a video card."""
        return self._get(EntityKind.VIDEO, entity_id, tenant_id)

    async def find_testimonial(
        self, entity_id: EntityId, tenant_id: TenantId
    ) -> Optional[ContentSummary]:
        """Find a testimonial card."""
        return self._get(EntityKind.TESTIMONIAL, entity_id, tenant_id)

    async def find_faq(
        self, entity_id: EntityId, tenant_id: TenantId
    ) -> Optional[ContentSummary]:
        """Find an FAQ card."""
        return self._get(EntityKind.FAQ, entity_id, tenant_id)
