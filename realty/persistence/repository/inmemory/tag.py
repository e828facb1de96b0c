"""In-memory implementation of the tag catalog for testing."""

from typing import Optional

from realty.domain.model.tag import Tag
from realty.domain.repository.tag import TagRepository
from realty.domain.value import TagId, TagKind, TenantId


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._tags: dict[TagId, Tag] = {}

    def _active(self, tenant_id: TenantId) -> list[Tag]:
        return [
            tag
            for tag in self._tags.values()
            if tag.tenant_id == tenant_id and tag.active
        ]

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag."""
        self._tags[tag.id] = tag
        return tag

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        return self._tags.get(tag_id)

    async def find_active_by_segments(
        self,
        tenant_id: TenantId,
        segments: list[str],
        language: str,
        default_language: str,
    ) -> list[Tag]:
        """Find active tags named by any segment."""
        return [
            tag
            for tag in self._active(tenant_id)
            if any(tag.matches_segment(s, language, default_language) for s in segments)
        ]

    async def find_active_by_slugs(
        self, tenant_id: TenantId, slugs: list[str]
    ) -> list[Tag]:
        """Find active tags by slug."""
        wanted = set(slugs)
        return [tag for tag in self._active(tenant_id) if tag.slug.root in wanted]

    async def find_active(
        self, tenant_id: TenantId, kinds: Optional[list[TagKind]] = None
    ) -> list[Tag]:
        """Find all active tags ordered by kind, sort order and slug."""
        tags = self._active(tenant_id)
        if kinds:
            tags = [tag for tag in tags if tag.kind in kinds]
        tags.sort(key=lambda t: (t.kind.value, t.sort_order, t.slug.root))
        return tags
