"""Tag catalog repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from realty.domain.model.tag import Tag
from realty.domain.value import TagId, TagKind, TenantId


class TagRepository(ABC):
    """Repository interface for the per-tenant tag catalog.

    Every ``find_active_*`` method only returns active tags of the given
    tenant. Implementations raise StoreAccessError when the catalog cannot
    be read.
    """

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag (catalog authoring).

        Args:
            tag: Tag to save

        Returns:
            Saved tag
        """
        pass

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find a tag by ID regardless of its activation flag.

        Args:
            tag_id: Tag identifier

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_active_by_segments(
        self,
        tenant_id: TenantId,
        segments: list[str],
        language: str,
        default_language: str,
    ) -> list[Tag]:
        """Find active tags named by any of the given normalized segments.

        A segment names a tag through its slug, its alias in ``language`` or
        its alias in ``default_language``.

        Args:
            tenant_id: Tenant identifier
            segments: Lower-cased, trimmed, non-empty path segments
            language: Requested display language
            default_language: Fallback alias language

        Returns:
            Matching tags in no particular order
        """
        pass

    @abstractmethod
    async def find_active_by_slugs(
        self, tenant_id: TenantId, slugs: list[str]
    ) -> list[Tag]:
        """Find active tags by exact slug in a single query.

        Args:
            tenant_id: Tenant identifier
            slugs: Normalized slugs

        Returns:
            Found tags (may be fewer than requested)
        """
        pass

    @abstractmethod
    async def find_active(
        self, tenant_id: TenantId, kinds: Optional[list[TagKind]] = None
    ) -> list[Tag]:
        """Find all active tags of a tenant.

        Args:
            tenant_id: Tenant identifier
            kinds: Restrict to these kinds (None for all)

        Returns:
            Tags ordered by kind, sort order, then slug
        """
        pass
