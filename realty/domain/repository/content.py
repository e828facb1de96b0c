"""Content detail lookups used to hydrate cross-content results."""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Mapping, Optional

from realty.domain.model.entity import ContentSummary
from realty.domain.value import EntityId, EntityKind, TenantId

# (entity_id, tenant_id) -> summary, or None when no detail record exists
DetailFetcher = Callable[[EntityId, TenantId], Awaitable[Optional[ContentSummary]]]


class DetailFetcherRegistry:
    """Per-kind detail fetchers registered by the caller.

    Kinds without a fetcher cannot be hydrated, and their results are dropped.
    """

    def __init__(self, fetchers: Mapping[EntityKind, DetailFetcher] | None = None):
        self._fetchers: dict[EntityKind, DetailFetcher] = dict(fetchers or {})

    def register(self, kind: EntityKind, fetcher: DetailFetcher) -> None:
        """Register (or replace) the fetcher of a kind."""
        self._fetchers[kind] = fetcher

    def get(self, kind: EntityKind) -> Optional[DetailFetcher]:
        """Fetcher of a kind, if any."""
        return self._fetchers.get(kind)

    @property
    def kinds(self) -> frozenset[EntityKind]:
        return frozenset(self._fetchers)


class ContentRepository(ABC):
    """Read access to the detail records of content entities.

    Each finder returns None when the record is missing or inactive.
    """

    @abstractmethod
    async def find_article(
        self, entity_id: EntityId, tenant_id: TenantId
    ) -> Optional[ContentSummary]:
        """Article card: title, slug, description, image."""
        pass

    @abstractmethod
    async def find_video(
        self, entity_id: EntityId, tenant_id: TenantId
    ) -> Optional[ContentSummary]:
        """Video card: title, slug, description, thumbnail."""
        pass

    @abstractmethod
    async def find_testimonial(
        self, entity_id: EntityId, tenant_id: TenantId
    ) -> Optional[ContentSummary]:
        """Testimonial card: client name, id as slug, comment, client photo."""
        pass

    @abstractmethod
    async def find_faq(
        self, entity_id: EntityId, tenant_id: TenantId
    ) -> Optional[ContentSummary]:
        """FAQ card: question, id as slug, answer, no image."""
        pass

    def as_registry(self) -> DetailFetcherRegistry:
        """Register this repository's finders for their kinds."""
        return DetailFetcherRegistry(
            {
                EntityKind.ARTICLE: self.find_article,
                EntityKind.VIDEO: self.find_video,
                EntityKind.TESTIMONIAL: self.find_testimonial,
                EntityKind.FAQ: self.find_faq,
            }
        )
