"""Cross-content domain service."""

import asyncio
from typing import Optional, Sequence

import logfire

from realty.domain.model.entity import ContentSummary, RankedContent, ScoredEntity
from realty.domain.model.tag import Tag
from realty.domain.repository.content import DetailFetcherRegistry
from realty.domain.value import EntityId, EntityKind, TenantId

from .base import Service
from .scoring import page
from .scoring_service import ScoringService


class ContentService(Service):
    """Finds articles, videos, testimonials and FAQs related to a tag set.

    Ranking is the same as for listings. Each ranked result is then hydrated
    into a card through the fetcher registered for its kind. Results that
    cannot be hydrated are dropped so no partial card reaches a renderer.
    """

    def __init__(
        self,
        scoring_service: ScoringService,
        fetchers: DetailFetcherRegistry,
        concurrency: int = 10,
    ) -> None:
        """Initialize content service.

        Args:
            scoring_service: Tag scoring service
            fetchers: Detail fetcher per content kind
            concurrency: Maximum detail lookups in flight per call
        """
        self.scoring_service = scoring_service
        self.fetchers = fetchers
        self.concurrency = max(concurrency, 1)

    async def related_content(
        self,
        tags: Sequence[Tag],
        tenant_id: TenantId,
        content_kind: Optional[EntityKind] = None,
        limit: int = 10,
        offset: int = 0,
        exclude_entity_id: Optional[EntityId] = None,
    ) -> list[RankedContent]:
        """Rank and hydrate content entities related to the tags.

        Args:
            tags: Tag set, from a URL or from an entity
            tenant_id: Tenant identifier
            content_kind: Restrict to one content kind (None for all)
            limit: Page size, applied after ranking
            offset: Page start, applied after ranking
            exclude_entity_id: Entity the tags came from, never returned

        Returns:
            Hydrated results in ranked order
        """
        if content_kind is None:
            kinds = EntityKind.content_kinds()
        elif content_kind is EntityKind.LISTING:
            kinds = ()
        else:
            kinds = (content_kind,)

        with logfire.span(
            "content_service.related_content",
            tenant_id=str(tenant_id),
            tags=len(tags),
            content_kind=content_kind.value if content_kind else None,
            limit=limit,
            offset=offset,
        ):
            ranked = await self.scoring_service.rank_all(
                tags,
                tenant_id,
                exclude_entity_id=exclude_entity_id,
                entity_kinds=kinds,
            )
            window = page(ranked, limit=limit, offset=offset)
            if not window:
                return []

            summaries = await self._hydrate(window, tenant_id)
            results = [
                RankedContent(
                    entity=scored.entity,
                    summary=summary,
                    matching_tags=scored.matching_tags,
                    total_score=scored.total_score,
                )
                for scored, summary in zip(window, summaries)
                if summary is not None
            ]
            logfire.info(
                "Related content hydrated",
                ranked=len(window),
                returned=len(results),
            )
            return results

    async def _hydrate(
        self, window: list[ScoredEntity], tenant_id: TenantId
    ) -> list[Optional[ContentSummary]]:
        """Fetch summaries concurrently, None for anything not hydratable."""
        semaphore = asyncio.Semaphore(self.concurrency)

        async def fetch(scored: ScoredEntity) -> Optional[ContentSummary]:
            fetcher = self.fetchers.get(scored.entity.kind)
            if fetcher is None:
                logfire.warn(
                    "No detail fetcher registered",
                    entity_kind=scored.entity.kind.value,
                )
                return None
            async with semaphore:
                return await fetcher(scored.entity.id, tenant_id)

        outcomes = await asyncio.gather(
            *(fetch(scored) for scored in window), return_exceptions=True
        )

        summaries: list[Optional[ContentSummary]] = []
        for scored, outcome in zip(window, outcomes):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                # One failed lookup drops one card, never the whole batch
                logfire.warn(
                    "Content hydration failed",
                    entity_kind=scored.entity.kind.value,
                    entity_id=str(scored.entity.id),
                    error=str(outcome),
                    error_type=type(outcome).__name__,
                )
                summaries.append(None)
            else:
                summaries.append(outcome)
        return summaries
