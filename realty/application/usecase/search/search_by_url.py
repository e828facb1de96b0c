"""Search listings by URL use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from realty.application.usecase.base import BaseUseCase
from realty.application.usecase.common import EntityItem, TagItem
from realty.config import TaggingSettings
from realty.domain.service import ScoringService, TagService, page
from realty.domain.value import TenantId


def split_path(path: str) -> list[str]:
    """Split a URL path into its segments, dropping query strings."""
    return [segment for segment in path.split("?", 1)[0].split("/") if segment]


class SearchByUrlRequest(BaseModel):
    """Search by URL request."""

    tenant_id: UUID
    segments: list[str]
    language: str | None = Field(default=None, min_length=2, max_length=5)
    limit: int | None = Field(default=None, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class SearchByUrlResponse(BaseModel):
    """Search by URL response.

    An empty ``tags`` list means the URL carried no filtering criteria; the
    caller decides the fallback (e.g. most recent listings).
    """

    tags: list[TagItem]
    results: list[EntityItem]
    total: int
    limit: int
    offset: int


class SearchByUrlUseCase(BaseUseCase[SearchByUrlRequest, SearchByUrlResponse]):
    """Use case answering "what matches this URL"."""

    def __init__(
        self,
        tag_service: TagService,
        scoring_service: ScoringService,
        settings: TaggingSettings,
    ) -> None:
        """Initialize search by URL use case.

        Args:
            tag_service: Tag domain service
            scoring_service: Scoring domain service
            settings: Tagging settings
        """
        self.tag_service = tag_service
        self.scoring_service = scoring_service
        self.settings = settings

    async def execute(self, request: SearchByUrlRequest) -> SearchByUrlResponse:
        """Resolve the URL to tags and rank available listings.

        Args:
            request: Search request

        Returns:
            Resolved tags and one page of ranked listings
        """
        with logfire.span(
            "search_by_url.execute",
            tenant_id=str(request.tenant_id),
            segments=request.segments,
            language=request.language,
        ):
            tenant_id = TenantId(request.tenant_id)
            language = request.language or self.settings.default_language
            tags = await self.tag_service.resolve_tags(
                request.segments, tenant_id, language
            )

            limit = request.limit or self.settings.listing_limit
            ranked = await self.scoring_service.rank_all(tags, tenant_id)
            total = len(ranked)
            results = page(ranked, limit=limit, offset=request.offset)

            logfire.info(
                "URL search completed",
                tags=len(tags),
                returned=len(results),
                total=total,
            )

            return SearchByUrlResponse(
                tags=[
                    TagItem.from_tag(tag, language, self.settings.default_language)
                    for tag in tags
                ],
                results=[EntityItem.from_scored(scored) for scored in results],
                total=total,
                limit=limit,
                offset=request.offset,
            )
