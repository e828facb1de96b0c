"""Get related content use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel, Field, model_validator

from realty.application.usecase.base import BaseUseCase
from realty.application.usecase.common import ContentItem
from realty.config import TaggingSettings
from realty.domain.service import ContentService, TagService
from realty.domain.value import EntityId, EntityKind, TenantId


class GetRelatedContentRequest(BaseModel):
    """Get related content request.

    Tags come either from explicit tag slugs or from an entity's own tags.
    """

    tenant_id: UUID
    tag_slugs: list[str] = []
    entity_kind: Optional[EntityKind] = None
    entity_id: Optional[UUID] = None
    content_kind: Optional[EntityKind] = None
    limit: int | None = Field(default=None, ge=1, le=100)
    offset: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def check_tag_source(self) -> "GetRelatedContentRequest":
        """Require exactly one source of tags."""
        from_entity = self.entity_id is not None
        if from_entity == bool(self.tag_slugs):
            raise ValueError("Provide exactly one of tag_slugs or entity_id")
        if from_entity and self.entity_kind is None:
            self.entity_kind = EntityKind.LISTING
        return self


class GetRelatedContentResponse(BaseModel):
    """Get related content response."""

    results: list[ContentItem]


class GetRelatedContentUseCase(
    BaseUseCase[GetRelatedContentRequest, GetRelatedContentResponse]
):
    """Use case answering "what content relates to these tags"."""

    def __init__(
        self,
        tag_service: TagService,
        content_service: ContentService,
        settings: TaggingSettings,
    ) -> None:
        """Initialize get related content use case.

        Args:
            tag_service: Tag domain service
            content_service: Cross-content domain service
            settings: Tagging settings
        """
        self.tag_service = tag_service
        self.content_service = content_service
        self.settings = settings

    async def execute(
        self, request: GetRelatedContentRequest
    ) -> GetRelatedContentResponse:
        """Execute get related content flow.

        Args:
            request: Get related content request

        Returns:
            Hydrated content cards, best first
        """
        with logfire.span(
            "get_related_content.execute",
            tenant_id=str(request.tenant_id),
            tag_slugs=request.tag_slugs,
            entity_id=str(request.entity_id) if request.entity_id else None,
            content_kind=request.content_kind.value if request.content_kind else None,
        ):
            tenant_id = TenantId(request.tenant_id)
            source_id = None
            if request.entity_id is not None:
                source_id = EntityId(request.entity_id)
                tags = await self.tag_service.tags_for_entity(
                    request.entity_kind or EntityKind.LISTING,
                    source_id,
                    tenant_id,
                )
            else:
                tags = await self.tag_service.tags_by_slugs(
                    request.tag_slugs, tenant_id
                )

            related = await self.content_service.related_content(
                tags,
                tenant_id,
                content_kind=request.content_kind,
                limit=request.limit or self.settings.content_limit,
                offset=request.offset,
                exclude_entity_id=source_id,
            )
            return GetRelatedContentResponse(
                results=[ContentItem.from_ranked(item) for item in related]
            )
