"""List available tags use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from realty.application.usecase.base import BaseUseCase
from realty.application.usecase.common import TagItem
from realty.config import TaggingSettings
from realty.domain.service import TagService
from realty.domain.value import TagKind, TenantId


class ListAvailableTagsRequest(BaseModel):
    """List available tags request."""

    tenant_id: UUID
    kinds: list[TagKind] = []
    language: str | None = Field(default=None, min_length=2, max_length=5)


class ListAvailableTagsResponse(BaseModel):
    """List available tags response, grouped by kind."""

    groups: dict[TagKind, list[TagItem]]


class ListAvailableTagsUseCase(
    BaseUseCase[ListAvailableTagsRequest, ListAvailableTagsResponse]
):
    """Use case for listing the active catalog, e.g. to build filter menus."""

    def __init__(self, tag_service: TagService, settings: TaggingSettings) -> None:
        """Initialize list available tags use case.

        Args:
            tag_service: Tag domain service
            settings: Tagging settings
        """
        self.tag_service = tag_service
        self.settings = settings

    async def execute(
        self, request: ListAvailableTagsRequest
    ) -> ListAvailableTagsResponse:
        """Execute list available tags flow.

        Args:
            request: List available tags request

        Returns:
            Active tags grouped by kind
        """
        language = request.language or self.settings.default_language
        with logfire.span(
            "list_available_tags.execute",
            tenant_id=str(request.tenant_id),
            kinds=[k.value for k in request.kinds],
        ):
            grouped = await self.tag_service.available_tags(
                TenantId(request.tenant_id), request.kinds or None
            )
            return ListAvailableTagsResponse(
                groups={
                    kind: [
                        TagItem.from_tag(tag, language, self.settings.default_language)
                        for tag in tags
                    ]
                    for kind, tags in grouped.items()
                }
            )
