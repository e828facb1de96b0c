"""Get similar entities use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from realty.application.usecase.base import BaseUseCase
from realty.application.usecase.common import EntityItem
from realty.config import TaggingSettings
from realty.domain.service import SimilarityService
from realty.domain.value import EntityId, EntityKind, TenantId


class GetSimilarRequest(BaseModel):
    """Get similar entities request."""

    tenant_id: UUID
    entity_kind: EntityKind = EntityKind.LISTING
    entity_id: UUID
    limit: int | None = Field(default=None, ge=1, le=50)


class GetSimilarResponse(BaseModel):
    """Get similar entities response.

    Empty ``results`` means the entity has no tags or nothing shares them;
    the caller falls back to another strategy.
    """

    results: list[EntityItem]


class GetSimilarUseCase(BaseUseCase[GetSimilarRequest, GetSimilarResponse]):
    """Use case answering "what is similar to this listing"."""

    def __init__(
        self, similarity_service: SimilarityService, settings: TaggingSettings
    ) -> None:
        """Initialize get similar use case.

        Args:
            similarity_service: Similarity domain service
            settings: Tagging settings
        """
        self.similarity_service = similarity_service
        self.settings = settings

    async def execute(self, request: GetSimilarRequest) -> GetSimilarResponse:
        """Execute get similar flow.

        Args:
            request: Get similar request

        Returns:
            Similar entities, best first
        """
        with logfire.span(
            "get_similar.execute",
            entity_kind=request.entity_kind.value,
            entity_id=str(request.entity_id),
            limit=request.limit,
        ):
            limit = request.limit or self.settings.similar_limit
            similar = await self.similarity_service.similar_to(
                request.entity_kind,
                EntityId(request.entity_id),
                TenantId(request.tenant_id),
                limit=limit,
            )
            return GetSimilarResponse(
                results=[EntityItem.from_scored(scored) for scored in similar]
            )
