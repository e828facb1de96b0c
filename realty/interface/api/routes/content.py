"""Related content routes."""

from typing import Optional
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import ValidationError

from realty.application.usecase.content import (
    GetRelatedContentRequest,
    GetRelatedContentResponse,
    GetRelatedContentUseCase,
)
from realty.domain.value import EntityKind

router = APIRouter(
    prefix="/tenants/{tenant_id}/content",
    tags=["content"],
    route_class=DishkaRoute,
)


@router.get(
    "/related",
    response_model=GetRelatedContentResponse,
    summary="Content related to tags or to an entity",
    description=(
        "Rank articles, videos, testimonials and FAQs by tag overlap. "
        "Pass either tag slugs or an entity."
    ),
)
async def get_related_content(
    tenant_id: UUID,
    use_case: FromDishka[GetRelatedContentUseCase],
    tags: list[str] = Query(default=[]),
    entity_kind: Optional[EntityKind] = None,
    entity_id: Optional[UUID] = None,
    kind: Optional[EntityKind] = None,
    limit: int | None = Query(default=None, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> GetRelatedContentResponse:
    """Get content related to a tag set.

    Examples:
        GET /tenants/{tenant_id}/content/related?tags=piantini&kind=video
        GET /tenants/{tenant_id}/content/related?entity_kind=listing&entity_id=...
    """
    with logfire.span(
        "api.get_related_content", tags=tags, kind=kind.value if kind else None
    ):
        try:
            request = GetRelatedContentRequest(
                tenant_id=tenant_id,
                tag_slugs=tags,
                entity_kind=entity_kind,
                entity_id=entity_id,
                content_kind=kind,
                limit=limit,
                offset=offset,
            )
        except ValidationError as e:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=e.errors(include_url=False, include_context=False),
            ) from e
        return await use_case.execute(request)
