"""Tag catalog routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from realty.application.usecase.tag import (
    ListAvailableTagsRequest,
    ListAvailableTagsResponse,
    ListAvailableTagsUseCase,
)
from realty.domain.value import TagKind

router = APIRouter(
    prefix="/tenants/{tenant_id}/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=ListAvailableTagsResponse,
    summary="List available tags",
    description="Active tags of the tenant grouped by kind.",
)
async def list_available_tags(
    tenant_id: UUID,
    use_case: FromDishka[ListAvailableTagsUseCase],
    kind: list[TagKind] = Query(default=[]),
    lang: str | None = None,
) -> ListAvailableTagsResponse:
    """List available tags grouped by kind.

    Example:
        GET /tenants/{tenant_id}/tags?kind=location&kind=amenity&lang=en
    """
    with logfire.span("api.list_available_tags", kinds=[k.value for k in kind]):
        request = ListAvailableTagsRequest(
            tenant_id=tenant_id, kinds=kind, language=lang
        )
        return await use_case.execute(request)
