"""Similar entity routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from realty.application.usecase.similar import (
    GetSimilarRequest,
    GetSimilarResponse,
    GetSimilarUseCase,
)
from realty.domain.value import EntityKind

router = APIRouter(
    prefix="/tenants/{tenant_id}/entities",
    tags=["similar"],
    route_class=DishkaRoute,
)


@router.get(
    "/{kind}/{entity_id}/similar",
    response_model=GetSimilarResponse,
    summary="Entities similar to an entity",
    description="Rank entities of the same kind by overlap with the entity's tags.",
)
async def get_similar(
    tenant_id: UUID,
    kind: EntityKind,
    entity_id: UUID,
    use_case: FromDishka[GetSimilarUseCase],
    limit: int | None = Query(default=None, ge=1, le=50),
) -> GetSimilarResponse:
    """Get entities similar to the given one.

    An empty result means the caller should fall back (e.g. recent listings).

    Example:
        GET /tenants/{tenant_id}/entities/listing/{entity_id}/similar?limit=4
    """
    with logfire.span("api.get_similar", kind=kind.value, entity_id=str(entity_id)):
        request = GetSimilarRequest(
            tenant_id=tenant_id, entity_kind=kind, entity_id=entity_id, limit=limit
        )
        return await use_case.execute(request)
