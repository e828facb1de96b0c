"""URL search routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from realty.application.usecase.search import (
    SearchByUrlRequest,
    SearchByUrlResponse,
    SearchByUrlUseCase,
    split_path,
)

router = APIRouter(
    prefix="/tenants/{tenant_id}/search",
    tags=["search"],
    route_class=DishkaRoute,
)


@router.get(
    "/{path:path}",
    response_model=SearchByUrlResponse,
    summary="Listings matching a semantic URL",
    description="Resolve the path segments to tags and rank available listings.",
)
async def search_by_url(
    tenant_id: UUID,
    path: str,
    use_case: FromDishka[SearchByUrlUseCase],
    lang: str | None = None,
    limit: int | None = Query(default=None, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> SearchByUrlResponse:
    """Search listings by semantic URL.

    Args:
        tenant_id: Tenant identifier
        path: Semantic path, e.g. comprar/apartamento/piantini
        use_case: Search by URL use case (injected)
        lang: URL language (defaults to the configured language)
        limit: Page size (1-100, defaults to the configured size)
        offset: Page start

    Returns:
        Resolved tags and ranked listings

    Example:
        GET /tenants/{tenant_id}/search/comprar/apartamento/piantini?lang=es
    """
    with logfire.span("api.search_by_url", path=path, lang=lang):
        request = SearchByUrlRequest(
            tenant_id=tenant_id,
            segments=split_path(path),
            language=lang,
            limit=limit,
            offset=offset,
        )
        return await use_case.execute(request)
