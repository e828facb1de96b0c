"""HTTP mapping of domain errors."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from realty.domain.error import StoreAccessError


async def store_access_error_handler(
    request: Request, exc: StoreAccessError
) -> JSONResponse:
    """Map store faults to 503 so callers do not mistake them for no matches."""
    logfire.error(
        "Store access failed",
        path=request.url.path,
        store=exc.store,
        operation=exc.operation,
        reason=exc.reason,
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": f"{exc.store} unavailable"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(StoreAccessError, store_access_error_handler)
