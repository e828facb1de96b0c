"""Related content use cases."""

from .get_related_content import (
    GetRelatedContentRequest,
    GetRelatedContentResponse,
    GetRelatedContentUseCase,
)

__all__ = [
    "GetRelatedContentRequest",
    "GetRelatedContentResponse",
    "GetRelatedContentUseCase",
]
