"""Tag use cases."""

from .list_available_tags import (
    ListAvailableTagsRequest,
    ListAvailableTagsResponse,
    ListAvailableTagsUseCase,
)

__all__ = [
    "ListAvailableTagsRequest",
    "ListAvailableTagsResponse",
    "ListAvailableTagsUseCase",
]
