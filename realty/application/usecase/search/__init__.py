"""Search use cases."""

from .search_by_url import (
    SearchByUrlRequest,
    SearchByUrlResponse,
    SearchByUrlUseCase,
    split_path,
)

__all__ = [
    "SearchByUrlRequest",
    "SearchByUrlResponse",
    "SearchByUrlUseCase",
    "split_path",
]
