"""Similarity use cases."""

from .get_similar import GetSimilarRequest, GetSimilarResponse, GetSimilarUseCase

__all__ = [
    "GetSimilarRequest",
    "GetSimilarResponse",
    "GetSimilarUseCase",
]
