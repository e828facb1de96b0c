"""Domain services."""

from .base import Service
from .content_service import ContentService
from .scoring import page, rank_matches
from .scoring_service import ScoringService
from .similarity_service import SimilarityService
from .tag_service import TagService

__all__ = [
    "ContentService",
    "ScoringService",
    "Service",
    "SimilarityService",
    "TagService",
    "page",
    "rank_matches",
]
