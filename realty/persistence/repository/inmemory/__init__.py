"""In-memory repository implementations for testing."""

from .association import InMemoryAssociationRepository
from .content import InMemoryContentRepository
from .tag import InMemoryTagRepository

__all__ = [
    "InMemoryAssociationRepository",
    "InMemoryContentRepository",
    "InMemoryTagRepository",
]
