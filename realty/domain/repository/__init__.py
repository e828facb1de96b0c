"""Repository interfaces for the tag engine.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from realty.domain.repository.association import AssociationRepository
from realty.domain.repository.content import (
    ContentRepository,
    DetailFetcher,
    DetailFetcherRegistry,
)
from realty.domain.repository.tag import TagRepository

__all__ = [
    "TagRepository",
    "AssociationRepository",
    "ContentRepository",
    "DetailFetcher",
    "DetailFetcherRegistry",
]
