"""PostgreSQL repository implementations."""

from realty.persistence.repository.association import PostgresAssociationRepository
from realty.persistence.repository.content import PostgresContentRepository
from realty.persistence.repository.tag import PostgresTagRepository

__all__ = [
    "PostgresAssociationRepository",
    "PostgresContentRepository",
    "PostgresTagRepository",
]
