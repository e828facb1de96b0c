"""Domain layer DI providers."""

from dishka import Scope, provide

from realty.config import TaggingSettings
from realty.domain.repository import (
    AssociationRepository,
    DetailFetcherRegistry,
    TagRepository,
)
from realty.domain.service import (
    ContentService,
    ScoringService,
    SimilarityService,
    TagService,
)
from realty.domain.value import WeightTable
from realty.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_tag_service(
        self,
        tag_repository: TagRepository,
        association_repository: AssociationRepository,
        weight_table: WeightTable,
        tagging: TaggingSettings,
    ) -> TagService:
        """Provide tag domain service."""
        return TagService(
            tag_repository=tag_repository,
            association_repository=association_repository,
            weight_table=weight_table,
            default_language=tagging.default_language,
        )

    @provide
    def get_scoring_service(
        self,
        association_repository: AssociationRepository,
        weight_table: WeightTable,
    ) -> ScoringService:
        """Provide scoring domain service."""
        return ScoringService(
            association_repository=association_repository,
            weight_table=weight_table,
        )

    @provide
    def get_similarity_service(
        self, tag_service: TagService, scoring_service: ScoringService
    ) -> SimilarityService:
        """Provide similarity domain service."""
        return SimilarityService(
            tag_service=tag_service, scoring_service=scoring_service
        )

    @provide
    def get_content_service(
        self,
        scoring_service: ScoringService,
        fetchers: DetailFetcherRegistry,
        tagging: TaggingSettings,
    ) -> ContentService:
        """Provide cross-content domain service."""
        return ContentService(
            scoring_service=scoring_service,
            fetchers=fetchers,
            concurrency=tagging.hydration_concurrency,
        )
