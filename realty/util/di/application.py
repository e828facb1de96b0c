"""Application layer DI providers."""

from dishka import Scope, provide

from realty.application.usecase.content import GetRelatedContentUseCase
from realty.application.usecase.search import SearchByUrlUseCase
from realty.application.usecase.similar import GetSimilarUseCase
from realty.application.usecase.tag import ListAvailableTagsUseCase
from realty.config import TaggingSettings
from realty.domain.service import (
    ContentService,
    ScoringService,
    SimilarityService,
    TagService,
)
from realty.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_search_by_url_use_case(
        self,
        tag_service: TagService,
        scoring_service: ScoringService,
        tagging: TaggingSettings,
    ) -> SearchByUrlUseCase:
        """Provide search by URL use case."""
        return SearchByUrlUseCase(
            tag_service=tag_service,
            scoring_service=scoring_service,
            settings=tagging,
        )

    @provide(scope=Scope.REQUEST)
    def get_similar_use_case(
        self, similarity_service: SimilarityService, tagging: TaggingSettings
    ) -> GetSimilarUseCase:
        """Provide get similar use case."""
        return GetSimilarUseCase(
            similarity_service=similarity_service, settings=tagging
        )

    @provide(scope=Scope.REQUEST)
    def get_related_content_use_case(
        self,
        tag_service: TagService,
        content_service: ContentService,
        tagging: TaggingSettings,
    ) -> GetRelatedContentUseCase:
        """Provide get related content use case."""
        return GetRelatedContentUseCase(
            tag_service=tag_service,
            content_service=content_service,
            settings=tagging,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_available_tags_use_case(
        self, tag_service: TagService, tagging: TaggingSettings
    ) -> ListAvailableTagsUseCase:
        """Provide list available tags use case."""
        return ListAvailableTagsUseCase(tag_service=tag_service, settings=tagging)
