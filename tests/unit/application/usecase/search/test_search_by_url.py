"""Unit tests for SearchByUrlUseCase."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from realty.application.usecase.search import (
    SearchByUrlRequest,
    SearchByUrlUseCase,
    split_path,
)
from realty.config import TaggingSettings
from realty.domain.repository import AssociationRepository, TagRepository
from realty.domain.service import ScoringService, TagService
from realty.domain.value import TagKind, WeightTable
from realty.persistence.repository.inmemory import (
    InMemoryAssociationRepository,
    InMemoryTagRepository,
)
from tests.conftest import make_entity, make_tag, new_tenant
from tests.harness import create_env_fixture

# Unit test fixture - in-memory stores
unit_env = create_env_fixture()


async def _seed(unit_env, tenant):
    tag_repo = await unit_env.get(TagRepository)
    association_repo = await unit_env.get(AssociationRepository)
    buy = await make_tag(
        tag_repo,
        tenant,
        "operation-buy",
        TagKind.OPERATION,
        aliases={"es": "comprar", "en": "buy"},
        display_names={"es": "Comprar", "en": "Buy"},
    )
    apartment = await make_tag(
        tag_repo,
        tenant,
        "apartamento",
        TagKind.PROPERTY_TYPE,
        aliases={"en": "apartment"},
        display_names={"es": "Apartamento"},
    )
    piantini = await make_tag(tag_repo, tenant, "piantini", TagKind.LOCATION)
    best = await make_entity(association_repo, tenant, [buy, apartment, piantini])
    partial = await make_entity(association_repo, tenant, [piantini])
    await make_entity(association_repo, tenant, [apartment], available=False)
    return best, partial


class TestSplitPath:
    """Tests for split_path."""

    def test_drops_empty_segments_and_query(self):
        assert split_path("/comprar//apartamento/piantini/?page=2") == [
            "comprar",
            "apartamento",
            "piantini",
        ]

    def test_root(self):
        assert split_path("/") == []


class TestSearchByUrlUseCase:
    """Tests for SearchByUrlUseCase."""

    @pytest.mark.asyncio
    async def test_resolves_and_ranks(self, unit_env):
        # Arrange
        use_case = await unit_env.get(SearchByUrlUseCase)
        tenant = new_tenant()
        best, partial = await _seed(unit_env, tenant)

        request = SearchByUrlRequest(
            tenant_id=tenant,
            segments=["comprar", "apartamento", "piantini"],
            language="es",
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert {t.slug for t in response.tags} == {
            "operation-buy",
            "apartamento",
            "piantini",
        }
        assert [r.entity_id for r in response.results] == [str(best), str(partial)]
        assert response.results[0].matching_tags == 3
        assert response.results[0].total_score == 4.0
        assert response.total == 2
        assert response.limit == 20
        assert response.offset == 0

    @pytest.mark.asyncio
    async def test_localized_tag_names(self, unit_env):
        use_case = await unit_env.get(SearchByUrlUseCase)
        tenant = new_tenant()
        await _seed(unit_env, tenant)

        response = await use_case.execute(
            SearchByUrlRequest(
                tenant_id=tenant, segments=["buy", "apartment"], language="en"
            )
        )

        names = {t.slug: t.name for t in response.tags}
        assert names == {"operation-buy": "Buy", "apartamento": "Apartamento"}

    @pytest.mark.asyncio
    async def test_default_language_when_unset(self, unit_env):
        """Without a language the configured default (es) applies."""
        use_case = await unit_env.get(SearchByUrlUseCase)
        tenant = new_tenant()
        await _seed(unit_env, tenant)

        response = await use_case.execute(
            SearchByUrlRequest(tenant_id=tenant, segments=["comprar"])
        )

        assert [t.slug for t in response.tags] == ["operation-buy"]

    @pytest.mark.asyncio
    async def test_unrecognized_url_returns_no_criteria(self, unit_env):
        """Empty tags tell the caller to fall back."""
        use_case = await unit_env.get(SearchByUrlUseCase)
        tenant = new_tenant()
        await _seed(unit_env, tenant)

        response = await use_case.execute(
            SearchByUrlRequest(tenant_id=tenant, segments=["ofertas", "nuevas"])
        )

        assert response.tags == []
        assert response.results == []
        assert response.total == 0

    @pytest.mark.asyncio
    async def test_pagination(self, unit_env):
        use_case = await unit_env.get(SearchByUrlUseCase)
        tenant = new_tenant()
        await _seed(unit_env, tenant)

        response = await use_case.execute(
            SearchByUrlRequest(
                tenant_id=tenant, segments=["piantini"], limit=1, offset=1
            )
        )

        assert response.total == 2
        assert response.limit == 1
        assert len(response.results) == 1

    @pytest.mark.asyncio
    async def test_ranks_once_per_search(self):
        """Total and page come from a single candidate query."""
        # Arrange
        class CountingAssociationRepository(InMemoryAssociationRepository):
            calls = 0

            async def find_matches(self, *args, **kwargs):
                type(self).calls += 1
                return await super().find_matches(*args, **kwargs)

        tag_repo = InMemoryTagRepository()
        association_repo = CountingAssociationRepository(tag_repo)
        weights = WeightTable()
        use_case = SearchByUrlUseCase(
            TagService(tag_repo, association_repo, weights),
            ScoringService(association_repo, weights),
            TaggingSettings(),
        )
        tenant = new_tenant()
        piantini = await make_tag(tag_repo, tenant, "piantini", TagKind.LOCATION)
        for age in range(3):
            await make_entity(association_repo, tenant, [piantini], age_days=age)

        # Act
        response = await use_case.execute(
            SearchByUrlRequest(tenant_id=tenant, segments=["piantini"], limit=2)
        )

        # Assert
        assert response.total == 3
        assert len(response.results) == 2
        assert CountingAssociationRepository.calls == 1

    def test_limit_bounds(self):
        with pytest.raises(ValidationError):
            SearchByUrlRequest(tenant_id=uuid4(), segments=[], limit=0)
        with pytest.raises(ValidationError):
            SearchByUrlRequest(tenant_id=uuid4(), segments=[], limit=101)
