"""Unit tests for SimilarityService."""

import pytest

from realty.domain.repository import AssociationRepository, TagRepository
from realty.domain.service import SimilarityService
from realty.domain.value import EntityKind, TagKind
from tests.conftest import make_entity, make_tag, new_tenant
from tests.harness import create_env_fixture

# Unit test fixture - in-memory stores
unit_env = create_env_fixture()


class TestSimilarTo:
    """Tests for similar_to."""

    @pytest.mark.asyncio
    async def test_ranks_listings_sharing_tags(self, unit_env):
        # Arrange
        similarity_service = await unit_env.get(SimilarityService)
        tag_repo = await unit_env.get(TagRepository)
        association_repo = await unit_env.get(AssociationRepository)
        tenant = new_tenant()

        piantini = await make_tag(tag_repo, tenant, "piantini", TagKind.LOCATION)
        apartment = await make_tag(
            tag_repo, tenant, "apartamento", TagKind.PROPERTY_TYPE
        )
        pool = await make_tag(tag_repo, tenant, "con-piscina", TagKind.AMENITY)

        reference = await make_entity(
            association_repo, tenant, [piantini, apartment, pool]
        )
        close = await make_entity(association_repo, tenant, [piantini, apartment])
        far = await make_entity(association_repo, tenant, [pool])
        await make_entity(association_repo, tenant, [])

        # Act
        similar = await similarity_service.similar_to(
            EntityKind.LISTING, reference, tenant
        )

        # Assert
        assert [s.entity.id for s in similar] == [close, far]

    @pytest.mark.asyncio
    async def test_reference_never_in_result(self, unit_env):
        similarity_service = await unit_env.get(SimilarityService)
        tag_repo = await unit_env.get(TagRepository)
        association_repo = await unit_env.get(AssociationRepository)
        tenant = new_tenant()
        piantini = await make_tag(tag_repo, tenant, "piantini", TagKind.LOCATION)
        reference = await make_entity(association_repo, tenant, [piantini])

        similar = await similarity_service.similar_to(
            EntityKind.LISTING, reference, tenant
        )

        assert similar == []

    @pytest.mark.asyncio
    async def test_untagged_entity_returns_empty(self, unit_env):
        """No tags signals the caller to fall back, not an error."""
        similarity_service = await unit_env.get(SimilarityService)
        tag_repo = await unit_env.get(TagRepository)
        association_repo = await unit_env.get(AssociationRepository)
        tenant = new_tenant()
        piantini = await make_tag(tag_repo, tenant, "piantini", TagKind.LOCATION)
        await make_entity(association_repo, tenant, [piantini])
        reference = await make_entity(association_repo, tenant, [])

        similar = await similarity_service.similar_to(
            EntityKind.LISTING, reference, tenant
        )

        assert similar == []

    @pytest.mark.asyncio
    async def test_limit(self, unit_env):
        similarity_service = await unit_env.get(SimilarityService)
        tag_repo = await unit_env.get(TagRepository)
        association_repo = await unit_env.get(AssociationRepository)
        tenant = new_tenant()
        piantini = await make_tag(tag_repo, tenant, "piantini", TagKind.LOCATION)
        reference = await make_entity(association_repo, tenant, [piantini])
        for _ in range(6):
            await make_entity(association_repo, tenant, [piantini])

        similar = await similarity_service.similar_to(
            EntityKind.LISTING, reference, tenant, limit=4
        )

        assert len(similar) == 4

    @pytest.mark.asyncio
    async def test_same_kind_only(self, unit_env):
        """Similar articles are articles."""
        similarity_service = await unit_env.get(SimilarityService)
        tag_repo = await unit_env.get(TagRepository)
        association_repo = await unit_env.get(AssociationRepository)
        tenant = new_tenant()
        piantini = await make_tag(tag_repo, tenant, "piantini", TagKind.LOCATION)
        reference = await make_entity(
            association_repo, tenant, [piantini], kind=EntityKind.ARTICLE
        )
        article = await make_entity(
            association_repo, tenant, [piantini], kind=EntityKind.ARTICLE
        )
        await make_entity(association_repo, tenant, [piantini])

        similar = await similarity_service.similar_to(
            EntityKind.ARTICLE, reference, tenant
        )

        assert [s.entity.id for s in similar] == [article]
