"""Unit tests for TagService."""

import pytest

from realty.domain.model import TagAssociation
from realty.domain.repository import AssociationRepository, TagRepository
from realty.domain.service import TagService
from realty.domain.service.tag_service import normalize_segments
from realty.domain.value import EntityKind, TagKind
from tests.conftest import make_entity, make_tag, new_tenant
from tests.harness import create_env_fixture

# Unit test fixture - in-memory stores
unit_env = create_env_fixture()


class TestNormalizeSegments:
    """Tests for normalize_segments."""

    def test_drops_empty_and_duplicate_segments(self):
        assert normalize_segments(["Comprar", "", " ", "comprar", "Piantini "]) == [
            "comprar",
            "piantini",
        ]


class TestResolveTags:
    """Tests for resolve_tags."""

    @pytest.mark.asyncio
    async def test_resolves_each_recognized_segment(self, unit_env):
        """comprar/apartamento/piantini yields exactly those three tags."""
        # Arrange
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        tenant = new_tenant()

        buy = await make_tag(
            tag_repo,
            tenant,
            "operation-buy",
            TagKind.OPERATION,
            aliases={"es": "comprar", "en": "buy"},
        )
        apartment = await make_tag(
            tag_repo, tenant, "apartamento", TagKind.PROPERTY_TYPE
        )
        piantini = await make_tag(tag_repo, tenant, "piantini", TagKind.LOCATION)
        await make_tag(tag_repo, tenant, "naco", TagKind.LOCATION)

        # Act
        tags = await tag_service.resolve_tags(
            ["comprar", "apartamento", "piantini"], tenant, "es"
        )

        # Assert
        assert {t.id for t in tags} == {buy.id, apartment.id, piantini.id}
        weights = {t.slug.root: t.weight for t in tags}
        assert weights == {
            "operation-buy": 1.2,
            "apartamento": 1.3,
            "piantini": 1.5,
        }

    @pytest.mark.asyncio
    async def test_unknown_segments_are_dropped(self, unit_env):
        """Listing slugs and free text in the URL are ignored."""
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        tenant = new_tenant()
        piantini = await make_tag(tag_repo, tenant, "piantini", TagKind.LOCATION)

        tags = await tag_service.resolve_tags(
            ["piantini", "torre-azul-5b", "ofertas"], tenant, "es"
        )

        assert [t.id for t in tags] == [piantini.id]

    @pytest.mark.asyncio
    async def test_segments_are_normalized(self, unit_env):
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        tenant = new_tenant()
        await make_tag(tag_repo, tenant, "piantini", TagKind.LOCATION)

        tags = await tag_service.resolve_tags([" PIANTINI "], tenant, "es")

        assert len(tags) == 1

    @pytest.mark.asyncio
    async def test_repeated_segments_resolve_once(self, unit_env):
        """Naming a tag twice, by slug or by alias, yields it once."""
        # Arrange
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        tenant = new_tenant()
        buy = await make_tag(
            tag_repo,
            tenant,
            "operation-buy",
            TagKind.OPERATION,
            aliases={"es": "comprar"},
        )
        piantini = await make_tag(tag_repo, tenant, "piantini", TagKind.LOCATION)

        # Act
        tags = await tag_service.resolve_tags(
            ["piantini", "comprar", "Piantini", "operation-buy", "comprar"],
            tenant,
            "es",
        )

        # Assert
        assert sorted(t.slug.root for t in tags) == sorted(
            [buy.slug.root, piantini.slug.root]
        )

    @pytest.mark.asyncio
    async def test_alias_of_requested_language(self, unit_env):
        """English URLs resolve through English aliases."""
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        tenant = new_tenant()
        buy = await make_tag(
            tag_repo,
            tenant,
            "operation-buy",
            TagKind.OPERATION,
            aliases={"es": "comprar", "en": "buy"},
        )

        english = await tag_service.resolve_tags(["buy"], tenant, "en")
        spanish = await tag_service.resolve_tags(["buy"], tenant, "es")

        assert [t.id for t in english] == [buy.id]
        assert spanish == []

    @pytest.mark.asyncio
    async def test_default_language_alias_applies_to_other_languages(self, unit_env):
        """A missing translation falls back to the default language alias."""
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        tenant = new_tenant()
        await make_tag(
            tag_repo,
            tenant,
            "operation-rent",
            TagKind.OPERATION,
            aliases={"es": "alquilar"},
        )

        tags = await tag_service.resolve_tags(["alquilar"], tenant, "fr")

        assert len(tags) == 1

    @pytest.mark.asyncio
    async def test_inactive_tags_are_invisible(self, unit_env):
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        tenant = new_tenant()
        await make_tag(tag_repo, tenant, "piantini", TagKind.LOCATION, active=False)

        assert await tag_service.resolve_tags(["piantini"], tenant, "es") == []

    @pytest.mark.asyncio
    async def test_other_tenants_tags_are_invisible(self, unit_env):
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        await make_tag(tag_repo, new_tenant(), "piantini", TagKind.LOCATION)

        assert await tag_service.resolve_tags(["piantini"], new_tenant(), "es") == []

    @pytest.mark.asyncio
    async def test_empty_segments(self, unit_env):
        tag_service = await unit_env.get(TagService)

        assert await tag_service.resolve_tags([], new_tenant(), "es") == []


class TestTagsForEntity:
    """Tests for tags_for_entity."""

    @pytest.mark.asyncio
    async def test_ordered_by_weight_then_order_hint(self, unit_env):
        # Arrange
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        association_repo = await unit_env.get(AssociationRepository)
        tenant = new_tenant()

        pool = await make_tag(tag_repo, tenant, "con-piscina", TagKind.AMENITY)
        gym = await make_tag(tag_repo, tenant, "gimnasio", TagKind.AMENITY)
        piantini = await make_tag(tag_repo, tenant, "piantini", TagKind.LOCATION)
        listing = await make_entity(association_repo, tenant, [pool, gym, piantini])

        # Act
        tags = await tag_service.tags_for_entity(EntityKind.LISTING, listing, tenant)

        # Assert
        assert [t.slug.root for t in tags] == ["piantini", "con-piscina", "gimnasio"]
        assert [t.weight for t in tags] == [1.5, 0.8, 0.8]

    @pytest.mark.asyncio
    async def test_relation_weight_wins_over_weight_class(self, unit_env):
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        association_repo = await unit_env.get(AssociationRepository)
        tenant = new_tenant()
        pool = await make_tag(tag_repo, tenant, "con-piscina", TagKind.AMENITY)
        listing = await make_entity(association_repo, tenant, [(pool, 2.0)])

        tags = await tag_service.tags_for_entity(EntityKind.LISTING, listing, tenant)

        assert tags[0].weight == 2.0

    @pytest.mark.asyncio
    async def test_deactivated_tag_is_skipped(self, unit_env):
        """Deactivating a tag hides it without touching the association."""
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        association_repo = await unit_env.get(AssociationRepository)
        tenant = new_tenant()
        pool = await make_tag(tag_repo, tenant, "con-piscina", TagKind.AMENITY)
        listing = await make_entity(association_repo, tenant, [pool])

        await tag_repo.save(pool.model_copy(update={"active": False}))
        tags = await tag_service.tags_for_entity(EntityKind.LISTING, listing, tenant)

        assert tags == []

    @pytest.mark.asyncio
    async def test_untagged_entity(self, unit_env):
        tag_service = await unit_env.get(TagService)
        association_repo = await unit_env.get(AssociationRepository)
        tenant = new_tenant()
        listing = await make_entity(association_repo, tenant, [])

        assert (
            await tag_service.tags_for_entity(EntityKind.LISTING, listing, tenant) == []
        )

    @pytest.mark.asyncio
    async def test_removed_association(self, unit_env):
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        association_repo = await unit_env.get(AssociationRepository)
        tenant = new_tenant()
        pool = await make_tag(tag_repo, tenant, "con-piscina", TagKind.AMENITY)
        listing = await make_entity(association_repo, tenant, [pool])

        await association_repo.delete(tenant, EntityKind.LISTING, listing, pool.id)

        assert (
            await tag_service.tags_for_entity(EntityKind.LISTING, listing, tenant) == []
        )

    @pytest.mark.asyncio
    async def test_saving_association_twice_keeps_one(self, unit_env):
        """One association per entity and tag."""
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        association_repo = await unit_env.get(AssociationRepository)
        tenant = new_tenant()
        pool = await make_tag(tag_repo, tenant, "con-piscina", TagKind.AMENITY)
        listing = await make_entity(association_repo, tenant, [pool])

        await association_repo.save(
            TagAssociation(
                tenant_id=tenant,
                entity_kind=EntityKind.LISTING,
                entity_id=listing,
                tag_id=pool.id,
                weight=1.1,
            )
        )
        tags = await tag_service.tags_for_entity(EntityKind.LISTING, listing, tenant)

        assert [t.weight for t in tags] == [1.1]


class TestSlugLookups:
    """Tests for tag_ids_by_slugs and tags_by_slugs."""

    @pytest.mark.asyncio
    async def test_tag_ids_by_slugs(self, unit_env):
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        tenant = new_tenant()
        piantini = await make_tag(tag_repo, tenant, "piantini", TagKind.LOCATION)
        await make_tag(tag_repo, tenant, "naco", TagKind.LOCATION, active=False)

        ids = await tag_service.tag_ids_by_slugs(
            ["Piantini", "naco", "unknown"], tenant
        )

        assert ids == [piantini.id]

    @pytest.mark.asyncio
    async def test_tags_by_slugs_are_weighted_by_kind(self, unit_env):
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        tenant = new_tenant()
        await make_tag(tag_repo, tenant, "con-piscina", TagKind.AMENITY)

        tags = await tag_service.tags_by_slugs(["con-piscina"], tenant)

        assert [t.weight for t in tags] == [0.8]

    @pytest.mark.asyncio
    async def test_empty_slugs(self, unit_env):
        tag_service = await unit_env.get(TagService)

        assert await tag_service.tag_ids_by_slugs([], new_tenant()) == []
        assert await tag_service.tags_by_slugs([], new_tenant()) == []


class TestAvailableTags:
    """Tests for available_tags."""

    @pytest.mark.asyncio
    async def test_grouped_by_kind_in_catalog_order(self, unit_env):
        # Arrange
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        tenant = new_tenant()
        await make_tag(tag_repo, tenant, "naco", TagKind.LOCATION, sort_order=2)
        await make_tag(tag_repo, tenant, "piantini", TagKind.LOCATION, sort_order=1)
        await make_tag(tag_repo, tenant, "con-piscina", TagKind.AMENITY)
        await make_tag(tag_repo, tenant, "oculto", TagKind.AMENITY, active=False)

        # Act
        groups = await tag_service.available_tags(tenant)

        # Assert
        assert set(groups) == {TagKind.LOCATION, TagKind.AMENITY}
        assert [t.slug.root for t in groups[TagKind.LOCATION]] == ["piantini", "naco"]
        assert [t.slug.root for t in groups[TagKind.AMENITY]] == ["con-piscina"]

    @pytest.mark.asyncio
    async def test_filter_by_kind(self, unit_env):
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        tenant = new_tenant()
        await make_tag(tag_repo, tenant, "piantini", TagKind.LOCATION)
        await make_tag(tag_repo, tenant, "con-piscina", TagKind.AMENITY)

        groups = await tag_service.available_tags(tenant, [TagKind.AMENITY])

        assert list(groups) == [TagKind.AMENITY]
