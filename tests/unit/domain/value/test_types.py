"""Unit tests for tag value types."""

import pytest
from pydantic import ValidationError

from realty.domain.value import EntityKind, TagSlug, normalize_segment


class TestTagSlug:
    """Tests for TagSlug validation."""

    @pytest.mark.parametrize("slug", ["piantini", "con-piscina", "3-habitaciones", "a"])
    def test_valid_slugs(self, slug):
        """URL-safe lowercase slugs are accepted."""
        assert TagSlug(slug).root == slug
        assert str(TagSlug(slug)) == slug

    @pytest.mark.parametrize(
        "slug", ["", "Piantini", "con piscina", "comprar/casa", "x" * 101]
    )
    def test_invalid_slugs(self, slug):
        """Empty, uppercase, spaced, slashed or overlong slugs are rejected."""
        with pytest.raises(ValidationError):
            TagSlug(slug)


class TestNormalizeSegment:
    """Tests for normalize_segment."""

    def test_trims_and_lowercases(self):
        assert normalize_segment("  Piantini ") == "piantini"


class TestEntityKind:
    """Tests for EntityKind."""

    def test_content_kinds_exclude_listing(self):
        """Content kinds are every kind except listing."""
        kinds = EntityKind.content_kinds()

        assert EntityKind.LISTING not in kinds
        assert set(kinds) == {
            EntityKind.ARTICLE,
            EntityKind.VIDEO,
            EntityKind.TESTIMONIAL,
            EntityKind.FAQ,
        }
