"""Domain value objects for the tag engine.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from realty.domain.value.common import RootValueObject


class TagKind(str, Enum):
    """Fixed taxonomy of tag kinds.

    The kind decides the default relevance weight of a tag (see WeightTable).
    """

    LOCATION = "location"
    PROPERTY_TYPE = "property-type"
    OPERATION = "operation"  # buy / rent
    FILTER = "filter"
    AMENITY = "amenity"
    FEATURE = "feature"
    CURATED_LIST = "curated-list"
    CONTENT = "content"
    SERVICE = "service"
    COUNTRY = "country"
    AREA = "area"
    INTERNAL = "internal"  # Backend-only tags, never meant for URLs


class EntityKind(str, Enum):
    """Kind of entity that can carry tags."""

    LISTING = "listing"
    ARTICLE = "article"
    VIDEO = "video"
    TESTIMONIAL = "testimonial"
    FAQ = "faq"

    @classmethod
    def content_kinds(cls) -> tuple["EntityKind", ...]:
        """All non-listing kinds."""
        return tuple(kind for kind in cls if kind is not cls.LISTING)


class TagSlug(RootValueObject[str]):
    """Canonical machine-readable tag key, unique per tenant.

    Lowercase, 1-100 characters, no whitespace or slashes (it is a URL path
    segment). Examples: 'piantini', 'apartamento', 'con-piscina'
    """

    @field_validator("root")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[^\s/]{1,100}$", v) or v != v.lower():
            raise ValueError(
                "Tag slug must be 1-100 lowercase characters without "
                "whitespace or slashes"
            )
        return v


def normalize_segment(segment: str) -> str:
    """Normalize a URL path segment or slug for exact matching."""
    return segment.strip().lower()
