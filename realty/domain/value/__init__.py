"""Domain value objects for the tag engine."""

from realty.domain.value.identifiers import EntityId, TagId, TenantId
from realty.domain.value.types import EntityKind, TagKind, TagSlug, normalize_segment
from realty.domain.value.weights import DEFAULT_WEIGHTS, FALLBACK_WEIGHT, WeightTable

__all__ = [
    # Identifiers
    "TenantId",
    "TagId",
    "EntityId",
    # Types
    "TagKind",
    "EntityKind",
    "TagSlug",
    "normalize_segment",
    # Weights
    "DEFAULT_WEIGHTS",
    "FALLBACK_WEIGHT",
    "WeightTable",
]
