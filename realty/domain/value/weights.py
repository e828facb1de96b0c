"""Default relevance weight per tag kind."""

from types import MappingProxyType
from typing import Mapping

from pydantic import Field

from realty.domain.value.common import ValueObject
from realty.domain.value.types import TagKind

# Weight of a kind missing from the table
FALLBACK_WEIGHT = 1.0

DEFAULT_WEIGHTS: Mapping[TagKind, float] = MappingProxyType(
    {
        TagKind.LOCATION: 1.50,
        TagKind.PROPERTY_TYPE: 1.30,
        TagKind.OPERATION: 1.20,
        TagKind.FILTER: 1.00,
        TagKind.AMENITY: 0.80,
        TagKind.FEATURE: 0.70,
        TagKind.CURATED_LIST: 0.50,
        TagKind.CONTENT: 0.30,
        TagKind.SERVICE: 0.30,
        TagKind.COUNTRY: 0.20,
        TagKind.AREA: 1.00,
        TagKind.INTERNAL: 0.10,
    }
)


class WeightTable(ValueObject):
    """Immutable mapping from tag kind to its default weight (weight class).

    Loaded once at startup and injected wherever weights are needed, so tests
    can substitute their own table.
    """

    weights: dict[TagKind, float] = Field(
        default_factory=lambda: dict(DEFAULT_WEIGHTS)
    )

    @classmethod
    def with_overrides(
        cls, overrides: Mapping[str, float] | None = None
    ) -> "WeightTable":
        """Build the default table with per-kind overrides applied.

        Args:
            overrides: Kind value -> weight (e.g. {"amenity": 0.9})

        Returns:
            Weight table

        Raises:
            ValueError: If a kind is unknown or a weight is not positive
        """
        weights = dict(DEFAULT_WEIGHTS)
        for kind, weight in (overrides or {}).items():
            if weight <= 0:
                raise ValueError(f"Weight for {kind} must be positive, got {weight}")
            weights[TagKind(kind)] = float(weight)
        return cls(weights=weights)

    def weight_for(self, kind: TagKind) -> float:
        """Return the weight class of a tag kind."""
        return self.weights.get(kind, FALLBACK_WEIGHT)
