"""Domain model entities for the tag engine."""

from realty.domain.model.association import TagAssociation
from realty.domain.model.entity import (
    ContentSummary,
    EntityRecord,
    EntityRef,
    RankedContent,
    ScoredEntity,
    TagMatch,
)
from realty.domain.model.tag import Tag, WeightedTag

__all__ = [
    "Tag",
    "WeightedTag",
    "TagAssociation",
    "EntityRef",
    "EntityRecord",
    "TagMatch",
    "ScoredEntity",
    "ContentSummary",
    "RankedContent",
]
