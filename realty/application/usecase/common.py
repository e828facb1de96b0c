"""Response items shared by the tag engine use cases."""

from datetime import datetime

from pydantic import BaseModel

from realty.domain.model import RankedContent, ScoredEntity, WeightedTag
from realty.domain.value import EntityKind, TagKind


class TagItem(BaseModel):
    """Tag item in response."""

    id: str
    slug: str
    kind: TagKind
    name: str
    weight: float
    value: str | None = None
    query_field: str | None = None
    query_operator: str | None = None

    @classmethod
    def from_tag(
        cls, tag: WeightedTag, language: str, default_language: str
    ) -> "TagItem":
        return cls(
            id=str(tag.id),
            slug=tag.slug.root,
            kind=tag.kind,
            name=tag.display_name(language, default_language),
            weight=tag.weight,
            value=tag.value,
            query_field=tag.query_field,
            query_operator=tag.query_operator,
        )


class EntityItem(BaseModel):
    """Ranked entity in response. Details are hydrated by the caller."""

    entity_kind: EntityKind
    entity_id: str
    matching_tags: int
    total_score: float
    created_at: datetime

    @classmethod
    def from_scored(cls, scored: ScoredEntity) -> "EntityItem":
        return cls(
            entity_kind=scored.entity.kind,
            entity_id=str(scored.entity.id),
            matching_tags=scored.matching_tags,
            total_score=scored.total_score,
            created_at=scored.created_at,
        )


class ContentItem(BaseModel):
    """Hydrated content card in response."""

    entity_kind: EntityKind
    entity_id: str
    title: str
    slug: str
    description: str | None
    image: str | None
    matching_tags: int
    total_score: float

    @classmethod
    def from_ranked(cls, ranked: RankedContent) -> "ContentItem":
        return cls(
            entity_kind=ranked.entity.kind,
            entity_id=str(ranked.entity.id),
            title=ranked.summary.title,
            slug=ranked.summary.slug,
            description=ranked.summary.description,
            image=ranked.summary.image,
            matching_tags=ranked.matching_tags,
            total_score=ranked.total_score,
        )
