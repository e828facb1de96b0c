"""Relevance ranking of candidate entities by weighted tag overlap.

Ranking order:
    1. matching_tags DESC - number of distinct requested tags matched
    2. total_score DESC - sum of the matched association weights
    3. created_at DESC - newer entities first
    4. (kind, id) ASC - makes the order total, so pages are stable

Scores are plain sums: a candidate matching many low-weight tags can outrank
one matching a single high-weight tag.
"""

from datetime import datetime
from typing import Iterable

from realty.domain.model.entity import EntityRef, ScoredEntity, TagMatch
from realty.domain.value import TagId, WeightTable

# Decimal places kept in total_score so equal weight sets tie exactly
SCORE_PRECISION = 4


def _sort_key(scored: ScoredEntity) -> tuple:
    return (
        -scored.matching_tags,
        -scored.total_score,
        -scored.created_at.timestamp(),
        scored.entity.kind.value,
        str(scored.entity.id),
    )


def rank_matches(
    matches: Iterable[TagMatch], weight_table: WeightTable
) -> list[ScoredEntity]:
    """Aggregate tag matches per entity and rank the entities.

    Args:
        matches: Associations between candidate entities and requested tags
        weight_table: Weight classes used for associations without a weight

    Returns:
        Every candidate entity, best first
    """
    weights: dict[EntityRef, dict[TagId, float]] = {}
    created: dict[EntityRef, datetime] = {}

    for match in matches:
        weight = (
            match.weight
            if match.weight is not None
            else weight_table.weight_for(match.tag_kind)
        )
        # At most one association per (entity, tag); keep the first if a store
        # returns duplicates
        weights.setdefault(match.entity, {}).setdefault(match.tag_id, weight)
        created.setdefault(match.entity, match.created_at)

    scored = [
        ScoredEntity(
            entity=entity,
            matching_tags=len(tag_weights),
            total_score=round(sum(sorted(tag_weights.values())), SCORE_PRECISION),
            created_at=created[entity],
        )
        for entity, tag_weights in weights.items()
    ]
    scored.sort(key=_sort_key)
    return scored


def page(items: list, limit: int, offset: int = 0) -> list:
    """Apply a limit/offset window after ranking."""
    if limit <= 0:
        return []
    start = max(offset, 0)
    return items[start : start + limit]
