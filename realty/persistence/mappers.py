"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand.
Mapping errors surface as ValueError (pydantic ValidationError included);
repositories turn them into StoreAccessError.
"""

from typing import Any, Dict
from uuid import UUID

from realty.domain.model import ContentSummary, Tag, TagAssociation
from realty.domain.value import (
    EntityId,
    EntityKind,
    TagId,
    TagKind,
    TagSlug,
    TenantId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model.

    Args:
        row: Database row as dict

    Returns:
        Tag domain model
    """
    return Tag(
        id=TagId(_uuid(row["id"])),
        tenant_id=TenantId(_uuid(row["tenant_id"])),
        slug=TagSlug(row["slug"]),
        kind=TagKind(row["kind"]),
        value=row.get("value"),
        query_field=row.get("query_field"),
        query_operator=row.get("query_operator"),
        display_names=row.get("display_names") or {},
        aliases=row.get("aliases") or {},
        active=row["active"],
        sort_order=row.get("sort_order") or 0,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict.

    Args:
        tag: Tag domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = tag.model_dump(include=set(Tag.model_fields))
    data["kind"] = tag.kind.value
    return data


def row_to_association(row: Dict[str, Any]) -> TagAssociation:
    """Convert database row to TagAssociation domain model.

    Args:
        row: Database row as dict

    Returns:
        TagAssociation domain model
    """
    weight = row.get("weight")
    return TagAssociation(
        tenant_id=TenantId(_uuid(row["tenant_id"])),
        entity_kind=EntityKind(row["entity_kind"]),
        entity_id=EntityId(_uuid(row["entity_id"])),
        tag_id=TagId(_uuid(row["tag_id"])),
        weight=float(weight) if weight is not None else None,
        order_hint=row.get("order_hint") or 0,
        created_at=row["created_at"],
    )


def association_to_dict(association: TagAssociation) -> Dict[str, Any]:
    """Convert TagAssociation domain model to database dict.

    Args:
        association: TagAssociation domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = association.model_dump()
    data["entity_kind"] = association.entity_kind.value
    return data


def row_to_summary(row: Dict[str, Any]) -> ContentSummary:
    """Convert a detail projection row (title, slug, description, image).

    Args:
        row: Database row as dict

    Returns:
        ContentSummary domain model
    """
    return ContentSummary(
        title=row["title"],
        slug=str(row["slug"]),
        description=row.get("description"),
        image=row.get("image"),
    )
