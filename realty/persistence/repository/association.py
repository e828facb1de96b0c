"""PostgreSQL implementation of the association repository."""

from collections import defaultdict
from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from realty.domain.error import StoreAccessError
from realty.domain.model.association import TagAssociation
from realty.domain.model.entity import EntityRef, TagMatch
from realty.domain.model.tag import Tag
from realty.domain.repository.association import AssociationRepository
from realty.domain.value import EntityId, EntityKind, TagId, TagKind, TenantId
from realty.persistence.mappers import (
    association_to_dict,
    row_to_association,
    row_to_tag,
)
from realty.persistence.tables import ENTITY_TABLES, entity_tags_table, tags_table


class PostgresAssociationRepository(AssociationRepository):
    """PostgreSQL implementation of AssociationRepository.

    Candidate entities are pre-filtered against their own tables: the record
    must exist for the tenant and be active, and listings must also be in the
    configured available status.
    """

    def __init__(
        self, session: AsyncSession, listing_available_status: str = "disponible"
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
            listing_available_status: Listing status eligible for ranking
        """
        self.session = session
        self.listing_available_status = listing_available_status

    async def save(self, association: TagAssociation) -> TagAssociation:
        """Create or replace an association."""
        values = association_to_dict(association)
        stmt = (
            insert(entity_tags_table)
            .values(**values)
            .on_conflict_do_update(
                constraint="uq_entity_tag",
                set_={
                    "weight": values["weight"],
                    "order_hint": values["order_hint"],
                },
            )
        )
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise StoreAccessError("association store", "save", str(e)) from e
        return association

    async def delete(
        self,
        tenant_id: TenantId,
        entity_kind: EntityKind,
        entity_id: EntityId,
        tag_id: TagId,
    ) -> None:
        """Remove one association."""
        stmt = delete(entity_tags_table).where(
            entity_tags_table.c.tenant_id == tenant_id,
            entity_tags_table.c.entity_kind == entity_kind.value,
            entity_tags_table.c.entity_id == entity_id,
            entity_tags_table.c.tag_id == tag_id,
        )
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise StoreAccessError("association store", "delete", str(e)) from e

    async def find_for_entity(
        self, tenant_id: TenantId, entity_kind: EntityKind, entity_id: EntityId
    ) -> list[tuple[Tag, TagAssociation]]:
        """Find the active tags of an entity with their associations."""
        with logfire.span(
            "association_repository.find_for_entity",
            entity_kind=entity_kind.value,
            entity_id=str(entity_id),
        ):
            stmt = (
                select(
                    tags_table,
                    entity_tags_table.c.entity_kind,
                    entity_tags_table.c.entity_id,
                    entity_tags_table.c.tag_id,
                    entity_tags_table.c.weight,
                    entity_tags_table.c.order_hint,
                    entity_tags_table.c.created_at.label("associated_at"),
                )
                .select_from(entity_tags_table)
                .join(tags_table, tags_table.c.id == entity_tags_table.c.tag_id)
                .where(
                    entity_tags_table.c.tenant_id == tenant_id,
                    entity_tags_table.c.entity_kind == entity_kind.value,
                    entity_tags_table.c.entity_id == entity_id,
                    tags_table.c.active.is_(True),
                )
            )
            try:
                result = await self.session.execute(stmt)
                pairs = []
                for row in result.fetchall():
                    data = row._asdict()
                    association = row_to_association(
                        {**data, "created_at": data["associated_at"]}
                    )
                    pairs.append((row_to_tag(data), association))
                return pairs
            except (SQLAlchemyError, ValueError) as e:
                raise StoreAccessError(
                    "association store", "find_for_entity", str(e)
                ) from e

    def _availability(self, kind: EntityKind):
        table = ENTITY_TABLES[kind]
        conditions = [table.c.active.is_(True)]
        if kind is EntityKind.LISTING:
            conditions.append(table.c.status == self.listing_available_status)
        return and_(*conditions)

    async def _created_at(
        self, tenant_id: TenantId, kind: EntityKind, entity_ids: list[UUID]
    ) -> dict[UUID, datetime]:
        """Creation time of the available entities among the given IDs."""
        table = ENTITY_TABLES[kind]
        stmt = select(table.c.id, table.c.created_at).where(
            table.c.tenant_id == tenant_id,
            table.c.id.in_(entity_ids),
            self._availability(kind),
        )
        result = await self.session.execute(stmt)
        return {row.id: row.created_at for row in result.fetchall()}

    async def find_matches(
        self,
        tenant_id: TenantId,
        tag_ids: Sequence[TagId],
        entity_kinds: Sequence[EntityKind],
        exclude_entity_id: Optional[EntityId] = None,
    ) -> list[TagMatch]:
        """Find associations of available entities with any of the tags."""
        if not tag_ids or not entity_kinds:
            return []

        with logfire.span(
            "association_repository.find_matches",
            tenant_id=str(tenant_id),
            tags=len(tag_ids),
            entity_kinds=[k.value for k in entity_kinds],
        ):
            stmt = (
                select(
                    entity_tags_table.c.entity_kind,
                    entity_tags_table.c.entity_id,
                    entity_tags_table.c.tag_id,
                    entity_tags_table.c.weight,
                    tags_table.c.kind.label("tag_kind"),
                )
                .select_from(entity_tags_table)
                .join(tags_table, tags_table.c.id == entity_tags_table.c.tag_id)
                .where(
                    entity_tags_table.c.tenant_id == tenant_id,
                    entity_tags_table.c.tag_id.in_(list(tag_ids)),
                    entity_tags_table.c.entity_kind.in_(
                        [k.value for k in entity_kinds]
                    ),
                    tags_table.c.active.is_(True),
                )
            )
            if exclude_entity_id is not None:
                stmt = stmt.where(entity_tags_table.c.entity_id != exclude_entity_id)

            try:
                result = await self.session.execute(stmt)
                rows = result.fetchall()

                ids_by_kind: dict[EntityKind, set[UUID]] = defaultdict(set)
                for row in rows:
                    ids_by_kind[EntityKind(row.entity_kind)].add(row.entity_id)

                # Pre-filter by tenant and availability, one query per kind
                created: dict[EntityKind, dict[UUID, datetime]] = {}
                for kind, ids in ids_by_kind.items():
                    created[kind] = await self._created_at(tenant_id, kind, list(ids))

                matches = []
                for row in rows:
                    kind = EntityKind(row.entity_kind)
                    created_at = created[kind].get(row.entity_id)
                    if created_at is None:
                        continue
                    matches.append(
                        TagMatch(
                            entity=EntityRef(kind=kind, id=EntityId(row.entity_id)),
                            tag_id=TagId(row.tag_id),
                            tag_kind=TagKind(row.tag_kind),
                            weight=(
                                float(row.weight) if row.weight is not None else None
                            ),
                            created_at=created_at,
                        )
                    )
            except (SQLAlchemyError, ValueError) as e:
                logfire.error("Association read failed", error=str(e))
                raise StoreAccessError(
                    "association store", "find_matches", str(e)
                ) from e

            logfire.debug(
                "Candidate matches loaded", rows=len(rows), matches=len(matches)
            )
            return matches
