"""PostgreSQL implementation of the tag catalog repository."""

from typing import Optional

import logfire
from sqlalchemy import func, or_, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from realty.domain.error import StoreAccessError
from realty.domain.model.tag import Tag
from realty.domain.repository.tag import TagRepository
from realty.domain.value import TagId, TagKind, TenantId
from realty.persistence.mappers import row_to_tag, tag_to_dict
from realty.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def _fetch(self, stmt, operation: str) -> list[Tag]:
        try:
            result = await self.session.execute(stmt)
            return [row_to_tag(row._asdict()) for row in result.fetchall()]
        except (SQLAlchemyError, ValueError) as e:
            logfire.error("Tag catalog read failed", operation=operation, error=str(e))
            raise StoreAccessError("tag catalog", operation, str(e)) from e

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag."""
        values = tag_to_dict(tag)
        stmt = (
            insert(tags_table)
            .values(**values)
            .on_conflict_do_update(
                index_elements=[tags_table.c.id],
                set_={k: v for k, v in values.items() if k != "id"},
            )
        )
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise StoreAccessError("tag catalog", "save", str(e)) from e
        return tag

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        stmt = select(tags_table).where(tags_table.c.id == tag_id)
        tags = await self._fetch(stmt, "find_by_id")
        return tags[0] if tags else None

    async def find_active_by_segments(
        self,
        tenant_id: TenantId,
        segments: list[str],
        language: str,
        default_language: str,
    ) -> list[Tag]:
        """Find active tags by slug or alias in a single query."""
        if not segments:
            return []

        with logfire.span(
            "tag_repository.find_active_by_segments",
            tenant_id=str(tenant_id),
            segments=segments,
        ):
            stmt = select(tags_table).where(
                tags_table.c.tenant_id == tenant_id,
                tags_table.c.active.is_(True),
                or_(
                    tags_table.c.slug.in_(segments),
                    func.lower(tags_table.c.aliases[language].astext).in_(segments),
                    func.lower(tags_table.c.aliases[default_language].astext).in_(
                        segments
                    ),
                ),
            )
            return await self._fetch(stmt, "find_active_by_segments")

    async def find_active_by_slugs(
        self, tenant_id: TenantId, slugs: list[str]
    ) -> list[Tag]:
        """Find active tags by slug in a single query."""
        if not slugs:
            return []

        stmt = select(tags_table).where(
            tags_table.c.tenant_id == tenant_id,
            tags_table.c.active.is_(True),
            tags_table.c.slug.in_(slugs),
        )
        return await self._fetch(stmt, "find_active_by_slugs")

    async def find_active(
        self, tenant_id: TenantId, kinds: Optional[list[TagKind]] = None
    ) -> list[Tag]:
        """Find all active tags ordered by kind, sort order and slug."""
        stmt = select(tags_table).where(
            tags_table.c.tenant_id == tenant_id,
            tags_table.c.active.is_(True),
        )
        if kinds:
            stmt = stmt.where(tags_table.c.kind.in_([k.value for k in kinds]))
        stmt = stmt.order_by(
            tags_table.c.kind, tags_table.c.sort_order, tags_table.c.slug
        )
        return await self._fetch(stmt, "find_active")
