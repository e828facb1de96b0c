"""PostgreSQL implementation of content detail lookups."""

from typing import Optional

import logfire
from sqlalchemy import String, cast, literal, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from realty.domain.error import StoreAccessError
from realty.domain.model.entity import ContentSummary
from realty.domain.repository.content import ContentRepository
from realty.domain.value import EntityId, TenantId
from realty.persistence.mappers import row_to_summary
from realty.persistence.tables import (
    articles_table,
    faqs_table,
    testimonials_table,
    videos_table,
)


class PostgresContentRepository(ContentRepository):
    """PostgreSQL implementation of ContentRepository.

    Every lookup opens its own short-lived session so that a batch of
    lookups can run concurrently without sharing a connection.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: Factory for per-lookup sessions
        """
        self.session_factory = session_factory

    async def _find_one(self, stmt, kind: str) -> Optional[ContentSummary]:
        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                row = result.fetchone()
        except SQLAlchemyError as e:
            raise StoreAccessError("content store", f"find_{kind}", str(e)) from e

        if not row:
            logfire.debug("Content detail not found", kind=kind)
            return None
        return row_to_summary(row._asdict())

    async def find_article(
        self, entity_id: EntityId, tenant_id: TenantId
    ) -> Optional[ContentSummary]:
        """Find an active article card."""
        t = articles_table
        stmt = select(
            t.c.title,
            t.c.slug,
            t.c.description,
            t.c.image,
        ).where(t.c.id == entity_id, t.c.tenant_id == tenant_id, t.c.active.is_(True))
        return await self._find_one(stmt, "article")

    async def find_video(
        self, entity_id: EntityId, tenant_id: TenantId
    ) -> Optional[ContentSummary]:
        """Find an active video card."""
        t = videos_table
        stmt = select(
            t.c.title,
            t.c.slug,
            t.c.description,
            t.c.thumbnail.label("image"),
        ).where(t.c.id == entity_id, t.c.tenant_id == tenant_id, t.c.active.is_(True))
        return await self._find_one(stmt, "video")

    async def find_testimonial(
        self, entity_id: EntityId, tenant_id: TenantId
    ) -> Optional[ContentSummary]:
        """Find an active testimonial card."""
        t = testimonials_table
        stmt = select(
            t.c.client_name.label("title"),
            cast(t.c.id, String).label("slug"),
            t.c.comment.label("description"),
            t.c.client_photo.label("image"),
        ).where(t.c.id == entity_id, t.c.tenant_id == tenant_id, t.c.active.is_(True))
        return await self._find_one(stmt, "testimonial")

    async def find_faq(
        self, entity_id: EntityId, tenant_id: TenantId
    ) -> Optional[ContentSummary]:
        """Find an active FAQ card."""
        t = faqs_table
        stmt = select(
            t.c.question.label("title"),
            cast(t.c.id, String).label("slug"),
            t.c.answer.label("description"),
            literal(None, String).label("image"),
        ).where(t.c.id == entity_id, t.c.tenant_id == tenant_id, t.c.active.is_(True))
        return await self._find_one(stmt, "faq")
