"""SQLAlchemy table definitions for the tag engine.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

from realty.domain.value import EntityKind

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# TAGS TABLE (per-tenant catalog)
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, server_default="gen_random_uuid()"),
    Column("tenant_id", UUID(as_uuid=True), nullable=False),
    Column("slug", String(100), nullable=False),
    Column("kind", String(30), nullable=False),  # 'location', 'property-type', ...
    Column("value", Text, nullable=True),
    Column("query_field", String(100), nullable=True),
    Column("query_operator", String(20), nullable=True),
    Column("display_names", JSONB, nullable=True),  # {"es": "...", "en": "..."}
    Column("aliases", JSONB, nullable=True),  # {"es": "comprar", "en": "buy"}
    Column("active", Boolean, nullable=False, server_default="true"),
    Column("sort_order", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("tenant_id", "slug", name="uq_tags_tenant_slug"),
)

Index("idx_tags_tenant_active", tags_table.c.tenant_id, tags_table.c.active)
Index("idx_tags_tenant_kind", tags_table.c.tenant_id, tags_table.c.kind)

# ============================================================================
# ENTITY_TAGS TABLE (tags <-> listings and content)
# ============================================================================
entity_tags_table = Table(
    "entity_tags",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, server_default="gen_random_uuid()"),
    Column("tenant_id", UUID(as_uuid=True), nullable=False),
    Column("entity_kind", String(50), nullable=False),  # 'listing', 'article', ...
    Column("entity_id", UUID(as_uuid=True), nullable=False),
    Column(
        "tag_id",
        UUID(as_uuid=True),
        ForeignKey("tags.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("order_hint", Integer, nullable=False, server_default="0"),
    Column("weight", Numeric(4, 2), nullable=True),  # NULL = weight class of the kind
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint(
        "tenant_id", "entity_kind", "entity_id", "tag_id", name="uq_entity_tag"
    ),
)

Index(
    "idx_entity_tags_entity",
    entity_tags_table.c.entity_kind,
    entity_tags_table.c.entity_id,
)
Index("idx_entity_tags_tag", entity_tags_table.c.tag_id)
Index(
    "idx_entity_tags_search",
    entity_tags_table.c.tenant_id,
    entity_tags_table.c.entity_kind,
    entity_tags_table.c.tag_id,
)

# ============================================================================
# ENTITY TABLES (owned by ingestion and editorial tooling, read-only here)
# ============================================================================
listings_table = Table(
    "listings",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("tenant_id", UUID(as_uuid=True), nullable=False),
    Column("title", String(300), nullable=False),
    Column("slug", String(300), nullable=False),
    Column("status", String(30), nullable=False),  # 'disponible', 'vendida', ...
    Column("active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

articles_table = Table(
    "articles",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("tenant_id", UUID(as_uuid=True), nullable=False),
    Column("title", String(300), nullable=False),
    Column("slug", String(300), nullable=False),
    Column("description", Text, nullable=True),
    Column("image", Text, nullable=True),
    Column("active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

videos_table = Table(
    "videos",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("tenant_id", UUID(as_uuid=True), nullable=False),
    Column("title", String(300), nullable=False),
    Column("slug", String(300), nullable=False),
    Column("description", Text, nullable=True),
    Column("thumbnail", Text, nullable=True),
    Column("active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

testimonials_table = Table(
    "testimonials",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("tenant_id", UUID(as_uuid=True), nullable=False),
    Column("client_name", String(200), nullable=False),
    Column("comment", Text, nullable=True),
    Column("client_photo", Text, nullable=True),
    Column("active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

faqs_table = Table(
    "faqs",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("tenant_id", UUID(as_uuid=True), nullable=False),
    Column("question", Text, nullable=False),
    Column("answer", Text, nullable=True),
    Column("active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# Table holding the records of each entity kind
ENTITY_TABLES: dict[EntityKind, Table] = {
    EntityKind.LISTING: listings_table,
    EntityKind.ARTICLE: articles_table,
    EntityKind.VIDEO: videos_table,
    EntityKind.TESTIMONIAL: testimonials_table,
    EntityKind.FAQ: faqs_table,
}
