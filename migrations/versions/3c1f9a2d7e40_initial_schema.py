"""initial_schema

Create the schema for the tag engine:
- Tags (per-tenant catalog with localized names and aliases)
- Entity tags (weighted links from tags to listings and content)
- Listings, articles, videos, testimonials, FAQs (minimal columns the engine
  reads; owned by ingestion and editorial tooling)

Revision ID: 3c1f9a2d7e40
Revises:
Create Date: 2026-10-19 10:12:03.418220

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a2d7e40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        postgresql.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _id() -> sa.Column:
    return sa.Column(
        "id",
        postgresql.UUID(as_uuid=True),
        primary_key=True,
        server_default=sa.text("gen_random_uuid()"),
    )


def _tenant() -> sa.Column:
    return sa.Column("tenant_id", postgresql.UUID(as_uuid=True), nullable=False)


def _active() -> sa.Column:
    return sa.Column(
        "active", sa.Boolean(), nullable=False, server_default=sa.text("true")
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # ========================================================================
    # TAGS
    # ========================================================================
    op.create_table(
        "tags",
        _id(),
        _tenant(),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("kind", sa.String(30), nullable=False),
        sa.Column("value", sa.Text(), nullable=True),
        sa.Column("query_field", sa.String(100), nullable=True),
        sa.Column("query_operator", sa.String(20), nullable=True),
        sa.Column("display_names", postgresql.JSONB(), nullable=True),
        sa.Column("aliases", postgresql.JSONB(), nullable=True),
        _active(),
        sa.Column(
            "sort_order", sa.Integer(), nullable=False, server_default=sa.text("0")
        ),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.UniqueConstraint("tenant_id", "slug", name="uq_tags_tenant_slug"),
        sa.CheckConstraint(
            "kind IN ('location', 'property-type', 'operation', 'filter', "
            "'amenity', 'feature', 'curated-list', 'content', 'service', "
            "'country', 'area', 'internal')",
            name="tags_kind_valid",
        ),
    )
    op.create_index("idx_tags_tenant_active", "tags", ["tenant_id", "active"])
    op.create_index("idx_tags_tenant_kind", "tags", ["tenant_id", "kind"])

    # ========================================================================
    # ENTITY TAGS
    # ========================================================================
    op.create_table(
        "entity_tags",
        _id(),
        _tenant(),
        sa.Column("entity_kind", sa.String(50), nullable=False),
        sa.Column("entity_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column(
            "tag_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("tags.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "order_hint", sa.Integer(), nullable=False, server_default=sa.text("0")
        ),
        sa.Column("weight", sa.Numeric(4, 2), nullable=True),
        _timestamp("created_at"),
        sa.UniqueConstraint(
            "tenant_id", "entity_kind", "entity_id", "tag_id", name="uq_entity_tag"
        ),
        sa.CheckConstraint("weight IS NULL OR weight > 0", name="weight_positive"),
    )
    op.create_index(
        "idx_entity_tags_entity", "entity_tags", ["entity_kind", "entity_id"]
    )
    op.create_index("idx_entity_tags_tag", "entity_tags", ["tag_id"])
    op.create_index(
        "idx_entity_tags_search",
        "entity_tags",
        ["tenant_id", "entity_kind", "tag_id"],
    )

    # ========================================================================
    # ENTITY TABLES
    # ========================================================================
    op.create_table(
        "listings",
        _id(),
        _tenant(),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("slug", sa.String(300), nullable=False),
        sa.Column("status", sa.String(30), nullable=False),
        _active(),
        _timestamp("created_at"),
    )
    op.create_index("idx_listings_tenant_status", "listings", ["tenant_id", "status"])

    op.create_table(
        "articles",
        _id(),
        _tenant(),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("slug", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image", sa.Text(), nullable=True),
        _active(),
        _timestamp("created_at"),
    )

    op.create_table(
        "videos",
        _id(),
        _tenant(),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("slug", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("thumbnail", sa.Text(), nullable=True),
        _active(),
        _timestamp("created_at"),
    )

    op.create_table(
        "testimonials",
        _id(),
        _tenant(),
        sa.Column("client_name", sa.String(200), nullable=False),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column("client_photo", sa.Text(), nullable=True),
        _active(),
        _timestamp("created_at"),
    )

    op.create_table(
        "faqs",
        _id(),
        _tenant(),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("answer", sa.Text(), nullable=True),
        _active(),
        _timestamp("created_at"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    for table in ("faqs", "testimonials", "videos", "articles", "listings"):
        op.drop_table(table)
    op.drop_table("entity_tags")
    op.drop_table("tags")
