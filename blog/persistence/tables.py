"""SQLAlchemy table definitions for the blog.

These table definitions are used with SQLAlchemy Core and match the
schema defined in Alembic migrations. Value objects are stored in their
canonical string form; identifiers are UUID columns exchanged as strings.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=False), primary_key=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column("role", String(20), nullable=False, server_default="user"),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
    CheckConstraint("role IN ('user', 'admin')", name="ck_users_role"),
)

Index("idx_users_created_at", users_table.c.created_at)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=False), primary_key=True),
    Column("title", String(255), nullable=False),
    Column("content", Text, nullable=False),
    Column("status", String(20), nullable=False, server_default="draft"),
    Column("author_id", UUID(as_uuid=False), nullable=False),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
    Column("published_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint(
        "status IN ('draft', 'published', 'archived')", name="ck_posts_status"
    ),
    CheckConstraint(
        "(status = 'draft' AND published_at IS NULL) "
        "OR (status = 'published' AND published_at IS NOT NULL) "
        "OR status = 'archived'",
        name="ck_posts_published_at",
    ),
)

Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index(
    "idx_posts_published_at",
    posts_table.c.published_at.desc(),
    postgresql_where=posts_table.c.status == "published",
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=False), primary_key=True),
    Column("content", Text, nullable=False),
    Column(
        "post_id",
        UUID(as_uuid=False),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_id", UUID(as_uuid=False), nullable=False),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
)

Index("idx_comments_post_id", comments_table.c.post_id, comments_table.c.created_at)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID(as_uuid=False), primary_key=True),
    Column("name", String(50), nullable=False),
    Column("slug", String(50), nullable=False, unique=True),
    Column("color", String(7), nullable=False),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
)

Index("idx_tags_name", tags_table.c.name)
