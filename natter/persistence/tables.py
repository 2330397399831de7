"""SQLAlchemy table definitions for Natter.

These table definitions match the schema defined in Alembic migrations.
Column types are dialect-neutral so the same table works on PostgreSQL and
SQLite.
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    func,
    true,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("post_slug", Text, nullable=False),
    # No foreign key: deleting a comment leaves its replies in place
    Column("parent_id", Integer, nullable=True),
    Column("name", Text, nullable=False),
    Column("email", Text, nullable=True),
    Column("content", Text, nullable=False),
    Column(
        "created_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
    Column("approved", Boolean, nullable=False, server_default=true()),
    Column("ip_hash", String(16), nullable=False),
)

# Public read path: approved comments of one post in time order
Index(
    "idx_comments_post_slug_approved",
    comments_table.c.post_slug,
    comments_table.c.approved,
    comments_table.c.created_at,
)
# Rate-limit window lookups
Index(
    "idx_comments_ip_hash_created_at",
    comments_table.c.ip_hash,
    comments_table.c.created_at,
)
# Moderation listing (newest first)
Index("idx_comments_created_at", comments_table.c.created_at)
