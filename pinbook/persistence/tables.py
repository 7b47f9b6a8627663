"""SQLAlchemy table definitions for Pinbook.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=True),
    Column("total_score", Integer, nullable=False, server_default="0"),
    # Posts already voted on; appended to atomically with array_append
    Column(
        "votes",
        postgresql.ARRAY(UUID),
        nullable=False,
        server_default=text("'{}'::uuid[]"),
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_name", users_table.c.name, unique=True)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True),  # Same id as the stored image asset
    Column("title", String(300), nullable=False),
    Column("url", Text, nullable=False),
    Column("comment", Text, nullable=False, server_default=""),
    Column("image", String(255), nullable=False),
    Column("score", Integer, nullable=False, server_default="1"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_score", posts_table.c.score.desc())
Index("idx_posts_author_id", posts_table.c.author_id)
