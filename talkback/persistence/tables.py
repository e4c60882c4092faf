"""SQLAlchemy table definitions for Talkback.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Column,
    Identity,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# ARTICLES TABLE (one aggregate per external article id)
# ============================================================================
articles_table = Table(
    "articles",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("uuid_generate_v4()")),
    Column("article_id", String(255), nullable=False, unique=True),  # External id
    Column("likes", ARRAY(Text), nullable=False, server_default=text("'{}'")),
    Column("likes_count", Integer, nullable=False, server_default="0"),
    Column("comments_count", Integer, nullable=False, server_default="0"),  # Roots
    Column("replies_count", Integer, nullable=False, server_default="0"),  # Any depth
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("uuid_generate_v4()")),
    # Insertion order, used when the client asks for no particular sort
    Column("seq", BigInteger, Identity(), nullable=False),
    Column("article_id", String(255), nullable=False),
    # No foreign key: subtree deletes remove a parent before its children
    Column("parent", UUID, nullable=True),
    Column("body", Text, nullable=False),
    Column("likes", ARRAY(Text), nullable=False, server_default=text("'{}'")),
    Column("likes_count", Integer, nullable=False, server_default="0"),
    Column("replies_count", Integer, nullable=False, server_default="0"),  # Direct only
    Column("created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")),
    # Author snapshot, denormalized at write time
    Column("author_id", String(255), nullable=False),
    Column("author_name", String(255), nullable=False),
    Column("author_image", Text, nullable=True),
)

Index("idx_comments_article_parent", comments_table.c.article_id, comments_table.c.parent)
Index("idx_comments_parent", comments_table.c.parent)
Index("idx_comments_article_created_at", comments_table.c.article_id, comments_table.c.created_at)
