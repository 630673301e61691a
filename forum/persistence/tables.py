"""SQLAlchemy table definitions for the forum.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# TOPICS TABLE
# ============================================================================
topics_table = Table(
    "topics",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(300), nullable=False),
    Column("author_id", UUID(as_uuid=True), nullable=False),
    Column("net_score", Integer, nullable=False, server_default="1"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column("total_votes", Integer, nullable=False, server_default="0"),
    Column("heart_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("comment_count >= 0", name="topic_comment_count_non_negative"),
    CheckConstraint("total_votes >= 0", name="topic_total_votes_non_negative"),
    CheckConstraint("heart_count >= 0", name="topic_heart_count_non_negative"),
)

Index("idx_topics_created_at", topics_table.c.created_at.desc())
Index("idx_topics_net_score", topics_table.c.net_score.desc())

# ============================================================================
# COMMENTS TABLE (flat records, threaded by parent_id)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "topic_id",
        UUID(as_uuid=True),
        ForeignKey("topics.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "parent_id",
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("author_id", UUID(as_uuid=True), nullable=False),
    Column("content", Text, nullable=False),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column("net_score", Integer, nullable=False, server_default="1"),
    Column("total_votes", Integer, nullable=False, server_default="0"),
    Column("heart_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("depth >= 0 AND depth <= 5", name="comment_depth_range"),
    CheckConstraint("total_votes >= 0", name="comment_total_votes_non_negative"),
    CheckConstraint("heart_count >= 0", name="comment_heart_count_non_negative"),
)

Index("idx_comments_topic_id", comments_table.c.topic_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# INTERACTIONS TABLE (one live reaction per user and target)
# ============================================================================
interactions_table = Table(
    "interactions",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("user_id", UUID(as_uuid=True), nullable=False),
    Column("target_type", String(20), nullable=False),  # 'TOPIC' or 'COMMENT'
    Column("target_id", UUID(as_uuid=True), nullable=False),
    Column("interaction_type", String(20), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint(
        "user_id", "target_id", "target_type", name="uq_interaction_user_target"
    ),
    CheckConstraint(
        "target_type IN ('TOPIC', 'COMMENT')", name="interaction_target_type_valid"
    ),
    CheckConstraint(
        "interaction_type IN ('VOTE_UP', 'VOTE_DOWN', 'HEART')",
        name="interaction_type_valid",
    ),
)

Index(
    "idx_interactions_target",
    interactions_table.c.target_type,
    interactions_table.c.target_id,
)
