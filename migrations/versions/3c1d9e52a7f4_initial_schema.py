"""initial_schema

Create the forum schema:
- Topics (feed entries with score and comment counters)
- Comments (flat records threaded by parent_id, depth 0..5)
- Interactions (one live reaction per user and target)

Revision ID: 3c1d9e52a7f4
Revises:
Create Date: 2026-10-19 09:12:44.318207

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1d9e52a7f4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # TOPICS
    # ========================================================================
    op.create_table(
        "topics",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("net_score", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("comment_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_votes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("heart_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "comment_count >= 0", name="topic_comment_count_non_negative"
        ),
        sa.CheckConstraint("total_votes >= 0", name="topic_total_votes_non_negative"),
        sa.CheckConstraint("heart_count >= 0", name="topic_heart_count_non_negative"),
    )
    op.create_index(
        "idx_topics_created_at", "topics", [sa.text("created_at DESC")]
    )
    op.create_index("idx_topics_net_score", "topics", [sa.text("net_score DESC")])

    # ========================================================================
    # COMMENTS
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("topic_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("depth", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("net_score", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("total_votes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("heart_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["topic_id"], ["topics.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("depth >= 0 AND depth <= 5", name="comment_depth_range"),
        sa.CheckConstraint(
            "total_votes >= 0", name="comment_total_votes_non_negative"
        ),
        sa.CheckConstraint(
            "heart_count >= 0", name="comment_heart_count_non_negative"
        ),
    )
    op.create_index("idx_comments_topic_id", "comments", ["topic_id"])
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])

    # ========================================================================
    # INTERACTIONS
    # ========================================================================
    op.create_table(
        "interactions",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("target_type", sa.String(20), nullable=False),
        sa.Column("target_id", sa.UUID(), nullable=False),
        sa.Column("interaction_type", sa.String(20), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "target_id", "target_type", name="uq_interaction_user_target"
        ),
        sa.CheckConstraint(
            "target_type IN ('TOPIC', 'COMMENT')",
            name="interaction_target_type_valid",
        ),
        sa.CheckConstraint(
            "interaction_type IN ('VOTE_UP', 'VOTE_DOWN', 'HEART')",
            name="interaction_type_valid",
        ),
    )
    op.create_index(
        "idx_interactions_target", "interactions", ["target_type", "target_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("interactions")
    op.drop_table("comments")
    op.drop_table("topics")
