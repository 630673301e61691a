"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Comment
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentId, TopicId
from forum.persistence.error import translate_errors
from forum.persistence.mappers import comment_to_dict, row_to_comment
from forum.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        async with translate_errors("comment.find_by_id", self.session):
            stmt = select(comments_table).where(comments_table.c.id == comment_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_topic(self, topic_id: TopicId) -> List[Comment]:
        """Find all comments of a topic."""
        async with translate_errors("comment.find_by_topic", self.session):
            stmt = (
                select(comments_table)
                .where(comments_table.c.topic_id == topic_id)
                .order_by(comments_table.c.created_at)
            )
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_comment(row._asdict()) for row in rows]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        async with translate_errors("comment.save", self.session):
            stmt = insert(comments_table).values(**comment_to_dict(comment))
            await self.session.execute(stmt)
            await self.session.flush()
        return comment

    async def adjust_counters(
        self,
        comment_id: CommentId,
        delta: int,
        vote_delta: int = 0,
        heart_delta: int = 0,
    ) -> bool:
        """Atomically add deltas to the reaction counters."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(
                net_score=comments_table.c.net_score + delta,
                total_votes=comments_table.c.total_votes + vote_delta,
                heart_count=comments_table.c.heart_count + heart_delta,
            )
        )
        async with translate_errors("comment.adjust_counters", self.session):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
