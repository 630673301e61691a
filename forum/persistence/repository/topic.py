"""PostgreSQL implementation of Topic repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import desc, func, insert, literal, select
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.ext.asyncio import AsyncSession

from forum.config import RankingSettings
from forum.domain.model import Topic
from forum.domain.repository import TopicRepository
from forum.domain.value import TopicId, TopicSortOrder
from forum.persistence.error import translate_errors
from forum.persistence.mappers import row_to_topic, topic_to_dict
from forum.persistence.tables import topics_table


class PostgresTopicRepository(TopicRepository):
    """PostgreSQL implementation of TopicRepository."""

    def __init__(self, session: AsyncSession, ranking: RankingSettings) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            ranking: Hot ranking parameters
        """
        self.session = session
        self.ranking = ranking

    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find a topic by ID."""
        async with translate_errors("topic.find_by_id", self.session):
            stmt = select(topics_table).where(topics_table.c.id == topic_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_topic(row._asdict()) if row else None

    async def find_all(
        self,
        sort: TopicSortOrder = TopicSortOrder.HOT,
        limit: int = 20,
        offset: int = 0,
        now: Optional[datetime] = None,
    ) -> List[Topic]:
        """Find topics in feed order with pagination."""
        with logfire.span(
            "topic_repository.find_all", sort=sort.value, limit=limit, offset=offset
        ):
            stmt = select(topics_table)

            if sort == TopicSortOrder.NEW:
                stmt = stmt.order_by(desc(topics_table.c.created_at))
            elif sort == TopicSortOrder.TOP:
                stmt = stmt.order_by(
                    desc(topics_table.c.net_score), desc(topics_table.c.created_at)
                )
            else:
                # Time-decay ranking:
                # max(net_score - 1, 0) / (age_hours + offset)^gravity
                reference = (
                    literal(now, TIMESTAMP(timezone=True)) if now else func.now()
                )
                age_hours = func.greatest(
                    func.extract("epoch", reference - topics_table.c.created_at)
                    / 3600,
                    0,
                )
                points = func.greatest(topics_table.c.net_score - 1, 0)
                score = points / func.pow(
                    age_hours + self.ranking.time_offset, self.ranking.gravity
                )
                stmt = stmt.order_by(desc(score), desc(topics_table.c.created_at))

            # Pagination happens after ranking
            stmt = stmt.limit(limit).offset(offset)

            async with translate_errors("topic.find_all", self.session):
                result = await self.session.execute(stmt)
                rows = result.fetchall()

            topics = [row_to_topic(row._asdict()) for row in rows]
            logfire.info("Found topics", count=len(topics))
            return topics

    async def count(self) -> int:
        """Count all topics."""
        async with translate_errors("topic.count", self.session):
            stmt = select(func.count()).select_from(topics_table)
            result = await self.session.execute(stmt)
            return result.scalar_one()

    async def save(self, topic: Topic) -> Topic:
        """Insert a new topic."""
        async with translate_errors("topic.save", self.session):
            stmt = insert(topics_table).values(**topic_to_dict(topic))
            await self.session.execute(stmt)
            await self.session.flush()
        return topic

    async def adjust_counters(
        self,
        topic_id: TopicId,
        delta: int,
        vote_delta: int = 0,
        heart_delta: int = 0,
    ) -> bool:
        """Atomically add deltas to the reaction counters."""
        stmt = (
            topics_table.update()
            .where(topics_table.c.id == topic_id)
            .values(
                net_score=topics_table.c.net_score + delta,
                total_votes=topics_table.c.total_votes + vote_delta,
                heart_count=topics_table.c.heart_count + heart_delta,
            )
        )
        async with translate_errors("topic.adjust_counters", self.session):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def increment_comment_count(self, topic_id: TopicId) -> bool:
        """Atomically increment comment_count by 1."""
        stmt = (
            topics_table.update()
            .where(topics_table.c.id == topic_id)
            .values(comment_count=topics_table.c.comment_count + 1)
        )
        async with translate_errors(
            "topic.increment_comment_count", self.session
        ):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
