"""PostgreSQL implementation of Interaction repository."""

from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Interaction
from forum.domain.repository import InteractionRepository
from forum.domain.value import InteractionId, InteractionType, TargetType, UserId
from forum.persistence.error import translate_errors
from forum.persistence.mappers import interaction_to_dict, row_to_interaction
from forum.persistence.tables import interactions_table


class PostgresInteractionRepository(InteractionRepository):
    """PostgreSQL implementation of InteractionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_id: UUID,
    ) -> Optional[Interaction]:
        """Find a user's reaction on a specific target."""
        stmt = select(interactions_table).where(
            and_(
                interactions_table.c.user_id == user_id,
                interactions_table.c.target_type == target_type.value,
                interactions_table.c.target_id == target_id,
            )
        )
        async with translate_errors(
            "interaction.find_by_user_and_target", self.session
        ):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_interaction(row._asdict()) if row else None

    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_ids: Sequence[UUID],
    ) -> List[Interaction]:
        """Find a user's reactions on multiple targets (batch query)."""
        if not target_ids:
            return []

        stmt = select(interactions_table).where(
            and_(
                interactions_table.c.user_id == user_id,
                interactions_table.c.target_type == target_type.value,
                interactions_table.c.target_id.in_(target_ids),
            )
        )
        async with translate_errors(
            "interaction.find_by_user_and_targets", self.session
        ):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_interaction(row._asdict()) for row in rows]

    async def save(self, interaction: Interaction) -> Interaction:
        """Insert a new interaction.

        The insert runs in a SAVEPOINT so a uniqueness violation only rolls
        back this statement and the caller can re-read and retry.
        """
        stmt = insert(interactions_table).values(**interaction_to_dict(interaction))
        async with translate_errors("interaction.save", self.session):
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        return interaction

    async def update_type(
        self,
        interaction_id: InteractionId,
        interaction_type: InteractionType,
    ) -> Optional[Interaction]:
        """Switch a stored interaction to another reaction type."""
        stmt = (
            interactions_table.update()
            .where(interactions_table.c.id == interaction_id)
            .values(interaction_type=interaction_type.value, updated_at=func.now())
            .returning(*interactions_table.c)
        )
        async with translate_errors("interaction.update_type", self.session):
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
        return row_to_interaction(row._asdict()) if row else None

    async def delete(self, interaction_id: InteractionId) -> bool:
        """Delete an interaction."""
        stmt = delete(interactions_table).where(
            interactions_table.c.id == interaction_id
        )
        async with translate_errors("interaction.delete", self.session):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
