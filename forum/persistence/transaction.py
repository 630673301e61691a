"""Handle on the request transaction.

Routes render domain errors as HTTP responses, so the request scope
finishes normally and the unit of work would commit. The interface layer
rolls back through this handle before rendering such an error.
"""

from abc import ABC, abstractmethod

import logfire
from sqlalchemy.ext.asyncio import AsyncSession


class Transaction(ABC):
    """The current request's transaction."""

    @abstractmethod
    async def rollback(self) -> None:
        """Discard everything written in the request so far."""
        pass


class SessionTransaction(Transaction):
    """Transaction backed by the request's SQLAlchemy session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def rollback(self) -> None:
        logfire.warn("Request transaction rolled back")
        await self.session.rollback()
