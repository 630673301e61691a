"""Translation of SQLAlchemy errors into domain errors."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import ConflictError, StorageError


@asynccontextmanager
async def translate_errors(
    operation: str, session: AsyncSession
) -> AsyncIterator[None]:
    """Map storage exceptions raised inside the block to domain errors.

    - IntegrityError (constraint violation) -> ConflictError
    - any other SQLAlchemyError -> StorageError, after rolling back the
      session since the database has aborted the transaction

    Args:
        operation: Name of the repository operation, for logging
        session: Session the block runs in
    """
    try:
        yield
    except IntegrityError as e:
        logfire.warn("Integrity error", operation=operation, error=str(e.orig))
        raise ConflictError(f"Conflicting write in {operation}") from e
    except SQLAlchemyError as e:
        logfire.error("Storage error", operation=operation, error=str(e))
        await session.rollback()
        raise StorageError(f"Storage failure in {operation}") from e
