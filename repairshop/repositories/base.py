"""Shared plumbing for SQLAlchemy stores — commit with error mapping and fresh reloads."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from repairshop.core.errors import DatabaseError

logger = logging.getLogger(__name__)


class SQLAlchemyStore:
    """Base for entity stores bound to one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _commit(self, operation: str) -> None:
        """Commit the unit of work, rolling back and mapping any SQLAlchemy failure."""
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Store {operation} failed: {e}",
                extra={"operation": operation},
            )
            raise DatabaseError("Could not persist changes", operation)
