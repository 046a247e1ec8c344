"""SQLAlchemy implementation of transaction manager."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession


class SqlaTransactionManager:
    """Commits or rolls back the request session."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()
