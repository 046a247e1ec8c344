"""SQLAlchemy Adventurer Repository Implementation."""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from sqlalchemy import Select, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from apps.adventurers.application.adventurer.ports import AdventurerRepository
from apps.adventurers.domain.entities import Adventurer
from apps.adventurers.domain.enums import CharacterClass
from apps.adventurers.domain.exceptions import AdventurerNotFoundError
from apps.adventurers.infrastructure.persistence_postgres.mappers import (
    adventurer_to_row,
    row_to_adventurer,
)
from apps.adventurers.infrastructure.persistence_postgres.tables import adventurers_table


class SqlaAdventurerRepository(AdventurerRepository):
    """SQLAlchemy Core based adventurer repository.

    Writes are flushed into the request session; committing is left to the
    TransactionManager.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def save(self, adventurer: Adventurer) -> Adventurer:
        values = adventurer_to_row(adventurer)

        if adventurer.id is None:
            result = await self._session.execute(insert(adventurers_table).values(**values))
            stored = replace(adventurer)
            stored.assign_id(int(result.inserted_primary_key[0]))
            return stored

        result = await self._session.execute(
            update(adventurers_table)
            .where(adventurers_table.c.id == adventurer.id)
            .values(**values, updated_at=func.now())
        )
        if result.rowcount == 0:
            # Deleted between the caller's existence check and this write
            raise AdventurerNotFoundError(adventurer_id=adventurer.id)
        return replace(adventurer)

    async def find_all(self) -> Sequence[Adventurer]:
        return await self._fetch_many(select(adventurers_table))

    async def find_by_id(
        self, adventurer_id: int, *, for_update: bool = False
    ) -> Adventurer | None:
        stmt = select(adventurers_table).where(adventurers_table.c.id == adventurer_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self._session.execute(stmt)
        row = result.mappings().one_or_none()
        return row_to_adventurer(row) if row else None

    async def find_by_name(self, name: str) -> Adventurer | None:
        stmt = (
            select(adventurers_table)
            .where(adventurers_table.c.name == name)
            .order_by(adventurers_table.c.id)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return row_to_adventurer(row) if row else None

    async def find_by_class(self, character_class: CharacterClass) -> Sequence[Adventurer]:
        return await self._fetch_many(
            select(adventurers_table).where(
                adventurers_table.c["class"] == character_class.value
            )
        )

    async def find_by_level(self, level: int) -> Sequence[Adventurer]:
        return await self._fetch_many(
            select(adventurers_table).where(adventurers_table.c.level == level)
        )

    async def find_by_xp(self, xp: int) -> Sequence[Adventurer]:
        return await self._fetch_many(
            select(adventurers_table).where(adventurers_table.c.xp == xp)
        )

    async def exists_by_id(self, adventurer_id: int) -> bool:
        stmt = select(adventurers_table.c.id).where(adventurers_table.c.id == adventurer_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def delete_by_id(self, adventurer_id: int) -> None:
        await self._session.execute(
            delete(adventurers_table).where(adventurers_table.c.id == adventurer_id)
        )

    async def _fetch_many(self, stmt: Select) -> list[Adventurer]:
        result = await self._session.execute(stmt.order_by(adventurers_table.c.id))
        return [row_to_adventurer(row) for row in result.mappings().all()]
