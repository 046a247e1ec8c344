"""Dependency Injection for FastAPI.

Every collaborator is built explicitly from the request session; there is no
container or global registry.
"""

from __future__ import annotations

import random
from functools import lru_cache
from typing import Annotated, AsyncIterator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apps.adventurers.application.adventurer import AdventurerService
from apps.adventurers.application.adventurer.ports import AdventurerRepository
from apps.adventurers.application.common.ports import TransactionManager
from apps.adventurers.domain.services import QuestService
from apps.adventurers.infrastructure.persistence_postgres import (
    SqlaAdventurerRepository,
    SqlaTransactionManager,
)
from apps.adventurers.setup.config import get_settings
from apps.adventurers.setup.database import async_session_factory


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """Yield a request-scoped session.

    Services commit through the TransactionManager; an exception escaping the
    request rolls the session back.
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


SessionDep = Annotated[AsyncSession, Depends(get_db_session)]


def get_adventurer_repository(session: SessionDep) -> AdventurerRepository:
    return SqlaAdventurerRepository(session)


def get_transaction_manager(session: SessionDep) -> TransactionManager:
    return SqlaTransactionManager(session)


@lru_cache
def get_quest_rng() -> random.Random:
    """Process-wide quest reward generator, seeded from settings when configured."""
    return random.Random(get_settings().quest_seed)


def get_quest_service(
    rng: Annotated[random.Random, Depends(get_quest_rng)],
) -> QuestService:
    return QuestService(rng)


def get_adventurer_service(
    repository: Annotated[AdventurerRepository, Depends(get_adventurer_repository)],
    quest_service: Annotated[QuestService, Depends(get_quest_service)],
    transaction_manager: Annotated[TransactionManager, Depends(get_transaction_manager)],
) -> AdventurerService:
    """Build the AdventurerService for this request."""
    return AdventurerService(repository, quest_service, transaction_manager)
