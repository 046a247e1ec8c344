"""Pytest configuration for adventurers tests."""

from __future__ import annotations

import os

# Settings are cached on first import; keep tests off the real database.
os.environ.setdefault("GUILD_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("GUILD_SCHEMA_AUTO_CREATE", "false")

from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402

from apps.adventurers.application.adventurer import AdventurerService  # noqa: E402
from apps.adventurers.domain.entities import Adventurer  # noqa: E402
from apps.adventurers.domain.enums import CharacterClass  # noqa: E402
from apps.adventurers.domain.services import QuestService  # noqa: E402
from fakes import FixedRandom, InMemoryAdventurerRepository  # noqa: E402


@pytest.fixture
def repository() -> InMemoryAdventurerRepository:
    return InMemoryAdventurerRepository()


@pytest.fixture
def rng() -> FixedRandom:
    """Forces a 15 XP reward unless a test scripts its own."""
    return FixedRandom(15)


@pytest.fixture
def transaction_manager() -> AsyncMock:
    """Mock TransactionManager."""
    return AsyncMock()


@pytest.fixture
def service(
    repository: InMemoryAdventurerRepository,
    rng: FixedRandom,
    transaction_manager: AsyncMock,
) -> AdventurerService:
    return AdventurerService(repository, QuestService(rng), transaction_manager)


@pytest.fixture
def geralt() -> Adventurer:
    return Adventurer(name="Geralt", character_class=CharacterClass.WARRIOR)
