"""AdventurerService.

Validates input, enforces adventurer invariants and resolves quests before
delegating storage to the AdventurerRepository port.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from apps.adventurers.domain.entities import (
    MAX_ID,
    MAX_LEVEL,
    MAX_XP,
    MIN_ID,
    MIN_LEVEL,
    MIN_XP,
    Adventurer,
)
from apps.adventurers.domain.enums import CharacterClass
from apps.adventurers.domain.exceptions import AdventurerNotFoundError, InvalidArgumentError

if TYPE_CHECKING:
    from apps.adventurers.application.adventurer.ports import AdventurerRepository
    from apps.adventurers.application.common.ports import TransactionManager
    from apps.adventurers.domain.services import QuestService

logger = logging.getLogger(__name__)


def _require_id(adventurer_id: int | None) -> int:
    if adventurer_id is None:
        raise InvalidArgumentError("Adventurer id is required")
    if not MIN_ID <= adventurer_id <= MAX_ID:
        raise InvalidArgumentError(f"Adventurer id must be between {MIN_ID} and {MAX_ID}")
    return adventurer_id


class AdventurerService:
    """Adventurer use cases."""

    def __init__(
        self,
        repository: "AdventurerRepository",
        quest_service: "QuestService",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._repository = repository
        self._quest_service = quest_service
        self._tx = transaction_manager

    async def create(self, adventurer: Adventurer | None) -> Adventurer:
        """Register a new adventurer.

        Args:
            adventurer: adventurer without identity

        Returns:
            The stored adventurer with its assigned identity

        Raises:
            InvalidArgumentError: adventurer missing or already has an identity
        """
        if adventurer is None:
            raise InvalidArgumentError("Adventurer must not be null")
        if adventurer.id is not None:
            raise InvalidArgumentError("A new adventurer must not have an id")

        created = await self._repository.save(adventurer)
        await self._tx.commit()
        logger.info(
            "Adventurer created",
            extra={
                "adventurer_id": created.id,
                "character_class": created.character_class.value,
            },
        )
        return created

    async def update(self, adventurer: Adventurer | None) -> Adventurer:
        """Replace the mutable fields of a stored adventurer.

        Raises:
            InvalidArgumentError: adventurer or its identity missing
            AdventurerNotFoundError: no adventurer with that identity
        """
        if adventurer is None:
            raise InvalidArgumentError("Adventurer must not be null")
        adventurer_id = _require_id(adventurer.id)

        if not await self._repository.exists_by_id(adventurer_id):
            raise AdventurerNotFoundError(adventurer_id=adventurer_id)

        updated = await self._repository.save(adventurer)
        await self._tx.commit()
        logger.info("Adventurer updated", extra={"adventurer_id": adventurer_id})
        return updated

    async def delete(self, adventurer_id: int | None) -> None:
        """Remove an adventurer. Deleting a missing identity is a no-op."""
        adventurer_id = _require_id(adventurer_id)
        await self._repository.delete_by_id(adventurer_id)
        await self._tx.commit()
        logger.info("Adventurer deleted", extra={"adventurer_id": adventurer_id})

    async def find_all(self) -> Sequence[Adventurer]:
        return await self._repository.find_all()

    async def find_by_id(self, adventurer_id: int | None) -> Adventurer | None:
        return await self._repository.find_by_id(_require_id(adventurer_id))

    async def find_by_name(self, name: str | None) -> Adventurer | None:
        if name is None or not name.strip():
            raise InvalidArgumentError("Name must not be empty")
        return await self._repository.find_by_name(name.strip())

    async def find_by_class(
        self, character_class: CharacterClass | None
    ) -> Sequence[Adventurer]:
        if character_class is None:
            raise InvalidArgumentError("Character class must not be null")
        return await self._repository.find_by_class(CharacterClass.parse(character_class))

    async def find_by_level(self, level: int | None) -> Sequence[Adventurer]:
        if level is None or not MIN_LEVEL <= level <= MAX_LEVEL:
            raise InvalidArgumentError(f"Level must be between {MIN_LEVEL} and {MAX_LEVEL}")
        return await self._repository.find_by_level(level)

    async def find_by_xp(self, xp: int | None) -> Sequence[Adventurer]:
        if xp is None or not MIN_XP <= xp <= MAX_XP:
            raise InvalidArgumentError(f"XP must be between {MIN_XP} and {MAX_XP}")
        return await self._repository.find_by_xp(xp)

    async def realize_quest(self, adventurer_id: int | None) -> Adventurer:
        """Send an adventurer on a quest.

        Flow:
        1. Load the adventurer (row locked for the rest of the transaction)
        2. Draw a random XP reward
        3. Add it to the adventurer's XP, levelling up at the threshold
        4. Persist and return the adventurer

        Raises:
            InvalidArgumentError: identity missing
            AdventurerNotFoundError: no adventurer with that identity
        """
        adventurer_id = _require_id(adventurer_id)

        hero = await self._repository.find_by_id(adventurer_id, for_update=True)
        if hero is None:
            raise AdventurerNotFoundError(adventurer_id=adventurer_id)

        outcome = self._quest_service.embark(hero)
        logger.info(
            "Quest completed",
            extra={
                "adventurer_id": adventurer_id,
                "reward": outcome.reward,
                "level": outcome.level,
                "xp": outcome.xp,
            },
        )
        if outcome.leveled_up:
            logger.info(
                "Adventurer leveled up",
                extra={
                    "adventurer_id": adventurer_id,
                    "previous_level": outcome.previous_level,
                    "level": outcome.level,
                },
            )

        saved = await self._repository.save(hero)
        await self._tx.commit()
        return saved
