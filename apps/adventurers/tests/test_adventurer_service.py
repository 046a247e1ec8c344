"""AdventurerService tests.

Validation, not-found handling and the quest flow, against an in-memory
repository with a scripted random source.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, create_autospec

import pytest

from apps.adventurers.application.adventurer import AdventurerService
from apps.adventurers.application.adventurer.ports import AdventurerRepository
from apps.adventurers.domain.entities import MAX_ID, MAX_LEVEL, MAX_XP, Adventurer
from apps.adventurers.domain.enums import CharacterClass
from apps.adventurers.domain.exceptions import AdventurerNotFoundError, InvalidArgumentError
from apps.adventurers.domain.services import QuestService

from fakes import FixedRandom, InMemoryAdventurerRepository


async def _seed(
    repository: InMemoryAdventurerRepository,
    *,
    name: str = "Geralt",
    character_class: CharacterClass = CharacterClass.WARRIOR,
    level: int = 1,
    xp: int = 0,
) -> Adventurer:
    return await repository.save(
        Adventurer(name=name, character_class=character_class, level=level, xp=xp)
    )


def _service_with_reward(
    repository: InMemoryAdventurerRepository, reward: int
) -> AdventurerService:
    return AdventurerService(repository, QuestService(FixedRandom(reward)), AsyncMock())


class TestCreate:
    @pytest.mark.asyncio
    async def test_assigns_identity_with_starting_stats(
        self,
        service: AdventurerService,
        geralt: Adventurer,
        transaction_manager: AsyncMock,
    ) -> None:
        created = await service.create(geralt)

        assert created.id is not None
        assert (created.level, created.xp) == (1, 0)
        assert created.name == "Geralt"
        transaction_manager.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_identities_are_fresh(self, service: AdventurerService) -> None:
        first = await service.create(Adventurer(name="A", character_class=CharacterClass.BARD))
        second = await service.create(Adventurer(name="B", character_class=CharacterClass.BARD))

        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_caller_level_and_xp_are_kept(self, service: AdventurerService) -> None:
        created = await service.create(
            Adventurer(name="Vesemir", character_class=CharacterClass.WARRIOR, level=9, xp=50)
        )

        assert (created.level, created.xp) == (9, 50)

    @pytest.mark.asyncio
    async def test_preset_identity_fails(
        self,
        service: AdventurerService,
        transaction_manager: AsyncMock,
    ) -> None:
        adventurer = Adventurer(name="Geralt", character_class=CharacterClass.WARRIOR, id=3)

        with pytest.raises(InvalidArgumentError):
            await service.create(adventurer)
        transaction_manager.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_adventurer_fails(self, service: AdventurerService) -> None:
        with pytest.raises(InvalidArgumentError):
            await service.create(None)


class TestUpdate:
    @pytest.mark.asyncio
    async def test_replaces_mutable_fields(
        self,
        service: AdventurerService,
        repository: InMemoryAdventurerRepository,
    ) -> None:
        stored = await _seed(repository)

        updated = await service.update(
            Adventurer(
                id=stored.id,
                name="Geralt of Rivia",
                character_class=CharacterClass.MAGE,
                level=4,
                xp=30,
            )
        )

        assert updated.id == stored.id
        reloaded = await repository.find_by_id(stored.id)
        assert reloaded == updated
        assert reloaded.character_class is CharacterClass.MAGE

    @pytest.mark.asyncio
    async def test_missing_identity_fails(
        self, service: AdventurerService, geralt: Adventurer
    ) -> None:
        with pytest.raises(InvalidArgumentError):
            await service.update(geralt)

    @pytest.mark.asyncio
    async def test_unknown_identity_is_not_found(self, service: AdventurerService) -> None:
        ghost = Adventurer(name="Ghost", character_class=CharacterClass.ROGUE, id=404)

        with pytest.raises(AdventurerNotFoundError) as exc_info:
            await service.update(ghost)
        assert exc_info.value.adventurer_id == 404

    @pytest.mark.asyncio
    async def test_missing_adventurer_fails(self, service: AdventurerService) -> None:
        with pytest.raises(InvalidArgumentError):
            await service.update(None)


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_is_idempotent(
        self,
        service: AdventurerService,
        repository: InMemoryAdventurerRepository,
    ) -> None:
        stored = await _seed(repository)

        await service.delete(stored.id)
        await service.delete(stored.id)

        assert await repository.exists_by_id(stored.id) is False

    @pytest.mark.asyncio
    async def test_missing_identity_fails(self, service: AdventurerService) -> None:
        with pytest.raises(InvalidArgumentError):
            await service.delete(None)


class TestFinders:
    @pytest.mark.asyncio
    async def test_find_all(
        self,
        service: AdventurerService,
        repository: InMemoryAdventurerRepository,
    ) -> None:
        assert list(await service.find_all()) == []

        await _seed(repository, name="A")
        await _seed(repository, name="B")

        assert [a.name for a in await service.find_all()] == ["A", "B"]

    @pytest.mark.asyncio
    async def test_find_by_id(
        self,
        service: AdventurerService,
        repository: InMemoryAdventurerRepository,
    ) -> None:
        stored = await _seed(repository)

        assert await service.find_by_id(stored.id) == stored
        assert await service.find_by_id(999) is None
        with pytest.raises(InvalidArgumentError):
            await service.find_by_id(None)

    @pytest.mark.asyncio
    async def test_find_by_name_trims_and_matches_exactly(
        self,
        service: AdventurerService,
        repository: InMemoryAdventurerRepository,
    ) -> None:
        stored = await _seed(repository, name="Yennefer")

        assert await service.find_by_name("  Yennefer ") == stored
        assert await service.find_by_name("yennefer") is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", [None, "", "   "])
    async def test_find_by_name_rejects_blank(self, service: AdventurerService, name) -> None:
        with pytest.raises(InvalidArgumentError):
            await service.find_by_name(name)

    @pytest.mark.asyncio
    async def test_find_by_class(
        self,
        service: AdventurerService,
        repository: InMemoryAdventurerRepository,
    ) -> None:
        await _seed(repository, name="Triss", character_class=CharacterClass.MAGE)
        await _seed(repository, name="Eskel", character_class=CharacterClass.WARRIOR)

        mages = await service.find_by_class(CharacterClass.MAGE)

        assert [a.name for a in mages] == ["Triss"]
        assert list(await service.find_by_class(CharacterClass.BARD)) == []
        with pytest.raises(InvalidArgumentError):
            await service.find_by_class(None)

    @pytest.mark.asyncio
    async def test_find_by_level(
        self,
        service: AdventurerService,
        repository: InMemoryAdventurerRepository,
    ) -> None:
        await _seed(repository, name="Low", level=1)
        await _seed(repository, name="High", level=5)

        assert [a.name for a in await service.find_by_level(5)] == ["High"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("level", [None, 0, -3, MAX_LEVEL + 1, 2**64])
    async def test_find_by_level_rejects_out_of_domain(
        self, service: AdventurerService, level
    ) -> None:
        with pytest.raises(InvalidArgumentError):
            await service.find_by_level(level)

    @pytest.mark.asyncio
    async def test_find_by_xp(
        self,
        service: AdventurerService,
        repository: InMemoryAdventurerRepository,
    ) -> None:
        await _seed(repository, name="Fresh", xp=0)
        await _seed(repository, name="Seasoned", xp=60)

        assert [a.name for a in await service.find_by_xp(0)] == ["Fresh"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("xp", [None, -1, MAX_XP + 1, 99999999999])
    async def test_find_by_xp_rejects_out_of_domain(self, service: AdventurerService, xp) -> None:
        with pytest.raises(InvalidArgumentError):
            await service.find_by_xp(xp)


class TestRealizeQuest:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("start", "reward", "expected"),
        [
            ((1, 95), 10, (2, 0)),
            ((1, 0), 15, (1, 15)),
            ((3, 89), 11, (4, 0)),
        ],
    )
    async def test_quest_outcomes_are_persisted(
        self,
        repository: InMemoryAdventurerRepository,
        start: tuple[int, int],
        reward: int,
        expected: tuple[int, int],
    ) -> None:
        stored = await _seed(repository, level=start[0], xp=start[1])
        service = _service_with_reward(repository, reward)

        result = await service.realize_quest(stored.id)

        assert (result.level, result.xp) == expected
        reloaded = await repository.find_by_id(stored.id)
        assert (reloaded.level, reloaded.xp) == expected

    @pytest.mark.asyncio
    async def test_commits_after_saving(
        self,
        service: AdventurerService,
        repository: InMemoryAdventurerRepository,
        transaction_manager: AsyncMock,
    ) -> None:
        stored = await _seed(repository)

        await service.realize_quest(stored.id)

        transaction_manager.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unknown_identity_is_not_found(self, service: AdventurerService) -> None:
        with pytest.raises(AdventurerNotFoundError):
            await service.realize_quest(12345)

    @pytest.mark.asyncio
    async def test_missing_identity_fails(self, service: AdventurerService) -> None:
        with pytest.raises(InvalidArgumentError):
            await service.realize_quest(None)

    @pytest.mark.asyncio
    async def test_loads_with_row_lock(self) -> None:
        repository = create_autospec(AdventurerRepository, instance=True)
        hero = Adventurer(name="Geralt", character_class=CharacterClass.WARRIOR, id=1)
        repository.find_by_id.return_value = hero
        repository.save.side_effect = lambda adventurer: adventurer
        service = AdventurerService(repository, QuestService(FixedRandom(15)), AsyncMock())

        result = await service.realize_quest(1)

        repository.find_by_id.assert_awaited_once_with(1, for_update=True)
        repository.save.assert_awaited_once_with(hero)
        assert result.xp == 15


class TestIdentityBounds:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("adventurer_id", [0, -7, MAX_ID + 1])
    async def test_lookups_reject_out_of_range_identity(
        self, service: AdventurerService, adventurer_id: int
    ) -> None:
        with pytest.raises(InvalidArgumentError):
            await service.find_by_id(adventurer_id)
        with pytest.raises(InvalidArgumentError):
            await service.delete(adventurer_id)
        with pytest.raises(InvalidArgumentError):
            await service.realize_quest(adventurer_id)

    @pytest.mark.asyncio
    async def test_quest_past_maximum_level_is_rejected(
        self,
        repository: InMemoryAdventurerRepository,
        transaction_manager: AsyncMock,
    ) -> None:
        stored = await _seed(repository, level=MAX_LEVEL, xp=95)
        service = AdventurerService(repository, QuestService(FixedRandom(10)), transaction_manager)

        with pytest.raises(InvalidArgumentError):
            await service.realize_quest(stored.id)

        reloaded = await repository.find_by_id(stored.id)
        assert (reloaded.level, reloaded.xp) == (MAX_LEVEL, 95)
        transaction_manager.commit.assert_not_awaited()
