"""Adventurer Repository Port."""

from abc import ABC, abstractmethod
from typing import Sequence

from apps.adventurers.domain.entities import Adventurer
from apps.adventurers.domain.enums import CharacterClass


class AdventurerRepository(ABC):
    """Adventurer storage port.

    Implemented by the infrastructure layer.
    """

    @abstractmethod
    async def save(self, adventurer: Adventurer) -> Adventurer:
        """Persist an adventurer.

        Assigns an identity when the adventurer has none, otherwise overwrites
        the stored record.

        Returns:
            The stored adventurer, identity included
        """
        ...

    @abstractmethod
    async def find_all(self) -> Sequence[Adventurer]:
        ...

    @abstractmethod
    async def find_by_id(
        self, adventurer_id: int, *, for_update: bool = False
    ) -> Adventurer | None:
        """Load one adventurer.

        Args:
            adventurer_id: identity
            for_update: lock the row until the surrounding transaction ends

        Returns:
            Adventurer or None
        """
        ...

    @abstractmethod
    async def find_by_name(self, name: str) -> Adventurer | None:
        ...

    @abstractmethod
    async def find_by_class(self, character_class: CharacterClass) -> Sequence[Adventurer]:
        ...

    @abstractmethod
    async def find_by_level(self, level: int) -> Sequence[Adventurer]:
        ...

    @abstractmethod
    async def find_by_xp(self, xp: int) -> Sequence[Adventurer]:
        ...

    @abstractmethod
    async def exists_by_id(self, adventurer_id: int) -> bool:
        ...

    @abstractmethod
    async def delete_by_id(self, adventurer_id: int) -> None:
        """Remove an adventurer. Missing identities are ignored."""
        ...
