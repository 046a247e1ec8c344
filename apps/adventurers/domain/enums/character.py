"""Character Class Enum."""

from __future__ import annotations

from enum import Enum

from apps.adventurers.domain.exceptions import InvalidArgumentError


class CharacterClass(str, Enum):
    """Playable adventurer archetypes.

    The value is the canonical uppercase name used on the wire and in storage.
    """

    MAGE = "MAGE"
    WARRIOR = "WARRIOR"
    ROGUE = "ROGUE"
    WARLOCK = "WARLOCK"
    CLERIC = "CLERIC"
    BARD = "BARD"
    ARCHER = "ARCHER"

    @classmethod
    def parse(cls, value: str | CharacterClass | None) -> CharacterClass:
        """Parse a class name, ignoring case.

        Accepts the canonical names and the guild's legacy Portuguese names
        (``MAGO``, ``GUERREIRO``, ...).

        Args:
            value: raw class name

        Returns:
            CharacterClass member

        Raises:
            InvalidArgumentError: empty or unknown name
        """
        if isinstance(value, cls):
            return value
        if value is None or not str(value).strip():
            raise InvalidArgumentError("Character class is required")

        key = str(value).strip().upper()
        member = cls.__members__.get(key) or LEGACY_CLASS_NAMES.get(key)
        if member is None:
            raise InvalidArgumentError(f"Invalid character class: {value}")
        return member

    def __str__(self) -> str:
        return self.value


# Original guild roster names
LEGACY_CLASS_NAMES: dict[str, CharacterClass] = {
    "MAGO": CharacterClass.MAGE,
    "GUERREIRO": CharacterClass.WARRIOR,
    "LADINO": CharacterClass.ROGUE,
    "BRUXO": CharacterClass.WARLOCK,
    "CLERIGO": CharacterClass.CLERIC,
    "CLÉRIGO": CharacterClass.CLERIC,
    "BARDO": CharacterClass.BARD,
    "ARQUEIRO": CharacterClass.ARCHER,
}
