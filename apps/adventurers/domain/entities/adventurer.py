"""Adventurer Entity.

A guild member tracked by the service.
"""

from __future__ import annotations

from dataclasses import dataclass

from apps.adventurers.domain.enums import CharacterClass
from apps.adventurers.domain.exceptions import InvalidArgumentError

MIN_LEVEL = 1
MIN_XP = 0

# Column limits of the adventurers table (VARCHAR(120), INTEGER, BIGINT)
MAX_NAME_LENGTH = 120
MAX_LEVEL = 2**31 - 1
MAX_XP = 2**31 - 1
MIN_ID = 1
MAX_ID = 2**63 - 1


def _require_int(value: object, field_name: str) -> int:
    if value is None or isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{field_name} must be an integer")
    return value


def _require_id_range(value: object) -> int:
    adventurer_id = _require_int(value, "Adventurer id")
    if not MIN_ID <= adventurer_id <= MAX_ID:
        raise InvalidArgumentError(f"Adventurer id must be between {MIN_ID} and {MAX_ID}")
    return adventurer_id


@dataclass
class Adventurer:
    """Adventurer entity.

    Self-validating: construction and every mutator keep ``level >= 1`` and
    ``xp >= 0`` within the column limits above. Invalid values are rejected,
    never clamped.

    Attributes:
        name: display name (trimmed, non-empty)
        character_class: archetype
        level: current level
        xp: experience points towards the next level
        id: identity assigned by the store (None before persistence)
    """

    name: str
    character_class: CharacterClass
    level: int = MIN_LEVEL
    xp: int = MIN_XP
    id: int | None = None

    def __post_init__(self) -> None:
        self.rename(self.name)
        self.change_class(self.character_class)
        self.set_level(self.level)
        self.set_xp(self.xp)
        if self.id is not None:
            self.id = _require_id_range(self.id)

    def rename(self, name: str | None) -> None:
        """Rename the adventurer."""
        if name is None or not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError("Adventurer name must not be empty")
        name = name.strip()
        if len(name) > MAX_NAME_LENGTH:
            raise InvalidArgumentError(
                f"Adventurer name must be at most {MAX_NAME_LENGTH} characters"
            )
        self.name = name

    def change_class(self, character_class: CharacterClass | str | None) -> None:
        """Change class. Strings are resolved with CharacterClass.parse."""
        self.character_class = CharacterClass.parse(character_class)

    def set_level(self, level: int | None) -> None:
        level = _require_int(level, "Level")
        if level < MIN_LEVEL:
            raise InvalidArgumentError(f"Level must be greater than or equal to {MIN_LEVEL}")
        if level > MAX_LEVEL:
            raise InvalidArgumentError(f"Level must be at most {MAX_LEVEL}")
        self.level = level

    def set_xp(self, xp: int | None) -> None:
        xp = _require_int(xp, "XP")
        if xp < MIN_XP:
            raise InvalidArgumentError("XP must not be negative")
        if xp > MAX_XP:
            raise InvalidArgumentError(f"XP must be at most {MAX_XP}")
        self.xp = xp

    def assign_id(self, adventurer_id: int) -> None:
        """Record the store-assigned identity. Once set it cannot change."""
        adventurer_id = _require_id_range(adventurer_id)
        if self.id is not None and self.id != adventurer_id:
            raise InvalidArgumentError(
                f"Adventurer already has id {self.id}; cannot reassign to {adventurer_id}"
            )
        self.id = adventurer_id

    @property
    def is_persisted(self) -> bool:
        return self.id is not None
