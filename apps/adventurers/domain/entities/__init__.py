"""Domain Entities."""

from apps.adventurers.domain.entities.adventurer import (
    MAX_ID,
    MAX_LEVEL,
    MAX_NAME_LENGTH,
    MAX_XP,
    MIN_ID,
    MIN_LEVEL,
    MIN_XP,
    Adventurer,
)

__all__ = [
    "Adventurer",
    "MAX_ID",
    "MAX_LEVEL",
    "MAX_NAME_LENGTH",
    "MAX_XP",
    "MIN_ID",
    "MIN_LEVEL",
    "MIN_XP",
]
