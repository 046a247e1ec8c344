"""Row to Domain Mappers."""

from __future__ import annotations

from typing import Any, Mapping

from apps.adventurers.domain.entities import Adventurer
from apps.adventurers.domain.enums import CharacterClass


def row_to_adventurer(row: Mapping[str, Any]) -> Adventurer:
    """Convert an adventurers row into an Adventurer entity."""
    return Adventurer(
        id=row["id"],
        name=row["name"],
        character_class=CharacterClass.parse(row["class"]),
        level=row["level"],
        xp=row["xp"],
    )


def adventurer_to_row(adventurer: Adventurer) -> dict[str, Any]:
    """Convert an Adventurer into adventurers column values (id excluded)."""
    return {
        "name": adventurer.name,
        "class": adventurer.character_class.value,
        "level": adventurer.level,
        "xp": adventurer.xp,
    }
