"""Adventurer HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from apps.adventurers.domain.entities import Adventurer
from apps.adventurers.domain.enums import CharacterClass


class AdventurerRequest(BaseModel):
    """Adventurer body for create (no id) and update (with id).

    Fields are loosely typed on purpose: blank names, unknown classes and
    out-of-range numbers are rejected by the domain with a 400 response.
    """

    id: int | None = Field(None, description="Adventurer ID (omit on create)")
    name: str | None = Field(None, description="Adventurer name")
    character_class: str | None = Field(
        None,
        alias="class",
        description="Character class, e.g. MAGE (case-insensitive)",
    )
    level: int | None = Field(None, description="Level (defaults to 1)")
    xp: int | None = Field(None, description="Experience points (defaults to 0)")

    model_config = {"populate_by_name": True}

    def to_entity(self) -> Adventurer:
        """Build a validated Adventurer; raises InvalidArgumentError."""
        return Adventurer(
            id=self.id,
            name=self.name,
            character_class=CharacterClass.parse(self.character_class),
            level=1 if self.level is None else self.level,
            xp=0 if self.xp is None else self.xp,
        )


class AdventurerResponse(BaseModel):
    """Adventurer representation."""

    id: int | None = Field(..., description="Adventurer ID")
    name: str = Field(..., description="Adventurer name")
    character_class: CharacterClass = Field(..., alias="class", description="Character class")
    level: int = Field(..., description="Level")
    xp: int = Field(..., description="Experience points")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_entity(cls, adventurer: Adventurer) -> AdventurerResponse:
        return cls(
            id=adventurer.id,
            name=adventurer.name,
            character_class=adventurer.character_class,
            level=adventurer.level,
            xp=adventurer.xp,
        )
