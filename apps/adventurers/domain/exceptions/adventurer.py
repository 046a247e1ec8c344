"""Adventurer lookup exceptions."""

from __future__ import annotations

from apps.adventurers.domain.exceptions.base import DomainError


class AdventurerNotFoundError(DomainError):
    """Raised when a referenced adventurer does not exist."""

    def __init__(self, adventurer_id: int | None = None, name: str | None = None) -> None:
        self.adventurer_id = adventurer_id
        self.name = name
        if adventurer_id is not None:
            message = f"Adventurer not found with id: {adventurer_id}"
        elif name:
            message = f"Adventurer not found: {name}"
        else:
            message = "Adventurer not found"
        super().__init__(message)
