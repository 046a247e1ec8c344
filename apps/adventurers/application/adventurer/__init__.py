"""Adventurer application layer."""

from apps.adventurers.application.adventurer.services.adventurer_service import (
    AdventurerService,
)

__all__ = ["AdventurerService"]
