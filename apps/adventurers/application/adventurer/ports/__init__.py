"""Adventurer Ports."""

from apps.adventurers.application.adventurer.ports.adventurer_repository import (
    AdventurerRepository,
)

__all__ = ["AdventurerRepository"]
