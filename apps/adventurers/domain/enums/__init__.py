"""Domain Enums."""

from apps.adventurers.domain.enums.character import LEGACY_CLASS_NAMES, CharacterClass

__all__ = ["CharacterClass", "LEGACY_CLASS_NAMES"]
