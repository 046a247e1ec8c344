"""Domain Exceptions."""

from apps.adventurers.domain.exceptions.adventurer import AdventurerNotFoundError
from apps.adventurers.domain.exceptions.base import DomainError
from apps.adventurers.domain.exceptions.validation import InvalidArgumentError

__all__ = [
    "DomainError",
    "AdventurerNotFoundError",
    "InvalidArgumentError",
]
