"""Validation exceptions."""

from __future__ import annotations

from apps.adventurers.domain.exceptions.base import DomainError


class InvalidArgumentError(DomainError):
    """Malformed, missing or out-of-domain input."""

    def __init__(self, message: str = "Invalid argument") -> None:
        super().__init__(message)
