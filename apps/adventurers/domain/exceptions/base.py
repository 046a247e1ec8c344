"""Base domain exceptions."""

from __future__ import annotations


class DomainError(Exception):
    """Base exception for the adventurer domain."""

    def __init__(self, message: str = "Domain error occurred") -> None:
        self.message = message
        super().__init__(message)
