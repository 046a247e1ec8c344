"""HTTP Schemas."""

from apps.adventurers.presentation.http.schemas.adventurer import (
    AdventurerRequest,
    AdventurerResponse,
)

__all__ = ["AdventurerRequest", "AdventurerResponse"]
