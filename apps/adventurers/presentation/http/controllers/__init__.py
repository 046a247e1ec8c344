"""HTTP controllers (routers)."""

from apps.adventurers.presentation.http.controllers.adventurers import (
    router as adventurers_router,
)
from apps.adventurers.presentation.http.controllers.health import router as health_router

__all__ = ["adventurers_router", "health_router"]
