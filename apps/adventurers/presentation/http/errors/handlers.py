"""Exception Handlers.

Maps domain exceptions to HTTP responses.
"""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from apps.adventurers.domain.exceptions import (
    AdventurerNotFoundError,
    DomainError,
    InvalidArgumentError,
)


def register_exception_handlers(app: FastAPI) -> None:
    """Register the domain error -> HTTP status mapping."""

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": exc.message, "code": "INVALID_ARGUMENT"},
        )

    @app.exception_handler(AdventurerNotFoundError)
    async def adventurer_not_found_handler(request: Request, exc: AdventurerNotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": exc.message, "code": "ADVENTURER_NOT_FOUND"},
        )

    # Fallback for DomainError subclasses without a dedicated handler
    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": exc.message, "code": "DOMAIN_ERROR"},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": "Invalid request",
                "code": "INVALID_ARGUMENT",
                "errors": jsonable_encoder(exc.errors()),
            },
        )
