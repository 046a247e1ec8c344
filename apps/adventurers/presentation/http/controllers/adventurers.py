"""Adventurer HTTP Controller."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from apps.adventurers.application.adventurer import AdventurerService
from apps.adventurers.domain.entities import MAX_ID, MIN_ID
from apps.adventurers.domain.enums import CharacterClass
from apps.adventurers.domain.exceptions import AdventurerNotFoundError
from apps.adventurers.presentation.http.schemas import AdventurerRequest, AdventurerResponse
from apps.adventurers.setup.dependencies import get_adventurer_service

router = APIRouter(prefix="/adventurers", tags=["adventurers"])

ServiceDep = Annotated[AdventurerService, Depends(get_adventurer_service)]
AdventurerIdPath = Annotated[int, Path(ge=MIN_ID, le=MAX_ID, description="Adventurer ID")]


@router.get(
    "",
    response_model=list[AdventurerResponse],
    summary="List adventurers",
)
async def list_adventurers(service: ServiceDep) -> list[AdventurerResponse]:
    adventurers = await service.find_all()
    return [AdventurerResponse.from_entity(a) for a in adventurers]


@router.post(
    "",
    response_model=AdventurerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register an adventurer",
    description="New adventurers start at level 1 with 0 XP unless the body says otherwise.",
)
async def create_adventurer(
    request: AdventurerRequest,
    service: ServiceDep,
) -> AdventurerResponse:
    created = await service.create(request.to_entity())
    return AdventurerResponse.from_entity(created)


@router.put(
    "",
    response_model=AdventurerResponse,
    summary="Replace an adventurer",
)
async def update_adventurer(
    request: AdventurerRequest,
    service: ServiceDep,
) -> AdventurerResponse:
    updated = await service.update(request.to_entity())
    return AdventurerResponse.from_entity(updated)


@router.delete(
    "/{adventurer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove an adventurer",
)
async def delete_adventurer(adventurer_id: AdventurerIdPath, service: ServiceDep) -> Response:
    await service.delete(adventurer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/by-name/{name}",
    response_model=AdventurerResponse,
    summary="Find an adventurer by exact name",
)
async def get_adventurer_by_name(name: str, service: ServiceDep) -> AdventurerResponse:
    adventurer = await service.find_by_name(name)
    if adventurer is None:
        raise AdventurerNotFoundError(name=name)
    return AdventurerResponse.from_entity(adventurer)


@router.get(
    "/by-class/{character_class}",
    response_model=list[AdventurerResponse],
    summary="List adventurers of a class",
)
async def list_adventurers_by_class(
    character_class: str,
    service: ServiceDep,
) -> list[AdventurerResponse]:
    adventurers = await service.find_by_class(CharacterClass.parse(character_class))
    return [AdventurerResponse.from_entity(a) for a in adventurers]


@router.get(
    "/by-level/{level}",
    response_model=list[AdventurerResponse],
    summary="List adventurers at a level",
)
async def list_adventurers_by_level(level: int, service: ServiceDep) -> list[AdventurerResponse]:
    adventurers = await service.find_by_level(level)
    return [AdventurerResponse.from_entity(a) for a in adventurers]


@router.get(
    "/by-xp/{xp}",
    response_model=list[AdventurerResponse],
    summary="List adventurers with an exact XP amount",
)
async def list_adventurers_by_xp(xp: int, service: ServiceDep) -> list[AdventurerResponse]:
    adventurers = await service.find_by_xp(xp)
    return [AdventurerResponse.from_entity(a) for a in adventurers]


@router.get(
    "/{adventurer_id}",
    response_model=AdventurerResponse,
    summary="Get an adventurer",
)
async def get_adventurer(
    adventurer_id: AdventurerIdPath,
    service: ServiceDep,
) -> AdventurerResponse:
    adventurer = await service.find_by_id(adventurer_id)
    if adventurer is None:
        raise AdventurerNotFoundError(adventurer_id=adventurer_id)
    return AdventurerResponse.from_entity(adventurer)


@router.put(
    "/{adventurer_id}/quest",
    response_model=AdventurerResponse,
    summary="Send an adventurer on a quest",
    description=(
        "Grants a random 10-20 XP reward. Reaching 100 XP raises the level by one "
        "and resets XP to 0."
    ),
)
async def realize_quest(
    adventurer_id: AdventurerIdPath,
    service: ServiceDep,
) -> AdventurerResponse:
    adventurer = await service.realize_quest(adventurer_id)
    return AdventurerResponse.from_entity(adventurer)
