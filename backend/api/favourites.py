"""FastAPI router exposing create/read/delete operations for favourites."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from backend.schemas.error import ErrorResponse
from backend.schemas.favourites import FavouriteCreatedResponse, FavouriteListResponse
from backend.services.dependencies import CurrentUser
from backend.services.favourites_service import (
    FavouritesService,
    get_favourites_service,
)
from backend.utils.error_responses import ConflictError

router = APIRouter()

_AUTH_ERRORS = {status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse}}


@router.post(
    "/pokemon/{pokemon_id}/favourite",
    response_model=FavouriteCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        **_AUTH_ERRORS,
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)
async def create_favourite(
    pokemon_id: int,
    current_user: CurrentUser,
    service: FavouritesService = Depends(get_favourites_service),
) -> FavouriteCreatedResponse:
    """Mark a Pokémon as a favourite of the acting user."""

    try:
        record = await service.add_favourite(user_id=current_user.id, pokemon_id=pokemon_id)
    except LookupError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ValueError as exc:
        raise ConflictError(str(exc)) from exc
    return FavouriteCreatedResponse(data=record)


@router.get(
    "/favourites",
    response_model=FavouriteListResponse,
    responses={**_AUTH_ERRORS, status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def read_favourites(
    current_user: CurrentUser,
    service: FavouritesService = Depends(get_favourites_service),
) -> FavouriteListResponse:
    """Return the acting user's favourite Pokémon as ``{id, name}`` pairs."""

    try:
        favourites = await service.list_favourites(user_id=current_user.id)
    except LookupError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return FavouriteListResponse(data=favourites)


@router.delete(
    "/pokemon/{pokemon_id}/favourite",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_AUTH_ERRORS, status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def delete_favourite(
    pokemon_id: int,
    current_user: CurrentUser,
    service: FavouritesService = Depends(get_favourites_service),
) -> Response:
    """Remove a Pokémon from the acting user's favourites."""

    try:
        await service.remove_favourite(user_id=current_user.id, pokemon_id=pokemon_id)
    except LookupError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
