"""Registration and login endpoints issuing bearer tokens."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from backend.schemas.auth import Credentials, TokenResponse, UserCreate, UserRead
from backend.services.auth_service import (
    AuthenticationError,
    AuthService,
    EmailAlreadyRegisteredError,
)
from backend.services.dependencies import CurrentUser, get_auth_service
from backend.utils.error_responses import ConflictError

router = APIRouter()


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: UserCreate,
    service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    try:
        return await service.register(payload)
    except EmailAlreadyRegisteredError as exc:
        raise ConflictError(str(exc)) from exc


@router.post("/login", response_model=TokenResponse)
async def login(
    payload: Credentials,
    service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    try:
        return await service.login(payload)
    except AuthenticationError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


@router.get("/me", response_model=UserRead)
async def me(current_user: CurrentUser) -> UserRead:
    return UserRead.model_validate(current_user)
