"""Registration, login and token resolution for API users."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.db.models import User
from backend.schemas.auth import Credentials, TokenResponse, UserCreate, UserRead
from backend.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)


class EmailAlreadyRegisteredError(ValueError):
    def __init__(self, email: str) -> None:
        super().__init__(f"Email {email} is already registered")


class AuthenticationError(Exception):
    """Credentials or bearer token could not be validated."""


class AuthService:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_user_by_id(self, user_id: int) -> User | None:
        result = await self._session.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_user_by_email(self, email: str) -> User | None:
        result = await self._session.execute(
            select(User).where(User.email == email.lower())
        )
        return result.scalar_one_or_none()

    async def register(self, payload: UserCreate) -> TokenResponse:
        email = payload.email.lower()
        if await self.get_user_by_email(email) is not None:
            raise EmailAlreadyRegisteredError(email)

        user = User(email=email, hashed_password=hash_password(payload.password))
        self._session.add(user)
        try:
            await self._session.commit()
        except IntegrityError as exc:
            await self._session.rollback()
            raise EmailAlreadyRegisteredError(email) from exc

        logger.info("Registered user %s", user.id)
        return self._issue_token(user)

    async def login(self, payload: Credentials) -> TokenResponse:
        user = await self.get_user_by_email(payload.email)
        if user is None or not verify_password(payload.password, user.hashed_password):
            raise AuthenticationError("Incorrect email or password")
        return self._issue_token(user)

    async def resolve_token(self, token: str) -> User:
        """Return the user a bearer token was issued to."""

        payload = decode_access_token(token)
        if payload is None:
            raise AuthenticationError("Invalid or expired token")
        try:
            user_id = int(payload["sub"])
        except (KeyError, TypeError, ValueError) as exc:
            raise AuthenticationError("Invalid token payload") from exc

        user = await self.get_user_by_id(user_id)
        if user is None:
            raise AuthenticationError("Token references an unknown user")
        return user

    @staticmethod
    def _issue_token(user: User) -> TokenResponse:
        return TokenResponse(
            access_token=create_access_token(str(user.id)),
            user=UserRead.model_validate(user),
        )
