"""Sign-in state for the client."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from enum import Enum

from pydantic import BaseModel, ConfigDict

from .api import ApiError, PokedexApiClient
from .models import AuthSession, User

Listener = Callable[["AuthState"], None]


class AuthStatus(str, Enum):
    INITIAL = "initial"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


class AuthState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: AuthStatus = AuthStatus.INITIAL
    user: User | None = None
    access_token: str | None = None
    error: str | None = None


class AuthStore:
    """Runs login and registration and hands the issued token to the API client."""

    def __init__(self, api: PokedexApiClient) -> None:
        self._api = api
        self._state = AuthState()
        self._listeners: list[Listener] = []
        self._lock = asyncio.Lock()

    @property
    def state(self) -> AuthState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, **changes: object) -> None:
        self._state = self._state.model_copy(update=changes)
        for listener in list(self._listeners):
            listener(self._state)

    async def login(self, email: str, password: str) -> None:
        await self._authenticate(self._api.login, email, password)

    async def register(self, email: str, password: str) -> None:
        await self._authenticate(self._api.register, email, password)

    async def _authenticate(
        self,
        call: Callable[[str, str], Awaitable[AuthSession]],
        email: str,
        password: str,
    ) -> None:
        if not email or not password:
            return

        async with self._lock:
            self._emit(status=AuthStatus.LOADING, error=None)
            try:
                session = await call(email, password)
            except ApiError as exc:
                self._emit(status=AuthStatus.FAILURE, error=exc.message)
                return

            self._api.set_token(session.access_token)
            self._emit(
                status=AuthStatus.SUCCESS,
                user=session.user,
                access_token=session.access_token,
                error=None,
            )

    def logout(self) -> None:
        self._api.set_token(None)
        self._emit(status=AuthStatus.INITIAL, user=None, access_token=None, error=None)
