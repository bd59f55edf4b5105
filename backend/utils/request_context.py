"""Request-scoped context metadata.

The application assigns a unique identifier to every inbound HTTP call and
keeps it in a ``ContextVar`` so middleware, exception handlers and log lines
can all reach it without threading it through call signatures.
"""

from __future__ import annotations

from contextvars import ContextVar, Token

__all__ = [
    "REQUEST_ID_CONTEXT",
    "clear_request_id",
    "get_request_id",
    "set_request_id",
]

REQUEST_ID_CONTEXT: ContextVar[str] = ContextVar("request_id", default="")


def set_request_id(request_id: str) -> Token[str]:
    """Store ``request_id`` for the active task and return the reset token."""

    return REQUEST_ID_CONTEXT.set(request_id)


def get_request_id() -> str:
    """Return the current request identifier, or an empty string."""

    return REQUEST_ID_CONTEXT.get()


def clear_request_id(token: Token[str] | None = None) -> None:
    """Reset the request identifier.

    With a token this mirrors ``ContextVar.reset``; without one the value is
    set back to an empty string.
    """

    if token is not None:
        REQUEST_ID_CONTEXT.reset(token)
    else:
        REQUEST_ID_CONTEXT.set("")
