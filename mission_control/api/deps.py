"""Shared request dependencies."""

from __future__ import annotations

from typing import Annotated

from fastapi import Header, HTTPException


def get_user_id(x_user_id: Annotated[str | None, Header()] = None) -> str:
    """Return the caller's user ID from the ``X-User-Id`` header.

    The header is set by the authenticating proxy in front of this service.
    """
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return x_user_id
