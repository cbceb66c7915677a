"""
Auth dependencies for protected FastAPI routes.
"""

from __future__ import annotations

from fastapi import Header, HTTPException, status

from core import config

from . import service


def _extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing Authorization header.",
        )

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid Authorization header format.",
        )

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization must be: Bearer <token>.",
        )
    return token


async def require_api_token(authorization: str | None = Header(default=None)) -> None:
    """
    Gate a route behind the static API token.

    Open when no `API_TOKEN` is configured.
    """
    expected = config.api_token()
    if expected is None:
        return None
    token = _extract_bearer_token(authorization)
    service.check_api_token(token, expected)
