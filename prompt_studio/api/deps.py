"""Shared FastAPI dependencies for API routes."""

from __future__ import annotations

from fastapi import Cookie, Depends, Header, HTTPException, Request, status
from sqlalchemy.orm import Session

from prompt_studio.db.session import get_db  # re-export
from prompt_studio.models.user import STATUS_ACTIVE, User
from prompt_studio.services.auth import get_user_from_token

__all__ = [
    "get_db",
    "get_current_user",
    "require_auth",
    "require_admin",
]


# Cookie name for browser sessions
AUTH_COOKIE = "access_token"


def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
    authorization: str | None = Header(None),
    access_token: str | None = Cookie(None),
) -> User | None:
    """Return the authenticated user or None.

    Checks (in order):
    1. Authorization: Bearer <token> header
    2. access_token cookie
    """
    token: str | None = None

    # Check Authorization header
    if authorization and authorization.startswith("Bearer "):
        token = authorization[len("Bearer ") :]

    # Fall back to cookie
    if token is None and access_token:
        token = access_token

    if token is None:
        return None

    return get_user_from_token(db, token)


def require_auth(
    request: Request,
    user: User | None = Depends(get_current_user),
) -> User:
    """Dependency that requires authentication. Returns 401 when missing."""
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user


def require_admin(user: User = Depends(require_auth)) -> User:
    """Dependency that requires an active admin account. Returns 403 otherwise."""
    if user.status != STATUS_ACTIVE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is disabled",
        )
    if not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin privileges required",
        )
    return user
