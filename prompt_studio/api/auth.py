"""Studio account routes: login, logout and the current account.

Only active accounts can sign in or resolve /me; disabled accounts keep
their rows (and their names on prompt versions) but lose access.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from prompt_studio.api.deps import AUTH_COOKIE, get_db, require_auth
from prompt_studio.models.user import STATUS_ACTIVE, User
from prompt_studio.schemas.auth import LoginRequest, TokenResponse, UserRead
from prompt_studio.services.auth import (
    ACCESS_TOKEN_EXPIRE_HOURS,
    authenticate_user,
    create_access_token,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _account_disabled() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Account is disabled",
    )


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
) -> TokenResponse:
    """Exchange credentials for a JWT; the token is also set as an httponly cookie."""
    user = authenticate_user(db, body.username, body.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )
    if user.status != STATUS_ACTIVE:
        logger.warning("Login refused for %s account: %s", user.status, user.username)
        raise _account_disabled()

    token = create_access_token(data={"sub": user.username, "role": user.role})
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        samesite="lax",
        max_age=ACCESS_TOKEN_EXPIRE_HOURS * 60 * 60,
        path="/",
    )
    logger.info("User logged in: %s (%s)", user.username, user.role)
    return TokenResponse(access_token=token, user=UserRead.model_validate(user))


@router.post("/logout")
def logout(response: Response) -> dict:
    """Clear the session cookie; bearer tokens simply expire."""
    response.delete_cookie(key=AUTH_COOKIE, path="/")
    return {"detail": "Logged out"}


@router.get("/me", response_model=UserRead)
def me(current_user: User = Depends(require_auth)) -> UserRead:
    """Current account, including whether it may manage prompt versions."""
    if current_user.status != STATUS_ACTIVE:
        raise _account_disabled()
    return UserRead.model_validate(current_user)
