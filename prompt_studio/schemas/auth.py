"""Login and current-user schemas for studio accounts."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class UserRead(BaseModel):
    """Account as shown to the admin UI; never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str
    status: str
    is_admin: bool


class TokenResponse(BaseModel):
    """Bearer token issued to an active account, with the account it belongs to."""

    access_token: str
    token_type: str = "bearer"
    user: UserRead
