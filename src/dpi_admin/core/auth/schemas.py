"""Admin session and authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class AdminSession(BaseModel):
    """An authenticated admin session decoded from an access token.

    ``role`` is kept as the raw tag from the token; the permission context
    decides how to treat a tag that is not a defined role.

    Attributes:
        admin_id: The admin's ID (e.g., "ADM001")
        full_name: Display name
        email: Login name or email
        role: Role tag carried by the session
        jti: Token ID, used for revocation
        exp: Token expiration time
    """

    admin_id: str
    full_name: str
    email: str
    role: str | None = None
    jti: str
    exp: datetime


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class AdminResponse(BaseModel):
    """Public view of the logged-in admin."""

    id: str
    full_name: str
    email: str
    role: str | None
    role_label: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    admin: AdminResponse
