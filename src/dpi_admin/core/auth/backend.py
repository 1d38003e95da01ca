"""Password hashing and access token handling.

Access tokens are signed JWTs that carry the admin's role. The role is
fixed for the lifetime of the token; logging in again is the only way to
change it.
"""

import secrets
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from dpi_admin.config import settings
from dpi_admin.core.auth.schemas import AdminSession
from dpi_admin.core.constants import ACCESS_TOKEN_JTI_LENGTH, BCRYPT_ROUNDS


if TYPE_CHECKING:
    from dpi_admin.core.auth.accounts import AdminAccount


pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its bcrypt hash."""
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(
    account: "AdminAccount",
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed access token for an admin account.

    Args:
        account: The authenticated admin
        expires_delta: Optional custom lifetime

    Returns:
        Encoded JWT
    """
    now = datetime.now(UTC)
    expire = now + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )

    to_encode: dict[str, Any] = {
        "sub": account.id,
        "name": account.full_name,
        "email": account.email,
        "role": account.role.value,
        "type": "access",
        "iat": now,
        "exp": expire,
        "jti": secrets.token_urlsafe(ACCESS_TOKEN_JTI_LENGTH),
    }

    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> AdminSession | None:
    """Decode and validate an access token.

    Returns:
        The session if the token is valid, None if it is malformed, expired,
        badly signed or not an access token
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        return None

    admin_id = payload.get("sub")
    jti = payload.get("jti")
    exp = payload.get("exp")
    if not admin_id or not jti or exp is None:
        return None
    if payload.get("type", "access") != "access":
        return None

    return AdminSession(
        admin_id=admin_id,
        full_name=payload.get("name") or admin_id,
        email=payload.get("email") or "",
        role=payload.get("role"),
        jti=jti,
        exp=datetime.fromtimestamp(exp, tz=UTC),
    )
