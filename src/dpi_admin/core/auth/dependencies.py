"""FastAPI dependencies for the admin session.

This module provides dependency injection functions for:
- Decoding the bearer token into an admin session
- Requiring an authenticated admin
"""

from typing import Annotated

import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from dpi_admin.api.dependencies import Revocations
from dpi_admin.core.auth.backend import decode_token
from dpi_admin.core.auth.schemas import AdminSession
from dpi_admin.core.errors import UnauthorizedError


logger = structlog.get_logger()

bearer_scheme = HTTPBearer(auto_error=False)

Credentials = Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)]


async def get_optional_session(
    request: Request,
    credentials: Credentials,
    revocations: Revocations,
) -> AdminSession | None:
    """Get the admin session if a valid, unrevoked token was sent.

    Args:
        request: The incoming request
        credentials: Optional bearer token credentials
        revocations: Revoked token list

    Returns:
        The session, or None when there is no usable token
    """
    if not credentials:
        return None

    session = decode_token(credentials.credentials)
    if session is None:
        return None

    if await revocations.is_revoked(session.jti):
        logger.info("revoked_token_used", admin_id=session.admin_id)
        return None

    request.state.admin_id = session.admin_id
    request.state.admin_role = session.role
    structlog.contextvars.bind_contextvars(
        admin_id=session.admin_id,
        role=session.role,
    )
    return session


OptionalSession = Annotated[AdminSession | None, Depends(get_optional_session)]


async def get_current_session(
    credentials: Credentials,
    session: OptionalSession,
) -> AdminSession:
    """Get the admin session, failing when there is none.

    Raises:
        UnauthorizedError: If the token is missing, invalid, expired or revoked
    """
    if not credentials:
        raise UnauthorizedError(
            "Missing authentication token",
            error_code="missing_token",
        )

    if session is None:
        raise UnauthorizedError(
            "Invalid or expired token",
            error_code="invalid_token",
        )

    return session


CurrentSession = Annotated[AdminSession, Depends(get_current_session)]
