"""Admin authentication: accounts, access tokens and sessions.

Dependencies, service and routes import the shared API dependencies, so
they are imported from their own modules rather than re-exported here.
"""

from dpi_admin.core.auth.accounts import AdminAccount, AdminDirectory
from dpi_admin.core.auth.backend import (
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from dpi_admin.core.auth.schemas import AdminSession, LoginRequest, TokenResponse


__all__ = [
    # Accounts
    "AdminAccount",
    "AdminDirectory",
    # Schemas
    "AdminSession",
    "LoginRequest",
    "TokenResponse",
    # Token utilities
    "create_access_token",
    "decode_token",
    # Password utilities
    "hash_password",
    "verify_password",
]
