"""Authentication service for admin login and logout."""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import Depends

from dpi_admin.api.dependencies import Audit, Directory, Revocations
from dpi_admin.core.audit import AuditLogger
from dpi_admin.core.auth.accounts import AdminAccount, AdminDirectory
from dpi_admin.core.auth.backend import create_access_token
from dpi_admin.core.auth.revocation import RevocationList
from dpi_admin.core.auth.schemas import AdminSession
from dpi_admin.core.errors import UnauthorizedError


class AuthService:
    """Service for admin authentication.

    Every login attempt and logout is written to the audit log.
    """

    def __init__(
        self,
        directory: AdminDirectory,
        revocations: RevocationList,
        audit: AuditLogger,
    ) -> None:
        self.directory = directory
        self.revocations = revocations
        self.audit = audit

    async def login(
        self,
        username: str,
        password: str,
        ip_address: str | None = None,
    ) -> tuple[AdminAccount, str]:
        """Authenticate an admin and issue an access token.

        Args:
            username: Login name
            password: Plain text password
            ip_address: Client address for the audit log

        Returns:
            Tuple of (account, access_token)

        Raises:
            UnauthorizedError: If the credentials are invalid
        """
        account = self.directory.authenticate(username, password)
        if account is None:
            await self.audit.log_login(
                admin_id=username,
                admin_name=username,
                success=False,
                ip_address=ip_address,
                failure_reason="invalid_credentials",
            )
            raise UnauthorizedError(
                "Invalid username or password",
                error_code="invalid_credentials",
            )

        token = create_access_token(account)
        await self.audit.log_login(
            admin_id=account.id,
            admin_name=account.full_name,
            success=True,
            ip_address=ip_address,
        )
        return account, token

    async def logout(
        self,
        session: AdminSession,
        ip_address: str | None = None,
    ) -> None:
        """Revoke the session's token until it expires."""
        if session.exp > datetime.now(UTC):
            await self.revocations.revoke(session.jti, session.exp)

        await self.audit.log_logout(
            admin_id=session.admin_id,
            admin_name=session.full_name,
            ip_address=ip_address,
        )


def get_auth_service(
    directory: Directory,
    revocations: Revocations,
    audit: Audit,
) -> AuthService:
    return AuthService(directory, revocations, audit)


AuthSvc = Annotated[AuthService, Depends(get_auth_service)]
