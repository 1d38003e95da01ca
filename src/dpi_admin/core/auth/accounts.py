"""Admin account directory.

Admin identities are provisioned by the external backend; this directory
only holds the accounts this service can authenticate itself. In
development it is seeded with one account per role.
"""

from functools import lru_cache

import structlog
from pydantic import BaseModel

from dpi_admin.config import settings
from dpi_admin.core.auth.backend import hash_password, verify_password
from dpi_admin.core.rbac import AdminRole


logger = structlog.get_logger()


class AdminAccount(BaseModel):
    """An admin who can log in to the back office."""

    id: str
    full_name: str
    email: str
    role: AdminRole
    password_hash: str
    is_active: bool = True


# username, password, id, full name, role
DEMO_ADMINS: tuple[tuple[str, str, str, str, AdminRole], ...] = (
    ("adminuser", "adminpass", "ADM001", "Super Admin", AdminRole.SUPER_ADMIN),
    ("moderator", "mod123", "ADM002", "Moderator User", AdminRole.MODERATOR),
    ("viewer", "view123", "ADM003", "Viewer User", AdminRole.VIEWER),
)


class AdminDirectory:
    """Username -> account lookup with password verification."""

    def __init__(self, accounts: list[AdminAccount] | None = None) -> None:
        self._accounts: dict[str, AdminAccount] = {}
        for account in accounts or []:
            self.add(account)

    def add(self, account: AdminAccount) -> None:
        self._accounts[account.email.lower()] = account

    def get(self, username: str) -> AdminAccount | None:
        return self._accounts.get(username.strip().lower())

    def authenticate(self, username: str, password: str) -> AdminAccount | None:
        """Return the account if the credentials match an active admin."""
        account = self.get(username)
        if account is None or not account.is_active:
            return None
        if not verify_password(password, account.password_hash):
            return None
        return account

    def __len__(self) -> int:
        return len(self._accounts)


def demo_accounts() -> list[AdminAccount]:
    """Build the development accounts, one per role."""
    return [
        AdminAccount(
            id=admin_id,
            full_name=full_name,
            email=username,
            role=role,
            password_hash=hash_password(password),
        )
        for username, password, admin_id, full_name, role in DEMO_ADMINS
    ]


@lru_cache
def get_admin_directory() -> AdminDirectory:
    """Process-wide admin directory."""
    if not settings.seed_demo_admins:
        return AdminDirectory()

    if settings.is_production:
        logger.warning("demo_admins_disabled_in_production")
        return AdminDirectory()

    logger.info("demo_admins_seeded", count=len(DEMO_ADMINS))
    return AdminDirectory(demo_accounts())
