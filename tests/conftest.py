"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator, Callable

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from dpi_admin.core.audit import AuditLogger, MemoryAuditStore, get_audit_logger
from dpi_admin.core.auth import AdminAccount, AdminDirectory, create_access_token
from dpi_admin.core.auth.accounts import demo_accounts, get_admin_directory
from dpi_admin.core.auth.revocation import MemoryRevocationList, get_revocation_list
from dpi_admin.core.rbac import AdminRole
from dpi_admin.main import create_app
from tests.factories import AdminAccountFactory


@pytest.fixture(scope="session")
def directory() -> AdminDirectory:
    """Directory holding the three development accounts.

    Session scoped because building it hashes three passwords.
    """
    return AdminDirectory(demo_accounts())


@pytest.fixture
def audit_logger() -> AuditLogger:
    """Fresh in-memory audit logger for each test."""
    return AuditLogger(MemoryAuditStore(capacity=1000))


@pytest.fixture
def revocations() -> MemoryRevocationList:
    return MemoryRevocationList()


@pytest.fixture
async def app(
    directory: AdminDirectory,
    audit_logger: AuditLogger,
    revocations: MemoryRevocationList,
) -> AsyncGenerator[FastAPI, None]:
    """Create test application instance."""
    application = create_app()

    application.dependency_overrides[get_audit_logger] = lambda: audit_logger
    application.dependency_overrides[get_admin_directory] = lambda: directory
    application.dependency_overrides[get_revocation_list] = lambda: revocations

    yield application

    application.dependency_overrides.clear()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


# ============================================================
# Admin and token fixtures
# ============================================================


def _bearer(account: AdminAccount) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(account)}"}


@pytest.fixture
def headers_for() -> Callable[[AdminRole], dict[str, str]]:
    """Build Authorization headers for a fresh admin with the given role.

    Usage:
        response = await client.get(url, headers=headers_for(AdminRole.VIEWER))
    """

    def build(role: AdminRole) -> dict[str, str]:
        return _bearer(AdminAccountFactory.build(role=role))

    return build


@pytest.fixture
def super_admin() -> AdminAccount:
    return AdminAccountFactory.build(
        id="ADM001", full_name="Super Admin", role=AdminRole.SUPER_ADMIN
    )


@pytest.fixture
def super_admin_headers(super_admin: AdminAccount) -> dict[str, str]:
    return _bearer(super_admin)


@pytest.fixture
def moderator_headers(
    headers_for: Callable[[AdminRole], dict[str, str]],
) -> dict[str, str]:
    return headers_for(AdminRole.MODERATOR)


@pytest.fixture
def viewer_headers(
    headers_for: Callable[[AdminRole], dict[str, str]],
) -> dict[str, str]:
    return headers_for(AdminRole.VIEWER)
