"""Integration tests for audit log endpoints."""

from datetime import UTC, datetime, timedelta

import pytest
from httpx import AsyncClient

from dpi_admin.core.audit import AuditAction, AuditLogger


pytestmark = pytest.mark.integration


@pytest.fixture
async def seeded(audit_logger: AuditLogger) -> AuditLogger:
    await audit_logger.log(
        AuditAction.POLL_CREATED,
        resource="polls",
        details="Created poll",
        admin_id="ADM001",
        admin_name="Super Admin",
    )
    await audit_logger.log(
        AuditAction.NIN_UPDATED,
        resource="nin",
        details="Updated NIN record",
        admin_id="ADM002",
        admin_name="Moderator User",
        resource_id="NIN123",
    )
    return audit_logger


class TestListAuditLogs:
    """Tests for GET /api/v1/audit-logs."""

    async def test_requires_authentication(self, client: AsyncClient):
        response = await client.get("/api/v1/audit-logs")
        assert response.status_code == 401

    async def test_viewer_is_denied(
        self, client: AsyncClient, viewer_headers: dict[str, str]
    ):
        response = await client.get("/api/v1/audit-logs", headers=viewer_headers)

        assert response.status_code == 403
        data = response.json()
        assert data["required_permission"] == "auditLogs:read"
        assert data["role"] == "viewer"

    async def test_moderator_can_read(
        self,
        client: AsyncClient,
        moderator_headers: dict[str, str],
        seeded: AuditLogger,
    ):
        response = await client.get("/api/v1/audit-logs", headers=moderator_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [item["action"] for item in data["items"]] == [
            "nin_updated",
            "poll_created",
        ]

    async def test_filters(
        self,
        client: AsyncClient,
        moderator_headers: dict[str, str],
        seeded: AuditLogger,
    ):
        by_action = await client.get(
            "/api/v1/audit-logs",
            params={"action": "poll_created"},
            headers=moderator_headers,
        )
        by_admin = await client.get(
            "/api/v1/audit-logs",
            params={"admin_id": "ADM002"},
            headers=moderator_headers,
        )

        assert by_action.json()["total"] == 1
        assert by_admin.json()["items"][0]["resource_id"] == "NIN123"

    async def test_date_range(
        self,
        client: AsyncClient,
        moderator_headers: dict[str, str],
        seeded: AuditLogger,
    ):
        tomorrow = datetime.now(UTC) + timedelta(days=1)

        upcoming = await client.get(
            "/api/v1/audit-logs",
            params={"start": tomorrow.strftime("%Y-%m-%dT%H:%M:%SZ")},
            headers=moderator_headers,
        )
        past = await client.get(
            "/api/v1/audit-logs",
            params={"end": tomorrow.strftime("%Y-%m-%dT%H:%M:%SZ")},
            headers=moderator_headers,
        )

        assert upcoming.json()["total"] == 0
        assert past.json()["total"] == 2

    async def test_inverted_date_range(
        self, client: AsyncClient, moderator_headers: dict[str, str]
    ):
        response = await client.get(
            "/api/v1/audit-logs",
            params={"start": "2024-02-01T00:00:00", "end": "2024-01-01T00:00:00"},
            headers=moderator_headers,
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "end"

    async def test_limit(
        self,
        client: AsyncClient,
        moderator_headers: dict[str, str],
        seeded: AuditLogger,
    ):
        response = await client.get(
            "/api/v1/audit-logs", params={"limit": 1}, headers=moderator_headers
        )

        assert len(response.json()["items"]) == 1
        assert response.json()["total"] == 2

    async def test_unknown_action_filter(
        self, client: AsyncClient, moderator_headers: dict[str, str]
    ):
        response = await client.get(
            "/api/v1/audit-logs",
            params={"action": "poll_archived"},
            headers=moderator_headers,
        )
        assert response.status_code == 422


class TestExportAuditLogs:
    """Tests for GET /api/v1/audit-logs/export."""

    async def test_moderator_cannot_export(
        self, client: AsyncClient, moderator_headers: dict[str, str]
    ):
        response = await client.get(
            "/api/v1/audit-logs/export", headers=moderator_headers
        )

        assert response.status_code == 403
        assert response.json()["required_permission"] == "auditLogs:export"

    async def test_super_admin_export_is_audited(
        self,
        client: AsyncClient,
        super_admin_headers: dict[str, str],
        seeded: AuditLogger,
    ):
        response = await client.get(
            "/api/v1/audit-logs/export", headers=super_admin_headers
        )

        assert response.status_code == 200
        assert len(response.json()) == 2

        [export] = await seeded.get_logs_by_action(AuditAction.EXPORT_DATA)
        assert export.admin_id == "ADM001"
        assert export.resource == "auditLogs"
        assert export.metadata == {"rows": 2}
