"""Tests for audit log entry models."""

import re

import pytest
from pydantic import ValidationError

from dpi_admin.core.audit import AuditAction, AuditLogEntry, AuditStatus, generate_log_id


pytestmark = pytest.mark.unit


class TestGenerateLogId:
    def test_format(self):
        assert re.fullmatch(r"LOG\d{13}[0-9a-z]{9}", generate_log_id())

    def test_unique(self):
        assert len({generate_log_id() for _ in range(1000)}) == 1000


class TestAuditLogEntry:
    def test_defaults(self):
        entry = AuditLogEntry(
            admin_id="ADM001",
            admin_name="Super Admin",
            action=AuditAction.EXPORT_DATA,
            resource="beneficiaries",
            details="Exported 20 beneficiaries",
        )

        assert entry.status is AuditStatus.SUCCESS
        assert entry.resource_id is None
        assert entry.metadata is None
        assert entry.id.startswith("LOG")

    def test_is_frozen(self):
        entry = AuditLogEntry(
            admin_id="ADM001",
            admin_name="Super Admin",
            action="poll_deleted",
            resource="polls",
            details="Deleted poll",
        )

        with pytest.raises(ValidationError):
            entry.details = "Edited"  # type: ignore[misc]

    def test_json_round_trip_keeps_action(self):
        entry = AuditLogEntry(
            admin_id="ADM002",
            admin_name="Moderator User",
            action=AuditAction.BULK_STATUS_UPDATE,
            resource="beneficiaries",
            details="Updated 12 records",
            metadata={"count": 12},
        )

        restored = AuditLogEntry.model_validate_json(entry.model_dump_json())
        assert restored == entry
