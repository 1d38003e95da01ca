"""Audit log entry schema.

Entries are immutable records of what an admin did in the back office.
"""

import secrets
import string
import time
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from dpi_admin.core.constants import AUDIT_LOG_ID_PREFIX, AUDIT_LOG_ID_SUFFIX_LENGTH


_ID_ALPHABET = string.digits + string.ascii_lowercase


class AuditAction(StrEnum):
    """Back-office actions that are recorded."""

    USER_CREATED = "user_created"
    USER_UPDATED = "user_updated"
    USER_DELETED = "user_deleted"
    USER_STATUS_CHANGED = "user_status_changed"
    NIN_CREATED = "nin_created"
    NIN_UPDATED = "nin_updated"
    NIN_DELETED = "nin_deleted"
    NIN_LINKED = "nin_linked"
    DISBURSEMENT_CREATED = "disbursement_created"
    DISBURSEMENT_APPROVED = "disbursement_approved"
    ANNOUNCEMENT_CREATED = "announcement_created"
    ANNOUNCEMENT_UPDATED = "announcement_updated"
    ANNOUNCEMENT_DELETED = "announcement_deleted"
    POLL_CREATED = "poll_created"
    POLL_UPDATED = "poll_updated"
    POLL_DELETED = "poll_deleted"
    FEEDBACK_UPDATED = "feedback_updated"
    ADMIN_LOGIN = "admin_login"
    ADMIN_LOGOUT = "admin_logout"
    BULK_IMPORT = "bulk_import"
    BULK_STATUS_UPDATE = "bulk_status_update"
    EXPORT_DATA = "export_data"


class AuditStatus(StrEnum):
    SUCCESS = "success"
    FAILED = "failed"


def generate_log_id() -> str:
    """Return an ID like ``LOG1718000000000k3j9x0a2b``."""
    suffix = "".join(
        secrets.choice(_ID_ALPHABET) for _ in range(AUDIT_LOG_ID_SUFFIX_LENGTH)
    )
    return f"{AUDIT_LOG_ID_PREFIX}{time.time_ns() // 1_000_000}{suffix}"


class AuditLogEntry(BaseModel):
    """One audit log entry.

    Attributes:
        id: Unique entry ID
        timestamp: When the action happened (UTC)
        admin_id: ID of the admin who acted
        admin_name: Display name of the admin at the time
        action: What was done
        resource: Resource area affected (e.g., "beneficiaries")
        resource_id: ID of the affected record, if any
        details: Human-readable description
        ip_address: Client address the request came from
        status: Whether the action succeeded
        metadata: Additional context
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=generate_log_id)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    admin_id: str
    admin_name: str
    action: AuditAction
    resource: str
    resource_id: str | None = None
    details: str
    ip_address: str | None = None
    status: AuditStatus = AuditStatus.SUCCESS
    metadata: dict[str, Any] | None = None
