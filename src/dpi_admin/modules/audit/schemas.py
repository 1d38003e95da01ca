"""Response schemas for the audit log endpoints."""

from pydantic import BaseModel

from dpi_admin.core.audit import AuditLogEntry


class AuditLogListResponse(BaseModel):
    """A page of audit entries, newest first.

    Attributes:
        items: The returned entries
        total: Number of entries matching the filters before ``limit``
    """

    items: list[AuditLogEntry]
    total: int
