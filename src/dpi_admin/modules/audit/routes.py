"""Audit log API routes.

Reading requires ``auditLogs:read`` and exporting ``auditLogs:export``.
Every export is itself recorded as an ``export_data`` entry.
"""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from dpi_admin.api.dependencies import Audit
from dpi_admin.core.audit import AuditAction, AuditLogEntry, AuditLogger
from dpi_admin.core.audit.service import as_utc
from dpi_admin.core.auth.schemas import AdminSession
from dpi_admin.core.constants import MAX_AUDIT_PAGE_SIZE
from dpi_admin.core.errors import ValidationError
from dpi_admin.core.logging import get_client_ip
from dpi_admin.core.rbac import Action, Resource
from dpi_admin.core.rbac.dependencies import require_permission
from dpi_admin.modules.audit.schemas import AuditLogListResponse


router = APIRouter(prefix="/audit-logs", tags=["audit"])

CanRead = Annotated[
    AdminSession, Depends(require_permission(Resource.AUDIT_LOGS, Action.READ))
]
CanExport = Annotated[
    AdminSession, Depends(require_permission(Resource.AUDIT_LOGS, Action.EXPORT))
]


async def _filtered(
    audit: AuditLogger,
    action: AuditAction | None,
    admin_id: str | None,
    start: datetime | None,
    end: datetime | None,
) -> list[AuditLogEntry]:
    if start and end and as_utc(end) < as_utc(start):
        raise ValidationError(
            "Invalid date range",
            errors=[{"field": "end", "message": "end must not be before start"}],
        )

    if start or end:
        entries = await audit.get_logs_by_date_range(
            start or datetime.min, end or datetime.max
        )
    else:
        entries = await audit.get_logs()

    if action is not None:
        entries = [entry for entry in entries if entry.action == action]
    if admin_id is not None:
        entries = [entry for entry in entries if entry.admin_id == admin_id]
    return entries


@router.get(
    "",
    response_model=AuditLogListResponse,
    summary="List audit log entries",
    description="Entries are returned newest first.",
)
async def list_audit_logs(
    _session: CanRead,
    audit: Audit,
    action: AuditAction | None = None,
    admin_id: str | None = None,
    start: datetime | None = None,
    end: datetime | None = None,
    limit: int = Query(100, ge=1, le=MAX_AUDIT_PAGE_SIZE),
) -> AuditLogListResponse:
    entries = await _filtered(audit, action, admin_id, start, end)
    return AuditLogListResponse(items=entries[:limit], total=len(entries))


@router.get(
    "/export",
    response_model=list[AuditLogEntry],
    summary="Export audit log entries",
)
async def export_audit_logs(
    session: CanExport,
    audit: Audit,
    request: Request,
    action: AuditAction | None = None,
    admin_id: str | None = None,
    start: datetime | None = None,
    end: datetime | None = None,
) -> list[AuditLogEntry]:
    entries = await _filtered(audit, action, admin_id, start, end)

    await audit.log(
        AuditAction.EXPORT_DATA,
        resource=Resource.AUDIT_LOGS.value,
        details=f"Exported {len(entries)} audit log entries",
        admin_id=session.admin_id,
        admin_name=session.full_name,
        ip_address=get_client_ip(request),
        metadata={"rows": len(entries)},
    )
    return entries
