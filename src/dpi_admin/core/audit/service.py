"""Audit logger for back-office actions.

Usage:
    audit = AuditLogger(MemoryAuditStore(capacity=1000))
    await audit.log(
        AuditAction.POLL_CREATED,
        resource="polls",
        details="Created poll 'Budget priorities'",
        admin_id="ADM001",
        admin_name="Super Admin",
        resource_id="POLL42",
    )
"""

from datetime import UTC, datetime
from functools import lru_cache
from typing import Any

import structlog

from dpi_admin.config import settings
from dpi_admin.core.audit.models import AuditAction, AuditLogEntry, AuditStatus
from dpi_admin.core.audit.store import AuditStore, MemoryAuditStore, RedisAuditStore


log = structlog.get_logger()


def as_utc(value: datetime | str) -> datetime:
    """Parse ``value`` and treat naive datetimes as UTC."""
    moment = datetime.fromisoformat(value) if isinstance(value, str) else value
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


class AuditLogger:
    """Append-only log of admin actions, newest first."""

    def __init__(self, store: AuditStore) -> None:
        self.store = store

    async def log(
        self,
        action: AuditAction | str,
        resource: str,
        details: str,
        admin_id: str,
        admin_name: str,
        resource_id: str | None = None,
        metadata: dict[str, Any] | None = None,
        ip_address: str | None = None,
        status: AuditStatus | str = AuditStatus.SUCCESS,
    ) -> AuditLogEntry:
        """Record an action.

        Args:
            action: What was done
            resource: Resource area affected
            details: Human-readable description
            admin_id: ID of the acting admin
            admin_name: Display name of the acting admin
            resource_id: ID of the affected record
            metadata: Additional context
            ip_address: Client address
            status: Outcome of the action

        Returns:
            The stored entry

        Raises:
            ValueError: If ``action`` or ``status`` is not a known value
        """
        entry = AuditLogEntry(
            admin_id=admin_id,
            admin_name=admin_name,
            action=AuditAction(action),
            resource=resource,
            resource_id=resource_id,
            details=details,
            ip_address=ip_address,
            status=AuditStatus(status),
            metadata=metadata,
        )
        await self.store.push(entry)

        log.info(
            "audit_log_created",
            log_id=entry.id,
            action=entry.action.value,
            resource=resource,
            resource_id=resource_id,
            admin_id=admin_id,
            status=entry.status.value,
        )
        return entry

    async def log_login(
        self,
        admin_id: str,
        admin_name: str,
        success: bool,
        ip_address: str | None = None,
        failure_reason: str | None = None,
    ) -> AuditLogEntry:
        """Record a login attempt."""
        return await self.log(
            AuditAction.ADMIN_LOGIN,
            resource="auth",
            details=(
                f"{admin_name} logged in"
                if success
                else f"Failed login attempt for {admin_name}"
            ),
            admin_id=admin_id,
            admin_name=admin_name,
            ip_address=ip_address,
            status=AuditStatus.SUCCESS if success else AuditStatus.FAILED,
            metadata={"failure_reason": failure_reason} if failure_reason else None,
        )

    async def log_logout(
        self,
        admin_id: str,
        admin_name: str,
        ip_address: str | None = None,
    ) -> AuditLogEntry:
        """Record a logout."""
        return await self.log(
            AuditAction.ADMIN_LOGOUT,
            resource="auth",
            details=f"{admin_name} logged out",
            admin_id=admin_id,
            admin_name=admin_name,
            ip_address=ip_address,
        )

    async def get_logs(self) -> list[AuditLogEntry]:
        """Return all retained entries, newest first."""
        return await self.store.entries()

    async def clear_logs(self) -> None:
        await self.store.clear()
        log.warning("audit_logs_cleared")

    async def get_logs_by_action(self, action: AuditAction | str) -> list[AuditLogEntry]:
        return [entry for entry in await self.get_logs() if entry.action == action]

    async def get_logs_by_admin(self, admin_id: str) -> list[AuditLogEntry]:
        return [entry for entry in await self.get_logs() if entry.admin_id == admin_id]

    async def get_logs_by_date_range(
        self,
        start: datetime | str,
        end: datetime | str,
    ) -> list[AuditLogEntry]:
        """Return entries with ``start <= timestamp <= end``.

        Naive datetimes and ISO strings without an offset are read as UTC.
        """
        lower, upper = as_utc(start), as_utc(end)
        return [
            entry
            for entry in await self.get_logs()
            if lower <= entry.timestamp <= upper
        ]


def build_audit_store() -> AuditStore:
    """Create the audit store selected by AUDIT_BACKEND."""
    if settings.audit_backend == "redis":
        return RedisAuditStore(
            key=settings.audit_redis_key,
            capacity=settings.audit_log_capacity,
        )
    return MemoryAuditStore(capacity=settings.audit_log_capacity)


@lru_cache
def get_audit_logger() -> AuditLogger:
    """Process-wide audit logger."""
    return AuditLogger(build_audit_store())
