"""Audit logging for back-office actions."""

from dpi_admin.core.audit.models import (
    AuditAction,
    AuditLogEntry,
    AuditStatus,
    generate_log_id,
)
from dpi_admin.core.audit.service import AuditLogger, get_audit_logger
from dpi_admin.core.audit.store import AuditStore, MemoryAuditStore, RedisAuditStore


__all__ = [
    "AuditAction",
    "AuditLogEntry",
    "AuditLogger",
    "AuditStatus",
    "AuditStore",
    "MemoryAuditStore",
    "RedisAuditStore",
    "generate_log_id",
    "get_audit_logger",
]
