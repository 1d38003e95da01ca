"""Audit log endpoints."""

from dpi_admin.modules.audit.routes import router


__all__ = ["router"]
