"""Permission model endpoints."""

from dpi_admin.modules.rbac.routes import router


__all__ = ["router"]
