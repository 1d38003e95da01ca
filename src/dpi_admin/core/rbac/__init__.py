"""Role-based access control for the admin back office."""

from dpi_admin.core.rbac.context import PermissionContext
from dpi_admin.core.rbac.evaluator import (
    get_permissions,
    get_role_color,
    get_role_label,
    has_all_permissions,
    has_any_permission,
    has_permission,
    permission_name,
    resolve_role,
)
from dpi_admin.core.rbac.gate import (
    GateOutcome,
    GateResult,
    LockedAffordance,
    PermissionGate,
)
from dpi_admin.core.rbac.lattice import ROLE_ORDER, LatticeViolation, lattice_violations
from dpi_admin.core.rbac.table import DENY_ALL, ROLE_PERMISSIONS
from dpi_admin.core.rbac.types import (
    Action,
    AdminRole,
    PermissionRecord,
    Resource,
    RolePermissionSet,
)


__all__ = [
    # Types
    "DENY_ALL",
    "ROLE_ORDER",
    "ROLE_PERMISSIONS",
    "Action",
    "AdminRole",
    # Gate
    "GateOutcome",
    "GateResult",
    "LatticeViolation",
    "LockedAffordance",
    # Context
    "PermissionContext",
    "PermissionGate",
    "PermissionRecord",
    "Resource",
    "RolePermissionSet",
    # Evaluator
    "get_permissions",
    "get_role_color",
    "get_role_label",
    "has_all_permissions",
    "has_any_permission",
    "has_permission",
    "lattice_violations",
    "permission_name",
    "resolve_role",
]
