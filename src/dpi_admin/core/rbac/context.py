"""Per-request permission context.

Binds the evaluator to the role of the current admin session so callers can
ask ``context.can("polls", "create")`` without threading the role around.
"""

from typing import TYPE_CHECKING, TypeVar

from dpi_admin.core.rbac.evaluator import (
    get_permissions,
    get_role_color,
    get_role_label,
    has_permission,
    resolve_role,
)
from dpi_admin.core.rbac.gate import GateResult, PermissionGate
from dpi_admin.core.rbac.table import DENY_ALL
from dpi_admin.core.rbac.types import Action, AdminRole, Resource, RolePermissionSet


if TYPE_CHECKING:
    from dpi_admin.core.auth.schemas import AdminSession


T = TypeVar("T")

UNKNOWN_ROLE_LABEL = "Unknown"
UNKNOWN_ROLE_COLOR = "bg-muted text-muted-foreground"


class PermissionContext:
    """Permission view of one admin session.

    A missing role is treated as viewer. A role tag that is present but not
    a defined role denies everything.

    Attributes:
        role: The resolved role, or None for an unrecognized tag
        raw_role: The tag as it arrived from the session
    """

    def __init__(self, role: object = None) -> None:
        self.raw_role = role
        self.role: AdminRole | None = resolve_role(role)

    @classmethod
    def from_session(cls, session: "AdminSession | None") -> "PermissionContext":
        """Build a context for ``session``; no session means viewer."""
        return cls(session.role if session else None)

    def can(self, resource: Resource | str, action: Action | str) -> bool:
        """Check a single permission for this session's role."""
        return has_permission(self.role, resource, action)

    @property
    def permissions(self) -> RolePermissionSet:
        if self.role is None:
            return DENY_ALL
        return get_permissions(self.role)

    @property
    def is_super(self) -> bool:
        return self.role is AdminRole.SUPER_ADMIN

    @property
    def is_moderator(self) -> bool:
        return self.role is AdminRole.MODERATOR

    @property
    def is_viewer(self) -> bool:
        return self.role is AdminRole.VIEWER

    @property
    def role_label(self) -> str:
        if self.role is None:
            return UNKNOWN_ROLE_LABEL
        return get_role_label(self.role)

    @property
    def role_color(self) -> str:
        if self.role is None:
            return UNKNOWN_ROLE_COLOR
        return get_role_color(self.role)

    def gate(
        self,
        resource: Resource | str,
        action: Action | str,
        children: T,
        fallback: T | None = None,
        show_lock: bool = False,
    ) -> GateResult[T]:
        """Render a permission gate for this session's role."""
        gate = PermissionGate(
            resource=resource,
            action=action,
            children=children,
            fallback=fallback,
            show_lock=show_lock,
        )
        return gate.render(self.role)

    def __repr__(self) -> str:
        return f"<PermissionContext(role={self.role})>"
