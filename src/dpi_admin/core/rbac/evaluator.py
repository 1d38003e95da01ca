"""Permission evaluation.

Answers "can role R perform action A on resource X?" against the static
role permission table. Lookups fail closed: a role, resource or action that
is not part of the model evaluates to False instead of raising.
"""

from collections.abc import Iterable
from typing import TypeVar

from dpi_admin.core.rbac.table import ROLE_PERMISSIONS
from dpi_admin.core.rbac.types import (
    Action,
    AdminRole,
    Resource,
    RolePermissionSet,
)


ROLE_LABELS: dict[AdminRole, str] = {
    AdminRole.SUPER_ADMIN: "Super Admin",
    AdminRole.MODERATOR: "Moderator",
    AdminRole.VIEWER: "Viewer",
}

ROLE_COLORS: dict[AdminRole, str] = {
    AdminRole.SUPER_ADMIN: "bg-destructive/10 text-destructive",
    AdminRole.MODERATOR: "bg-primary/10 text-primary",
    AdminRole.VIEWER: "bg-muted text-muted-foreground",
}

# (resource, action) pair as accepted by the helpers below
PermissionPair = tuple[Resource | str, Action | str]

E = TypeVar("E", AdminRole, Resource, Action)


def _coerce(enum_cls: type[E], value: object) -> E | None:
    """Return ``value`` as a member of ``enum_cls`` or None if it is not one."""
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


def get_permissions(role: AdminRole | str) -> RolePermissionSet:
    """Get the full resource -> permission record mapping for a role.

    Args:
        role: One of the defined admin roles

    Returns:
        Read-only mapping with a record for every resource

    Raises:
        ValueError: If ``role`` is not a defined admin role
    """
    return ROLE_PERMISSIONS[AdminRole(role)]


def has_permission(
    role: AdminRole | str | None,
    resource: Resource | str,
    action: Action | str,
) -> bool:
    """Check whether ``role`` may perform ``action`` on ``resource``.

    Args:
        role: The session role
        resource: The resource being accessed (e.g., "beneficiaries")
        action: The action being performed (e.g., "delete")

    Returns:
        True only if the table explicitly grants the permission
    """
    known_role = _coerce(AdminRole, role)
    known_resource = _coerce(Resource, resource)
    known_action = _coerce(Action, action)
    if known_role is None or known_resource is None or known_action is None:
        return False

    return ROLE_PERMISSIONS[known_role][known_resource].allows(known_action)


def has_any_permission(
    role: AdminRole | str | None,
    permissions: Iterable[PermissionPair],
) -> bool:
    """Check whether ``role`` holds at least one of the given permissions."""
    return any(
        has_permission(role, resource, action) for resource, action in permissions
    )


def has_all_permissions(
    role: AdminRole | str | None,
    permissions: Iterable[PermissionPair],
) -> bool:
    """Check whether ``role`` holds every one of the given permissions."""
    return all(
        has_permission(role, resource, action) for resource, action in permissions
    )


def resolve_role(value: object) -> AdminRole | None:
    """Resolve a session role tag.

    A missing tag falls back to the viewer role. A tag that is present but
    not a defined role resolves to None, which callers treat as deny-all.
    """
    if value is None or value == "":
        return AdminRole.VIEWER
    return _coerce(AdminRole, value)


def get_role_label(role: AdminRole | str) -> str:
    """Display label for a role."""
    return ROLE_LABELS[AdminRole(role)]


def get_role_color(role: AdminRole | str) -> str:
    """Badge style classes for a role."""
    return ROLE_COLORS[AdminRole(role)]


def permission_name(resource: Resource | str, action: Action | str) -> str:
    """Return the permission as ``resource:action``."""
    return f"{resource}:{action}"
