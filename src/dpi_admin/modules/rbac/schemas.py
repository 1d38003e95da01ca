"""Response schemas for the permission model endpoints."""

from pydantic import BaseModel

from dpi_admin.core.rbac import AdminRole, RolePermissionSet


# resource -> action -> allowed
PermissionMatrix = dict[str, dict[str, bool]]


def to_matrix(permissions: RolePermissionSet) -> PermissionMatrix:
    return {
        resource.value: record.as_dict() for resource, record in permissions.items()
    }


class RoleSummary(BaseModel):
    role: AdminRole
    label: str
    color: str


class RolePermissionsResponse(BaseModel):
    role: AdminRole
    label: str
    permissions: PermissionMatrix


class SessionPermissionsResponse(BaseModel):
    """Permission view of the caller's session."""

    authenticated: bool
    role: AdminRole | None
    label: str
    color: str
    is_super: bool
    is_moderator: bool
    is_viewer: bool
    permissions: PermissionMatrix


class PermissionCheckResponse(BaseModel):
    resource: str
    action: str
    role: AdminRole | None
    allowed: bool
