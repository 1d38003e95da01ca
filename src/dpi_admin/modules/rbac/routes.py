"""Permission model API routes.

These endpoints let the admin UI load the permission table and the
caller's effective permissions once, then gate affordances locally.
"""

from fastapi import APIRouter, Query

from dpi_admin.core.auth.dependencies import OptionalSession
from dpi_admin.core.errors import NotFoundError
from dpi_admin.core.rbac import (
    AdminRole,
    get_permissions,
    get_role_color,
    get_role_label,
    resolve_role,
)
from dpi_admin.core.rbac.dependencies import Permissions
from dpi_admin.modules.rbac.schemas import (
    PermissionCheckResponse,
    RolePermissionsResponse,
    RoleSummary,
    SessionPermissionsResponse,
    to_matrix,
)


router = APIRouter(prefix="/rbac", tags=["rbac"])


@router.get(
    "/roles",
    response_model=list[RoleSummary],
    summary="List admin roles",
)
async def list_roles() -> list[RoleSummary]:
    return [
        RoleSummary(role=role, label=get_role_label(role), color=get_role_color(role))
        for role in AdminRole
    ]


@router.get(
    "/roles/{role}/permissions",
    response_model=RolePermissionsResponse,
    summary="Permission matrix of a role",
)
async def role_permissions(role: str) -> RolePermissionsResponse:
    # A path segment is never empty, so unknown tags resolve to None here
    known = resolve_role(role)
    if known is None:
        raise NotFoundError("Unknown role", resource="role", resource_id=role)

    return RolePermissionsResponse(
        role=known,
        label=get_role_label(known),
        permissions=to_matrix(get_permissions(known)),
    )


@router.get(
    "/me",
    response_model=SessionPermissionsResponse,
    summary="Effective permissions of the caller",
    description="Anonymous callers receive viewer permissions.",
)
async def my_permissions(
    context: Permissions,
    session: OptionalSession,
) -> SessionPermissionsResponse:
    return SessionPermissionsResponse(
        authenticated=session is not None,
        role=context.role,
        label=context.role_label,
        color=context.role_color,
        is_super=context.is_super,
        is_moderator=context.is_moderator,
        is_viewer=context.is_viewer,
        permissions=to_matrix(context.permissions),
    )


@router.get(
    "/check",
    response_model=PermissionCheckResponse,
    summary="Check one permission for the caller",
    description="Unknown resources or actions are answered with allowed=false.",
)
async def check_permission(
    context: Permissions,
    resource: str = Query(..., max_length=64),
    action: str = Query(..., max_length=64),
) -> PermissionCheckResponse:
    return PermissionCheckResponse(
        resource=resource,
        action=action,
        role=context.role,
        allowed=context.can(resource, action),
    )
