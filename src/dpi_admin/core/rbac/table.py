"""Role permission table.

The grants below are data, not logic: every (role, resource) pair lists all
six flags so that a change of grant shows up as a one-line diff. There is no
inheritance between roles and no override layer.

NOTE: this table only drives what the admin UI offers. Endpoints that touch
domain data must re-check authorization on the server.
"""

from types import MappingProxyType

from dpi_admin.core.rbac.types import (
    AdminRole,
    PermissionRecord,
    Resource,
    RolePermissionSet,
)


_T = True
_F = False


def _record(
    read: bool,
    create: bool,
    update: bool,
    delete: bool,
    export: bool,
    bulk_operations: bool,
) -> PermissionRecord:
    return PermissionRecord(
        read=read,
        create=create,
        update=update,
        delete=delete,
        export=export,
        bulk_operations=bulk_operations,
    )


#                                       read create update delete export bulk
_SUPER_ADMIN: dict[Resource, PermissionRecord] = {
    Resource.BENEFICIARIES: _record(_T, _T, _T, _T, _T, _T),
    Resource.DISBURSEMENTS: _record(_T, _T, _T, _T, _T, _T),
    Resource.POLLS: _record(_T, _T, _T, _T, _T, _T),
    Resource.NIN: _record(_T, _T, _T, _T, _T, _T),
    Resource.FEEDBACK: _record(_T, _T, _T, _T, _T, _T),
    Resource.ANNOUNCEMENTS: _record(_T, _T, _T, _T, _T, _T),
    Resource.NOTIFICATIONS: _record(_T, _T, _T, _T, _T, _T),
    Resource.ANALYTICS: _record(_T, _F, _F, _F, _T, _F),
    Resource.AUDIT_LOGS: _record(_T, _F, _F, _F, _T, _F),
    Resource.SETTINGS: _record(_T, _T, _T, _T, _F, _F),
}

#                                       read create update delete export bulk
_MODERATOR: dict[Resource, PermissionRecord] = {
    Resource.BENEFICIARIES: _record(_T, _T, _T, _F, _T, _F),
    Resource.DISBURSEMENTS: _record(_T, _T, _T, _F, _T, _F),
    Resource.POLLS: _record(_T, _T, _T, _F, _T, _F),
    Resource.NIN: _record(_T, _T, _T, _F, _T, _F),
    Resource.FEEDBACK: _record(_T, _F, _T, _F, _T, _F),
    Resource.ANNOUNCEMENTS: _record(_T, _T, _T, _F, _T, _F),
    Resource.NOTIFICATIONS: _record(_T, _T, _F, _F, _F, _F),
    Resource.ANALYTICS: _record(_T, _F, _F, _F, _T, _F),
    Resource.AUDIT_LOGS: _record(_T, _F, _F, _F, _F, _F),
    Resource.SETTINGS: _record(_T, _F, _F, _F, _F, _F),
}

#                                       read create update delete export bulk
_VIEWER: dict[Resource, PermissionRecord] = {
    Resource.BENEFICIARIES: _record(_T, _F, _F, _F, _F, _F),
    Resource.DISBURSEMENTS: _record(_T, _F, _F, _F, _F, _F),
    Resource.POLLS: _record(_T, _F, _F, _F, _F, _F),
    Resource.NIN: _record(_T, _F, _F, _F, _F, _F),
    Resource.FEEDBACK: _record(_T, _F, _F, _F, _F, _F),
    Resource.ANNOUNCEMENTS: _record(_T, _F, _F, _F, _F, _F),
    Resource.NOTIFICATIONS: _record(_T, _F, _F, _F, _F, _F),
    Resource.ANALYTICS: _record(_T, _F, _F, _F, _F, _F),
    Resource.AUDIT_LOGS: _record(_F, _F, _F, _F, _F, _F),
    Resource.SETTINGS: _record(_F, _F, _F, _F, _F, _F),
}


ROLE_PERMISSIONS: MappingProxyType[AdminRole, RolePermissionSet] = MappingProxyType(
    {
        AdminRole.SUPER_ADMIN: MappingProxyType(_SUPER_ADMIN),
        AdminRole.MODERATOR: MappingProxyType(_MODERATOR),
        AdminRole.VIEWER: MappingProxyType(_VIEWER),
    }
)

# Returned for a session whose role tag is not one of AdminRole
DENY_ALL: RolePermissionSet = MappingProxyType(
    {resource: PermissionRecord() for resource in Resource}
)
