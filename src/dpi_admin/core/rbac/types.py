"""Closed vocabularies for the permission model.

Roles, resources and actions are string enums so that values coming from
tokens, query strings or templates compare equal to their members.
"""

from collections.abc import Mapping
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class AdminRole(StrEnum):
    """Authority tier assigned to an admin session."""

    SUPER_ADMIN = "super_admin"
    MODERATOR = "moderator"
    VIEWER = "viewer"


class Resource(StrEnum):
    """Back-office feature areas subject to access control."""

    BENEFICIARIES = "beneficiaries"
    DISBURSEMENTS = "disbursements"
    POLLS = "polls"
    NIN = "nin"
    FEEDBACK = "feedback"
    ANNOUNCEMENTS = "announcements"
    NOTIFICATIONS = "notifications"
    ANALYTICS = "analytics"
    AUDIT_LOGS = "auditLogs"
    SETTINGS = "settings"


class Action(StrEnum):
    """Capability verbs applicable to any resource."""

    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    EXPORT = "export"
    BULK_OPERATIONS = "bulkOperations"


class PermissionRecord(BaseModel):
    """The six capability flags for one (role, resource) pair.

    Every flag defaults to False so a record built from a partial literal
    still denies whatever it does not mention.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    read: bool = False
    create: bool = False
    update: bool = False
    delete: bool = False
    export: bool = False
    bulk_operations: bool = Field(default=False, alias="bulkOperations")

    def allows(self, action: Action) -> bool:
        """Return the flag for ``action``."""
        match action:
            case Action.READ:
                return self.read
            case Action.CREATE:
                return self.create
            case Action.UPDATE:
                return self.update
            case Action.DELETE:
                return self.delete
            case Action.EXPORT:
                return self.export
            case Action.BULK_OPERATIONS:
                return self.bulk_operations
        return False

    def as_dict(self) -> dict[str, bool]:
        """Return the flags keyed by action value."""
        return {action.value: self.allows(action) for action in Action}


# Resource -> record for one role
RolePermissionSet = Mapping[Resource, PermissionRecord]
