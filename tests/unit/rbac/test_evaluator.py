"""Unit tests for the permission evaluator.

These tests verify:
- Literal table lookups
- Fail-closed handling of unknown roles, resources and actions
- Role resolution for session tags
- Display helpers
"""

import pytest

from dpi_admin.core.rbac import (
    Action,
    AdminRole,
    Resource,
    get_role_color,
    get_role_label,
    has_all_permissions,
    has_any_permission,
    has_permission,
    permission_name,
    resolve_role,
)


pytestmark = pytest.mark.unit


class TestHasPermission:
    """Tests for has_permission()."""

    def test_super_admin_can_delete_beneficiaries(self):
        assert has_permission(AdminRole.SUPER_ADMIN, "beneficiaries", "delete") is True

    def test_viewer_cannot_delete_beneficiaries(self):
        assert has_permission(AdminRole.VIEWER, "beneficiaries", "delete") is False

    def test_privilege_is_resource_scoped(self):
        """Even the top role cannot create analytics."""
        assert has_permission(AdminRole.SUPER_ADMIN, "analytics", "create") is False

    def test_audit_logs_read(self):
        assert has_permission(AdminRole.VIEWER, "auditLogs", "read") is False
        assert has_permission(AdminRole.MODERATOR, "auditLogs", "read") is True

    def test_accepts_enum_members(self):
        assert has_permission(
            AdminRole.MODERATOR, Resource.NIN, Action.UPDATE
        ) is has_permission("moderator", "nin", "update")

    def test_bulk_operations_action_value(self):
        assert has_permission("super_admin", "disbursements", "bulkOperations") is True
        assert has_permission("moderator", "disbursements", "bulkOperations") is False

    @pytest.mark.parametrize(
        ("role", "resource", "action"),
        [
            ("nonexistent-role", "beneficiaries", "read"),
            ("SUPER_ADMIN", "beneficiaries", "read"),
            ("super_admin", "payroll", "read"),
            ("super_admin", "beneficiaries", "approve"),
            ("super_admin", "beneficiaries", "bulk_operations"),
            ("super_admin", "", ""),
            (None, "beneficiaries", "read"),
            (42, "beneficiaries", "read"),
            ("super_admin", None, "read"),
            ("super_admin", "beneficiaries", ["read"]),
        ],
    )
    def test_unknown_inputs_fail_closed(self, role, resource, action):
        """Malformed keys never raise and never grant."""
        assert has_permission(role, resource, action) is False

    def test_is_idempotent(self):
        results = {
            has_permission(AdminRole.MODERATOR, Resource.POLLS, Action.CREATE)
            for _ in range(100)
        }
        assert results == {True}

    def test_every_lookup_returns_bool(self):
        for role in AdminRole:
            for resource in Resource:
                for action in Action:
                    assert isinstance(has_permission(role, resource, action), bool)


class TestCombinedChecks:
    """Tests for has_any_permission() and has_all_permissions()."""

    def test_any_with_one_grant(self):
        assert has_any_permission(
            AdminRole.MODERATOR,
            [("beneficiaries", "delete"), ("beneficiaries", "update")],
        )

    def test_any_with_no_grant(self):
        assert not has_any_permission(
            AdminRole.VIEWER,
            [("beneficiaries", "delete"), ("settings", "read")],
        )

    def test_any_with_empty_list(self):
        assert has_any_permission(AdminRole.SUPER_ADMIN, []) is False

    def test_all_requires_every_grant(self):
        assert has_all_permissions(
            AdminRole.MODERATOR, [("polls", "create"), ("polls", "export")]
        )
        assert not has_all_permissions(
            AdminRole.MODERATOR, [("polls", "create"), ("polls", "delete")]
        )

    def test_all_with_unknown_pair(self):
        assert not has_all_permissions(
            AdminRole.SUPER_ADMIN, [("polls", "read"), ("polls", "approve")]
        )


class TestResolveRole:
    """Tests for resolve_role()."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_role_is_viewer(self, value):
        assert resolve_role(value) is AdminRole.VIEWER

    @pytest.mark.parametrize("value", ["root", "Super_Admin", 7, ["viewer"]])
    def test_unknown_role_is_none(self, value):
        assert resolve_role(value) is None

    def test_known_role(self):
        assert resolve_role("moderator") is AdminRole.MODERATOR
        assert resolve_role(AdminRole.SUPER_ADMIN) is AdminRole.SUPER_ADMIN


class TestDisplayHelpers:
    """Tests for label and color helpers."""

    def test_labels(self):
        assert get_role_label(AdminRole.SUPER_ADMIN) == "Super Admin"
        assert get_role_label("moderator") == "Moderator"
        assert get_role_label(AdminRole.VIEWER) == "Viewer"

    def test_colors_are_distinct(self):
        colors = {get_role_color(role) for role in AdminRole}
        assert len(colors) == len(AdminRole)

    def test_super_admin_color(self):
        assert get_role_color("super_admin") == "bg-destructive/10 text-destructive"

    def test_permission_name(self):
        assert permission_name(Resource.AUDIT_LOGS, Action.EXPORT) == "auditLogs:export"
        assert permission_name("polls", "read") == "polls:read"
