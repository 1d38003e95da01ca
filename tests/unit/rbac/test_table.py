"""Tests for the role permission table."""

import pytest
from pydantic import ValidationError

from dpi_admin.core.rbac import (
    DENY_ALL,
    ROLE_PERMISSIONS,
    Action,
    AdminRole,
    PermissionRecord,
    Resource,
    get_permissions,
)


pytestmark = pytest.mark.unit


class TestTableShape:
    """The table covers every role and resource with six flags."""

    @pytest.mark.parametrize("role", list(AdminRole))
    def test_every_resource_has_a_record(self, role: AdminRole):
        permissions = get_permissions(role)

        assert set(permissions) == set(Resource)
        for record in permissions.values():
            flags = record.as_dict()
            assert set(flags) == {action.value for action in Action}
            assert all(isinstance(flag, bool) for flag in flags.values())

    def test_table_has_exactly_three_roles(self):
        assert set(ROLE_PERMISSIONS) == set(AdminRole)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            ROLE_PERMISSIONS[AdminRole.VIEWER] = DENY_ALL  # type: ignore[index]

        with pytest.raises(TypeError):
            get_permissions(AdminRole.VIEWER)[Resource.POLLS] = PermissionRecord(  # type: ignore[index]
                read=True, delete=True
            )

    def test_records_are_frozen(self):
        record = get_permissions(AdminRole.VIEWER)[Resource.BENEFICIARIES]

        with pytest.raises(ValidationError):
            record.delete = True  # type: ignore[misc]

        assert record.delete is False

    def test_deny_all_grants_nothing(self):
        assert set(DENY_ALL) == set(Resource)
        assert not any(
            record.allows(action) for record in DENY_ALL.values() for action in Action
        )


class TestTableValues:
    """Spot checks of grants whose values are product decisions."""

    def test_super_admin_full_access_to_beneficiaries(self):
        record = get_permissions(AdminRole.SUPER_ADMIN)[Resource.BENEFICIARIES]
        assert all(record.as_dict().values())

    def test_analytics_is_never_created(self):
        for role in AdminRole:
            assert get_permissions(role)[Resource.ANALYTICS].create is False

    def test_settings_is_never_exported(self):
        for role in AdminRole:
            assert get_permissions(role)[Resource.SETTINGS].export is False

    def test_audit_logs_are_never_deleted(self):
        for role in AdminRole:
            assert get_permissions(role)[Resource.AUDIT_LOGS].delete is False

    def test_moderator_feedback(self):
        record = get_permissions(AdminRole.MODERATOR)[Resource.FEEDBACK]
        assert record.as_dict() == {
            "read": True,
            "create": False,
            "update": True,
            "delete": False,
            "export": True,
            "bulkOperations": False,
        }

    def test_viewer_reads_everything_but_audit_logs_and_settings(self):
        permissions = get_permissions(AdminRole.VIEWER)
        unreadable = {
            resource for resource, record in permissions.items() if not record.read
        }
        assert unreadable == {Resource.AUDIT_LOGS, Resource.SETTINGS}


class TestGetPermissions:
    """Tests for get_permissions()."""

    def test_accepts_role_value(self):
        assert get_permissions("moderator") is get_permissions(AdminRole.MODERATOR)

    def test_unknown_role_raises(self):
        with pytest.raises(ValueError):
            get_permissions("root")


class TestPermissionRecord:
    """Tests for PermissionRecord."""

    def test_defaults_deny(self):
        record = PermissionRecord()
        assert not any(record.allows(action) for action in Action)

    def test_bulk_operations_alias(self):
        record = PermissionRecord.model_validate({"bulkOperations": True})

        assert record.bulk_operations is True
        assert record.allows(Action.BULK_OPERATIONS) is True
        assert record.as_dict()["bulkOperations"] is True

    def test_populate_by_field_name(self):
        record = PermissionRecord(bulk_operations=True)
        assert record.allows(Action.BULK_OPERATIONS) is True
