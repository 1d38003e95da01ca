"""Tests for the privilege ordering of the role table."""

from unittest.mock import patch

import pytest

from dpi_admin.core.rbac import (
    ROLE_ORDER,
    Action,
    AdminRole,
    LatticeViolation,
    Resource,
    has_permission,
    lattice_violations,
)


pytestmark = pytest.mark.unit


class TestLattice:
    """viewer <= moderator <= super_admin for every grant."""

    def test_current_table_is_ordered(self):
        assert lattice_violations() == []

    def test_ordering_holds_pairwise(self):
        for resource in Resource:
            for action in Action:
                if has_permission(AdminRole.VIEWER, resource, action):
                    assert has_permission(AdminRole.MODERATOR, resource, action)
                if has_permission(AdminRole.MODERATOR, resource, action):
                    assert has_permission(AdminRole.SUPER_ADMIN, resource, action)

    def test_role_order_covers_all_roles(self):
        assert set(ROLE_ORDER) == set(AdminRole)
        assert ROLE_ORDER[0] is AdminRole.VIEWER
        assert ROLE_ORDER[-1] is AdminRole.SUPER_ADMIN

    def test_reports_broken_grant(self):
        """A grant the viewer has but the moderator lacks is flagged."""

        def edited(role, resource, action):
            if (resource, action) == (Resource.SETTINGS, Action.READ):
                return role == AdminRole.VIEWER
            return has_permission(role, resource, action)

        with patch("dpi_admin.core.rbac.lattice.has_permission", side_effect=edited):
            violations = lattice_violations()

        assert violations == [
            LatticeViolation(
                Resource.SETTINGS, Action.READ, AdminRole.VIEWER, AdminRole.MODERATOR
            )
        ]
        assert str(violations[0]) == (
            "settings:read granted to viewer but not to moderator"
        )
