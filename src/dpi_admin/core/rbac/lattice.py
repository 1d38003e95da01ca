"""Privilege ordering check for the role permission table.

Roles do not inherit from each other, but as authored the table grants
every higher role at least what the role below it has. This module finds
the grants that break that ordering so a table edit can be reviewed.
"""

from itertools import pairwise
from typing import NamedTuple

from dpi_admin.core.rbac.evaluator import has_permission
from dpi_admin.core.rbac.types import Action, AdminRole, Resource


# Lowest to highest privilege
ROLE_ORDER: tuple[AdminRole, ...] = (
    AdminRole.VIEWER,
    AdminRole.MODERATOR,
    AdminRole.SUPER_ADMIN,
)


class LatticeViolation(NamedTuple):
    """A grant held by ``lower`` but not by the next role up."""

    resource: Resource
    action: Action
    lower: AdminRole
    higher: AdminRole

    def __str__(self) -> str:
        return (
            f"{self.resource}:{self.action} granted to {self.lower} "
            f"but not to {self.higher}"
        )


def lattice_violations() -> list[LatticeViolation]:
    """Return every grant that breaks viewer <= moderator <= super_admin."""
    violations: list[LatticeViolation] = []
    for lower, higher in pairwise(ROLE_ORDER):
        for resource in Resource:
            for action in Action:
                if has_permission(lower, resource, action) and not has_permission(
                    higher, resource, action
                ):
                    violations.append(LatticeViolation(resource, action, lower, higher))
    return violations
