"""Permission gate for conditional rendering.

A gate wraps one UI affordance with the (resource, action) pair it needs and
picks what to render for the current role:

1. permitted -> the protected content
2. denied with ``show_lock`` -> a non-interactive locked affordance
3. denied with a fallback -> the fallback
4. otherwise -> nothing

The decision is recomputed on every render, so a role change between two
renders is always reflected. Hiding an affordance does not stop a client
from calling the underlying endpoint; the API re-checks on the server.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

from dpi_admin.core.rbac.evaluator import has_permission
from dpi_admin.core.rbac.types import Action, AdminRole, Resource


T = TypeVar("T")

LOCK_LABEL = "Restricted"


class GateOutcome(StrEnum):
    """Which branch a gate rendered."""

    PERMITTED = "permitted"
    LOCKED = "locked"
    FALLBACK = "fallback"
    EMPTY = "empty"


@dataclass(frozen=True)
class LockedAffordance:
    """Disabled placeholder shown in place of a forbidden control.

    It carries no click handler: ``on_click`` is always None and
    ``interactive`` always False.
    """

    resource: str
    action: str
    label: str = LOCK_LABEL

    @property
    def tooltip(self) -> str:
        return f"You don't have permission to {self.action} {self.resource}"

    @property
    def interactive(self) -> bool:
        return False

    @property
    def on_click(self) -> None:
        return None


@dataclass(frozen=True)
class GateResult(Generic[T]):
    """What a gate produced for one render."""

    outcome: GateOutcome
    content: T | LockedAffordance | None = None

    @property
    def rendered(self) -> bool:
        """True when anything at all was produced."""
        return self.outcome is not GateOutcome.EMPTY


@dataclass(frozen=True)
class PermissionGate(Generic[T]):
    """Conditional-rendering wrapper around one (resource, action) check.

    Usage:
        gate = PermissionGate(
            resource="beneficiaries",
            action="delete",
            children=delete_button,
            show_lock=True,
        )
        result = gate.render(session_role)
    """

    resource: Resource | str
    action: Action | str
    children: T
    fallback: T | None = None
    show_lock: bool = False

    def render(self, role: AdminRole | str | None) -> GateResult[T]:
        """Pick the branch for ``role``.

        Args:
            role: The caller's current role, read fresh for each render

        Returns:
            The chosen outcome and its content
        """
        if has_permission(role, self.resource, self.action):
            return GateResult(GateOutcome.PERMITTED, self.children)

        if self.show_lock:
            return GateResult(
                GateOutcome.LOCKED,
                LockedAffordance(resource=str(self.resource), action=str(self.action)),
            )

        if self.fallback is not None:
            return GateResult(GateOutcome.FALLBACK, self.fallback)

        return GateResult(GateOutcome.EMPTY)
