"""FastAPI dependencies for permission checks.

The same evaluator that drives the admin UI gates is used here to protect
routes, so hiding a button and rejecting the request always agree.

Usage:
    @router.get("/beneficiaries/export")
    async def export(
        session: Annotated[
            AdminSession,
            Depends(require_permission(Resource.BENEFICIARIES, Action.EXPORT)),
        ],
    ): ...
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

import structlog
from fastapi import Depends

from dpi_admin.core.auth.dependencies import CurrentSession, OptionalSession
from dpi_admin.core.auth.schemas import AdminSession
from dpi_admin.core.errors import PermissionDeniedError
from dpi_admin.core.rbac.context import PermissionContext
from dpi_admin.core.rbac.evaluator import permission_name
from dpi_admin.core.rbac.types import Action, Resource


logger = structlog.get_logger()


async def get_permission_context(session: OptionalSession) -> PermissionContext:
    """Permission context for the caller; anonymous callers get viewer."""
    return PermissionContext.from_session(session)


Permissions = Annotated[PermissionContext, Depends(get_permission_context)]


def require_permission(
    resource: Resource, action: Action
) -> Callable[[AdminSession], Awaitable[AdminSession]]:
    """Dependency factory requiring one permission from an authenticated admin.

    Args:
        resource: The resource being accessed (e.g., Resource.AUDIT_LOGS)
        action: The action being performed (e.g., Action.EXPORT)

    Returns:
        Dependency that yields the session when the check passes

    Raises:
        UnauthorizedError: If there is no valid session
        PermissionDeniedError: If the session role lacks the permission
    """

    async def dependency(session: CurrentSession) -> AdminSession:
        context = PermissionContext.from_session(session)
        if not context.can(resource, action):
            logger.warning(
                "permission_denied",
                admin_id=session.admin_id,
                role=session.role,
                required_permission=permission_name(resource, action),
            )
            raise PermissionDeniedError(resource, action, role=session.role)
        return session

    return dependency
