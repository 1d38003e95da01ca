"""Error handling module with RFC 7807 Problem Details."""

from dpi_admin.core.errors.exceptions import (
    AppException,
    ForbiddenError,
    NotFoundError,
    PermissionDeniedError,
    UnauthorizedError,
    ValidationError,
)
from dpi_admin.core.errors.handlers import (
    FieldError,
    ProblemDetail,
    register_exception_handlers,
)


__all__ = [
    # Exceptions
    "AppException",
    # Handlers
    "FieldError",
    "ForbiddenError",
    "NotFoundError",
    "PermissionDeniedError",
    "ProblemDetail",
    "UnauthorizedError",
    "ValidationError",
    "register_exception_handlers",
]
