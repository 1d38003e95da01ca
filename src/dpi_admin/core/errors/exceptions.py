"""Domain exceptions for the admin service.

These exceptions are converted to RFC 7807 Problem Details responses by
the exception handlers. The permission core itself never raises them:
denials there are plain False results.
"""

from typing import Any

from dpi_admin.core.rbac.evaluator import permission_name


class AppException(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code for clients
        status_code: HTTP status code for the response
        details: Additional error details
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Raised when a requested resource is not found.

    Example:
        raise NotFoundError("Unknown role", resource="role", resource_id=role)
    """

    message = "Resource not found"
    error_code = "not_found"
    status_code = 404

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        resource_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if resource:
            details["resource"] = resource
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__(message=message, details=details, **kwargs)


class ValidationError(AppException):
    """Raised when request data fails validation.

    Example:
        raise ValidationError(
            "Invalid date range",
            errors=[{"field": "end", "message": "end is before start"}]
        )
    """

    message = "Validation error"
    error_code = "validation_error"
    status_code = 422

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if errors:
            details["errors"] = errors
        super().__init__(message=message, details=details, **kwargs)


class UnauthorizedError(AppException):
    """Raised when authentication is required but not provided or invalid.

    Example:
        raise UnauthorizedError("Invalid access token")
    """

    message = "Authentication required"
    error_code = "unauthorized"
    status_code = 401


class ForbiddenError(AppException):
    """Raised when an admin lacks permission to access a resource."""

    message = "Access forbidden"
    error_code = "forbidden"
    status_code = 403


class PermissionDeniedError(ForbiddenError):
    """Raised when the session role lacks a (resource, action) permission.

    Example:
        raise PermissionDeniedError("auditLogs", "delete", role="moderator")
    """

    error_code = "permission_denied"

    def __init__(
        self,
        resource: str,
        action: str,
        role: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        details["required_permission"] = permission_name(resource, action)
        if role:
            details["role"] = role
        message = kwargs.pop(
            "message", f"You don't have permission to {action} {resource}"
        )
        super().__init__(message=message, details=details, **kwargs)
