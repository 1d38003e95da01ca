"""Shared API dependencies."""

from typing import Annotated

from fastapi import Depends

from dpi_admin.core.audit import AuditLogger, get_audit_logger
from dpi_admin.core.auth.accounts import AdminDirectory, get_admin_directory
from dpi_admin.core.auth.revocation import RevocationList, get_revocation_list


# Type aliases for process-wide collaborators; tests swap them through
# app.dependency_overrides on the getter functions.
Audit = Annotated[AuditLogger, Depends(get_audit_logger)]
Directory = Annotated[AdminDirectory, Depends(get_admin_directory)]
Revocations = Annotated[RevocationList, Depends(get_revocation_list)]
