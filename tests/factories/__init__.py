"""Test factories for generating test data."""

from tests.factories.admin import (
    TEST_PASSWORD,
    AdminAccountFactory,
    AuditLogEntryFactory,
)


__all__ = [
    "TEST_PASSWORD",
    "AdminAccountFactory",
    "AuditLogEntryFactory",
]
