"""Application-wide constants.

This module defines constants used throughout the application
to avoid magic numbers and ensure consistency.
"""

# Audit log
DEFAULT_AUDIT_LOG_CAPACITY = 1000
AUDIT_LOG_ID_PREFIX = "LOG"
AUDIT_LOG_ID_SUFFIX_LENGTH = 9
MAX_AUDIT_PAGE_SIZE = 1000

# Password requirements
BCRYPT_ROUNDS = 12

# Token settings
ACCESS_TOKEN_JTI_LENGTH = 32
REVOKED_TOKEN_PREFIX = "dpi:revoked:"

# Secret key requirements
MIN_SECRET_KEY_LENGTH = 32
DEFAULT_INSECURE_SECRET = "change-me-in-production"
