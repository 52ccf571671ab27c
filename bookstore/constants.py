"""
Application-level constants for hardcoded business logic.

These values define the public contract of the API and should NEVER be
changed via environment variables or configuration.

For configurable values (connection pools, retries, CORS, logging, etc.),
see bookstore/settings.py.
"""

# ============================================================================
# Client-facing messages
# ============================================================================

# Fixed body for every 500 response; internal error text never leaves the
# server
ERROR_500_MESSAGE = "Something went wrong. Please try again later."

# Used in log lines when a requested record does not exist
RECORD_NOT_FOUND_MESSAGE = "Record not found"


# ============================================================================
# Author field limits
# ============================================================================

AUTHOR_NAME_MAX_LENGTH = 50
AUTHOR_BIO_MAX_LENGTH = 250

# Range of the INTEGER primary key column. Ids outside it cannot exist and
# are rejected as invalid input before any store access.
AUTHOR_ID_MIN = -(2**31)
AUTHOR_ID_MAX = 2**31 - 1


# ============================================================================
# Request tracing
# ============================================================================

CORRELATION_ID_HEADER = "X-Correlation-ID"

# Correlation IDs are truncated to this many characters
CORRELATION_ID_LENGTH = 8
