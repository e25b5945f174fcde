# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error Code Enumeration.

Classifies every error raised by mysql_crud_example so callers can branch on
``error.error_code`` without matching exception messages.
"""

from enum import Enum


class EnumErrorCode(str, Enum):
    """Error classification codes.

    Connection Errors:
        DATABASE_CONNECTION_ERROR: Server unreachable or connection lost.
        AUTHENTICATION_ERROR: Access denied for the configured credentials.
        TIMEOUT_ERROR: Connect or statement deadline exceeded.

    Statement Errors:
        DATABASE_QUERY_ERROR: Statement rejected by the server.
        DUPLICATE_RECORD: Unique key violated by an insert or update.

    Application Errors:
        INVALID_CONFIGURATION: Bad environment value or malformed DSN.
        RESOURCE_NOT_FOUND: A required row does not exist.
        OPERATION_FAILED: Anything not classified above.
    """

    DATABASE_CONNECTION_ERROR = "DATABASE_CONNECTION_ERROR"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    DATABASE_QUERY_ERROR = "DATABASE_QUERY_ERROR"
    DUPLICATE_RECORD = "DUPLICATE_RECORD"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    OPERATION_FAILED = "OPERATION_FAILED"


__all__ = ["EnumErrorCode"]
