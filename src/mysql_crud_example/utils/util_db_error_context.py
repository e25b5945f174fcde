# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Database operation error handling context manager.

This module provides an async context manager that transforms aiomysql
(PyMySQL) exceptions into mysql_crud_example errors with proper context
propagation.

Exception Mapping:
    | Driver condition                     | Error raised                    |
    |--------------------------------------|---------------------------------|
    | asyncio.TimeoutError                 | InfraTimeoutError               |
    | errno 1205 / 3024                    | InfraTimeoutError               |
    | errno 2002 / 2003 / 2005 / 2006 / 2013 | InfraConnectionError          |
    | errno 1044 / 1045                    | InfraAuthenticationError        |
    | errno 1062                           | UniqueConstraintViolationError  |
    | other aiomysql.Error                 | RuntimeHostError                |
    | OSError (socket, TLS)                | InfraConnectionError            |

It does NOT acquire connections or manage transactions; callers do their
driver work inside the ``async with`` block.

Example:
    >>> async with db_operation_error_context(
    ...     operation="insert_user",
    ...     target_name="users",
    ... ) as (correlation_id, context):
    ...     async with pool.acquire() as conn:
    ...         async with conn.cursor() as cur:
    ...             await cur.execute(sql, params)
"""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID, uuid4

import aiomysql

from mysql_crud_example.enums import (
    EnumErrorCode,
    EnumInfraTransportType,
    EnumMysqlErrno,
)
from mysql_crud_example.errors import (
    InfraAuthenticationError,
    InfraConnectionError,
    InfraTimeoutError,
    ModelInfraErrorContext,
    RuntimeHostError,
    UniqueConstraintViolationError,
)

logger = logging.getLogger(__name__)

# Used by map_mysql_error to build descriptive messages for statement errors
_MYSQL_ERROR_PREFIXES: dict[EnumMysqlErrno, str] = {
    EnumMysqlErrno.PARSE_ERROR: "SQL syntax error",
    EnumMysqlErrno.NO_SUCH_TABLE: "Table not found",
    EnumMysqlErrno.BAD_FIELD_ERROR: "Column not found",
    EnumMysqlErrno.BAD_NULL_ERROR: "Not null constraint violation",
    EnumMysqlErrno.ROW_IS_REFERENCED_2: "Foreign key constraint violation",
    EnumMysqlErrno.NO_REFERENCED_ROW_2: "Foreign key constraint violation",
}

# "Duplicate entry 'x@example.com' for key 'users.email'" -> users.email
_DUPLICATE_KEY_PATTERN = re.compile(r"for key '([^']+)'")


def _driver_message(exc: BaseException) -> str:
    if len(exc.args) >= 2 and isinstance(exc.args[1], str) and exc.args[1]:
        return exc.args[1]
    return type(exc).__name__


def map_mysql_error(
    exc: aiomysql.Error,
    context: ModelInfraErrorContext,
) -> RuntimeHostError:
    """Map an aiomysql exception to a mysql_crud_example error.

    Duplicate-key messages from the server embed the offending value, so only
    the key name is carried over.

    Args:
        exc: The driver exception that was raised.
        context: Error context with transport type, operation, and correlation ID.

    Returns:
        The error to raise in place of ``exc``.
    """
    errno = EnumMysqlErrno.from_exception(exc)
    raw_errno = exc.args[0] if exc.args and isinstance(exc.args[0], int) else None

    if errno is None:
        return RuntimeHostError(
            f"Database error: {type(exc).__name__}",
            error_code=EnumErrorCode.DATABASE_QUERY_ERROR,
            context=context,
            mysql_errno=raw_errno,
        )

    if errno.is_connection_error:
        if context.operation == "connect":
            message = "Failed to connect to database - check host and port"
        else:
            message = f"Database connection lost during {context.operation}"
        return InfraConnectionError(message, context=context, mysql_errno=int(errno))

    if errno.is_authentication_error:
        return InfraAuthenticationError(
            "Database authentication failed - check credentials",
            context=context,
            mysql_errno=int(errno),
        )

    if errno.is_timeout_error:
        return InfraTimeoutError(
            f"{context.operation} timed out",
            context=context,
            mysql_errno=int(errno),
        )

    if errno is EnumMysqlErrno.DUP_ENTRY:
        match = _DUPLICATE_KEY_PATTERN.search(_driver_message(exc))
        key_name = match.group(1) if match else "unknown"
        return UniqueConstraintViolationError(
            f"Unique constraint violation on key '{key_name}'",
            context=context,
            mysql_errno=int(errno),
            key_name=key_name,
        )

    if errno is EnumMysqlErrno.BAD_DB_ERROR:
        return RuntimeHostError(
            "Database not found - check database name",
            error_code=EnumErrorCode.DATABASE_QUERY_ERROR,
            context=context,
            mysql_errno=int(errno),
        )

    prefix = _MYSQL_ERROR_PREFIXES.get(errno, "Database error")
    return RuntimeHostError(
        f"{prefix}: {_driver_message(exc)}",
        error_code=EnumErrorCode.DATABASE_QUERY_ERROR,
        context=context,
        mysql_errno=int(errno),
    )


@asynccontextmanager
async def db_operation_error_context(
    operation: str,
    target_name: str,
    correlation_id: UUID | None = None,
    timeout_seconds: float | None = None,
) -> AsyncIterator[tuple[UUID, ModelInfraErrorContext]]:
    """Async context manager for database operation error handling.

    Args:
        operation: Name of the operation being performed (e.g., "insert_user").
        target_name: Name of the target table or resource (e.g., "users").
        correlation_id: Optional correlation ID. A new UUID is generated if omitted.
        timeout_seconds: Optional deadline, included in timeout error context.

    Yields:
        Tuple of (correlation_id, ModelInfraErrorContext).

    Raises:
        InfraTimeoutError: On asyncio.TimeoutError or a server-side timeout.
        InfraConnectionError: On connection-class errno or OSError.
        InfraAuthenticationError: On access denied.
        UniqueConstraintViolationError: On duplicate key.
        RuntimeHostError: On any other aiomysql.Error.
    """
    op_correlation_id = correlation_id or uuid4()

    context = ModelInfraErrorContext(
        transport_type=EnumInfraTransportType.DATABASE,
        operation=operation,
        target_name=target_name,
        correlation_id=op_correlation_id,
    )

    try:
        yield (op_correlation_id, context)

    # TimeoutError subclasses OSError on Python 3.11+, so it must come first
    except asyncio.TimeoutError as e:
        logger.error(
            "Database operation timed out",
            extra={
                "operation": operation,
                "target_name": target_name,
                "correlation_id": str(op_correlation_id),
                "timeout_seconds": timeout_seconds,
            },
        )
        raise InfraTimeoutError(
            f"{operation} timed out",
            context=context,
            timeout_seconds=timeout_seconds,
        ) from e

    except aiomysql.Error as e:
        error = map_mysql_error(e, context)
        logger.error(
            "Database operation failed: %s",
            error.message,
            extra={
                "operation": operation,
                "target_name": target_name,
                "correlation_id": str(op_correlation_id),
                "error_type": type(e).__name__,
                "error_code": error.error_code.value,
            },
        )
        raise error from e

    except OSError as e:
        logger.error(
            "Database connection failed",
            extra={
                "operation": operation,
                "target_name": target_name,
                "correlation_id": str(op_correlation_id),
                "error_type": type(e).__name__,
            },
        )
        raise InfraConnectionError(
            f"Database connection failed during {operation}",
            context=context,
        ) from e


__all__: list[str] = [
    "db_operation_error_context",
    "map_mysql_error",
]
