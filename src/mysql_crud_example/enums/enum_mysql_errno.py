# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""MySQL Error Number Enumeration.

Server (``ER_*``) and client (``CR_*``) error numbers that the error mapping
in ``util_db_error_context`` classifies explicitly. The driver reports them as
the first element of the exception's ``args``.

Usage:
    >>> EnumMysqlErrno.DUP_ENTRY.is_connection_error
    False
    >>> EnumMysqlErrno.CR_CONN_HOST_ERROR.is_connection_error
    True
"""

from enum import IntEnum


class EnumMysqlErrno(IntEnum):
    """MySQL error numbers with explicit handling.

    Client Errors (connection-level):
        CR_CONNECTION_ERROR: Local socket connection failed.
        CR_CONN_HOST_ERROR: TCP connection to host failed (also wraps TLS failures).
        CR_UNKNOWN_HOST: Hostname could not be resolved.
        CR_SERVER_GONE_ERROR: Server closed the connection.
        CR_SERVER_LOST: Connection lost during a query.

    Server Errors:
        DBACCESS_DENIED_ERROR / ACCESS_DENIED_ERROR: Authentication failures.
        BAD_DB_ERROR: Unknown database.
        BAD_NULL_ERROR: NOT NULL column received NULL.
        BAD_FIELD_ERROR: Unknown column.
        DUP_ENTRY: UNIQUE or PRIMARY KEY violated.
        PARSE_ERROR: SQL syntax error.
        NO_SUCH_TABLE: Table does not exist.
        LOCK_WAIT_TIMEOUT: InnoDB lock wait exceeded.
        ROW_IS_REFERENCED_2: Delete blocked by a foreign key.
        NO_REFERENCED_ROW_2: Insert references a missing parent row.
        QUERY_TIMEOUT: ``max_execution_time`` exceeded.
    """

    DBACCESS_DENIED_ERROR = 1044
    ACCESS_DENIED_ERROR = 1045
    BAD_NULL_ERROR = 1048
    BAD_DB_ERROR = 1049
    BAD_FIELD_ERROR = 1054
    DUP_ENTRY = 1062
    PARSE_ERROR = 1064
    NO_SUCH_TABLE = 1146
    LOCK_WAIT_TIMEOUT = 1205
    ROW_IS_REFERENCED_2 = 1451
    NO_REFERENCED_ROW_2 = 1452
    QUERY_TIMEOUT = 3024

    CR_CONNECTION_ERROR = 2002
    CR_CONN_HOST_ERROR = 2003
    CR_UNKNOWN_HOST = 2005
    CR_SERVER_GONE_ERROR = 2006
    CR_SERVER_LOST = 2013

    @property
    def is_connection_error(self) -> bool:
        return self in _CONNECTION_ERRNOS

    @property
    def is_authentication_error(self) -> bool:
        return self in (
            EnumMysqlErrno.ACCESS_DENIED_ERROR,
            EnumMysqlErrno.DBACCESS_DENIED_ERROR,
        )

    @property
    def is_timeout_error(self) -> bool:
        return self in (EnumMysqlErrno.LOCK_WAIT_TIMEOUT, EnumMysqlErrno.QUERY_TIMEOUT)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "EnumMysqlErrno | None":
        """Return the known error number carried by a driver exception, if any."""
        if exc.args and isinstance(exc.args[0], int):
            try:
                return cls(exc.args[0])
            except ValueError:
                return None
        return None


_CONNECTION_ERRNOS: frozenset[EnumMysqlErrno] = frozenset(
    {
        EnumMysqlErrno.CR_CONNECTION_ERROR,
        EnumMysqlErrno.CR_CONN_HOST_ERROR,
        EnumMysqlErrno.CR_UNKNOWN_HOST,
        EnumMysqlErrno.CR_SERVER_GONE_ERROR,
        EnumMysqlErrno.CR_SERVER_LOST,
    }
)


__all__ = ["EnumMysqlErrno"]
