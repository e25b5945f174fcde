# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""MySQL Connection Manager - aiomysql pool with a one-shot SSL fallback.

Connection Resolution:
    1. Parse and validate the DSN (configuration errors are raised as-is).
    2. Create a pool honoring the DSN's ``ssl-mode`` (default PREFERRED).
    3. On a connection failure, derive the fallback DSN with ``ssl-mode=disabled``
       and try exactly once more.
    4. If the fallback also fails, the error propagates to the caller.

There is no backoff, no further retry and no circuit breaking.

Single-Statement Execution:
    ``execute``, ``fetch_all`` and ``fetch_one`` each run one parameterized
    statement on a connection borrowed from the pool. The pool runs in
    autocommit mode; there is no transaction API.

Security Policy - DSN Handling:
    The DSN contains credentials. It is only ever logged through
    ``sanitize_dsn`` and never placed in error messages.
"""

from __future__ import annotations

import logging
import ssl
from collections.abc import Sequence
from types import TracebackType
from uuid import UUID, uuid4

import aiomysql

from mysql_crud_example.enums import EnumInfraTransportType, EnumSslMode
from mysql_crud_example.errors import (
    ModelInfraErrorContext,
    ProtocolConfigurationError,
    RuntimeHostError,
)
from mysql_crud_example.models import ModelExecuteResult
from mysql_crud_example.runtime.model_database_config import ModelDatabaseConfig
from mysql_crud_example.types import ModelParsedDSN
from mysql_crud_example.utils import (
    build_ssl_disabled_dsn,
    db_operation_error_context,
    parse_and_validate_dsn,
    sanitize_dsn,
)

logger = logging.getLogger(__name__)

_POOL_MIN_SIZE: int = 1
_CHARSET: str = "utf8mb4"
_TARGET_NAME: str = "mysql_pool"

_TROUBLESHOOTING_HINT: str = (
    "Check that: 1. the MySQL server is running "
    "2. the database exists "
    "3. the username and password are correct"
)


def build_ssl_context(parsed: ModelParsedDSN) -> ssl.SSLContext | None:
    """Translate the DSN's ``ssl-mode`` into an SSL context for aiomysql.

    PREFERRED and REQUIRED encrypt without verifying the certificate,
    VERIFY_CA checks the chain only, VERIFY_IDENTITY also checks the hostname.
    DISABLED returns None (plain TCP).
    """
    mode = parsed.ssl_mode
    if not mode.uses_tls:
        return None

    try:
        context = ssl.create_default_context(cafile=parsed.ssl_ca)
    except OSError as e:
        ctx = ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.DATABASE,
            operation="build_ssl_context",
            target_name=_TARGET_NAME,
        )
        raise ProtocolConfigurationError(
            f"Cannot load ssl-ca certificate file: {type(e).__name__}",
            context=ctx,
            parameter="dsn.ssl-ca",
        ) from e

    if mode in (EnumSslMode.PREFERRED, EnumSslMode.REQUIRED):
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    elif mode is EnumSslMode.VERIFY_CA:
        context.check_hostname = False
    return context


class MysqlConnectionManager:
    """Owns the aiomysql pool used by every repository call.

    Implements ProtocolDatabaseClient.

    Usage:
        async with MysqlConnectionManager(config) as db:
            users = await select_all_users(db)
    """

    def __init__(self, config: ModelDatabaseConfig | None = None) -> None:
        """Initialize the manager in the disconnected state."""
        self._config = config or ModelDatabaseConfig.from_environment()
        self._pool: aiomysql.Pool | None = None
        self._ssl_fallback_used: bool = False

    @property
    def is_connected(self) -> bool:
        return self._pool is not None

    @property
    def ssl_fallback_used(self) -> bool:
        """True when the pool was created from the SSL-disabled fallback DSN."""
        return self._ssl_fallback_used

    async def connect(self, dsn: str | None = None) -> None:
        """Create the pool, falling back once to ``ssl-mode=disabled``.

        Args:
            dsn: Connection URL. Defaults to the configured ``database_url``.

        Raises:
            ProtocolConfigurationError: If the DSN is malformed or its ssl-ca
                file cannot be loaded (no fallback).
            RuntimeHostError: If both the primary and the fallback attempt
                fail; the fallback attempt's error is raised.
        """
        if self._pool is not None:
            return

        raw_dsn = dsn or self._config.database_url
        correlation_id = uuid4()

        parsed = parse_and_validate_dsn(raw_dsn, correlation_id=correlation_id)
        logger.info(
            "Connecting to database: %s",
            sanitize_dsn(raw_dsn),
            extra={
                "correlation_id": str(correlation_id),
                "ssl_mode": parsed.ssl_mode.value,
            },
        )

        try:
            self._pool = await self._create_pool(parsed, correlation_id)
        except ProtocolConfigurationError:
            raise
        except RuntimeHostError as e:
            logger.error(
                "Database connection failed: %s",
                e,
                extra={
                    "correlation_id": str(correlation_id),
                    "error_code": e.error_code.value,
                },
            )
            logger.error(
                "Retrying with SSL/TLS disabled",
                extra={"correlation_id": str(correlation_id)},
            )
        else:
            logger.info(
                "Database connected",
                extra={"correlation_id": str(correlation_id)},
            )
            return

        fallback = parse_and_validate_dsn(
            build_ssl_disabled_dsn(raw_dsn), correlation_id=correlation_id
        )
        try:
            self._pool = await self._create_pool(fallback, correlation_id)
        except RuntimeHostError as e:
            logger.error(
                "Connection with SSL disabled also failed: %s",
                e,
                extra={
                    "correlation_id": str(correlation_id),
                    "error_code": e.error_code.value,
                },
            )
            logger.error(_TROUBLESHOOTING_HINT)
            raise

        self._ssl_fallback_used = True
        logger.info(
            "Database connected (SSL disabled)",
            extra={"correlation_id": str(correlation_id)},
        )

    async def close(self) -> None:
        """Close the pool and wait for its connections to drain."""
        if self._pool is None:
            return
        pool = self._pool
        self._pool = None
        pool.close()
        await pool.wait_closed()
        logger.info("Database pool closed")

    async def __aenter__(self) -> MysqlConnectionManager:
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def execute(
        self,
        sql: str,
        params: Sequence[object] = (),
        *,
        operation: str = "execute",
        target_name: str = "mysql",
        correlation_id: UUID | None = None,
    ) -> ModelExecuteResult:
        """Run one INSERT/UPDATE/DELETE/DDL statement.

        Returns:
            ModelExecuteResult with the affected row count and, for inserts,
            the generated AUTO_INCREMENT id.
        """
        pool = self._require_pool(operation, correlation_id)
        async with db_operation_error_context(
            operation=operation,
            target_name=target_name,
            correlation_id=correlation_id,
        ):
            async with pool.acquire() as conn:
                async with conn.cursor() as cur:
                    await cur.execute(sql, tuple(params))
                    return ModelExecuteResult(
                        row_count=cur.rowcount,
                        last_insert_id=cur.lastrowid or None,
                    )

    async def fetch_all(
        self,
        sql: str,
        params: Sequence[object] = (),
        *,
        operation: str = "fetch_all",
        target_name: str = "mysql",
        correlation_id: UUID | None = None,
    ) -> list[dict[str, object]]:
        """Run one SELECT and return all rows as dicts."""
        pool = self._require_pool(operation, correlation_id)
        async with db_operation_error_context(
            operation=operation,
            target_name=target_name,
            correlation_id=correlation_id,
        ):
            async with pool.acquire() as conn:
                async with conn.cursor(aiomysql.DictCursor) as cur:
                    await cur.execute(sql, tuple(params))
                    rows = await cur.fetchall()
                    return [dict(row) for row in rows]

    async def fetch_one(
        self,
        sql: str,
        params: Sequence[object] = (),
        *,
        operation: str = "fetch_one",
        target_name: str = "mysql",
        correlation_id: UUID | None = None,
    ) -> dict[str, object] | None:
        """Run one SELECT and return the first row, or None when empty."""
        pool = self._require_pool(operation, correlation_id)
        async with db_operation_error_context(
            operation=operation,
            target_name=target_name,
            correlation_id=correlation_id,
        ):
            async with pool.acquire() as conn:
                async with conn.cursor(aiomysql.DictCursor) as cur:
                    await cur.execute(sql, tuple(params))
                    row = await cur.fetchone()
                    return dict(row) if row is not None else None

    async def _create_pool(
        self, parsed: ModelParsedDSN, correlation_id: UUID
    ) -> aiomysql.Pool:
        """Create a pool for one DSN attempt, mapping driver errors."""
        try:
            async with db_operation_error_context(
                operation="connect",
                target_name=_TARGET_NAME,
                correlation_id=correlation_id,
                timeout_seconds=self._config.connect_timeout,
            ):
                return await aiomysql.create_pool(
                    host=parsed.hostname or "localhost",
                    port=parsed.effective_port,
                    user=parsed.username or "root",
                    password=parsed.password or "",
                    db=parsed.database,
                    minsize=_POOL_MIN_SIZE,
                    maxsize=self._config.pool_max_size,
                    connect_timeout=self._config.connect_timeout,
                    ssl=build_ssl_context(parsed),
                    charset=_CHARSET,
                    autocommit=True,
                )
        except RuntimeHostError:
            raise
        except Exception as e:
            ctx = ModelInfraErrorContext(
                transport_type=EnumInfraTransportType.DATABASE,
                operation="connect",
                target_name=_TARGET_NAME,
                correlation_id=correlation_id,
            )
            raise RuntimeHostError(
                f"Failed to initialize database pool: {type(e).__name__}",
                context=ctx,
            ) from e

    def _require_pool(
        self, operation: str, correlation_id: UUID | None
    ) -> aiomysql.Pool:
        if self._pool is None:
            ctx = ModelInfraErrorContext.with_correlation(
                correlation_id=correlation_id,
                transport_type=EnumInfraTransportType.DATABASE,
                operation=operation,
                target_name=_TARGET_NAME,
            )
            raise RuntimeHostError(
                "MysqlConnectionManager not connected. Call connect() first.",
                context=ctx,
            )
        return self._pool


__all__: list[str] = ["MysqlConnectionManager", "build_ssl_context"]
